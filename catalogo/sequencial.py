"""Product repository that hands out sequential integer ids and keeps order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

from .repositorio import PrecoInvalidoError, ProdutoNaoEncontradoError


@dataclass(frozen=True)
class ProdutoSequencial:
    """A product identified by a sequential integer id."""

    id: int
    nome: str
    preco: float


class RepositorioSequencial:
    """In-memory repository keeping products in creation order.

    Ids start at 1 and are never reused, even after a product is deleted.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._produtos: list[ProdutoSequencial] = []
        self._ultimo_id = 0
        self._logger = logger or logging.getLogger(__name__)

    def _posicao(self, id: int) -> int | None:
        return next(
            (pos for pos, produto in enumerate(self._produtos) if produto.id == id),
            None,
        )

    def criar(self, nome: str, preco: float) -> ProdutoSequencial:
        """Append a new product with the next id."""
        if preco < 0:
            erro = PrecoInvalidoError()
            self._logger.error(
                "Falha ao criar produto", extra={"error": str(erro), "nome": nome}
            )
            raise erro

        self._ultimo_id += 1
        produto = ProdutoSequencial(id=self._ultimo_id, nome=nome, preco=preco)
        self._produtos.append(produto)
        self._logger.info(
            "Produto criado", extra={"id": produto.id, "nome": nome, "preco": preco}
        )
        return produto

    def buscar(self, id: int) -> ProdutoSequencial:
        """Return the product with the given id."""
        pos = self._posicao(id)
        if pos is None:
            erro = ProdutoNaoEncontradoError("buscar", id)
            self._logger.error(
                "Falha ao buscar produto", extra={"error": str(erro), "id": id}
            )
            raise erro
        self._logger.info("Produto encontrado", extra={"id": id})
        return self._produtos[pos]

    def listar(self) -> list[ProdutoSequencial]:
        """Return the products in creation order."""
        self._logger.info("Listando produtos", extra={"total": len(self._produtos)})
        return list(self._produtos)

    def atualizar(self, id: int, nome: str, preco: float) -> ProdutoSequencial:
        """Replace the name and price of a product, keeping its position."""
        if preco < 0:
            erro = PrecoInvalidoError()
            self._logger.error(
                "Falha ao atualizar produto", extra={"error": str(erro), "id": id}
            )
            raise erro

        pos = self._posicao(id)
        if pos is None:
            erro = ProdutoNaoEncontradoError("atualizar", id)
            self._logger.error(
                "Falha ao atualizar produto", extra={"error": str(erro), "id": id}
            )
            raise erro

        produto = replace(self._produtos[pos], nome=nome, preco=preco)
        self._produtos[pos] = produto
        self._logger.info(
            "Produto atualizado", extra={"id": id, "nome": nome, "preco": preco}
        )
        return produto

    def deletar(self, id: int) -> None:
        """Remove the product with the given id."""
        pos = self._posicao(id)
        if pos is None:
            erro = ProdutoNaoEncontradoError("deletar", id)
            self._logger.error(
                "Falha ao deletar produto", extra={"error": str(erro), "id": id}
            )
            raise erro
        del self._produtos[pos]
        self._logger.info("Produto deletado", extra={"id": id})


def linhas_produtos(produtos: Iterable[ProdutoSequencial]) -> Iterator[str]:
    """Yield one display line per product."""
    for produto in produtos:
        yield f"ID: {produto.id}, Nome: {produto.nome}, Preço: {produto.preco:.2f}"