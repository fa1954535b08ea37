"""Product repository contract and its in-memory implementation."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Protocol, runtime_checkable

from .models import Produto


class ProdutoError(Exception):
    """Base class of the repository errors."""


class PrecoInvalidoError(ProdutoError, ValueError):
    """Raised when a product would get a negative price."""

    def __init__(self) -> None:
        super().__init__("preço não pode ser negativo")


class ProdutoNaoEncontradoError(ProdutoError, LookupError):
    """Raised when no product has the given id."""

    def __init__(self, operacao: str, id: object) -> None:
        self.operacao = operacao
        self.id = id
        super().__init__(f"{operacao} produto id {id}: produto não encontrado")


@runtime_checkable
class RepositorioProdutos(Protocol):
    """Operations every product repository offers."""

    def criar(self, nome: str, preco: float) -> Produto: ...

    def buscar(self, id: uuid.UUID) -> Produto: ...

    def listar(self) -> list[Produto]: ...

    def atualizar(self, id: uuid.UUID, nome: str, preco: float) -> Produto: ...

    def deletar(self, id: uuid.UUID) -> None: ...


class _RepositorioBase:
    """Logging and error reporting shared by every storage."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(type(self).__module__)

    def _falha(self, mensagem: str, erro: ProdutoError, **campos: Any) -> ProdutoError:
        self._logger.error(mensagem, extra={"error": str(erro), **campos})
        return erro

    def _exigir_preco(self, preco: float, mensagem: str, **campos: Any) -> None:
        if preco < 0:
            raise self._falha(mensagem, PrecoInvalidoError(), **campos)

    def _nao_encontrado(
        self, operacao: str, id: uuid.UUID, mensagem: str
    ) -> ProdutoError:
        return self._falha(
            mensagem, ProdutoNaoEncontradoError(operacao, id), id=str(id)
        )

    def _registrar(self, mensagem: str, **campos: Any) -> None:
        self._logger.info(mensagem, extra=campos)


class RepositorioEmMemoria(_RepositorioBase):
    """Repository that keeps products in a dictionary keyed by id."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._produtos: dict[uuid.UUID, Produto] = {}

    def criar(self, nome: str, preco: float) -> Produto:
        """Store a new product under a fresh random id."""
        self._exigir_preco(preco, "Falha ao criar produto", nome=nome)
        produto = Produto(id=uuid.uuid4(), nome=nome, preco=preco)
        self._produtos[produto.id] = produto
        self._registrar("Produto criado", id=str(produto.id), nome=nome, preco=preco)
        return produto

    def buscar(self, id: uuid.UUID) -> Produto:
        """Return the product with the given id."""
        produto = self._produtos.get(id)
        if produto is None:
            raise self._nao_encontrado("buscar", id, "Falha ao buscar produto")
        self._registrar("Produto encontrado", id=str(id))
        return produto

    def listar(self) -> list[Produto]:
        """Return every stored product."""
        produtos = list(self._produtos.values())
        self._registrar("Listando produtos", total=len(produtos))
        return produtos

    def atualizar(self, id: uuid.UUID, nome: str, preco: float) -> Produto:
        """Replace the name and price of an existing product."""
        mensagem = "Falha ao atualizar produto"
        self._exigir_preco(preco, mensagem, id=str(id))
        atual = self._produtos.get(id)
        if atual is None:
            raise self._nao_encontrado("atualizar", id, mensagem)
        produto = replace(atual, nome=nome, preco=preco)
        self._produtos[id] = produto
        self._registrar("Produto atualizado", id=str(id), nome=nome, preco=preco)
        return produto

    def deletar(self, id: uuid.UUID) -> None:
        """Remove the product with the given id."""
        if self._produtos.pop(id, None) is None:
            raise self._nao_encontrado("deletar", id, "Falha ao deletar produto")
        self._registrar("Produto deletado", id=str(id))