"""Product repository backed by a relational database through SQLAlchemy."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator

from sqlalchemy import (
    Column,
    Float,
    MetaData,
    String,
    Table,
    create_engine,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .models import Produto
from .repositorio import ProdutoError, _RepositorioBase

_metadata = MetaData()

_produtos = Table(
    "produtos",
    _metadata,
    Column("id", String(36), primary_key=True),
    Column("nome", String, nullable=False),
    Column("preco", Float, nullable=False),
)


def conectar(url: str) -> Engine:
    """Open a database engine for ``url`` and create the product table.

    An in-memory SQLite URL gets a single shared connection, so every
    repository built on the engine sees the same data.
    """
    destino = make_url(url)
    opcoes: dict[str, Any] = {}
    if destino.get_backend_name() == "sqlite" and destino.database in (
        None,
        "",
        ":memory:",
    ):
        opcoes = {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    engine = create_engine(destino, **opcoes)
    _metadata.create_all(engine)
    return engine


def _produto(linha: Any) -> Produto:
    return Produto(id=uuid.UUID(linha.id), nome=linha.nome, preco=float(linha.preco))


class RepositorioSQL(_RepositorioBase):
    """Repository that stores products in the ``produtos`` table."""

    def __init__(self, engine: Engine, logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self._engine = engine

    @contextmanager
    def _banco(self, mensagem: str, contexto: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self._logger.error(mensagem, extra={"error": str(exc)})
            raise ProdutoError(f"{contexto}: {exc}") from exc

    def _obter(self, id: uuid.UUID, operacao: str) -> Produto | None:
        with self._banco(
            "Falha ao buscar produto no banco", f"{operacao} produto"
        ), self._engine.connect() as conexao:
            linha = conexao.execute(
                select(_produtos).where(_produtos.c.id == str(id))
            ).first()
        return None if linha is None else _produto(linha)

    def criar(self, nome: str, preco: float) -> Produto:
        """Insert a new product under a fresh random id."""
        self._exigir_preco(preco, "Falha ao criar produto", nome=nome)
        produto = Produto(id=uuid.uuid4(), nome=nome, preco=float(preco))
        with self._banco(
            "Falha ao criar produto no banco", "criar produto"
        ), self._engine.begin() as conexao:
            conexao.execute(
                insert(_produtos).values(
                    id=str(produto.id), nome=produto.nome, preco=produto.preco
                )
            )
        self._registrar("Produto criado", id=str(produto.id), nome=nome, preco=preco)
        return produto

    def buscar(self, id: uuid.UUID) -> Produto:
        """Return the product with the given id."""
        produto = self._obter(id, "buscar")
        if produto is None:
            raise self._nao_encontrado("buscar", id, "Falha ao buscar produto")
        self._registrar("Produto encontrado", id=str(id))
        return produto

    def listar(self) -> list[Produto]:
        """Return every stored product."""
        with self._banco(
            "Falha ao listar produtos", "listar produtos"
        ), self._engine.connect() as conexao:
            linhas = conexao.execute(select(_produtos)).all()
        produtos = [_produto(linha) for linha in linhas]
        self._registrar("Listando produtos", total=len(produtos))
        return produtos

    def atualizar(self, id: uuid.UUID, nome: str, preco: float) -> Produto:
        """Replace the name and price of an existing product."""
        mensagem = "Falha ao atualizar produto"
        self._exigir_preco(preco, mensagem, id=str(id))
        atual = self._obter(id, "atualizar")
        if atual is None:
            raise self._nao_encontrado("atualizar", id, mensagem)
        produto = replace(atual, nome=nome, preco=float(preco))
        with self._banco(
            "Falha ao atualizar produto no banco", "atualizar produto"
        ), self._engine.begin() as conexao:
            conexao.execute(
                update(_produtos)
                .where(_produtos.c.id == str(id))
                .values(nome=produto.nome, preco=produto.preco)
            )
        self._registrar("Produto atualizado", id=str(id), nome=nome, preco=preco)
        return produto

    def deletar(self, id: uuid.UUID) -> None:
        """Remove the product with the given id."""
        with self._banco(
            "Falha ao deletar produto no banco", "deletar produto"
        ), self._engine.begin() as conexao:
            removidos = conexao.execute(
                delete(_produtos).where(_produtos.c.id == str(id))
            ).rowcount
        if removidos == 0:
            raise self._nao_encontrado("deletar", id, "Falha ao deletar produto")
        self._registrar("Produto deletado", id=str(id))