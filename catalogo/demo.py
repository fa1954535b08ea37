"""Scripted walk through the repository operations, printed to the console."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Sequence, TextIO

from .repositorio import ProdutoError, RepositorioEmMemoria, RepositorioProdutos


def _numero(valor: float) -> str:
    texto = repr(float(valor))
    return texto[:-2] if texto.endswith(".0") else texto


def _descrever(produto: Any) -> str:
    return f"{{ID:{produto.id} Nome:{produto.nome} Preco:{_numero(produto.preco)}}}"


def exibir_produtos(
    repositorio: RepositorioProdutos, arquivo: TextIO | None = None
) -> None:
    """Write the product list to ``arquivo`` (standard output by default)."""
    saida = arquivo if arquivo is not None else sys.stdout
    try:
        produtos = repositorio.listar()
    except ProdutoError as exc:
        raise ProdutoError(f"exibir produtos: {exc}") from exc

    print("Lista de produtos:", file=saida)
    for produto in produtos:
        print(
            f"ID: {produto.id}, Nome: {produto.nome}, Preço: {produto.preco:.2f}",
            file=saida,
        )


def _tentar(
    acao: Callable[[], Any], sucesso: Callable[[Any], str] | None = None
) -> bool:
    """Run ``acao``; print its error, or the success line, and tell which."""
    try:
        resultado = acao()
    except ProdutoError as exc:
        print("Erro:", exc)
        return False
    if sucesso is not None:
        print(sucesso(resultado))
    return True


def main(argv: Sequence[str] | None = None) -> None:
    """Create, list, find, update and delete products, printing each step."""
    argparse.ArgumentParser(
        prog="catalogo-demo", description="Demonstração do repositório em memória."
    ).parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    repo = RepositorioEmMemoria(logging.getLogger("catalogo"))

    try:
        p1 = repo.criar("Laptop", 999.99)
    except ProdutoError as exc:
        print("Erro:", exc)
        return
    repo.criar("Mouse", 29.99)

    if not _tentar(lambda: exibir_produtos(repo)):
        return

    _tentar(
        lambda: repo.buscar(p1.id),
        lambda produto: f"Produto encontrado: {_descrever(produto)}",
    )
    _tentar(
        lambda: repo.atualizar(p1.id, "Laptop Pro", 1299.99),
        lambda produto: f"Produto atualizado: {_descrever(produto)}",
    )
    _tentar(lambda: repo.deletar(p1.id), lambda _: "Produto deletado com sucesso")
    _tentar(lambda: exibir_produtos(repo))