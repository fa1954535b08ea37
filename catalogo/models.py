"""Product model of the catalogue and validation of incoming product data."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Iterable

ID_NULO = uuid.UUID(int=0)
"""Identifier carried by a product that has not been stored yet."""

NOME_MIN = 3
"""Minimum length of a product name."""


@dataclass(frozen=True)
class Produto:
    """A product in the catalogue."""

    id: uuid.UUID
    nome: str
    preco: float

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the product."""
        return {"id": str(self.id), "nome": self.nome, "preco": self.preco}


class ValidacaoError(ValueError):
    """Raised when incoming product data breaks a binding rule.

    ``erros`` holds ``(field, rule)`` pairs, one for each broken rule.
    """

    def __init__(self, mensagem: str, erros: Iterable[tuple[str, str]] = ()) -> None:
        super().__init__(mensagem)
        self.erros: tuple[tuple[str, str], ...] = tuple(erros)


def _mensagem(campo: str, regra: str) -> str:
    return (
        f"Key: 'Produto.{campo}' Error:Field validation for "
        f"'{campo}' failed on the '{regra}' tag"
    )


def validar_produto(dados: Any) -> Produto:
    """Check decoded JSON data against the product rules.

    ``nome`` is required and at least three characters long; ``preco`` is
    required and greater than zero. Returns an unsaved product whose id is
    ``ID_NULO``; raises ``ValidacaoError`` otherwise.
    """
    if not isinstance(dados, dict):
        raise ValidacaoError("corpo da requisição deve ser um objeto JSON")

    nome = dados.get("nome")
    preco = dados.get("preco")
    if nome is None:
        nome = ""
    if preco is None:
        preco = 0

    if not isinstance(nome, str):
        raise ValidacaoError("campo 'nome' deve ser texto", [("Nome", "tipo")])
    if isinstance(preco, bool) or not isinstance(preco, (int, float)):
        raise ValidacaoError("campo 'preco' deve ser um número", [("Preco", "tipo")])
    preco = float(preco)

    erros: list[tuple[str, str]] = []
    if not nome:
        erros.append(("Nome", "required"))
    elif len(nome) < NOME_MIN:
        erros.append(("Nome", "min"))

    if preco == 0:
        erros.append(("Preco", "required"))
    elif not preco > 0:
        erros.append(("Preco", "gt"))

    if erros:
        raise ValidacaoError("\n".join(_mensagem(c, r) for c, r in erros), erros)
    return Produto(id=ID_NULO, nome=nome, preco=preco)