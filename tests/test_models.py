import dataclasses
import uuid

import pytest

from catalogo.models import ID_NULO, Produto, ValidacaoError, validar_produto


ID_FIXO = uuid.UUID("12345678-1234-5678-1234-567812345678")


def test_to_dict_holds_every_field():
    produto = Produto(id=ID_FIXO, nome="Laptop", preco=999.99)
    assert produto.to_dict() == {
        "id": "12345678-1234-5678-1234-567812345678",
        "nome": "Laptop",
        "preco": 999.99,
    }


def test_to_dict_round_trips_through_validation():
    produto = Produto(id=ID_FIXO, nome="Mouse", preco=29.99)
    validado = validar_produto(produto.to_dict())
    assert (validado.nome, validado.preco) == (produto.nome, produto.preco)


def test_produto_is_immutable():
    produto = Produto(id=ID_FIXO, nome="Laptop", preco=999.99)
    with pytest.raises(dataclasses.FrozenInstanceError):
        produto.nome = "Outro"  # type: ignore[misc]
    alterado = dataclasses.replace(produto, nome="Laptop Pro")
    assert alterado.nome == "Laptop Pro"
    assert produto.nome == "Laptop"


def test_valid_data_gives_unsaved_product():
    produto = validar_produto({"nome": "Laptop", "preco": 999.99})
    assert produto == Produto(id=ID_NULO, nome="Laptop", preco=999.99)


def test_integer_price_becomes_float():
    produto = validar_produto({"nome": "Teclado", "preco": 10})
    assert produto.preco == 10.0
    assert isinstance(produto.preco, float)


def test_missing_name_is_required_error():
    with pytest.raises(ValidacaoError) as info:
        validar_produto({"preco": 10})
    assert info.value.erros == (("Nome", "required"),)


def test_empty_name_is_required_error():
    with pytest.raises(ValidacaoError) as info:
        validar_produto({"nome": "", "preco": 10})
    assert info.value.erros == (("Nome", "required"),)


def test_short_name_fails_min_rule():
    with pytest.raises(ValidacaoError) as info:
        validar_produto({"nome": "ab", "preco": 10})
    assert info.value.erros == (("Nome", "min"),)
    assert str(info.value) == (
        "Key: 'Produto.Nome' Error:Field validation for 'Nome' failed on the 'min' tag"
    )


def test_zero_or_missing_price_is_required_error():
    for dados in ({"nome": "Laptop", "preco": 0}, {"nome": "Laptop"}):
        with pytest.raises(ValidacaoError) as info:
            validar_produto(dados)
        assert info.value.erros == (("Preco", "required"),)


def test_negative_price_fails_gt_rule():
    with pytest.raises(ValidacaoError) as info:
        validar_produto({"nome": "Laptop", "preco": -1})
    assert info.value.erros == (("Preco", "gt"),)


def test_every_broken_rule_is_reported():
    with pytest.raises(ValidacaoError) as info:
        validar_produto({})
    assert info.value.erros == (("Nome", "required"), ("Preco", "required"))
    assert len(str(info.value).splitlines()) == 2


def test_body_must_be_an_object():
    with pytest.raises(ValidacaoError) as info:
        validar_produto(["Laptop", 999.99])
    assert info.value.erros == ()


@pytest.mark.parametrize(
    "dados, campo",
    [
        ({"nome": 123, "preco": 10}, "Nome"),
        ({"nome": "Laptop", "preco": "10"}, "Preco"),
        ({"nome": "Laptop", "preco": True}, "Preco"),
    ],
)
def test_wrong_types_are_rejected(dados, campo):
    with pytest.raises(ValidacaoError) as info:
        validar_produto(dados)
    assert info.value.erros[0][0] == campo