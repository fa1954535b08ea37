import uuid

import pytest
from sqlalchemy import text

from catalogo.models import ID_NULO, Produto
from catalogo.repositorio import (
    PrecoInvalidoError,
    ProdutoError,
    ProdutoNaoEncontradoError,
)
from catalogo.sql import RepositorioSQL, conectar


@pytest.fixture
def engine():
    eng = conectar("sqlite://")
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine):
    return RepositorioSQL(engine)


def _sem_tabela(engine):
    with engine.begin() as conexao:
        conexao.execute(text("DROP TABLE produtos"))


def test_criar_e_buscar(repo):
    produto = repo.criar("Laptop", 999.99)
    assert produto.id != ID_NULO
    assert repo.buscar(produto.id) == Produto(id=produto.id, nome="Laptop", preco=999.99)


def test_criar_guarda_preco_como_real(repo):
    produto = repo.criar("Caneta", 3)
    assert repr(produto.preco) == "3.0"
    assert repo.buscar(produto.id) == produto


def test_preco_invalido_nao_altera_o_banco(repo):
    with pytest.raises(PrecoInvalidoError):
        repo.criar("Laptop", -1)
    produto = repo.criar("Mouse", 29.99)
    with pytest.raises(PrecoInvalidoError):
        repo.atualizar(produto.id, "Laptop Pro", -5)
    assert repo.listar() == [produto]


def test_buscar_id_inexistente(repo):
    id_ausente = uuid.uuid4()
    with pytest.raises(ProdutoNaoEncontradoError) as info:
        repo.buscar(id_ausente)
    assert str(info.value) == f"buscar produto id {id_ausente}: produto não encontrado"


def test_atualizar_id_inexistente(repo):
    id_ausente = uuid.uuid4()
    with pytest.raises(ProdutoNaoEncontradoError) as info:
        repo.atualizar(id_ausente, "Laptop Pro", 10.0)
    assert (
        str(info.value) == f"atualizar produto id {id_ausente}: produto não encontrado"
    )


def test_deletar_id_inexistente(repo):
    id_ausente = uuid.uuid4()
    with pytest.raises(ProdutoNaoEncontradoError) as info:
        repo.deletar(id_ausente)
    assert str(info.value) == f"deletar produto id {id_ausente}: produto não encontrado"


def test_listar_atualizar_deletar(repo):
    laptop = repo.criar("Laptop", 999.99)
    repo.criar("Mouse", 29.99)
    assert sorted(p.nome for p in repo.listar()) == ["Laptop", "Mouse"]

    atualizado = repo.atualizar(laptop.id, "Laptop Pro", 1299.99)
    assert atualizado == Produto(id=laptop.id, nome="Laptop Pro", preco=1299.99)
    assert repo.buscar(laptop.id) == atualizado

    repo.deletar(laptop.id)
    assert [p.nome for p in repo.listar()] == ["Mouse"]


def test_repositorios_no_mesmo_engine_compartilham_dados(engine):
    produto = RepositorioSQL(engine).criar("Teclado", 150.0)
    assert RepositorioSQL(engine).buscar(produto.id) == produto


def test_dados_persistem_em_arquivo(tmp_path):
    url = f"sqlite:///{tmp_path / 'catalogo.db'}"
    eng = conectar(url)
    produto = RepositorioSQL(eng).criar("Monitor", 800.5)
    eng.dispose()

    outro = conectar(url)
    try:
        encontrado = RepositorioSQL(outro).buscar(produto.id)
    finally:
        outro.dispose()
    assert encontrado == Produto(id=produto.id, nome="Monitor", preco=800.5)


@pytest.mark.parametrize(
    "chamada, prefixo",
    [
        (lambda repo: repo.listar(), "listar produtos:"),
        (lambda repo: repo.criar("Laptop", 10.0), "criar produto:"),
        (lambda repo: repo.buscar(uuid.uuid4()), "buscar produto:"),
        (lambda repo: repo.atualizar(uuid.uuid4(), "Laptop", 1.0), "atualizar produto:"),
        (lambda repo: repo.deletar(uuid.uuid4()), "deletar produto:"),
    ],
)
def test_erro_de_banco_e_encapsulado(engine, repo, chamada, prefixo):
    _sem_tabela(engine)
    with pytest.raises(ProdutoError) as info:
        chamada(repo)
    assert str(info.value).startswith(prefixo)
    assert not isinstance(info.value, ProdutoNaoEncontradoError)