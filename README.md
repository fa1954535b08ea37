# catalogo

A small product catalogue. Each product (`Produto`) has a UUID identifier
(`id`), a name (`nome`) and a price (`preco`). The package offers:

- `catalogo.models` — the frozen `Produto` record, its JSON form
  (`Produto.to_dict`) and request validation (`validar_produto`, which
  raises `ValidacaoError`).
- `catalogo.repositorio` — the `RepositorioProdutos` protocol, the error
  classes and `RepositorioEmMemoria`, a dictionary-backed store.
- `catalogo.sql` — `RepositorioSQL`, the same operations on a relational
  database through SQLAlchemy; `conectar(url)` opens the database and
  creates the `produtos` table.
- `catalogo.api` — a Flask application exposing the catalogue over HTTP.
- `catalogo.sequencial` — `RepositorioSequencial`, an in-memory store with
  sequential integer ids that keeps creation order.
- `catalogo.workerpool` — a pool of threads that squares values.
- `catalogo.demo` — a console walkthrough of the repository operations.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using a repository

Every repository has the same five operations: `criar`, `buscar`, `listar`,
`atualizar` and `deletar`.

```python
from catalogo.repositorio import (
    PrecoInvalidoError,
    ProdutoNaoEncontradoError,
    RepositorioEmMemoria,
)

repo = RepositorioEmMemoria()
laptop = repo.criar("Laptop", 999.99)
repo.atualizar(laptop.id, "Laptop Pro", 1299.99)
print(repo.buscar(laptop.id).to_dict())

try:
    repo.criar("Mouse", -1)
except PrecoInvalidoError as exc:
    print(exc)          # preço não pode ser negativo

repo.deletar(laptop.id)
try:
    repo.buscar(laptop.id)
except ProdutoNaoEncontradoError as exc:
    print(exc)          # buscar produto id ...: produto não encontrado
```

A negative price raises `PrecoInvalidoError`; a missing id raises
`ProdutoNaoEncontradoError`. Both derive from `ProdutoError`. Each
operation is logged through the `logging.Logger` given to the repository
(a module logger by default), with its fields passed as `extra`.

To keep products in a database instead, build a `RepositorioSQL` over the
engine returned by `conectar`:

```python
from catalogo.sql import RepositorioSQL, conectar

repo = RepositorioSQL(conectar("sqlite:///catalogo.db"))
```

`conectar` accepts any SQLAlchemy URL whose driver is installed. An
in-memory SQLite URL (`sqlite://`) uses one shared connection, so every
repository on that engine sees the same data. Database failures are raised
as `ProdutoError`.

`RepositorioSequencial` in `catalogo.sequencial` offers the same five
operations on `ProdutoSequencial` records whose ids count from 1 and are
never reused; `linhas_produtos(produtos)` yields one display line per
product.

## The HTTP API

`create_app(repositorio=None, logger=None)` returns a Flask application
over any repository (a new `RepositorioEmMemoria` if none is given).
From the command line:

```
catalogo-api [--database URL] [--host HOST] [--port PORT]
```

listens on `0.0.0.0:8080` by default. Without `--database` products are
kept in memory; with it they are stored through `RepositorioSQL`.

| Method | Path             | Success                | Errors                                          |
|--------|------------------|------------------------|-------------------------------------------------|
| POST   | `/produtos`      | 201 with the product   | 400 on an invalid body or price                 |
| GET    | `/produtos`      | 200 with the list      | 500 on storage failure                          |
| GET    | `/produtos/<id>` | 200 with the product   | 400 on a malformed id, 404 if absent            |
| PUT    | `/produtos/<id>` | 200 with the product   | 400 on a malformed id or body, or if absent     |
| DELETE | `/produtos/<id>` | 204 with no body       | 400 on a malformed id, 404 if absent            |
| GET    | `/metrics`       | 200, request counts    |                                                 |

Request bodies are JSON objects with `nome` (at least three characters) and
`preco` (greater than zero). Errors come back as `{"error": "..."}`.
Every request is logged with its method, path, status and duration, and
counted in `http_requests_total`, served in Prometheus text format at
`/metrics`.

## Demos

```
catalogo-demo
```

creates, lists, finds, updates and deletes products in memory, printing
each step. `exibir_produtos(repositorio, arquivo=None)` writes a product
list to any text stream.

```
catalogo-workerpool [--workers N] [--tarefas N]
```

sends tasks 1 to N (five by default) to three workers by default and
prints each task's square. From Python, `processar_tarefas(valores,
num_workers=3)` yields `Resultado` records in the order workers finish
them.

## What it does not do

The package creates its one table itself and has no migration runner.
It collects no traces; `/metrics` reports only request counts.