"""HTTP API that exposes the product catalogue."""

from __future__ import annotations

import argparse
import json
import logging
import threading
import time
import uuid
from collections import Counter
from typing import Any, Sequence

from flask import Flask, Response, g, jsonify, request

from .models import Produto, ValidacaoError, validar_produto
from .repositorio import ProdutoError, RepositorioEmMemoria, RepositorioProdutos
from .sql import RepositorioSQL, conectar

HOST_PADRAO = "0.0.0.0"
PORTA_PADRAO = 8080
ID_INVALIDO = "ID inválido"


class _Metricas:
    """Counts processed requests and renders them in Prometheus text format."""

    def __init__(self) -> None:
        self._contagens: Counter[tuple[str, str, int]] = Counter()
        self._lock = threading.Lock()

    def registrar(self, metodo: str, caminho: str, status: int) -> None:
        with self._lock:
            self._contagens[(metodo, caminho, status)] += 1

    def exposicao(self) -> str:
        with self._lock:
            itens = sorted(self._contagens.items())
        linhas = [
            "# HELP http_requests_total Total de requisições processadas.",
            "# TYPE http_requests_total counter",
        ]
        for (metodo, caminho, status), total in itens:
            rotulos = ",".join(
                f'{nome}="{_escapar(valor)}"'
                for nome, valor in (
                    ("method", metodo),
                    ("path", caminho),
                    ("status", str(status)),
                )
            )
            linhas.append(f"http_requests_total{{{rotulos}}} {total}")
        return "\n".join(linhas) + "\n"


def _escapar(valor: str) -> str:
    return valor.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _erro(mensagem: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": mensagem}), status


def _ler_produto() -> Produto:
    try:
        dados = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as exc:
        raise ValidacaoError(str(exc)) from exc
    return validar_produto(dados)


def _ler_id(texto: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(texto)
    except ValueError:
        return None


def create_app(
    repositorio: RepositorioProdutos | None = None,
    logger: logging.Logger | None = None,
) -> Flask:
    """Build the Flask application serving the ``/produtos`` routes."""
    repo: RepositorioProdutos = (
        repositorio if repositorio is not None else RepositorioEmMemoria()
    )
    log = logger or logging.getLogger(__name__)
    metricas = _Metricas()

    app = Flask(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.extensions["repositorio"] = repo

    @app.before_request
    def _iniciar() -> None:
        g.inicio = time.perf_counter()

    @app.after_request
    def _registrar(resposta: Response) -> Response:
        inicio = g.get("inicio", time.perf_counter())
        duracao = time.perf_counter() - inicio
        metricas.registrar(request.method, request.path, resposta.status_code)
        log.info(
            "Requisição processada",
            extra={
                "method": request.method,
                "path": request.path,
                "status": resposta.status_code,
                "duration": duracao,
            },
        )
        return resposta

    @app.get("/metrics")
    def _metricas() -> Response:
        return Response(
            metricas.exposicao(), mimetype="text/plain; version=0.0.4"
        )

    @app.post("/produtos")
    def _criar() -> Any:
        try:
            dados = _ler_produto()
        except ValidacaoError as exc:
            return _erro(str(exc), 400)
        try:
            produto = repo.criar(dados.nome, dados.preco)
        except ProdutoError as exc:
            return _erro(str(exc), 400)
        return jsonify(produto.to_dict()), 201

    @app.get("/produtos")
    def _listar() -> Any:
        try:
            produtos = repo.listar()
        except ProdutoError as exc:
            return _erro(str(exc), 500)
        return jsonify([p.to_dict() for p in produtos]), 200

    @app.get("/produtos/<texto_id>")
    def _buscar(texto_id: str) -> Any:
        id = _ler_id(texto_id)
        if id is None:
            return _erro(ID_INVALIDO, 400)
        try:
            produto = repo.buscar(id)
        except ProdutoError as exc:
            return _erro(str(exc), 404)
        return jsonify(produto.to_dict()), 200

    @app.put("/produtos/<texto_id>")
    def _atualizar(texto_id: str) -> Any:
        id = _ler_id(texto_id)
        if id is None:
            return _erro(ID_INVALIDO, 400)
        try:
            dados = _ler_produto()
        except ValidacaoError as exc:
            return _erro(str(exc), 400)
        try:
            produto = repo.atualizar(id, dados.nome, dados.preco)
        except ProdutoError as exc:
            return _erro(str(exc), 400)
        return jsonify(produto.to_dict()), 200

    @app.delete("/produtos/<texto_id>")
    def _deletar(texto_id: str) -> Any:
        id = _ler_id(texto_id)
        if id is None:
            return _erro(ID_INVALIDO, 400)
        try:
            repo.deletar(id)
        except ProdutoError as exc:
            return _erro(str(exc), 404)
        return "", 204

    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Start the HTTP server."""
    parser = argparse.ArgumentParser(
        prog="catalogo-api", description="API HTTP do catálogo de produtos."
    )
    parser.add_argument(
        "--database",
        help="URL SQLAlchemy do banco; sem ela os produtos ficam em memória",
    )
    parser.add_argument("--host", default=HOST_PADRAO)
    parser.add_argument("--port", type=int, default=PORTA_PADRAO)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("catalogo")

    repositorio: RepositorioProdutos
    if args.database:
        engine = conectar(args.database)
        logger.info("Migrações aplicadas")
        repositorio = RepositorioSQL(engine, logger)
    else:
        repositorio = RepositorioEmMemoria(logger)

    app = create_app(repositorio, logger)
    app.run(host=args.host, port=args.port)