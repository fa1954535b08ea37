"""Pool of worker threads that square the values of a batch of tasks."""

from __future__ import annotations

import argparse
import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

DURACAO_TRABALHO = 0.1
"""Seconds each task takes, simulating work."""

TAMANHO_BUFFER = 10
"""Capacity of the task queue."""

_logger = logging.getLogger(__name__)
_FIM = object()


@dataclass(frozen=True)
class Tarefa:
    """A value to be processed."""

    id: int
    valor: int


@dataclass(frozen=True)
class Resultado:
    """The square of a task's value."""

    id: int
    quadrado: int


def _worker(
    numero: int, tarefas: queue.Queue, resultados: queue.Queue
) -> None:
    try:
        while (tarefa := tarefas.get()) is not _FIM:
            _logger.info(
                "Processando tarefa",
                extra={"worker": numero, "tarefa_id": tarefa.id, "valor": tarefa.valor},
            )
            time.sleep(DURACAO_TRABALHO)
            resultados.put(Resultado(id=tarefa.id, quadrado=tarefa.valor * tarefa.valor))
    finally:
        resultados.put(_FIM)


def _enviar(lista: list[Tarefa], tarefas: queue.Queue, num_workers: int) -> None:
    for tarefa in lista:
        tarefas.put(tarefa)
        _logger.info(
            "Tarefa enviada", extra={"tarefa_id": tarefa.id, "valor": tarefa.valor}
        )
    for _ in range(num_workers):
        tarefas.put(_FIM)


def _executar(lista: list[Tarefa], num_workers: int) -> Iterator[Resultado]:
    tarefas: queue.Queue = queue.Queue(maxsize=TAMANHO_BUFFER)
    resultados: queue.Queue = queue.Queue()
    threads = [
        threading.Thread(
            target=_worker, args=(numero, tarefas, resultados), daemon=True
        )
        for numero in range(1, num_workers + 1)
    ]
    threads.append(
        threading.Thread(
            target=_enviar, args=(lista, tarefas, num_workers), daemon=True
        )
    )
    for thread in threads:
        thread.start()

    ativos = num_workers
    while ativos:
        item = resultados.get()
        if item is _FIM:
            ativos -= 1
        else:
            yield item


def processar_tarefas(
    valores: Iterable[int], num_workers: int = 3
) -> Iterator[Resultado]:
    """Square ``valores`` on ``num_workers`` threads.

    Task ids count from 1 in the order of ``valores``. Results are yielded
    as workers finish them, so their order may differ from the input.
    """
    if num_workers < 1:
        raise ValueError("num_workers deve ser pelo menos 1")
    lista = [Tarefa(id=id, valor=valor) for id, valor in enumerate(valores, start=1)]
    return _executar(lista, num_workers)


def main(argv: Sequence[str] | None = None) -> None:
    """Process a batch of tasks and print each square."""
    parser = argparse.ArgumentParser(
        prog="catalogo-workerpool", description="Calcula quadrados com workers."
    )
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--tarefas", type=int, default=5)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    for resultado in processar_tarefas(range(1, args.tarefas + 1), args.workers):
        print(f"Tarefa {resultado.id}: Quadrado = {resultado.quadrado}")
    _logger.info("Processamento concluído", extra={"total_tarefas": args.tarefas})