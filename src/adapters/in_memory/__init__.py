"""
Adapters em memória - repositórios, Unit of Work e publicadores de eventos.
"""

from .publishers import InMemoryEventPublisher, LoggingEventPublisher
from .repositories import (
    InMemoryAlocacaoRepository,
    InMemoryComentarioRepository,
    InMemoryEquipeRepository,
    InMemoryProjetoRepository,
    InMemoryRegistroEsforcoRepository,
    InMemoryRepository,
    InMemoryTarefaRepository,
    InMemoryUsuarioRepository,
)
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryEventPublisher",
    "LoggingEventPublisher",
    "InMemoryAlocacaoRepository",
    "InMemoryComentarioRepository",
    "InMemoryEquipeRepository",
    "InMemoryProjetoRepository",
    "InMemoryRegistroEsforcoRepository",
    "InMemoryRepository",
    "InMemoryTarefaRepository",
    "InMemoryUsuarioRepository",
    "InMemoryUnitOfWork",
]
