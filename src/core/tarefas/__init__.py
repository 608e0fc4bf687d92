"""
Contexto de Tarefas - ciclo de vida, esforço e comentários.
"""

from .entities import (
    ComentarioTarefaEntity,
    PrioridadeTarefa,
    RegistroEsforcoEntity,
    StatusTarefa,
    TarefaEntity,
    TRANSICOES_TAREFA,
)
from .ports import ComentarioRepository, RegistroEsforcoRepository, TarefaRepository
from .use_cases import (
    AlterarStatusTarefaService,
    ComentarTarefaService,
    ConcluirTarefaService,
    CriarTarefaService,
    ExportarComentariosCsvService,
    ExportarEsforcosCsvService,
    RegistrarEsforcoService,
    ResumoHorasService,
)

__all__ = [
    "ComentarioTarefaEntity",
    "PrioridadeTarefa",
    "RegistroEsforcoEntity",
    "StatusTarefa",
    "TarefaEntity",
    "TRANSICOES_TAREFA",
    "ComentarioRepository",
    "RegistroEsforcoRepository",
    "TarefaRepository",
    "AlterarStatusTarefaService",
    "ComentarTarefaService",
    "ConcluirTarefaService",
    "CriarTarefaService",
    "ExportarComentariosCsvService",
    "ExportarEsforcosCsvService",
    "RegistrarEsforcoService",
    "ResumoHorasService",
]
