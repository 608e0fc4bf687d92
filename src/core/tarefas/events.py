"""
Domain Events do Contexto de Tarefas.

Eventos:
- TarefaCriadaEvent
- StatusTarefaAlteradoEvent
- TarefaConcluidaEvent
- EsforcoRegistradoEvent
- ComentarioAdicionadoEvent
"""

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional

from src.core.shared.events import DomainEvent


@dataclass
class TarefaCriadaEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Tarefa"

    projeto_id: str = ""
    titulo: str = ""
    prioridade: str = ""
    responsavel_id: Optional[str] = None


@dataclass
class StatusTarefaAlteradoEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Tarefa"

    status_anterior: str = ""
    status_novo: str = ""


@dataclass
class TarefaConcluidaEvent(DomainEvent):
    """
    Evento: Tarefa concluída.

    Attributes:
        horas_finais: Horas informadas na conclusão
        esforco_real_total: Esforço real acumulado após a conclusão
        data_conclusao: Data efetiva de conclusão
    """

    aggregate_type: ClassVar[str] = "Tarefa"

    horas_finais: int = 0
    esforco_real_total: int = 0
    data_conclusao: Optional[date] = None


@dataclass
class EsforcoRegistradoEvent(DomainEvent):
    """Evento: Horas lançadas (aggregate_id = id da tarefa)."""

    aggregate_type: ClassVar[str] = "Tarefa"

    registro_id: str = ""
    usuario_id: str = ""
    data: Optional[date] = None
    horas: int = 0


@dataclass
class ComentarioAdicionadoEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Tarefa"

    comentario_id: str = ""
    autor_id: str = ""
