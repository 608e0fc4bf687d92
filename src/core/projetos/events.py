"""
Domain Events do Contexto de Projetos.

Eventos:
- ProjetoCriadoEvent
- StatusProjetoAlteradoEvent
- ProjetoCanceladoEvent
- EquipeAlocadaEvent
- AlocacaoEncerradaEvent
"""

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional

from src.core.shared.events import DomainEvent


@dataclass
class ProjetoCriadoEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Projeto"

    nome: str = ""
    gerente_id: str = ""
    status: str = ""


@dataclass
class StatusProjetoAlteradoEvent(DomainEvent):
    """
    Evento: Status do projeto mudou.

    Attributes:
        status_anterior: Rótulo do status antes da mudança
        status_novo: Rótulo do status depois da mudança
    """

    aggregate_type: ClassVar[str] = "Projeto"

    status_anterior: str = ""
    status_novo: str = ""


@dataclass
class ProjetoCanceladoEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Projeto"

    status_anterior: str = ""
    motivo: Optional[str] = None


@dataclass
class EquipeAlocadaEvent(DomainEvent):
    """Evento: Equipe alocada ao projeto (aggregate_id = id da alocação)."""

    aggregate_type: ClassVar[str] = "AlocacaoEquipeProjeto"

    projeto_id: str = ""
    equipe_id: str = ""
    data_inicio: Optional[date] = None
    capacidade_horas_semana: int = 0


@dataclass
class AlocacaoEncerradaEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "AlocacaoEquipeProjeto"

    projeto_id: str = ""
    equipe_id: str = ""
    data_fim: Optional[date] = None
