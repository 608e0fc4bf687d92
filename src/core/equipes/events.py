"""
Domain Events do Contexto de Equipes.

Eventos:
- EquipeCriadaEvent
- MembroAdicionadoEvent
- MembroRemovidoEvent
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.shared.events import DomainEvent


@dataclass
class EquipeCriadaEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Equipe"

    nome: str = ""


@dataclass
class MembroAdicionadoEvent(DomainEvent):
    """
    Evento: Usuário entrou na equipe.

    Attributes:
        usuario_id: ID do novo membro
        papel: Rótulo do papel, se informado
    """

    aggregate_type: ClassVar[str] = "Equipe"

    usuario_id: str = ""
    papel: Optional[str] = None


@dataclass
class MembroRemovidoEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Equipe"

    usuario_id: str = ""
