"""
Domain Events - registro de fatos relevantes do domínio.

Eventos são criados pelos casos de uso, enfileirados no Unit of Work
e publicados somente depois do commit.

Características:
- Nomeados no passado (TarefaConcluida, não ConcluirTarefa)
- Auto-geração de ID e timestamp
- Serializáveis para log/transporte via ``to_dict()``
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, ClassVar, Dict
import uuid


@dataclass
class DomainEvent:
    """
    Classe base para Domain Events.

    Subclasses declaram ``aggregate_type`` e seus próprios campos
    (sempre com default, por causa da herança de dataclasses).

    Attributes:
        event_id: Identificador único do evento
        aggregate_id: ID do agregado que gerou o evento
        occurred_at: Momento em que o evento ocorreu
        version: Versão do schema do evento

    Example:
        @dataclass
        class TarefaCriadaEvent(DomainEvent):
            aggregate_type: ClassVar[str] = "Tarefa"
            titulo: str = ""
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=datetime.now)
    version: int = 1

    aggregate_type: ClassVar[str] = ""

    _BASE_FIELDS: ClassVar[frozenset] = frozenset(
        {"event_id", "aggregate_id", "occurred_at", "version"}
    )

    def __post_init__(self):
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    def event_type(self) -> str:
        """Nome da classe do evento."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializa evento para dicionário.

        Datas são convertidas para ISO-8601.
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Campos específicos da subclasse."""
        data = {}
        for f in fields(self):
            if f.name in self._BASE_FIELDS:
                continue
            value = getattr(self, f.name)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            data[f.name] = value
        return data

    def __repr__(self) -> str:
        return (
            f"{self.event_type}("
            f"event_id={self.event_id[:8]}..., "
            f"aggregate_id={self.aggregate_id}, "
            f"occurred_at={self.occurred_at.isoformat()}"
            f")"
        )
