"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações:
- LoggingEventPublisher: Loga cada evento e despacha para handlers locais
- InMemoryEventPublisher: Guarda eventos publicados (testes)

Padrão Observer/Pub-Sub para desacoplamento.
"""

from typing import Callable, Dict, List
import json
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class LoggingEventPublisher(EventPublisher):
    """
    Publisher que loga eventos.

    Formato:
        [EVENT] TarefaConcluidaEvent | aggregate=<id> | data={...}

    Handlers síncronos podem ser registrados por tipo de evento;
    falha em um handler é logada e não interrompe os demais.
    """

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level
        self._handlers: Dict[str, List[EventHandler]] = {}

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event_data, default=str, ensure_ascii=False)}"
        )

        self._dispatch_to_handlers(event)

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Registra handler para tipo de evento (nome da classe)."""
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class InMemoryEventPublisher(EventPublisher):
    """
    Publisher para testes: apenas acumula eventos.

    Example:
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(event_publisher=publisher)
        ...
        assert publisher.event_types == ["TarefaCriadaEvent"]
    """

    def __init__(self):
        self.events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> List[str]:
        return [e.event_type for e in self.events]

    def clear(self) -> None:
        self.events.clear()
