"""
Unit of Work - Implementação em memória.

Não há banco de dados: a "transação" apenas delimita a operação e
controla o destino dos eventos enfileirados.

- Commit: eventos vão para o EventPublisher (se configurado) e
  ficam registrados em ``published_events``
- Rollback: eventos são descartados
"""

from typing import List, Optional
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher, UnitOfWork

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória.

    Reutilizável: cada ``with`` inicia uma nova operação, e os eventos
    publicados se acumulam em ``published_events``.

    Example:
        uow = InMemoryUnitOfWork(event_publisher=LoggingEventPublisher())
        with uow:
            repo.save(entity)
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1

    Example com rollback:
        with uow:
            uow.publish_event(event)
            raise InvalidArgumentError("...")
        # Evento descartado, exceção propagada
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Finaliza a operação e publica os eventos enfileirados.

        Ordem: marca como comitado, publica na ordem em que os
        eventos foram enfileirados e limpa a fila.
        """
        eventos = self.collect_events()
        self.clear_events()
        self._committed = True
        logger.debug(f"Transaction committed ({len(eventos)} events)")

        for event in eventos:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )
            if self._event_publisher:
                self._event_publisher.publish(event)
            self._published_events.append(event)

    def rollback(self) -> None:
        descartados = len(self._events)
        self._rolled_back = True
        self.clear_events()
        logger.debug(f"Transaction rolled back ({descartados} events discarded)")

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos publicados desde a criação (ou desde o último reset)."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
