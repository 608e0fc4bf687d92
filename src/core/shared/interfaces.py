"""
Contratos compartilhados pelos serviços de usuários, equipes, projetos e tarefas.

Os serviços de aplicação recebem uma ``UnitOfWork`` e, por meio dela,
um ``EventPublisher``. Os repositórios de cada contexto ficam no
``ports.py`` do próprio contexto; as implementações em memória ficam em
``src/adapters/in_memory``.
"""

from abc import ABC, abstractmethod
from typing import List

from .events import DomainEvent


class UnitOfWork(ABC):
    """
    Escopo de uma operação de serviço (ex: concluir tarefa, cancelar projeto).

    Uso:
        with uow:
            tarefa.concluir(horas_reais, data_conclusao)
            repo.save(tarefa)
            uow.publish_event(TarefaConcluidaEvent(...))

    Saída sem erro chama ``commit()``, que entrega os eventos ao publisher.
    Saída com exceção chama ``rollback()`` e os eventos da operação são
    descartados; a exceção segue para quem chamou o serviço.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Entrega ao publisher os eventos enfileirados e esvazia a fila."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Esvazia a fila sem publicar nada."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """Enfileira um evento (ex: ``ProjetoCriadoEvent``) até o commit."""
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Cópia da fila atual."""
        return list(self._events)

    def clear_events(self) -> None:
        self._events.clear()


class EventPublisher(ABC):
    """
    Destino dos eventos de projetos, equipes, tarefas e usuários.

    ``LoggingEventPublisher`` grava cada evento no log;
    ``InMemoryEventPublisher`` guarda a lista para consulta nos testes.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publica na ordem em que os eventos foram enfileirados."""
        for event in events:
            self.publish(event)
