"""
Shared Domain Components.

Contém componentes compartilhados entre todos os contextos:
- Exceções de domínio
- Value Objects (CPF, Email) e Resultado
- Tabelas de transição, sinônimos de enum e política de períodos
- Interfaces (Ports) e base de Domain Events
"""

from .exceptions import (
    DomainException,
    ValidationError,
    RequiredFieldError,
    InvalidFormatError,
    InvalidChecksumError,
    InvalidArgumentError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    InvalidTransitionError,
    UseCompletionOperationError,
    TaskFinalizedError,
    ProjectFinalizedError,
    AlreadyMemberError,
    DuplicateLoginError,
)
from .events import DomainEvent
from .interfaces import EventPublisher, UnitOfWork
from .resultado import Resultado
from .value_objects import CPF, Email

__all__ = [
    "DomainException",
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "InvalidChecksumError",
    "InvalidArgumentError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "InvalidTransitionError",
    "UseCompletionOperationError",
    "TaskFinalizedError",
    "ProjectFinalizedError",
    "AlreadyMemberError",
    "DuplicateLoginError",
    "DomainEvent",
    "EventPublisher",
    "UnitOfWork",
    "Resultado",
    "CPF",
    "Email",
]
