"""
Domain Events do Contexto de Usuários.

Eventos:
- UsuarioCadastradoEvent: Novo usuário cadastrado
- SenhaAlteradaEvent: Usuário trocou a senha
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.shared.events import DomainEvent


@dataclass
class UsuarioCadastradoEvent(DomainEvent):
    """
    Evento: Usuário foi cadastrado.

    Attributes:
        login: Login do novo usuário
        perfil: Rótulo do perfil de acesso
    """

    aggregate_type: ClassVar[str] = "Usuario"

    login: str = ""
    perfil: str = ""


@dataclass
class SenhaAlteradaEvent(DomainEvent):
    """Evento: Senha foi trocada. Não carrega a senha nem o hash."""

    aggregate_type: ClassVar[str] = "Usuario"

    login: str = ""
