"""
Ports (Interfaces) do Contexto de Usuários.

Implementações:
- InMemoryUsuarioRepository (src.adapters.in_memory.repositories)
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import Perfil, UsuarioEntity


@runtime_checkable
class UsuarioRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Além do CRUD, oferece busca por login, usada para garantir
    unicidade de login no cadastro.
    """

    def save(self, usuario: UsuarioEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_login(self, login: str) -> Optional[UsuarioEntity]:
        """
        Busca usuário pelo login (sem diferenciar maiúsculas).

        Returns:
            Usuário encontrado ou None
        """
        ...

    def exists_login(self, login: str) -> bool:
        ...

    def delete(self, usuario_id: str) -> None:
        ...

    def list_all(self) -> List[UsuarioEntity]:
        ...

    def list_by_perfil(self, perfil: Perfil) -> List[UsuarioEntity]:
        ...
