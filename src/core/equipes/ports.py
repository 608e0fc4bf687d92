"""
Ports (Interfaces) do Contexto de Equipes.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import EquipeEntity


@runtime_checkable
class EquipeRepository(Protocol):
    """Interface para persistência de Equipes."""

    def save(self, equipe: EquipeEntity) -> None:
        ...

    def get_by_id(self, equipe_id: str) -> Optional[EquipeEntity]:
        ...

    def delete(self, equipe_id: str) -> None:
        ...

    def list_all(self) -> List[EquipeEntity]:
        ...

    def list_by_membro(self, usuario_id: str) -> List[EquipeEntity]:
        """Equipes das quais o usuário participa."""
        ...
