"""
Ports (Interfaces) do Contexto de Projetos.
"""

from datetime import date
from typing import List, Optional, Protocol, runtime_checkable

from .entities import AlocacaoEquipeProjetoEntity, ProjetoEntity, StatusProjeto


@runtime_checkable
class ProjetoRepository(Protocol):
    """Interface para persistência de Projetos."""

    def save(self, projeto: ProjetoEntity) -> None:
        ...

    def get_by_id(self, projeto_id: str) -> Optional[ProjetoEntity]:
        ...

    def delete(self, projeto_id: str) -> None:
        ...

    def list_all(self) -> List[ProjetoEntity]:
        ...

    def list_by_status(self, status: StatusProjeto) -> List[ProjetoEntity]:
        ...

    def list_by_gerente(self, gerente_id: str) -> List[ProjetoEntity]:
        ...


@runtime_checkable
class AlocacaoRepository(Protocol):
    """Interface para persistência de Alocações de equipe."""

    def save(self, alocacao: AlocacaoEquipeProjetoEntity) -> None:
        ...

    def get_by_id(self, alocacao_id: str) -> Optional[AlocacaoEquipeProjetoEntity]:
        ...

    def delete(self, alocacao_id: str) -> None:
        ...

    def list_all(self) -> List[AlocacaoEquipeProjetoEntity]:
        ...

    def list_by_projeto(self, projeto_id: str) -> List[AlocacaoEquipeProjetoEntity]:
        ...

    def list_vigentes(
        self, projeto_id: str, referencia: Optional[date] = None
    ) -> List[AlocacaoEquipeProjetoEntity]:
        """Alocações do projeto vigentes na data (default: hoje)."""
        ...
