"""
Ports (Interfaces) do Contexto de Tarefas.

Repositórios de tarefas, registros de esforço e comentários.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import (
    ComentarioTarefaEntity,
    RegistroEsforcoEntity,
    StatusTarefa,
    TarefaEntity,
)


@runtime_checkable
class TarefaRepository(Protocol):
    """Interface para persistência de Tarefas."""

    def save(self, tarefa: TarefaEntity) -> None:
        ...

    def get_by_id(self, tarefa_id: str) -> Optional[TarefaEntity]:
        ...

    def delete(self, tarefa_id: str) -> None:
        ...

    def list_all(self) -> List[TarefaEntity]:
        ...

    def list_by_projeto(self, projeto_id: str) -> List[TarefaEntity]:
        ...

    def list_by_responsavel(self, usuario_id: str) -> List[TarefaEntity]:
        ...

    def list_by_status(self, status: StatusTarefa) -> List[TarefaEntity]:
        ...


@runtime_checkable
class RegistroEsforcoRepository(Protocol):
    def save(self, registro: RegistroEsforcoEntity) -> None:
        ...

    def get_by_id(self, registro_id: str) -> Optional[RegistroEsforcoEntity]:
        ...

    def list_all(self) -> List[RegistroEsforcoEntity]:
        ...

    def list_by_tarefa(self, tarefa_id: str) -> List[RegistroEsforcoEntity]:
        ...

    def list_by_usuario(self, usuario_id: str) -> List[RegistroEsforcoEntity]:
        ...


@runtime_checkable
class ComentarioRepository(Protocol):
    def save(self, comentario: ComentarioTarefaEntity) -> None:
        ...

    def get_by_id(self, comentario_id: str) -> Optional[ComentarioTarefaEntity]:
        ...

    def list_all(self) -> List[ComentarioTarefaEntity]:
        ...

    def list_by_tarefa(self, tarefa_id: str) -> List[ComentarioTarefaEntity]:
        ...

    def list_by_autor(self, autor_id: str) -> List[ComentarioTarefaEntity]:
        ...
