"""
Repositórios em memória.

Guardam as entidades em dicionários indexados pelo ID. Cada contexto
ganha uma subclasse de InMemoryRepository com as consultas declaradas
no seu port.

Útil para:
- Testes unitários e de integração
- Prototipagem e execução local

Não há isolamento de transação: as entidades são guardadas por
referência, então alterações feitas antes de um rollback permanecem.
"""

from datetime import date
from typing import Callable, Dict, Generic, List, Optional, TypeVar
import logging

from src.core.equipes.entities import EquipeEntity
from src.core.projetos.entities import (
    AlocacaoEquipeProjetoEntity,
    ProjetoEntity,
    StatusProjeto,
)
from src.core.tarefas.entities import (
    ComentarioTarefaEntity,
    RegistroEsforcoEntity,
    StatusTarefa,
    TarefaEntity,
)
from src.core.usuarios.entities import Perfil, UsuarioEntity

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    Base genérica para repositórios em memória.

    Type Parameters:
        T: Tipo da entidade (precisa expor ``id``)

    Example:
        class InMemoryEquipeRepository(InMemoryRepository[EquipeEntity]):
            entity_name = "Equipe"
    """

    entity_name: str = "Entidade"

    def __init__(self):
        self._items: Dict[str, T] = {}

    def save(self, entity: T) -> None:
        """Cria ou substitui a entidade."""
        acao = "updated" if entity.id in self._items else "created"
        self._items[entity.id] = entity
        logger.debug(f"{self.entity_name} {acao}: {entity.id}")

    def get_by_id(self, entity_id: str) -> Optional[T]:
        return self._items.get(entity_id)

    def delete(self, entity_id: str) -> None:
        if self._items.pop(entity_id, None) is not None:
            logger.debug(f"{self.entity_name} deleted: {entity_id}")

    def list_all(self) -> List[T]:
        return list(self._items.values())

    def exists(self, entity_id: str) -> bool:
        return entity_id in self._items

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove todos os dados (útil para testes)."""
        self._items.clear()

    def _filtrar(self, criterio: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if criterio(item)]


class InMemoryUsuarioRepository(InMemoryRepository[UsuarioEntity]):
    entity_name = "Usuario"

    def get_by_login(self, login: str) -> Optional[UsuarioEntity]:
        """Busca por login, sem diferenciar maiúsculas."""
        chave = (login or "").strip().lower()
        for usuario in self._items.values():
            if usuario.login.lower() == chave:
                return usuario
        return None

    def exists_login(self, login: str) -> bool:
        return self.get_by_login(login) is not None

    def list_by_perfil(self, perfil: Perfil) -> List[UsuarioEntity]:
        return self._filtrar(lambda u: u.perfil == perfil)


class InMemoryEquipeRepository(InMemoryRepository[EquipeEntity]):
    entity_name = "Equipe"

    def list_by_membro(self, usuario_id: str) -> List[EquipeEntity]:
        return self._filtrar(
            lambda e: any(m.id == usuario_id for m in e.membros)
        )


class InMemoryProjetoRepository(InMemoryRepository[ProjetoEntity]):
    entity_name = "Projeto"

    def list_by_status(self, status: StatusProjeto) -> List[ProjetoEntity]:
        return self._filtrar(lambda p: p.status == status)

    def list_by_gerente(self, gerente_id: str) -> List[ProjetoEntity]:
        return self._filtrar(
            lambda p: p.gerente_responsavel is not None
            and p.gerente_responsavel.id == gerente_id
        )


class InMemoryAlocacaoRepository(InMemoryRepository[AlocacaoEquipeProjetoEntity]):
    entity_name = "AlocacaoEquipeProjeto"

    def list_by_projeto(self, projeto_id: str) -> List[AlocacaoEquipeProjetoEntity]:
        return self._filtrar(lambda a: a.projeto.id == projeto_id)

    def list_vigentes(
        self, projeto_id: str, referencia: Optional[date] = None
    ) -> List[AlocacaoEquipeProjetoEntity]:
        return [
            a for a in self.list_by_projeto(projeto_id)
            if a.esta_vigente(referencia)
        ]


class InMemoryTarefaRepository(InMemoryRepository[TarefaEntity]):
    entity_name = "Tarefa"

    def list_by_projeto(self, projeto_id: str) -> List[TarefaEntity]:
        return self._filtrar(lambda t: t.projeto.id == projeto_id)

    def list_by_responsavel(self, usuario_id: str) -> List[TarefaEntity]:
        return self._filtrar(
            lambda t: t.responsavel is not None and t.responsavel.id == usuario_id
        )

    def list_by_status(self, status: StatusTarefa) -> List[TarefaEntity]:
        return self._filtrar(lambda t: t.status == status)


class InMemoryRegistroEsforcoRepository(InMemoryRepository[RegistroEsforcoEntity]):
    entity_name = "RegistroEsforco"

    def list_by_tarefa(self, tarefa_id: str) -> List[RegistroEsforcoEntity]:
        return self._filtrar(lambda r: r.tarefa.id == tarefa_id)

    def list_by_usuario(self, usuario_id: str) -> List[RegistroEsforcoEntity]:
        return self._filtrar(lambda r: r.usuario.id == usuario_id)


class InMemoryComentarioRepository(InMemoryRepository[ComentarioTarefaEntity]):
    entity_name = "ComentarioTarefa"

    def list_by_tarefa(self, tarefa_id: str) -> List[ComentarioTarefaEntity]:
        return self._filtrar(lambda c: c.tarefa.id == tarefa_id)

    def list_by_autor(self, autor_id: str) -> List[ComentarioTarefaEntity]:
        return self._filtrar(lambda c: c.autor.id == autor_id)
