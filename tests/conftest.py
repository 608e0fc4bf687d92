"""
Configurações globais do Pytest para o Gestor de Projetos.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

from datetime import date
from pathlib import Path
from typing import List

import pytest

from src.adapters.in_memory.repositories import (
    InMemoryAlocacaoRepository,
    InMemoryComentarioRepository,
    InMemoryEquipeRepository,
    InMemoryProjetoRepository,
    InMemoryRegistroEsforcoRepository,
    InMemoryTarefaRepository,
    InMemoryUsuarioRepository,
)
from src.config.container import reset_container
from src.core.projetos.entities import ProjetoEntity
from src.core.shared.events import DomainEvent
from src.core.tarefas.entities import TarefaEntity
from src.core.usuarios.entities import Perfil, UsuarioEntity


CPF_GERENTE = "529.982.247-25"
CPF_COLABORADOR = "111.444.777-35"
CPF_ADMIN = "123.456.789-09"


class FakeUnitOfWork:
    """
    Fake Unit of Work para testes.

    Permite testar:
    - Comportamento de commit/rollback
    - Eventos publicados
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._committed = False
        self._rolled_back = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def commit(self):
        self._committed = True

    def rollback(self):
        self._rolled_back = True
        self._events.clear()

    def publish_event(self, event: DomainEvent):
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container (e repositórios) limpos.
    """
    reset_container()
    yield
    reset_container()


# =============================================================================
# Infraestrutura fake
# =============================================================================

@pytest.fixture
def uow():
    """Fixture para Unit of Work fake."""
    return FakeUnitOfWork()


@pytest.fixture
def usuario_repo():
    return InMemoryUsuarioRepository()


@pytest.fixture
def equipe_repo():
    return InMemoryEquipeRepository()


@pytest.fixture
def projeto_repo():
    return InMemoryProjetoRepository()


@pytest.fixture
def alocacao_repo():
    return InMemoryAlocacaoRepository()


@pytest.fixture
def tarefa_repo():
    return InMemoryTarefaRepository()


@pytest.fixture
def registro_repo():
    return InMemoryRegistroEsforcoRepository()


@pytest.fixture
def comentario_repo():
    return InMemoryComentarioRepository()


# =============================================================================
# Entidades de exemplo
# =============================================================================

@pytest.fixture
def gerente():
    """Usuário com perfil GERENTE."""
    return UsuarioEntity.criar(
        nome_completo="Ana Souza",
        cpf=CPF_GERENTE,
        email="ana@empresa.com",
        cargo="Gerente de Projetos",
        login="ana",
        senha="segredo123",
        perfil=Perfil.GERENTE,
    )


@pytest.fixture
def colaborador():
    """Usuário com perfil COLABORADOR."""
    return UsuarioEntity.criar(
        nome_completo="Bruno Lima",
        cpf=CPF_COLABORADOR,
        email="bruno@empresa.com",
        cargo="Desenvolvedor",
        login="bruno",
        senha="senha456",
        perfil="colaborador",
    )


@pytest.fixture
def admin():
    return UsuarioEntity.criar(
        nome_completo="Carla Dias",
        cpf=CPF_ADMIN,
        email="carla@empresa.com",
        cargo="Diretora",
        login="carla",
        senha="admin789",
        perfil="admin",
    )


@pytest.fixture
def projeto(gerente):
    """Projeto PLANEJADO de 2025-01-01 a 2025-06-30."""
    return ProjetoEntity.criar(
        nome="Portal do Cliente",
        descricao="Novo portal de autoatendimento",
        data_inicio=date(2025, 1, 1),
        data_termino_prevista=date(2025, 6, 30),
        gerente_responsavel=gerente,
    )


@pytest.fixture
def tarefa(projeto):
    """Tarefa NOVA de 2025-01-01 a 2025-01-10, estimativa 8h."""
    return TarefaEntity.criar(
        projeto=projeto,
        titulo="Modelar banco",
        data_inicio=date(2025, 1, 1),
        data_termino_prevista=date(2025, 1, 10),
        esforco_estimado_horas=8,
    )


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
