"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, event publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores vindos de settings/.env
"""

from typing import Optional

from dependency_injector import containers, providers

from src.adapters.in_memory.publishers import LoggingEventPublisher
from src.adapters.in_memory.repositories import (
    InMemoryAlocacaoRepository,
    InMemoryComentarioRepository,
    InMemoryEquipeRepository,
    InMemoryProjetoRepository,
    InMemoryRegistroEsforcoRepository,
    InMemoryTarefaRepository,
    InMemoryUsuarioRepository,
)
from src.adapters.in_memory.unit_of_work import InMemoryUnitOfWork
from src.config import settings
from src.core.equipes import use_cases as equipes
from src.core.projetos import use_cases as projetos
from src.core.tarefas import use_cases as tarefas
from src.core.usuarios import use_cases as usuarios


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Infrastructure: Event publisher
    - Repositories: Persistência (em memória)
    - Unit of Work: Operações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.criar_tarefa_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default=settings.CONTAINER_CONFIG)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        LoggingEventPublisher,
        log_level=config.event_log_level,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    usuario_repository = providers.Singleton(InMemoryUsuarioRepository)
    equipe_repository = providers.Singleton(InMemoryEquipeRepository)
    projeto_repository = providers.Singleton(InMemoryProjetoRepository)
    alocacao_repository = providers.Singleton(InMemoryAlocacaoRepository)
    tarefa_repository = providers.Singleton(InMemoryTarefaRepository)
    registro_esforco_repository = providers.Singleton(InMemoryRegistroEsforcoRepository)
    comentario_repository = providers.Singleton(InMemoryComentarioRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    cadastrar_usuario_service = providers.Factory(
        usuarios.CadastrarUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    trocar_senha_service = providers.Factory(
        usuarios.TrocarSenhaService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    obter_usuario_service = providers.Factory(
        usuarios.ObterUsuarioService,
        usuario_repo=usuario_repository,
    )

    listar_usuarios_service = providers.Factory(
        usuarios.ListarUsuariosService,
        usuario_repo=usuario_repository,
    )

    # =========================================================================
    # Services - Equipes
    # =========================================================================

    criar_equipe_service = providers.Factory(
        equipes.CriarEquipeService,
        equipe_repo=equipe_repository,
        uow=unit_of_work,
    )

    adicionar_membro_service = providers.Factory(
        equipes.AdicionarMembroService,
        equipe_repo=equipe_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    remover_membro_service = providers.Factory(
        equipes.RemoverMembroService,
        equipe_repo=equipe_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services - Projetos
    # =========================================================================

    criar_projeto_service = providers.Factory(
        projetos.CriarProjetoService,
        projeto_repo=projeto_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    alterar_status_projeto_service = providers.Factory(
        projetos.AlterarStatusProjetoService,
        projeto_repo=projeto_repository,
        uow=unit_of_work,
    )

    cancelar_projeto_service = providers.Factory(
        projetos.CancelarProjetoService,
        projeto_repo=projeto_repository,
        uow=unit_of_work,
    )

    alocar_equipe_service = providers.Factory(
        projetos.AlocarEquipeService,
        alocacao_repo=alocacao_repository,
        projeto_repo=projeto_repository,
        equipe_repo=equipe_repository,
        uow=unit_of_work,
    )

    encerrar_alocacao_service = providers.Factory(
        projetos.EncerrarAlocacaoService,
        alocacao_repo=alocacao_repository,
        uow=unit_of_work,
    )

    listar_projetos_atrasados_service = providers.Factory(
        projetos.ListarProjetosAtrasadosService,
        projeto_repo=projeto_repository,
    )

    # =========================================================================
    # Services - Tarefas
    # =========================================================================

    criar_tarefa_service = providers.Factory(
        tarefas.CriarTarefaService,
        tarefa_repo=tarefa_repository,
        projeto_repo=projeto_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    alterar_status_tarefa_service = providers.Factory(
        tarefas.AlterarStatusTarefaService,
        tarefa_repo=tarefa_repository,
        uow=unit_of_work,
    )

    concluir_tarefa_service = providers.Factory(
        tarefas.ConcluirTarefaService,
        tarefa_repo=tarefa_repository,
        uow=unit_of_work,
    )

    registrar_esforco_service = providers.Factory(
        tarefas.RegistrarEsforcoService,
        tarefa_repo=tarefa_repository,
        registro_repo=registro_esforco_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    comentar_tarefa_service = providers.Factory(
        tarefas.ComentarTarefaService,
        tarefa_repo=tarefa_repository,
        comentario_repo=comentario_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
        tamanho_max_mensagem=config.comentario_tamanho_max,
    )

    exportar_esforcos_csv_service = providers.Factory(
        tarefas.ExportarEsforcosCsvService,
        registro_repo=registro_esforco_repository,
    )

    exportar_comentarios_csv_service = providers.Factory(
        tarefas.ExportarComentariosCsvService,
        comentario_repo=comentario_repository,
    )

    resumo_horas_service = providers.Factory(
        tarefas.ResumoHorasService,
        registro_repo=registro_esforco_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo, com repositórios vazios.
    """
    global _container
    _container = None
