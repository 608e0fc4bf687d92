"""
Use Cases (Application Services) do Contexto de Projetos.

Use Cases implementados:
- CriarProjetoService
- AlterarStatusProjetoService
- CancelarProjetoService
- AlocarEquipeService
- EncerrarAlocacaoService
- ListarProjetosAtrasadosService
"""

from datetime import date
from typing import List, Optional

from src.core.equipes.ports import EquipeRepository
from src.core.equipes.use_cases import obter_equipe_ou_erro
from src.core.shared.exceptions import EntityNotFoundError, ProjectFinalizedError
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.ports import UsuarioRepository
from src.core.usuarios.use_cases import obter_usuario_ou_erro

from .dtos import (
    AlocacaoOutputDTO,
    AlocarEquipeInputDTO,
    AlterarStatusProjetoInputDTO,
    CancelarProjetoInputDTO,
    CriarProjetoInputDTO,
    EncerrarAlocacaoInputDTO,
    ProjetoOutputDTO,
)
from .entities import AlocacaoEquipeProjetoEntity, ProjetoEntity
from .events import (
    AlocacaoEncerradaEvent,
    EquipeAlocadaEvent,
    ProjetoCanceladoEvent,
    ProjetoCriadoEvent,
    StatusProjetoAlteradoEvent,
)
from .ports import AlocacaoRepository, ProjetoRepository


def obter_projeto_ou_erro(repo: ProjetoRepository, projeto_id: str) -> ProjetoEntity:
    projeto = repo.get_by_id(projeto_id)
    if not projeto:
        raise EntityNotFoundError(
            f"Projeto {projeto_id} não encontrado",
            entity_type="Projeto",
            entity_id=projeto_id,
        )
    return projeto


class CriarProjetoService:
    """
    Use Case: Criar novo projeto.

    Fluxo:
    1. Buscar gerente responsável
    2. Criar entidade (valida datas e perfil do gerente)
    3. Persistir e disparar ProjetoCriado
    """

    def __init__(
        self,
        projeto_repo: ProjetoRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.projeto_repo = projeto_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CriarProjetoInputDTO) -> ProjetoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Gerente inexistente
            ValidationError: Dados inválidos
        """
        with self.uow:
            gerente = obter_usuario_ou_erro(self.usuario_repo, input_dto.gerente_id)

            projeto = ProjetoEntity.criar(
                nome=input_dto.nome,
                descricao=input_dto.descricao,
                data_inicio=input_dto.data_inicio,
                data_termino_prevista=input_dto.data_termino_prevista,
                gerente_responsavel=gerente,
                status=input_dto.status,
            )
            self.projeto_repo.save(projeto)

            self.uow.publish_event(
                ProjetoCriadoEvent(
                    aggregate_id=projeto.id,
                    nome=projeto.nome,
                    gerente_id=gerente.id,
                    status=projeto.status.value,
                )
            )

        return ProjetoOutputDTO.from_entity(projeto)


class AlterarStatusProjetoService:
    """Use Case: Mudar status do projeto respeitando a tabela de transições."""

    def __init__(self, projeto_repo: ProjetoRepository, uow: UnitOfWork):
        self.projeto_repo = projeto_repo
        self.uow = uow

    def execute(self, input_dto: AlterarStatusProjetoInputDTO) -> ProjetoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Projeto inexistente
            InvalidTransitionError: Transição não permitida
        """
        with self.uow:
            projeto = obter_projeto_ou_erro(self.projeto_repo, input_dto.projeto_id)
            status_anterior = projeto.status

            projeto.alterar_status(input_dto.novo_status)
            self.projeto_repo.save(projeto)

            self.uow.publish_event(
                StatusProjetoAlteradoEvent(
                    aggregate_id=projeto.id,
                    status_anterior=status_anterior.value,
                    status_novo=projeto.status.value,
                )
            )

        return ProjetoOutputDTO.from_entity(projeto)


class CancelarProjetoService:
    def __init__(self, projeto_repo: ProjetoRepository, uow: UnitOfWork):
        self.projeto_repo = projeto_repo
        self.uow = uow

    def execute(self, input_dto: CancelarProjetoInputDTO) -> ProjetoOutputDTO:
        with self.uow:
            projeto = obter_projeto_ou_erro(self.projeto_repo, input_dto.projeto_id)
            status_anterior = projeto.status

            projeto.cancelar(input_dto.motivo)
            self.projeto_repo.save(projeto)

            motivo = projeto.motivo_cancelamento
            self.uow.publish_event(
                ProjetoCanceladoEvent(
                    aggregate_id=projeto.id,
                    status_anterior=status_anterior.value,
                    motivo=motivo.value if motivo else None,
                )
            )

        return ProjetoOutputDTO.from_entity(projeto)


class AlocarEquipeService:
    """
    Use Case: Alocar equipe a um projeto.

    Projetos concluídos ou cancelados não recebem novas alocações.
    """

    def __init__(
        self,
        alocacao_repo: AlocacaoRepository,
        projeto_repo: ProjetoRepository,
        equipe_repo: EquipeRepository,
        uow: UnitOfWork,
    ):
        self.alocacao_repo = alocacao_repo
        self.projeto_repo = projeto_repo
        self.equipe_repo = equipe_repo
        self.uow = uow

    def execute(self, input_dto: AlocarEquipeInputDTO) -> AlocacaoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Projeto ou equipe inexistente
            ProjectFinalizedError: Projeto já finalizado
            InvalidArgumentError: Capacidade negativa ou período incoerente
        """
        with self.uow:
            projeto = obter_projeto_ou_erro(self.projeto_repo, input_dto.projeto_id)
            equipe = obter_equipe_ou_erro(self.equipe_repo, input_dto.equipe_id)

            if projeto.status.is_finalizado:
                raise ProjectFinalizedError(
                    f"Projeto {projeto.nome} está {projeto.status.value}; "
                    f"não aceita novas alocações"
                )

            alocacao = AlocacaoEquipeProjetoEntity.criar(
                projeto=projeto,
                equipe=equipe,
                data_inicio=input_dto.data_inicio,
                capacidade_horas_semana=input_dto.capacidade_horas_semana,
                observacoes=input_dto.observacoes,
                data_fim=input_dto.data_fim,
            )
            self.alocacao_repo.save(alocacao)

            self.uow.publish_event(
                EquipeAlocadaEvent(
                    aggregate_id=alocacao.id,
                    projeto_id=projeto.id,
                    equipe_id=equipe.id,
                    data_inicio=alocacao.data_inicio,
                    capacidade_horas_semana=alocacao.capacidade_horas_semana,
                )
            )

        return AlocacaoOutputDTO.from_entity(alocacao)


class EncerrarAlocacaoService:
    def __init__(self, alocacao_repo: AlocacaoRepository, uow: UnitOfWork):
        self.alocacao_repo = alocacao_repo
        self.uow = uow

    def execute(self, input_dto: EncerrarAlocacaoInputDTO) -> AlocacaoOutputDTO:
        with self.uow:
            alocacao = self.alocacao_repo.get_by_id(input_dto.alocacao_id)
            if not alocacao:
                raise EntityNotFoundError(
                    f"Alocação {input_dto.alocacao_id} não encontrada",
                    entity_type="AlocacaoEquipeProjeto",
                    entity_id=input_dto.alocacao_id,
                )

            alocacao.encerrar_alocacao(input_dto.data_fim)
            self.alocacao_repo.save(alocacao)

            self.uow.publish_event(
                AlocacaoEncerradaEvent(
                    aggregate_id=alocacao.id,
                    projeto_id=alocacao.projeto.id,
                    equipe_id=alocacao.equipe.id,
                    data_fim=alocacao.data_fim,
                )
            )

        return AlocacaoOutputDTO.from_entity(alocacao, referencia=input_dto.data_fim)


class ListarProjetosAtrasadosService:
    """Use Case (consulta): Projetos não finalizados com término previsto vencido."""

    def __init__(self, projeto_repo: ProjetoRepository):
        self.projeto_repo = projeto_repo

    def execute(self, referencia: Optional[date] = None) -> List[ProjetoOutputDTO]:
        atrasados = [
            p for p in self.projeto_repo.list_all() if p.esta_atrasado(referencia)
        ]
        atrasados.sort(key=lambda p: p.data_termino_prevista)
        return [ProjetoOutputDTO.from_entity(p) for p in atrasados]
