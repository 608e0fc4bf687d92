"""
Use Cases (Application Services) do Contexto de Tarefas.

Use Cases implementados:
- CriarTarefaService: Criar tarefa em um projeto
- AlterarStatusTarefaService: Transição genérica de status
- ConcluirTarefaService: Conclusão com horas e data
- RegistrarEsforcoService: Lançar horas
- ComentarTarefaService: Comentar tarefa
- ExportarEsforcosCsvService / ExportarComentariosCsvService: Exportação CSV
- ResumoHorasService: Totais de horas por usuário e por tarefa
"""

from datetime import date
from typing import Optional

from src.core.projetos.ports import ProjetoRepository
from src.core.projetos.use_cases import obter_projeto_ou_erro
from src.core.shared.exceptions import EntityNotFoundError, ProjectFinalizedError
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.ports import UsuarioRepository
from src.core.usuarios.use_cases import obter_usuario_ou_erro

from . import relatorios
from .dtos import (
    AlterarStatusTarefaInputDTO,
    ComentarTarefaInputDTO,
    ComentarioOutputDTO,
    ConcluirTarefaInputDTO,
    CriarTarefaInputDTO,
    RegistrarEsforcoInputDTO,
    RegistroEsforcoOutputDTO,
    ResumoHorasOutputDTO,
    TarefaOutputDTO,
)
from .entities import TarefaEntity
from .events import (
    ComentarioAdicionadoEvent,
    EsforcoRegistradoEvent,
    StatusTarefaAlteradoEvent,
    TarefaConcluidaEvent,
    TarefaCriadaEvent,
)
from .ports import ComentarioRepository, RegistroEsforcoRepository, TarefaRepository


def obter_tarefa_ou_erro(repo: TarefaRepository, tarefa_id: str) -> TarefaEntity:
    tarefa = repo.get_by_id(tarefa_id)
    if not tarefa:
        raise EntityNotFoundError(
            f"Tarefa {tarefa_id} não encontrada",
            entity_type="Tarefa",
            entity_id=tarefa_id,
        )
    return tarefa


class CriarTarefaService:
    """
    Use Case: Criar nova tarefa.

    Fluxo:
    1. Buscar projeto (e responsável, se informado)
    2. Rejeitar projeto concluído/cancelado
    3. Criar entidade (valida datas, prioridade e estimativa)
    4. Persistir e disparar TarefaCriada

    Example:
        service = CriarTarefaService(tarefa_repo, projeto_repo, usuario_repo, uow)
        output = service.execute(CriarTarefaInputDTO(
            projeto_id=projeto.id,
            titulo="Modelar banco",
            data_inicio=date(2025, 1, 1),
            data_termino_prevista=date(2025, 1, 10),
        ))
    """

    def __init__(
        self,
        tarefa_repo: TarefaRepository,
        projeto_repo: ProjetoRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.tarefa_repo = tarefa_repo
        self.projeto_repo = projeto_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CriarTarefaInputDTO) -> TarefaOutputDTO:
        """
        Raises:
            EntityNotFoundError: Projeto ou responsável inexistente
            ProjectFinalizedError: Projeto concluído ou cancelado
            ValidationError: Dados inválidos
        """
        with self.uow:
            projeto = obter_projeto_ou_erro(self.projeto_repo, input_dto.projeto_id)
            if projeto.status.is_finalizado:
                raise ProjectFinalizedError(
                    f"Projeto {projeto.nome} está {projeto.status.value}; "
                    f"não aceita novas tarefas"
                )

            responsavel = None
            if input_dto.responsavel_id:
                responsavel = obter_usuario_ou_erro(
                    self.usuario_repo, input_dto.responsavel_id
                )

            tarefa = TarefaEntity.criar(
                projeto=projeto,
                titulo=input_dto.titulo,
                data_inicio=input_dto.data_inicio,
                data_termino_prevista=input_dto.data_termino_prevista,
                descricao=input_dto.descricao,
                responsavel=responsavel,
                prioridade=input_dto.prioridade,
                esforco_estimado_horas=input_dto.esforco_estimado_horas,
            )
            self.tarefa_repo.save(tarefa)

            self.uow.publish_event(
                TarefaCriadaEvent(
                    aggregate_id=tarefa.id,
                    projeto_id=projeto.id,
                    titulo=tarefa.titulo,
                    prioridade=tarefa.prioridade.value,
                    responsavel_id=responsavel.id if responsavel else None,
                )
            )

        return TarefaOutputDTO.from_entity(tarefa)


class AlterarStatusTarefaService:
    """
    Use Case: Transição genérica de status.

    Conclusão não passa por aqui: use ConcluirTarefaService.
    """

    def __init__(self, tarefa_repo: TarefaRepository, uow: UnitOfWork):
        self.tarefa_repo = tarefa_repo
        self.uow = uow

    def execute(self, input_dto: AlterarStatusTarefaInputDTO) -> TarefaOutputDTO:
        """
        Raises:
            EntityNotFoundError: Tarefa inexistente
            InvalidTransitionError: Transição não permitida
            UseCompletionOperationError: Destino é CONCLUIDA
        """
        with self.uow:
            tarefa = obter_tarefa_ou_erro(self.tarefa_repo, input_dto.tarefa_id)
            status_anterior = tarefa.status

            tarefa.alterar_status(input_dto.novo_status)
            self.tarefa_repo.save(tarefa)

            self.uow.publish_event(
                StatusTarefaAlteradoEvent(
                    aggregate_id=tarefa.id,
                    status_anterior=status_anterior.value,
                    status_novo=tarefa.status.value,
                )
            )

        return TarefaOutputDTO.from_entity(tarefa)


class ConcluirTarefaService:
    def __init__(self, tarefa_repo: TarefaRepository, uow: UnitOfWork):
        self.tarefa_repo = tarefa_repo
        self.uow = uow

    def execute(self, input_dto: ConcluirTarefaInputDTO) -> TarefaOutputDTO:
        with self.uow:
            tarefa = obter_tarefa_ou_erro(self.tarefa_repo, input_dto.tarefa_id)

            tarefa.concluir(input_dto.horas_reais, input_dto.data_conclusao)
            self.tarefa_repo.save(tarefa)

            self.uow.publish_event(
                TarefaConcluidaEvent(
                    aggregate_id=tarefa.id,
                    horas_finais=input_dto.horas_reais,
                    esforco_real_total=tarefa.esforco_real_horas,
                    data_conclusao=tarefa.data_conclusao,
                )
            )

        return TarefaOutputDTO.from_entity(tarefa)


class RegistrarEsforcoService:
    """
    Use Case: Lançar horas de um usuário em uma tarefa.

    O registro é criado e as horas são somadas ao esforço real da
    tarefa; ambos são persistidos na mesma unidade de trabalho.
    """

    def __init__(
        self,
        tarefa_repo: TarefaRepository,
        registro_repo: RegistroEsforcoRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.tarefa_repo = tarefa_repo
        self.registro_repo = registro_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: RegistrarEsforcoInputDTO) -> RegistroEsforcoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Tarefa ou usuário inexistente
            InvalidArgumentError: Horas <= 0 ou data anterior ao início
            TaskFinalizedError: Tarefa concluída ou cancelada
        """
        with self.uow:
            tarefa = obter_tarefa_ou_erro(self.tarefa_repo, input_dto.tarefa_id)
            usuario = obter_usuario_ou_erro(self.usuario_repo, input_dto.usuario_id)

            registro = relatorios.registrar_esforco(
                tarefa,
                usuario,
                input_dto.data,
                input_dto.horas,
                input_dto.observacao,
            )
            self.registro_repo.save(registro)
            self.tarefa_repo.save(tarefa)

            self.uow.publish_event(
                EsforcoRegistradoEvent(
                    aggregate_id=tarefa.id,
                    registro_id=registro.id,
                    usuario_id=usuario.id,
                    data=registro.data,
                    horas=registro.horas,
                )
            )

        return RegistroEsforcoOutputDTO.from_entity(registro)


class ComentarTarefaService:
    def __init__(
        self,
        tarefa_repo: TarefaRepository,
        comentario_repo: ComentarioRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
        tamanho_max_mensagem: Optional[int] = None,
    ):
        self.tarefa_repo = tarefa_repo
        self.comentario_repo = comentario_repo
        self.usuario_repo = usuario_repo
        self.uow = uow
        self.tamanho_max_mensagem = tamanho_max_mensagem

    def execute(self, input_dto: ComentarTarefaInputDTO) -> ComentarioOutputDTO:
        with self.uow:
            tarefa = obter_tarefa_ou_erro(self.tarefa_repo, input_dto.tarefa_id)
            autor = obter_usuario_ou_erro(self.usuario_repo, input_dto.autor_id)

            comentario = relatorios.comentar_agora(
                tarefa, autor, input_dto.mensagem, self.tamanho_max_mensagem
            )
            self.comentario_repo.save(comentario)

            self.uow.publish_event(
                ComentarioAdicionadoEvent(
                    aggregate_id=tarefa.id,
                    comentario_id=comentario.id,
                    autor_id=autor.id,
                )
            )

        return ComentarioOutputDTO.from_entity(comentario)


class ExportarEsforcosCsvService:
    """Use Case (consulta): CSV de registros, opcionalmente por tarefa e período."""

    def __init__(self, registro_repo: RegistroEsforcoRepository):
        self.registro_repo = registro_repo

    def execute(
        self,
        tarefa_id: Optional[str] = None,
        inicio: Optional[date] = None,
        fim: Optional[date] = None,
    ) -> str:
        if tarefa_id:
            registros = self.registro_repo.list_by_tarefa(tarefa_id)
        else:
            registros = self.registro_repo.list_all()

        if inicio is not None:
            registros = relatorios.filtrar_registros_por_periodo(registros, inicio, fim)

        return relatorios.esforcos_para_csv(registros)


class ExportarComentariosCsvService:
    def __init__(self, comentario_repo: ComentarioRepository):
        self.comentario_repo = comentario_repo

    def execute(self, tarefa_id: Optional[str] = None) -> str:
        if tarefa_id:
            comentarios = self.comentario_repo.list_by_tarefa(tarefa_id)
        else:
            comentarios = self.comentario_repo.list_all()

        comentarios = sorted(comentarios, key=lambda c: c.data_hora)
        return relatorios.comentarios_para_csv(comentarios)


class ResumoHorasService:
    """Use Case (consulta): Totais de horas por usuário e por tarefa."""

    def __init__(self, registro_repo: RegistroEsforcoRepository):
        self.registro_repo = registro_repo

    def execute(
        self,
        inicio: Optional[date] = None,
        fim: Optional[date] = None,
    ) -> ResumoHorasOutputDTO:
        registros = self.registro_repo.list_all()
        if inicio is not None:
            registros = relatorios.filtrar_registros_por_periodo(registros, inicio, fim)

        return ResumoHorasOutputDTO(
            total_horas=relatorios.somar_horas(registros),
            por_usuario={
                usuario.login: horas
                for usuario, horas in relatorios.horas_por_usuario(registros).items()
            },
            por_tarefa={
                tarefa.id: horas
                for tarefa, horas in relatorios.horas_por_tarefa(registros).items()
            },
        )
