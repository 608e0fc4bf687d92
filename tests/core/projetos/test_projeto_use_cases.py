"""
Testes Unitários para Use Cases do Contexto de Projetos.

Coverage:
- CriarProjetoService
- AlterarStatusProjetoService
- CancelarProjetoService
- AlocarEquipeService
- EncerrarAlocacaoService
- ListarProjetosAtrasadosService
"""

from datetime import date

import pytest

from src.core.equipes.entities import EquipeEntity
from src.core.projetos.dtos import (
    AlocarEquipeInputDTO,
    AlterarStatusProjetoInputDTO,
    CancelarProjetoInputDTO,
    CriarProjetoInputDTO,
    EncerrarAlocacaoInputDTO,
)
from src.core.projetos.entities import ProjetoEntity, StatusProjeto
from src.core.projetos.events import (
    AlocacaoEncerradaEvent,
    EquipeAlocadaEvent,
    ProjetoCanceladoEvent,
    ProjetoCriadoEvent,
    StatusProjetoAlteradoEvent,
)
from src.core.projetos.use_cases import (
    AlocarEquipeService,
    AlterarStatusProjetoService,
    CancelarProjetoService,
    CriarProjetoService,
    EncerrarAlocacaoService,
    ListarProjetosAtrasadosService,
)
from src.core.shared.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidTransitionError,
    ProjectFinalizedError,
)


@pytest.fixture
def projeto_salvo(projeto_repo, projeto):
    projeto_repo.save(projeto)
    return projeto


@pytest.fixture
def equipe_salva(equipe_repo):
    equipe = EquipeEntity.criar("Plataforma")
    equipe_repo.save(equipe)
    return equipe


class TestCriarProjetoService:
    """Testes para CriarProjetoService."""

    def test_criar_projeto(self, projeto_repo, usuario_repo, uow, gerente):
        usuario_repo.save(gerente)
        service = CriarProjetoService(projeto_repo, usuario_repo, uow)

        output = service.execute(CriarProjetoInputDTO(
            nome="Portal",
            descricao="Autoatendimento",
            data_inicio=date(2025, 1, 1),
            data_termino_prevista=date(2025, 6, 30),
            gerente_id=gerente.id,
        ))

        assert output.status == "Planejado"
        assert output.gerente_login == "ana"
        assert projeto_repo.count() == 1

        evento = uow.collect_events()[0]
        assert isinstance(evento, ProjetoCriadoEvent)
        assert evento.gerente_id == gerente.id

    def test_gerente_inexistente(self, projeto_repo, usuario_repo, uow):
        service = CriarProjetoService(projeto_repo, usuario_repo, uow)

        with pytest.raises(EntityNotFoundError):
            service.execute(CriarProjetoInputDTO(
                "Portal", "X", date(2025, 1, 1), date(2025, 2, 1), "ninguem"
            ))

    def test_gerente_colaborador(self, projeto_repo, usuario_repo, uow, colaborador):
        usuario_repo.save(colaborador)
        service = CriarProjetoService(projeto_repo, usuario_repo, uow)

        with pytest.raises(InvalidArgumentError):
            service.execute(CriarProjetoInputDTO(
                "Portal", "X", date(2025, 1, 1), date(2025, 2, 1), colaborador.id
            ))

        assert projeto_repo.count() == 0
        assert uow.rolled_back


class TestAlterarStatusProjetoService:
    def test_iniciar_projeto(self, projeto_repo, uow, projeto_salvo):
        service = AlterarStatusProjetoService(projeto_repo, uow)

        output = service.execute(
            AlterarStatusProjetoInputDTO(projeto_salvo.id, "em andamento")
        )

        assert output.status == "Em andamento"
        evento = uow.collect_events()[0]
        assert isinstance(evento, StatusProjetoAlteradoEvent)
        assert evento.status_anterior == "Planejado"
        assert evento.status_novo == "Em andamento"

    def test_transicao_invalida(self, projeto_repo, uow, projeto_salvo):
        service = AlterarStatusProjetoService(projeto_repo, uow)

        with pytest.raises(InvalidTransitionError):
            service.execute(AlterarStatusProjetoInputDTO(projeto_salvo.id, "concluido"))

        assert uow.collect_events() == []


class TestCancelarProjetoService:
    def test_cancelar_com_motivo(self, projeto_repo, uow, projeto_salvo):
        output = CancelarProjetoService(projeto_repo, uow).execute(
            CancelarProjetoInputDTO(projeto_salvo.id, "cliente cancelou")
        )

        assert output.status == "Cancelado"
        assert output.motivo_cancelamento == "Cancelamento pelo cliente"

        evento = uow.collect_events()[0]
        assert isinstance(evento, ProjetoCanceladoEvent)
        assert evento.motivo == "Cancelamento pelo cliente"


class TestAlocacaoServices:
    """Testes para AlocarEquipeService e EncerrarAlocacaoService."""

    def test_alocar_equipe(
        self, alocacao_repo, projeto_repo, equipe_repo, uow, projeto_salvo, equipe_salva
    ):
        service = AlocarEquipeService(alocacao_repo, projeto_repo, equipe_repo, uow)

        output = service.execute(AlocarEquipeInputDTO(
            projeto_id=projeto_salvo.id,
            equipe_id=equipe_salva.id,
            data_inicio=date(2025, 1, 1),
            capacidade_horas_semana=40,
        ))

        assert output.capacidade_horas_semana == 40
        assert output.data_fim is None
        assert alocacao_repo.list_by_projeto(projeto_salvo.id)[0].id == output.id
        assert isinstance(uow.collect_events()[0], EquipeAlocadaEvent)

    def test_alocar_em_projeto_finalizado(
        self, alocacao_repo, projeto_repo, equipe_repo, uow, projeto_salvo, equipe_salva
    ):
        projeto_salvo.cancelar()
        service = AlocarEquipeService(alocacao_repo, projeto_repo, equipe_repo, uow)

        with pytest.raises(ProjectFinalizedError):
            service.execute(AlocarEquipeInputDTO(
                projeto_salvo.id, equipe_salva.id, date(2025, 1, 1)
            ))

        assert alocacao_repo.count() == 0

    def test_encerrar_alocacao(
        self, alocacao_repo, projeto_repo, equipe_repo, uow, projeto_salvo, equipe_salva
    ):
        alocada = AlocarEquipeService(
            alocacao_repo, projeto_repo, equipe_repo, uow
        ).execute(AlocarEquipeInputDTO(projeto_salvo.id, equipe_salva.id, date(2025, 1, 1)))

        output = EncerrarAlocacaoService(alocacao_repo, uow).execute(
            EncerrarAlocacaoInputDTO(alocada.id, date(2025, 3, 31))
        )

        assert output.data_fim == date(2025, 3, 31)
        assert output.vigente is True
        assert alocacao_repo.list_vigentes(projeto_salvo.id, date(2025, 4, 1)) == []
        assert isinstance(uow.collect_events()[-1], AlocacaoEncerradaEvent)

    def test_encerrar_alocacao_inexistente(self, alocacao_repo, uow):
        with pytest.raises(EntityNotFoundError):
            EncerrarAlocacaoService(alocacao_repo, uow).execute(
                EncerrarAlocacaoInputDTO("nada", date(2025, 1, 1))
            )


class TestListarProjetosAtrasadosService:
    def test_lista_somente_atrasados_ativos(self, projeto_repo, gerente):
        """Finalizados e dentro do prazo não aparecem; ordem por término."""
        def novo(nome, termino):
            projeto = ProjetoEntity.criar(nome, "desc", date(2025, 1, 1), termino, gerente)
            projeto_repo.save(projeto)
            return projeto

        novo("Tardio", date(2025, 3, 1))
        novo("Mais tardio", date(2025, 2, 1))
        novo("No prazo", date(2025, 12, 31))
        novo("Cancelado", date(2025, 2, 1)).cancelar()

        output = ListarProjetosAtrasadosService(projeto_repo).execute(date(2025, 6, 1))

        assert [p.nome for p in output] == ["Mais tardio", "Tardio"]
        assert all(p.status != StatusProjeto.CANCELADO.value for p in output)
