"""
Testes Unitários para as entidades do Contexto de Tarefas.

Coverage:
- TarefaEntity.criar(): datas, prioridade, estimativa
- Máquina de estados e conclusão
- Esforço real e bloqueio de alterações em tarefa finalizada
- ComentarioTarefaEntity e RegistroEsforcoEntity
"""

from datetime import date, datetime

import pytest

from src.core.shared.exceptions import (
    InvalidArgumentError,
    InvalidFormatError,
    InvalidTransitionError,
    RequiredFieldError,
    TaskFinalizedError,
    UseCompletionOperationError,
)
from src.core.tarefas.entities import (
    ComentarioTarefaEntity,
    PrioridadeTarefa,
    RegistroEsforcoEntity,
    StatusTarefa,
    TarefaEntity,
    TRANSICOES_TAREFA,
)


PARES_STATUS = [(o, d) for o in StatusTarefa for d in StatusTarefa]


class TestTarefaCriacao:
    """Testes para criação de tarefas."""

    def test_criar_tarefa_valida(self, tarefa, projeto):
        assert tarefa.projeto == projeto
        assert tarefa.status is StatusTarefa.NOVA
        assert tarefa.prioridade is PrioridadeTarefa.MEDIA
        assert tarefa.esforco_estimado_horas == 8
        assert tarefa.esforco_real_horas == 0
        assert tarefa.data_conclusao is None
        assert tarefa.responsavel is None

    def test_prioridade_por_sinonimo(self, projeto):
        tarefa = TarefaEntity.criar(
            projeto, "Deploy", date(2025, 1, 1), date(2025, 1, 2), prioridade="urgente"
        )

        assert tarefa.prioridade is PrioridadeTarefa.CRITICA
        assert tarefa.prioridade.peso == 4
        assert tarefa.prioridade.is_alta_ou_critica

    def test_prioridade_desconhecida(self, projeto):
        with pytest.raises(InvalidFormatError):
            TarefaEntity.criar(
                projeto, "Deploy", date(2025, 1, 1), date(2025, 1, 2), prioridade="talvez"
            )

    def test_termino_antes_do_inicio(self, projeto):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TarefaEntity.criar(projeto, "Deploy", date(2025, 1, 5), date(2025, 1, 4))

        assert exc_info.value.field == "data_termino_prevista"

    def test_estimativa_negativa(self, projeto):
        with pytest.raises(InvalidArgumentError):
            TarefaEntity.criar(
                projeto, "Deploy", date(2025, 1, 1), date(2025, 1, 2),
                esforco_estimado_horas=-1,
            )

    def test_titulo_em_branco(self, projeto):
        with pytest.raises(RequiredFieldError) as exc_info:
            TarefaEntity.criar(projeto, "  ", date(2025, 1, 1), date(2025, 1, 2))

        assert exc_info.value.field == "titulo"

    def test_projeto_obrigatorio(self):
        with pytest.raises(RequiredFieldError):
            TarefaEntity.criar(None, "Deploy", date(2025, 1, 1), date(2025, 1, 2))


class TestTarefaStatus:
    """Testes da máquina de estados da tarefa."""

    def test_fluxo_completo(self, tarefa):
        """Iniciar, lançar 5h e concluir com mais 3h totaliza 8h."""
        tarefa.iniciar()
        tarefa.registrar_esforco(5)
        tarefa.concluir(3, date(2025, 1, 9))

        assert tarefa.status is StatusTarefa.CONCLUIDA
        assert tarefa.esforco_real_horas == 8
        assert tarefa.data_conclusao == date(2025, 1, 9)
        assert tarefa.saldo_horas == 0

    @pytest.mark.parametrize("origem,destino", PARES_STATUS)
    def test_alterar_status_segue_tabela(self, tarefa, origem, destino):
        tarefa.status = origem

        if destino not in TRANSICOES_TAREFA[origem]:
            with pytest.raises(InvalidTransitionError):
                tarefa.alterar_status(destino)
            assert tarefa.status is origem
        elif destino is StatusTarefa.CONCLUIDA:
            with pytest.raises(UseCompletionOperationError):
                tarefa.alterar_status(destino)
            assert tarefa.status is origem
        else:
            tarefa.alterar_status(destino)
            assert tarefa.status is destino

    def test_alterar_status_por_texto(self, tarefa):
        tarefa.alterar_status("in progress")

        assert tarefa.status is StatusTarefa.EM_ANDAMENTO

    def test_concluir_direto_de_nova(self, tarefa):
        with pytest.raises(InvalidTransitionError):
            tarefa.concluir(1, date(2025, 1, 2))

        assert tarefa.esforco_real_horas == 0

    def test_concluir_duas_vezes(self, tarefa):
        tarefa.iniciar()
        tarefa.concluir(2, date(2025, 1, 3))

        with pytest.raises(InvalidTransitionError):
            tarefa.concluir(2, date(2025, 1, 4))

        assert tarefa.esforco_real_horas == 2

    def test_concluir_a_partir_de_bloqueada(self, tarefa):
        tarefa.bloquear()
        tarefa.concluir(0, date(2025, 1, 1))

        assert tarefa.status is StatusTarefa.CONCLUIDA

    def test_concluir_horas_negativas(self, tarefa):
        tarefa.iniciar()

        with pytest.raises(InvalidArgumentError) as exc_info:
            tarefa.concluir(-1, date(2025, 1, 3))

        assert exc_info.value.field == "horas_reais"
        assert tarefa.status is StatusTarefa.EM_ANDAMENTO

    def test_concluir_antes_do_inicio(self, tarefa):
        tarefa.iniciar()

        with pytest.raises(InvalidArgumentError):
            tarefa.concluir(1, date(2024, 12, 31))

        assert tarefa.data_conclusao is None

    def test_bloquear_idempotente(self, tarefa):
        tarefa.bloquear()
        tarefa.bloquear()

        assert tarefa.status is StatusTarefa.BLOQUEADA

    @pytest.mark.parametrize("finalizacao", ["cancelar", "concluir"])
    def test_bloquear_tarefa_finalizada(self, tarefa, finalizacao):
        tarefa.iniciar()
        if finalizacao == "cancelar":
            tarefa.cancelar()
        else:
            tarefa.concluir(1, date(2025, 1, 2))

        with pytest.raises(TaskFinalizedError):
            tarefa.bloquear()

    def test_cancelar_concluida(self, tarefa):
        tarefa.iniciar()
        tarefa.concluir(1, date(2025, 1, 2))

        with pytest.raises(TaskFinalizedError):
            tarefa.cancelar()

        assert tarefa.status is StatusTarefa.CONCLUIDA

    def test_cancelar_cancelada(self, tarefa):
        """Cancelar de novo não altera nada."""
        tarefa.cancelar()
        tarefa.cancelar()

        assert tarefa.status is StatusTarefa.CANCELADA


class TestTarefaEdicao:
    def test_registrar_esforco_nao_positivo(self, tarefa):
        with pytest.raises(InvalidArgumentError) as exc_info:
            tarefa.registrar_esforco(0)

        assert exc_info.value.field == "horas"
        assert tarefa.esforco_real_horas == 0

    def test_registrar_esforco_em_tarefa_cancelada(self, tarefa):
        tarefa.cancelar()

        with pytest.raises(TaskFinalizedError):
            tarefa.registrar_esforco(2)

    def test_atribuir_e_desatribuir_responsavel(self, tarefa, colaborador):
        tarefa.atribuir_responsavel(colaborador)
        assert tarefa.responsavel == colaborador

        tarefa.atribuir_responsavel(None)
        assert tarefa.responsavel is None

    def test_replanejar(self, tarefa):
        tarefa.replanejar(date(2025, 2, 1), date(2025, 2, 10))

        assert tarefa.data_inicio == date(2025, 2, 1)
        assert tarefa.data_termino_prevista == date(2025, 2, 10)

    def test_replanejar_periodo_invalido(self, tarefa):
        with pytest.raises(InvalidArgumentError):
            tarefa.replanejar(date(2025, 2, 10), date(2025, 2, 1))

        assert tarefa.data_inicio == date(2025, 1, 1)

    def test_edicao_em_tarefa_finalizada(self, tarefa):
        tarefa.cancelar()

        with pytest.raises(TaskFinalizedError):
            tarefa.alterar_titulo("Outro")
        with pytest.raises(TaskFinalizedError):
            tarefa.alterar_prioridade("alta")
        with pytest.raises(TaskFinalizedError):
            tarefa.definir_esforco_estimado(10)

    def test_esta_atrasada(self, tarefa):
        assert tarefa.esta_atrasada(date(2025, 1, 11))
        assert not tarefa.esta_atrasada(date(2025, 1, 10))

        tarefa.cancelar()
        assert not tarefa.esta_atrasada(date(2025, 1, 11))


class TestComentarioTarefa:
    def test_criar_comentario(self, tarefa, colaborador):
        comentario = ComentarioTarefaEntity.criar(
            tarefa, colaborador, datetime(2025, 1, 2, 9, 30), "  revisar modelo  "
        )

        assert comentario.mensagem == "revisar modelo"
        assert comentario.autor == colaborador

    def test_mensagem_em_branco(self, tarefa, colaborador):
        with pytest.raises(RequiredFieldError):
            ComentarioTarefaEntity.criar(tarefa, colaborador, datetime(2025, 1, 2), "   ")

    def test_mensagem_no_limite(self, tarefa, colaborador):
        comentario = ComentarioTarefaEntity.criar(
            tarefa, colaborador, datetime(2025, 1, 2), "x" * 1000
        )

        assert len(comentario.mensagem) == 1000

    def test_mensagem_acima_do_limite(self, tarefa, colaborador):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ComentarioTarefaEntity.criar(
                tarefa, colaborador, datetime(2025, 1, 2), "x" * 1001
            )

        assert exc_info.value.field == "mensagem"

    def test_limite_customizado(self, tarefa, colaborador):
        with pytest.raises(InvalidArgumentError):
            ComentarioTarefaEntity.criar(
                tarefa, colaborador, datetime(2025, 1, 2), "abcdef", tamanho_max=5
            )

    def test_limite_zero_rejeita_qualquer_mensagem(self, tarefa, colaborador):
        with pytest.raises(InvalidArgumentError):
            ComentarioTarefaEntity.criar(
                tarefa, colaborador, datetime(2025, 1, 2), "ok", tamanho_max=0
            )

    def test_comentario_imutavel(self, tarefa, colaborador):
        comentario = ComentarioTarefaEntity.criar(
            tarefa, colaborador, datetime(2025, 1, 2), "ok"
        )

        with pytest.raises(AttributeError):
            comentario.mensagem = "alterado"


class TestRegistroEsforco:
    def test_criar_registro(self, tarefa, colaborador):
        registro = RegistroEsforcoEntity.criar(
            tarefa, colaborador, date(2025, 1, 2), 4, "modelagem inicial"
        )

        assert registro.horas == 4
        assert registro.observacao == "modelagem inicial"
        assert tarefa.esforco_real_horas == 0

    @pytest.mark.parametrize("horas", [0, -3])
    def test_horas_invalidas(self, tarefa, colaborador, horas):
        with pytest.raises(InvalidArgumentError) as exc_info:
            RegistroEsforcoEntity.criar(tarefa, colaborador, date(2025, 1, 2), horas)

        assert exc_info.value.field == "horas"

    def test_data_antes_do_inicio_da_tarefa(self, tarefa, colaborador):
        with pytest.raises(InvalidArgumentError) as exc_info:
            RegistroEsforcoEntity.criar(tarefa, colaborador, date(2024, 12, 31), 2)

        assert exc_info.value.field == "data"

    def test_usuario_obrigatorio(self, tarefa):
        with pytest.raises(RequiredFieldError):
            RegistroEsforcoEntity.criar(tarefa, None, date(2025, 1, 2), 2)
