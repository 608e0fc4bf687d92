"""
Testes Unitários para o kernel compartilhado.

Coverage:
- Hierarquia de exceções e serialização
- Resultado
- Tabelas de transição
- Conversão de texto com sinônimos
- Política de períodos
- DomainEvent
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar

import pytest

from src.core.shared.events import DomainEvent
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidTransitionError,
    RequiredFieldError,
    ValidationError,
)
from src.core.shared.periodo import esta_atrasado, esta_vigente, validar_periodo
from src.core.shared.resultado import Resultado
from src.core.shared.sinonimos import resolver_sinonimo
from src.core.shared.transicoes import exigir_transicao, pode_transicionar
from src.core.tarefas.entities import PrioridadeTarefa, StatusTarefa, TRANSICOES_TAREFA
from src.core.usuarios.entities import Perfil


class TestExcecoes:
    """Testes para a hierarquia de exceções."""

    def test_required_e_validation_error(self):
        """RequiredFieldError deve ser ValidationError e DomainException."""
        erro = RequiredFieldError("titulo")

        assert isinstance(erro, ValidationError)
        assert isinstance(erro, DomainException)
        assert erro.field == "titulo"
        assert erro.code == "VALIDATION_ERROR_TITULO"
        assert "titulo" in erro.message

    def test_str_inclui_codigo(self):
        erro = InvalidArgumentError("horas deve ser > 0", field="horas")

        assert str(erro) == "[VALIDATION_ERROR_HORAS] horas deve ser > 0"

    def test_to_dict_validation(self):
        """to_dict deve incluir campo e tipo do erro."""
        dados = InvalidFormatError("E-mail inválido", field="email").to_dict()

        assert dados == {
            "error": "VALIDATION_ERROR_EMAIL",
            "message": "E-mail inválido",
            "field": "email",
            "kind": "InvalidFormatError",
        }

    def test_transicao_invalida_guarda_estados(self):
        """InvalidTransitionError deve expor origem, destino e regra."""
        erro = InvalidTransitionError(StatusTarefa.CONCLUIDA, StatusTarefa.NOVA)

        assert isinstance(erro, BusinessRuleViolationError)
        assert erro.origem is StatusTarefa.CONCLUIDA
        assert erro.destino is StatusTarefa.NOVA
        assert erro.rule == "transicao_status_invalida"
        assert "Concluída → Nova" in erro.message


class TestResultado:
    def test_sucesso(self):
        resultado = Resultado.sucesso(42)

        assert resultado.ok
        assert resultado.unwrap() == 42

    def test_falha_unwrap_lanca(self):
        """unwrap() deve lançar o erro armazenado."""
        resultado = Resultado.falha(RequiredFieldError("cpf"))

        assert not resultado.ok
        with pytest.raises(RequiredFieldError):
            resultado.unwrap()


class TestTransicoes:
    """Testes para consulta às tabelas de transição."""

    def test_transicao_permitida(self):
        assert pode_transicionar(
            TRANSICOES_TAREFA, StatusTarefa.NOVA, StatusTarefa.EM_ANDAMENTO
        )

    def test_destino_nulo_nao_permitido(self):
        assert not pode_transicionar(TRANSICOES_TAREFA, StatusTarefa.NOVA, None)

    def test_estado_fora_da_tabela(self):
        """Estado ausente da tabela não deve permitir transição."""
        assert not pode_transicionar({}, StatusTarefa.NOVA, StatusTarefa.BLOQUEADA)

    def test_exigir_transicao_lanca(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            exigir_transicao(
                TRANSICOES_TAREFA, StatusTarefa.CANCELADA, StatusTarefa.NOVA
            )

        assert exc_info.value.origem is StatusTarefa.CANCELADA


class TestSinonimos:
    """Testes para conversão de texto em enum."""

    @pytest.mark.parametrize("texto,esperado", [
        ("admin", Perfil.ADMINISTRADOR),
        ("  ADM ", Perfil.ADMINISTRADOR),
        ("manager", Perfil.GERENTE),
        ("usuário", Perfil.COLABORADOR),
        ("Colaborador", Perfil.COLABORADOR),
    ])
    def test_perfil_por_sinonimo(self, texto, esperado):
        assert Perfil.from_string(texto) is esperado

    @pytest.mark.parametrize("texto,esperado", [
        ("urgent", PrioridadeTarefa.CRITICA),
        ("Média", PrioridadeTarefa.MEDIA),
        ("low", PrioridadeTarefa.BAIXA),
    ])
    def test_prioridade_por_sinonimo(self, texto, esperado):
        assert PrioridadeTarefa.from_string(texto) is esperado

    def test_aceita_membro_do_enum(self):
        """Membro já convertido deve ser devolvido como está."""
        assert resolver_sinonimo(Perfil, {}, Perfil.GERENTE, "perfil") is Perfil.GERENTE

    def test_aceita_rotulo(self):
        """O rótulo (value) deve ser aceito mesmo fora da tabela."""
        assert resolver_sinonimo(StatusTarefa, {}, "em andamento", "status") is (
            StatusTarefa.EM_ANDAMENTO
        )

    def test_valor_desconhecido(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            Perfil.from_string("estagiario")

        assert exc_info.value.field == "perfil"

    @pytest.mark.parametrize("texto", [None, "", "  "])
    def test_valor_vazio(self, texto):
        with pytest.raises(RequiredFieldError):
            PrioridadeTarefa.from_string(texto)


class TestPeriodo:
    """Testes para a política de períodos."""

    def test_periodo_valido(self):
        validar_periodo(date(2025, 1, 1), date(2025, 1, 1))
        validar_periodo(date(2025, 1, 1), None)

    def test_fim_antes_do_inicio(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validar_periodo(date(2025, 2, 1), date(2025, 1, 1), "data_termino_prevista")

        assert exc_info.value.field == "data_termino_prevista"

    def test_vigencia(self):
        """Período aberto vale do início em diante; fechado é inclusivo."""
        inicio = date(2025, 1, 1)

        assert esta_vigente(inicio, None, date(2030, 1, 1))
        assert esta_vigente(inicio, date(2025, 1, 31), date(2025, 1, 31))
        assert not esta_vigente(inicio, date(2025, 1, 31), date(2025, 2, 1))
        assert not esta_vigente(inicio, None, date(2024, 12, 31))

    def test_atraso(self):
        termino = date(2025, 1, 10)

        assert esta_atrasado(termino, False, date(2025, 1, 11))
        assert not esta_atrasado(termino, False, date(2025, 1, 10))
        assert not esta_atrasado(termino, True, date(2025, 2, 1))


@dataclass
class _EventoDeTeste(DomainEvent):
    aggregate_type: ClassVar[str] = "Teste"

    quando: date = None
    valor: int = 0


class TestDomainEvent:
    """Testes para a base de eventos."""

    def test_exige_aggregate_id(self):
        with pytest.raises(ValueError):
            _EventoDeTeste()

    def test_to_dict(self):
        """Deve serializar dados específicos com datas em ISO-8601."""
        evento = _EventoDeTeste(aggregate_id="agg-1", quando=date(2025, 1, 9), valor=3)

        dados = evento.to_dict()

        assert dados["event_type"] == "_EventoDeTeste"
        assert dados["aggregate_type"] == "Teste"
        assert dados["aggregate_id"] == "agg-1"
        assert dados["data"] == {"quando": "2025-01-09", "valor": 3}
        assert datetime.fromisoformat(dados["occurred_at"])
