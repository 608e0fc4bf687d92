"""
Entidades do Contexto de Tarefas.

Entidades:
- TarefaEntity: Agregado principal (status, prioridade, datas, esforço)
- ComentarioTarefaEntity: Comentário imutável de um usuário em uma tarefa
- RegistroEsforcoEntity: Lançamento imutável de horas em uma tarefa
- StatusTarefa / PrioridadeTarefa: Enums com tabela de transições e pesos

Regras de Negócio Encapsuladas:
- Término previsto >= início
- Transições de status controladas pela tabela TRANSICOES_TAREFA
- Conclusão somente via concluir(horas, data)
- Tarefa concluída/cancelada não aceita alterações
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import ClassVar, FrozenSet, Mapping, Optional, Union
import uuid

from src.core.projetos.entities import ProjetoEntity
from src.core.shared.exceptions import (
    InvalidArgumentError,
    TaskFinalizedError,
    UseCompletionOperationError,
)
from src.core.shared.periodo import esta_atrasado, validar_periodo
from src.core.shared.sinonimos import resolver_sinonimo
from src.core.shared.transicoes import exigir_transicao, pode_transicionar
from src.core.shared.validacao import exigir, exigir_texto, texto_ou_vazio
from src.core.usuarios.entities import UsuarioEntity


class StatusTarefa(Enum):
    """
    Estados do ciclo de vida de uma Tarefa.

    Fluxo de Estados:
        NOVA → EM_ANDAMENTO ⇄ BLOQUEADA
          ↓         ↓            ↓
          ↓     CONCLUIDA ←──────┘
          └──→ CANCELADA (de qualquer estado ativo)
    """

    NOVA = "Nova"
    EM_ANDAMENTO = "Em andamento"
    BLOQUEADA = "Bloqueada"
    CONCLUIDA = "Concluída"
    CANCELADA = "Cancelada"

    @property
    def rotulo(self) -> str:
        return self.value

    @property
    def is_finalizada(self) -> bool:
        """Tarefa não sofre mais alterações."""
        return self in (StatusTarefa.CONCLUIDA, StatusTarefa.CANCELADA)

    @property
    def is_ativa(self) -> bool:
        return not self.is_finalizada

    def pode_transicionar_para(self, destino: "StatusTarefa") -> bool:
        return pode_transicionar(TRANSICOES_TAREFA, self, destino)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "StatusTarefa":
        return resolver_sinonimo(cls, _SINONIMOS_STATUS_TAREFA, value, "status")


TRANSICOES_TAREFA: Mapping[StatusTarefa, FrozenSet[StatusTarefa]] = {
    StatusTarefa.NOVA: frozenset({
        StatusTarefa.EM_ANDAMENTO,
        StatusTarefa.BLOQUEADA,
        StatusTarefa.CANCELADA,
    }),
    StatusTarefa.EM_ANDAMENTO: frozenset({
        StatusTarefa.BLOQUEADA,
        StatusTarefa.CONCLUIDA,
        StatusTarefa.CANCELADA,
    }),
    StatusTarefa.BLOQUEADA: frozenset({
        StatusTarefa.EM_ANDAMENTO,
        StatusTarefa.CONCLUIDA,
        StatusTarefa.CANCELADA,
    }),
    StatusTarefa.CONCLUIDA: frozenset(),
    StatusTarefa.CANCELADA: frozenset(),
}

_SINONIMOS_STATUS_TAREFA = {
    "NOVA": StatusTarefa.NOVA,
    "NOVO": StatusTarefa.NOVA,
    "OPEN": StatusTarefa.NOVA,
    "EM ANDAMENTO": StatusTarefa.EM_ANDAMENTO,
    "ANDAMENTO": StatusTarefa.EM_ANDAMENTO,
    "IN PROGRESS": StatusTarefa.EM_ANDAMENTO,
    "EM_ANDAMENTO": StatusTarefa.EM_ANDAMENTO,
    "BLOQUEADA": StatusTarefa.BLOQUEADA,
    "BLOQUEADO": StatusTarefa.BLOQUEADA,
    "BLOCKED": StatusTarefa.BLOQUEADA,
    "CONCLUIDA": StatusTarefa.CONCLUIDA,
    "CONCLUÍDA": StatusTarefa.CONCLUIDA,
    "FINALIZADA": StatusTarefa.CONCLUIDA,
    "COMPLETED": StatusTarefa.CONCLUIDA,
    "DONE": StatusTarefa.CONCLUIDA,
    "CANCELADA": StatusTarefa.CANCELADA,
    "CANCELADO": StatusTarefa.CANCELADA,
    "CANCELED": StatusTarefa.CANCELADA,
}


class PrioridadeTarefa(Enum):
    """
    Níveis de prioridade.

    O peso (1 a 4) ordena a urgência: maior = mais urgente.
    """

    BAIXA = "Baixa"
    MEDIA = "Média"
    ALTA = "Alta"
    CRITICA = "Crítica"

    @property
    def rotulo(self) -> str:
        return self.value

    @property
    def peso(self) -> int:
        return _PESOS_PRIORIDADE[self]

    @property
    def is_alta_ou_critica(self) -> bool:
        return self in (PrioridadeTarefa.ALTA, PrioridadeTarefa.CRITICA)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "PrioridadeTarefa":
        return resolver_sinonimo(cls, _SINONIMOS_PRIORIDADE, value, "prioridade")


_PESOS_PRIORIDADE = {
    PrioridadeTarefa.BAIXA: 1,
    PrioridadeTarefa.MEDIA: 2,
    PrioridadeTarefa.ALTA: 3,
    PrioridadeTarefa.CRITICA: 4,
}

_SINONIMOS_PRIORIDADE = {
    "BAIXA": PrioridadeTarefa.BAIXA,
    "LOW": PrioridadeTarefa.BAIXA,
    "MEDIA": PrioridadeTarefa.MEDIA,
    "MÉDIA": PrioridadeTarefa.MEDIA,
    "MED": PrioridadeTarefa.MEDIA,
    "MEDIUM": PrioridadeTarefa.MEDIA,
    "ALTA": PrioridadeTarefa.ALTA,
    "HIGH": PrioridadeTarefa.ALTA,
    "CRITICA": PrioridadeTarefa.CRITICA,
    "CRÍTICA": PrioridadeTarefa.CRITICA,
    "CRITICO": PrioridadeTarefa.CRITICA,
    "CRÍTICO": PrioridadeTarefa.CRITICA,
    "CRITICAL": PrioridadeTarefa.CRITICA,
    "URGENTE": PrioridadeTarefa.CRITICA,
    "URGENT": PrioridadeTarefa.CRITICA,
}


@dataclass
class TarefaEntity:
    """
    Entidade de Domínio: Tarefa de um Projeto.

    Invariantes:
    - Projeto, título e datas obrigatórios
    - data_termino_prevista >= data_inicio
    - Esforços (estimado e real) nunca negativos
    - data_conclusao preenchida somente na conclusão

    Attributes:
        id: Identificador único (UUID)
        projeto: Projeto dono da tarefa
        titulo: Título (obrigatório)
        descricao: Descrição livre
        responsavel: Usuário responsável (opcional)
        prioridade: Prioridade (default: MEDIA)
        status: Estado atual (inicia em NOVA)
        data_inicio: Início planejado
        data_termino_prevista: Término previsto
        data_conclusao: Data efetiva de conclusão
        esforco_estimado_horas: Estimativa em horas
        esforco_real_horas: Horas acumuladas

    Example:
        tarefa = TarefaEntity.criar(
            projeto=projeto,
            titulo="Modelar banco",
            data_inicio=date(2025, 1, 1),
            data_termino_prevista=date(2025, 1, 10),
            esforco_estimado_horas=8,
        )
        tarefa.iniciar()
        tarefa.registrar_esforco(5)
        tarefa.concluir(3, date(2025, 1, 9))
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    projeto: Optional[ProjetoEntity] = None
    titulo: str = ""
    descricao: str = ""
    responsavel: Optional[UsuarioEntity] = None
    prioridade: PrioridadeTarefa = PrioridadeTarefa.MEDIA
    status: StatusTarefa = StatusTarefa.NOVA
    data_inicio: Optional[date] = None
    data_termino_prevista: Optional[date] = None
    data_conclusao: Optional[date] = None
    esforco_estimado_horas: int = 0
    esforco_real_horas: int = 0

    @classmethod
    def criar(
        cls,
        projeto: ProjetoEntity,
        titulo: str,
        data_inicio: date,
        data_termino_prevista: date,
        descricao: Optional[str] = None,
        responsavel: Optional[UsuarioEntity] = None,
        prioridade: Union[None, str, PrioridadeTarefa] = None,
        esforco_estimado_horas: Optional[int] = None,
    ) -> "TarefaEntity":
        """
        Factory method para criar tarefa com validações.

        Args:
            prioridade: Prioridade (default: MEDIA; aceita sinônimos)
            esforco_estimado_horas: Estimativa (default: 0)

        Raises:
            RequiredFieldError: Campo obrigatório ausente
            InvalidArgumentError: Datas incoerentes ou estimativa negativa
        """
        exigir(projeto, "projeto")
        titulo_limpo = exigir_texto(titulo, "titulo")
        exigir(data_inicio, "data_inicio")
        exigir(data_termino_prevista, "data_termino_prevista")
        validar_periodo(data_inicio, data_termino_prevista, "data_termino_prevista")

        prioridade_final = (
            PrioridadeTarefa.MEDIA
            if prioridade is None
            else PrioridadeTarefa.from_string(prioridade)
        )
        estimado = 0 if esforco_estimado_horas is None else esforco_estimado_horas
        cls._validar_estimativa(estimado)

        return cls(
            projeto=projeto,
            titulo=titulo_limpo,
            descricao=texto_ou_vazio(descricao),
            responsavel=responsavel,
            prioridade=prioridade_final,
            data_inicio=data_inicio,
            data_termino_prevista=data_termino_prevista,
            esforco_estimado_horas=estimado,
        )

    @staticmethod
    def _validar_estimativa(horas: int) -> None:
        if horas < 0:
            raise InvalidArgumentError(
                "esforco_estimado_horas deve ser >= 0",
                field="esforco_estimado_horas",
            )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def alterar_status(self, destino: Union[str, StatusTarefa]) -> None:
        """
        Transição genérica de status.

        Raises:
            InvalidTransitionError: Se a tabela não permite a transição
            UseCompletionOperationError: Se destino é CONCLUIDA
        """
        novo = StatusTarefa.from_string(destino)
        exigir_transicao(TRANSICOES_TAREFA, self.status, novo)
        if novo is StatusTarefa.CONCLUIDA:
            raise UseCompletionOperationError()
        self.status = novo

    def iniciar(self) -> None:
        self.alterar_status(StatusTarefa.EM_ANDAMENTO)

    def bloquear(self) -> None:
        """Bloqueia a tarefa (idempotente para tarefa já bloqueada)."""
        self._garantir_nao_finalizada()
        self.status = StatusTarefa.BLOQUEADA

    def cancelar(self) -> None:
        """Cancela a partir de qualquer estado, exceto CONCLUIDA."""
        if self.status is StatusTarefa.CONCLUIDA:
            raise TaskFinalizedError("Não é possível cancelar tarefa concluída")
        self.status = StatusTarefa.CANCELADA

    def concluir(self, horas_reais: int, data_conclusao: date) -> None:
        """
        Conclui a tarefa somando as horas finais ao esforço real.

        Raises:
            InvalidTransitionError: Se CONCLUIDA não é alcançável do status atual
            InvalidArgumentError: Horas negativas ou data anterior ao início
        """
        exigir_transicao(TRANSICOES_TAREFA, self.status, StatusTarefa.CONCLUIDA)
        if horas_reais < 0:
            raise InvalidArgumentError(
                "Esforço real deve ser >= 0", field="horas_reais"
            )
        exigir(data_conclusao, "data_conclusao")
        if data_conclusao < self.data_inicio:
            raise InvalidArgumentError(
                "data_conclusao não pode ser anterior à data de início",
                field="data_conclusao",
            )

        self.esforco_real_horas += horas_reais
        self.data_conclusao = data_conclusao
        self.status = StatusTarefa.CONCLUIDA

    # ------------------------------------------------------------------
    # Edição
    # ------------------------------------------------------------------

    def replanejar(self, nova_data_inicio: date, nova_data_termino_prevista: date) -> None:
        self._garantir_nao_finalizada()
        exigir(nova_data_inicio, "data_inicio")
        exigir(nova_data_termino_prevista, "data_termino_prevista")
        validar_periodo(nova_data_inicio, nova_data_termino_prevista, "data_termino_prevista")
        self.data_inicio = nova_data_inicio
        self.data_termino_prevista = nova_data_termino_prevista

    def atribuir_responsavel(self, novo_responsavel: Optional[UsuarioEntity]) -> None:
        """Atribui ou troca o responsável. None desatribui."""
        self._garantir_nao_finalizada()
        self.responsavel = novo_responsavel

    def alterar_prioridade(self, nova_prioridade: Union[str, PrioridadeTarefa]) -> None:
        self._garantir_nao_finalizada()
        self.prioridade = PrioridadeTarefa.from_string(nova_prioridade)

    def alterar_titulo(self, novo_titulo: str) -> None:
        self._garantir_nao_finalizada()
        self.titulo = exigir_texto(novo_titulo, "titulo")

    def alterar_descricao(self, nova_descricao: Optional[str]) -> None:
        self._garantir_nao_finalizada()
        self.descricao = texto_ou_vazio(nova_descricao)

    def registrar_esforco(self, horas: int) -> None:
        """Acrescenta horas (> 0) ao esforço real."""
        self._garantir_nao_finalizada()
        if horas <= 0:
            raise InvalidArgumentError("Horas devem ser positivas", field="horas")
        self.esforco_real_horas += horas

    def definir_esforco_estimado(self, horas: int) -> None:
        self._garantir_nao_finalizada()
        self._validar_estimativa(horas)
        self.esforco_estimado_horas = horas

    def _garantir_nao_finalizada(self) -> None:
        if self.status.is_finalizada:
            raise TaskFinalizedError()

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def esta_atrasada(self, referencia: Optional[date] = None) -> bool:
        return esta_atrasado(
            self.data_termino_prevista, self.status.is_finalizada, referencia
        )

    @property
    def saldo_horas(self) -> int:
        """Estimado menos realizado (negativo = estouro)."""
        return self.esforco_estimado_horas - self.esforco_real_horas

    def __repr__(self) -> str:
        responsavel = self.responsavel.login if self.responsavel else "—"
        return (
            f"TarefaEntity("
            f"id={self.id[:8]}..., "
            f"titulo='{self.titulo}', "
            f"projeto='{self.projeto.nome if self.projeto else None}', "
            f"prioridade={self.prioridade.name}, "
            f"status={self.status.name}, "
            f"termino_previsto={self.data_termino_prevista}, "
            f"responsavel={responsavel}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TarefaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class ComentarioTarefaEntity:
    """
    Comentário de um usuário em uma tarefa. Imutável após a criação.

    Invariantes:
    - tarefa, autor e data_hora obrigatórios
    - mensagem com 1 a TAMANHO_MAX_MENSAGEM caracteres (após strip)
    """

    TAMANHO_MAX_MENSAGEM: ClassVar[int] = 1000

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tarefa: Optional[TarefaEntity] = None
    autor: Optional[UsuarioEntity] = None
    data_hora: Optional[datetime] = None
    mensagem: str = ""

    @classmethod
    def criar(
        cls,
        tarefa: TarefaEntity,
        autor: UsuarioEntity,
        data_hora: datetime,
        mensagem: str,
        tamanho_max: Optional[int] = None,
    ) -> "ComentarioTarefaEntity":
        """
        Raises:
            RequiredFieldError: Referência ausente ou mensagem em branco
            InvalidArgumentError: Mensagem acima do tamanho máximo
        """
        exigir(tarefa, "tarefa")
        exigir(autor, "autor")
        exigir(data_hora, "data_hora")
        texto = exigir_texto(mensagem, "mensagem")

        limite = cls.TAMANHO_MAX_MENSAGEM if tamanho_max is None else tamanho_max
        if len(texto) > limite:
            raise InvalidArgumentError(
                f"mensagem excede {limite} caracteres", field="mensagem"
            )

        return cls(tarefa=tarefa, autor=autor, data_hora=data_hora, mensagem=texto)

    def __repr__(self) -> str:
        resumo = self.mensagem if len(self.mensagem) <= 40 else self.mensagem[:40] + "…"
        return (
            f"ComentarioTarefaEntity("
            f"id={self.id[:8]}..., "
            f"tarefa='{self.tarefa.titulo}', "
            f"autor={self.autor.login}, "
            f"data_hora={self.data_hora.isoformat()}, "
            f"mensagem='{resumo}'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComentarioTarefaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class RegistroEsforcoEntity:
    """
    Lançamento de horas de um usuário em uma tarefa. Imutável.

    Invariantes:
    - tarefa, usuario e data obrigatórios
    - horas > 0
    - data >= tarefa.data_inicio
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tarefa: Optional[TarefaEntity] = None
    usuario: Optional[UsuarioEntity] = None
    data: Optional[date] = None
    horas: int = 0
    observacao: str = ""

    @classmethod
    def criar(
        cls,
        tarefa: TarefaEntity,
        usuario: UsuarioEntity,
        data: date,
        horas: int,
        observacao: Optional[str] = None,
    ) -> "RegistroEsforcoEntity":
        """
        Raises:
            RequiredFieldError: tarefa, usuario ou data ausentes
            InvalidArgumentError: horas <= 0 ou data anterior ao início da tarefa
        """
        exigir(tarefa, "tarefa")
        exigir(usuario, "usuario")
        exigir(data, "data")
        if horas <= 0:
            raise InvalidArgumentError("horas deve ser > 0", field="horas")
        if data < tarefa.data_inicio:
            raise InvalidArgumentError(
                "data do esforço não pode ser anterior ao início da tarefa",
                field="data",
            )

        return cls(
            tarefa=tarefa,
            usuario=usuario,
            data=data,
            horas=horas,
            observacao=texto_ou_vazio(observacao),
        )

    def __repr__(self) -> str:
        obs = f", obs='{self.observacao}'" if self.observacao else ""
        return (
            f"RegistroEsforcoEntity("
            f"id={self.id[:8]}..., "
            f"tarefa='{self.tarefa.titulo}', "
            f"usuario={self.usuario.login}, "
            f"data={self.data}, "
            f"horas={self.horas}"
            f"{obs})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegistroEsforcoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
