"""
Entidades do Contexto de Projetos.

Entidades:
- ProjetoEntity: Agregado principal (datas, status, gerente responsável)
- AlocacaoEquipeProjetoEntity: Equipe alocada a um projeto por um período
- StatusProjeto: Estados do ciclo de vida + tabela de transições
- MotivoCancelamentoProjeto: Motivos padronizados de cancelamento

Regras de Negócio Encapsuladas:
- Término previsto >= início
- Gerente responsável precisa ter perfil GERENTE ou ADMINISTRADOR
- Toda mudança de status consulta a tabela de transições
- Projeto concluído/cancelado não é replanejado nem editado
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import FrozenSet, Mapping, Optional, Union
import uuid

from src.core.equipes.entities import EquipeEntity
from src.core.shared.exceptions import (
    InvalidArgumentError,
    ProjectFinalizedError,
)
from src.core.shared.periodo import esta_atrasado, esta_vigente, validar_periodo
from src.core.shared.sinonimos import resolver_sinonimo
from src.core.shared.transicoes import exigir_transicao, pode_transicionar
from src.core.shared.validacao import exigir, exigir_texto, texto_ou_vazio
from src.core.usuarios.entities import UsuarioEntity


class StatusProjeto(Enum):
    """
    Estados do ciclo de vida de um Projeto.

    Fluxo de Estados:
        PLANEJADO → EM_ANDAMENTO → CONCLUIDO
            ↓            ↓
            └──────→ CANCELADO
    """

    PLANEJADO = "Planejado"
    EM_ANDAMENTO = "Em andamento"
    CONCLUIDO = "Concluído"
    CANCELADO = "Cancelado"

    @property
    def rotulo(self) -> str:
        return self.value

    @property
    def is_ativo(self) -> bool:
        """Projeto em execução."""
        return self is StatusProjeto.EM_ANDAMENTO

    @property
    def is_finalizado(self) -> bool:
        """Projeto não sofrerá mais alterações de execução."""
        return self in (StatusProjeto.CONCLUIDO, StatusProjeto.CANCELADO)

    def pode_transicionar_para(self, destino: "StatusProjeto") -> bool:
        return pode_transicionar(TRANSICOES_PROJETO, self, destino)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "StatusProjeto":
        return resolver_sinonimo(cls, _SINONIMOS_STATUS_PROJETO, value, "status")


TRANSICOES_PROJETO: Mapping[StatusProjeto, FrozenSet[StatusProjeto]] = {
    StatusProjeto.PLANEJADO: frozenset({StatusProjeto.EM_ANDAMENTO, StatusProjeto.CANCELADO}),
    StatusProjeto.EM_ANDAMENTO: frozenset({StatusProjeto.CONCLUIDO, StatusProjeto.CANCELADO}),
    StatusProjeto.CONCLUIDO: frozenset(),
    StatusProjeto.CANCELADO: frozenset(),
}

_SINONIMOS_STATUS_PROJETO = {
    "PLANEJADO": StatusProjeto.PLANEJADO,
    "EM ANDAMENTO": StatusProjeto.EM_ANDAMENTO,
    "ANDAMENTO": StatusProjeto.EM_ANDAMENTO,
    "EM_ANDAMENTO": StatusProjeto.EM_ANDAMENTO,
    "CONCLUIDO": StatusProjeto.CONCLUIDO,
    "CONCLUÍDO": StatusProjeto.CONCLUIDO,
    "CONCLUIDO(A)": StatusProjeto.CONCLUIDO,
    "CANCELADO": StatusProjeto.CANCELADO,
}


class MotivoCancelamentoProjeto(Enum):
    """Motivos padronizados para cancelamento (relatórios de portfólio)."""

    ORCAMENTO_ESTOURADO = "Orçamento estourado"
    FALTA_RECURSOS = "Falta de recursos (pessoas/tempo)"
    PRIORIDADE_ALTERADA = "Prioridade alterada pelo negócio"
    DEPENDENCIAS_EXTERNAS = "Dependências externas inviabilizadas"
    VIABILIDADE_TECNICA = "Inviabilidade técnica"
    RISCOS_INACEITAVEIS = "Riscos inaceitáveis"
    CLIENTE_CANCELOU = "Cancelamento pelo cliente"
    COMPLIANCE_LEGAL = "Compliance / Legal"
    DUPLICIDADE = "Duplicidade / Projeto substituído"
    DECISAO_ESTRATEGICA = "Decisão estratégica"

    @property
    def rotulo(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: Optional[str]) -> "MotivoCancelamentoProjeto":
        return resolver_sinonimo(cls, _SINONIMOS_MOTIVO, value, "motivo")


_M = MotivoCancelamentoProjeto

_SINONIMOS_MOTIVO = {
    "ORCAMENTO ESTOURADO": _M.ORCAMENTO_ESTOURADO,
    "ORÇAMENTO ESTOURADO": _M.ORCAMENTO_ESTOURADO,
    "BUDGET": _M.ORCAMENTO_ESTOURADO,
    "BUDGET ESTOURADO": _M.ORCAMENTO_ESTOURADO,
    "FALTA RECURSOS": _M.FALTA_RECURSOS,
    "FALTA DE RECURSOS": _M.FALTA_RECURSOS,
    "RECURSOS": _M.FALTA_RECURSOS,
    "TIME INSUFICIENTE": _M.FALTA_RECURSOS,
    "PRIORIDADE ALTERADA": _M.PRIORIDADE_ALTERADA,
    "ALTERACAO DE PRIORIDADE": _M.PRIORIDADE_ALTERADA,
    "ALTERAÇÃO DE PRIORIDADE": _M.PRIORIDADE_ALTERADA,
    "REPRIORIZACAO": _M.PRIORIDADE_ALTERADA,
    "REPRIORIZAÇÃO": _M.PRIORIDADE_ALTERADA,
    "DEPENDENCIAS EXTERNAS": _M.DEPENDENCIAS_EXTERNAS,
    "DEPENDÊNCIAS EXTERNAS": _M.DEPENDENCIAS_EXTERNAS,
    "DEPENDENCIAS": _M.DEPENDENCIAS_EXTERNAS,
    "FORNECEDOR": _M.DEPENDENCIAS_EXTERNAS,
    "VIABILIDADE TECNICA": _M.VIABILIDADE_TECNICA,
    "VIABILIDADE TÉCNICA": _M.VIABILIDADE_TECNICA,
    "INVIABILIDADE TECNICA": _M.VIABILIDADE_TECNICA,
    "INVIABILIDADE TÉCNICA": _M.VIABILIDADE_TECNICA,
    "RISCOS INACEITAVEIS": _M.RISCOS_INACEITAVEIS,
    "RISCOS INACEITÁVEIS": _M.RISCOS_INACEITAVEIS,
    "RISCO": _M.RISCOS_INACEITAVEIS,
    "CLIENTE CANCELOU": _M.CLIENTE_CANCELOU,
    "CANCELAMENTO PELO CLIENTE": _M.CLIENTE_CANCELOU,
    "CLIENT CANCELED": _M.CLIENTE_CANCELOU,
    "COMPLIANCE": _M.COMPLIANCE_LEGAL,
    "LEGAL": _M.COMPLIANCE_LEGAL,
    "COMPLIANCE LEGAL": _M.COMPLIANCE_LEGAL,
    "DUPLICIDADE": _M.DUPLICIDADE,
    "PROJETO DUPLICADO": _M.DUPLICIDADE,
    "SUBSTITUIDO": _M.DUPLICIDADE,
    "SUBSTITUÍDO": _M.DUPLICIDADE,
    "DECISAO ESTRATEGICA": _M.DECISAO_ESTRATEGICA,
    "DECISÃO ESTRATÉGICA": _M.DECISAO_ESTRATEGICA,
    "ESTRATEGIA": _M.DECISAO_ESTRATEGICA,
    "ESTRATÉGIA": _M.DECISAO_ESTRATEGICA,
}


def _validar_gerente(gerente: Optional[UsuarioEntity]) -> UsuarioEntity:
    exigir(gerente, "gerente_responsavel")
    if not gerente.pode_gerenciar_projetos:
        raise InvalidArgumentError(
            "gerente_responsavel deve ter perfil GERENTE ou ADMINISTRADOR",
            field="gerente_responsavel",
        )
    return gerente


@dataclass
class ProjetoEntity:
    """
    Entidade de Domínio: Projeto.

    Invariantes:
    - Nome e descrição obrigatórios
    - data_termino_prevista >= data_inicio
    - Gerente com perfil GERENTE ou ADMINISTRADOR
    - Status só muda conforme TRANSICOES_PROJETO

    Attributes:
        id: Identificador único (UUID)
        nome: Nome do projeto
        descricao: Descrição
        data_inicio: Início planejado
        data_termino_prevista: Término previsto
        status: Estado atual
        gerente_responsavel: Usuário responsável
        motivo_cancelamento: Preenchido apenas ao cancelar com motivo

    Example:
        projeto = ProjetoEntity.criar(
            nome="Portal do Cliente",
            descricao="Novo portal de autoatendimento",
            data_inicio=date(2025, 1, 1),
            data_termino_prevista=date(2025, 6, 30),
            gerente_responsavel=gerente,
        )
        projeto.iniciar()
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    descricao: str = ""
    data_inicio: Optional[date] = None
    data_termino_prevista: Optional[date] = None
    status: StatusProjeto = StatusProjeto.PLANEJADO
    gerente_responsavel: Optional[UsuarioEntity] = None
    motivo_cancelamento: Optional[MotivoCancelamentoProjeto] = None

    @classmethod
    def criar(
        cls,
        nome: str,
        descricao: str,
        data_inicio: date,
        data_termino_prevista: date,
        gerente_responsavel: UsuarioEntity,
        status: Union[None, str, StatusProjeto] = None,
    ) -> "ProjetoEntity":
        """
        Factory method para criar projeto com validações.

        Args:
            status: Status inicial (default: PLANEJADO)

        Raises:
            RequiredFieldError: Campo obrigatório ausente
            InvalidArgumentError: Datas incoerentes ou gerente sem perfil
        """
        nome_limpo = exigir_texto(nome, "nome")
        descricao_limpa = exigir_texto(descricao, "descricao")
        exigir(data_inicio, "data_inicio")
        exigir(data_termino_prevista, "data_termino_prevista")
        validar_periodo(data_inicio, data_termino_prevista, "data_termino_prevista")
        _validar_gerente(gerente_responsavel)

        status_final = (
            StatusProjeto.PLANEJADO if status is None else StatusProjeto.from_string(status)
        )

        return cls(
            nome=nome_limpo,
            descricao=descricao_limpa,
            data_inicio=data_inicio,
            data_termino_prevista=data_termino_prevista,
            status=status_final,
            gerente_responsavel=gerente_responsavel,
        )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def alterar_status(self, novo_status: Union[str, StatusProjeto]) -> None:
        """
        Altera status consultando a tabela de transições.

        Transições válidas:
        - PLANEJADO → EM_ANDAMENTO, CANCELADO
        - EM_ANDAMENTO → CONCLUIDO, CANCELADO

        Raises:
            InvalidTransitionError: Se transição não permitida
        """
        destino = StatusProjeto.from_string(novo_status)
        exigir_transicao(TRANSICOES_PROJETO, self.status, destino)
        self.status = destino

    def iniciar(self) -> None:
        self.alterar_status(StatusProjeto.EM_ANDAMENTO)

    def concluir(self) -> None:
        self.alterar_status(StatusProjeto.CONCLUIDO)

    def cancelar(
        self,
        motivo: Union[None, str, MotivoCancelamentoProjeto] = None,
    ) -> None:
        """
        Cancela o projeto registrando o motivo (opcional).

        O motivo é convertido antes da transição: motivo inválido
        não altera o status.
        """
        motivo_final = (
            MotivoCancelamentoProjeto.from_string(motivo) if motivo is not None else None
        )
        exigir_transicao(TRANSICOES_PROJETO, self.status, StatusProjeto.CANCELADO)
        self.status = StatusProjeto.CANCELADO
        self.motivo_cancelamento = motivo_final

    # ------------------------------------------------------------------
    # Edição
    # ------------------------------------------------------------------

    def replanejar(self, nova_data_inicio: date, nova_data_termino_prevista: date) -> None:
        """Replaneja datas garantindo término >= início."""
        self._garantir_nao_finalizado()
        exigir(nova_data_inicio, "data_inicio")
        exigir(nova_data_termino_prevista, "data_termino_prevista")
        validar_periodo(nova_data_inicio, nova_data_termino_prevista, "data_termino_prevista")
        self.data_inicio = nova_data_inicio
        self.data_termino_prevista = nova_data_termino_prevista

    def alterar_descricao(self, nova_descricao: str) -> None:
        self._garantir_nao_finalizado()
        self.descricao = exigir_texto(nova_descricao, "descricao")

    def definir_gerente_responsavel(self, novo_gerente: UsuarioEntity) -> None:
        self._garantir_nao_finalizado()
        self.gerente_responsavel = _validar_gerente(novo_gerente)

    def _garantir_nao_finalizado(self) -> None:
        if self.status.is_finalizado:
            raise ProjectFinalizedError()

    def esta_atrasado(self, referencia: Optional[date] = None) -> bool:
        """Não finalizado e término previsto anterior à referência (default: hoje)."""
        return esta_atrasado(
            self.data_termino_prevista, self.status.is_finalizado, referencia
        )

    def __repr__(self) -> str:
        gerente = self.gerente_responsavel.login if self.gerente_responsavel else None
        return (
            f"ProjetoEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome}', "
            f"status={self.status.value}, "
            f"inicio={self.data_inicio}, "
            f"termino_previsto={self.data_termino_prevista}, "
            f"gerente={gerente}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjetoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class AlocacaoEquipeProjetoEntity:
    """
    Liga uma Equipe a um Projeto por um período, com capacidade semanal.

    Invariantes:
    - projeto, equipe e data_inicio obrigatórios
    - data_fim, quando informada, >= data_inicio (None = alocação vigente)
    - capacidade_horas_semana >= 0
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    projeto: Optional[ProjetoEntity] = None
    equipe: Optional[EquipeEntity] = None
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    capacidade_horas_semana: int = 0
    observacoes: str = ""

    @classmethod
    def criar(
        cls,
        projeto: ProjetoEntity,
        equipe: EquipeEntity,
        data_inicio: date,
        capacidade_horas_semana: Optional[int] = None,
        observacoes: Optional[str] = None,
        data_fim: Optional[date] = None,
    ) -> "AlocacaoEquipeProjetoEntity":
        """
        Factory method com validações.

        Args:
            capacidade_horas_semana: Horas por semana (None = 0)
            data_fim: Fim da alocação (None = em aberto)

        Raises:
            RequiredFieldError: projeto, equipe ou data_inicio ausentes
            InvalidArgumentError: Capacidade negativa ou período incoerente
        """
        exigir(projeto, "projeto")
        exigir(equipe, "equipe")
        exigir(data_inicio, "data_inicio")
        capacidade = 0 if capacidade_horas_semana is None else capacidade_horas_semana
        cls._validar_capacidade(capacidade)
        validar_periodo(data_inicio, data_fim)

        return cls(
            projeto=projeto,
            equipe=equipe,
            data_inicio=data_inicio,
            data_fim=data_fim,
            capacidade_horas_semana=capacidade,
            observacoes=texto_ou_vazio(observacoes),
        )

    @staticmethod
    def _validar_capacidade(horas: int) -> None:
        if horas < 0:
            raise InvalidArgumentError(
                "capacidade_horas_semana deve ser >= 0",
                field="capacidade_horas_semana",
            )

    def ajustar_periodo(self, novo_inicio: date, novo_fim: Optional[date]) -> None:
        """Ajusta o período (novo_fim pode ser None)."""
        exigir(novo_inicio, "data_inicio")
        validar_periodo(novo_inicio, novo_fim)
        self.data_inicio = novo_inicio
        self.data_fim = novo_fim

    def encerrar_alocacao(self, data_fim: date) -> None:
        exigir(data_fim, "data_fim")
        validar_periodo(self.data_inicio, data_fim)
        self.data_fim = data_fim

    def reabrir_alocacao(self) -> None:
        self.data_fim = None

    def alterar_capacidade(self, horas_semana: int) -> None:
        self._validar_capacidade(horas_semana)
        self.capacidade_horas_semana = horas_semana

    def alterar_observacoes(self, novas_observacoes: Optional[str]) -> None:
        self.observacoes = texto_ou_vazio(novas_observacoes)

    def esta_vigente(self, referencia: Optional[date] = None) -> bool:
        """Iniciada e não encerrada na data de referência (default: hoje)."""
        return esta_vigente(self.data_inicio, self.data_fim, referencia)

    def __repr__(self) -> str:
        return (
            f"AlocacaoEquipeProjetoEntity("
            f"id={self.id[:8]}..., "
            f"projeto='{self.projeto.nome if self.projeto else None}', "
            f"equipe='{self.equipe.nome if self.equipe else None}', "
            f"inicio={self.data_inicio}, "
            f"fim={self.data_fim or '—'}, "
            f"capacidade={self.capacidade_horas_semana}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlocacaoEquipeProjetoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
