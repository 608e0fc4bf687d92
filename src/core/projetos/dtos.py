"""
Data Transfer Objects (DTOs) do Contexto de Projetos.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .entities import AlocacaoEquipeProjetoEntity, ProjetoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarProjetoInputDTO:
    """
    DTO de entrada para criar projeto.

    Attributes:
        nome: Nome do projeto
        descricao: Descrição
        data_inicio: Início planejado
        data_termino_prevista: Término previsto (>= início)
        gerente_id: ID do usuário GERENTE/ADMINISTRADOR
        status: Status inicial opcional (aceita sinônimos)
    """

    nome: str
    descricao: str
    data_inicio: date
    data_termino_prevista: date
    gerente_id: str
    status: Optional[str] = None


@dataclass(frozen=True)
class AlterarStatusProjetoInputDTO:
    projeto_id: str
    novo_status: str


@dataclass(frozen=True)
class CancelarProjetoInputDTO:
    projeto_id: str
    motivo: Optional[str] = None


@dataclass(frozen=True)
class AlocarEquipeInputDTO:
    """
    Attributes:
        capacidade_horas_semana: Horas semanais (None = 0)
        data_fim: Fim da alocação (None = em aberto)
    """

    projeto_id: str
    equipe_id: str
    data_inicio: date
    capacidade_horas_semana: Optional[int] = None
    observacoes: Optional[str] = None
    data_fim: Optional[date] = None


@dataclass(frozen=True)
class EncerrarAlocacaoInputDTO:
    alocacao_id: str
    data_fim: date


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ProjetoOutputDTO:
    id: str
    nome: str
    descricao: str
    data_inicio: date
    data_termino_prevista: date
    status: str
    gerente_login: str
    motivo_cancelamento: Optional[str] = None

    @classmethod
    def from_entity(cls, entity: ProjetoEntity) -> "ProjetoOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            descricao=entity.descricao,
            data_inicio=entity.data_inicio,
            data_termino_prevista=entity.data_termino_prevista,
            status=entity.status.value,
            gerente_login=entity.gerente_responsavel.login,
            motivo_cancelamento=(
                entity.motivo_cancelamento.value if entity.motivo_cancelamento else None
            ),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "descricao": self.descricao,
            "data_inicio": self.data_inicio.isoformat(),
            "data_termino_prevista": self.data_termino_prevista.isoformat(),
            "status": self.status,
            "gerente_login": self.gerente_login,
            "motivo_cancelamento": self.motivo_cancelamento,
        }


@dataclass
class AlocacaoOutputDTO:
    id: str
    projeto_id: str
    equipe_id: str
    data_inicio: date
    data_fim: Optional[date]
    capacidade_horas_semana: int
    observacoes: str
    vigente: bool

    @classmethod
    def from_entity(
        cls,
        entity: AlocacaoEquipeProjetoEntity,
        referencia: Optional[date] = None,
    ) -> "AlocacaoOutputDTO":
        return cls(
            id=entity.id,
            projeto_id=entity.projeto.id,
            equipe_id=entity.equipe.id,
            data_inicio=entity.data_inicio,
            data_fim=entity.data_fim,
            capacidade_horas_semana=entity.capacidade_horas_semana,
            observacoes=entity.observacoes,
            vigente=entity.esta_vigente(referencia),
        )
