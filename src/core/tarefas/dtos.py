"""
Data Transfer Objects (DTOs) do Contexto de Tarefas.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional

from .entities import ComentarioTarefaEntity, RegistroEsforcoEntity, TarefaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarTarefaInputDTO:
    """
    DTO de entrada para criar tarefa.

    Attributes:
        projeto_id: Projeto dono da tarefa
        titulo: Título
        data_inicio: Início planejado
        data_termino_prevista: Término previsto (>= início)
        descricao: Descrição opcional
        responsavel_id: Usuário responsável (opcional)
        prioridade: Prioridade (default: MEDIA; aceita sinônimos)
        esforco_estimado_horas: Estimativa (default: 0)
    """

    projeto_id: str
    titulo: str
    data_inicio: date
    data_termino_prevista: date
    descricao: Optional[str] = None
    responsavel_id: Optional[str] = None
    prioridade: Optional[str] = None
    esforco_estimado_horas: Optional[int] = None


@dataclass(frozen=True)
class AlterarStatusTarefaInputDTO:
    tarefa_id: str
    novo_status: str


@dataclass(frozen=True)
class ConcluirTarefaInputDTO:
    tarefa_id: str
    horas_reais: int
    data_conclusao: date


@dataclass(frozen=True)
class RegistrarEsforcoInputDTO:
    tarefa_id: str
    usuario_id: str
    data: date
    horas: int
    observacao: Optional[str] = None


@dataclass(frozen=True)
class ComentarTarefaInputDTO:
    tarefa_id: str
    autor_id: str
    mensagem: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class TarefaOutputDTO:
    """DTO de saída para Tarefa."""

    id: str
    projeto_id: str
    titulo: str
    descricao: str
    responsavel_login: Optional[str]
    prioridade: str
    status: str
    data_inicio: date
    data_termino_prevista: date
    data_conclusao: Optional[date]
    esforco_estimado_horas: int
    esforco_real_horas: int

    @classmethod
    def from_entity(cls, entity: TarefaEntity) -> "TarefaOutputDTO":
        return cls(
            id=entity.id,
            projeto_id=entity.projeto.id,
            titulo=entity.titulo,
            descricao=entity.descricao,
            responsavel_login=entity.responsavel.login if entity.responsavel else None,
            prioridade=entity.prioridade.value,
            status=entity.status.value,
            data_inicio=entity.data_inicio,
            data_termino_prevista=entity.data_termino_prevista,
            data_conclusao=entity.data_conclusao,
            esforco_estimado_horas=entity.esforco_estimado_horas,
            esforco_real_horas=entity.esforco_real_horas,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "projeto_id": self.projeto_id,
            "titulo": self.titulo,
            "descricao": self.descricao,
            "responsavel_login": self.responsavel_login,
            "prioridade": self.prioridade,
            "status": self.status,
            "data_inicio": self.data_inicio.isoformat(),
            "data_termino_prevista": self.data_termino_prevista.isoformat(),
            "data_conclusao": (
                self.data_conclusao.isoformat() if self.data_conclusao else None
            ),
            "esforco_estimado_horas": self.esforco_estimado_horas,
            "esforco_real_horas": self.esforco_real_horas,
        }


@dataclass
class RegistroEsforcoOutputDTO:
    id: str
    tarefa_id: str
    usuario_login: str
    data: date
    horas: int
    observacao: str
    esforco_real_tarefa: int

    @classmethod
    def from_entity(cls, entity: RegistroEsforcoEntity) -> "RegistroEsforcoOutputDTO":
        return cls(
            id=entity.id,
            tarefa_id=entity.tarefa.id,
            usuario_login=entity.usuario.login,
            data=entity.data,
            horas=entity.horas,
            observacao=entity.observacao,
            esforco_real_tarefa=entity.tarefa.esforco_real_horas,
        )


@dataclass
class ComentarioOutputDTO:
    id: str
    tarefa_id: str
    autor_login: str
    data_hora: datetime
    mensagem: str

    @classmethod
    def from_entity(cls, entity: ComentarioTarefaEntity) -> "ComentarioOutputDTO":
        return cls(
            id=entity.id,
            tarefa_id=entity.tarefa.id,
            autor_login=entity.autor.login,
            data_hora=entity.data_hora,
            mensagem=entity.mensagem,
        )


@dataclass
class ResumoHorasOutputDTO:
    """
    Totais de horas lançadas.

    Attributes:
        total_horas: Soma de todos os registros considerados
        por_usuario: login → horas
        por_tarefa: id da tarefa → horas
    """

    total_horas: int = 0
    por_usuario: Dict[str, int] = field(default_factory=dict)
    por_tarefa: Dict[str, int] = field(default_factory=dict)
