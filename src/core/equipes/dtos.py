"""
Data Transfer Objects (DTOs) do Contexto de Equipes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .entities import EquipeEntity


@dataclass(frozen=True)
class CriarEquipeInputDTO:
    nome: str
    descricao: Optional[str] = None


@dataclass(frozen=True)
class AdicionarMembroInputDTO:
    """
    Attributes:
        equipe_id: ID da equipe
        usuario_id: ID do usuário a incluir
        papel: Papel opcional (aceita sinônimos)
    """

    equipe_id: str
    usuario_id: str
    papel: Optional[str] = None


@dataclass
class EquipeOutputDTO:
    """DTO de saída com membros (logins) e papéis."""

    id: str
    nome: str
    descricao: str
    membros: List[str] = field(default_factory=list)
    papeis: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_entity(cls, entity: EquipeEntity) -> "EquipeOutputDTO":
        papeis = {}
        for usuario in entity.membros:
            papel = entity.papel_de(usuario)
            if papel is not None:
                papeis[usuario.login] = papel.value
        return cls(
            id=entity.id,
            nome=entity.nome,
            descricao=entity.descricao,
            membros=entity.logins_dos_membros,
            papeis=papeis,
        )
