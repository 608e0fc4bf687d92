"""
Entidades do Contexto de Equipes.

Entidades:
- EquipeEntity: Equipe com lista ordenada de membros
- PapelEquipe: Papel desempenhado por um membro (Dev, Analista, ...)

Regras de Negócio Encapsuladas:
- Nome obrigatório
- Um usuário aparece no máximo uma vez na equipe (identidade por ID)
- Ordem de inserção dos membros é preservada
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
import uuid

from src.core.shared.exceptions import AlreadyMemberError, BusinessRuleViolationError
from src.core.shared.sinonimos import resolver_sinonimo
from src.core.shared.validacao import exigir, exigir_texto, texto_ou_vazio
from src.core.usuarios.entities import UsuarioEntity


class PapelEquipe(Enum):
    """Papéis desempenhados pelos membros de uma equipe."""

    DEV = "Desenvolvedor"
    ANALISTA = "Analista de Sistemas"
    DESIGNER = "Designer de Interface"
    QA = "Analista de Qualidade (QA)"

    @property
    def rotulo(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: Optional[str]) -> "PapelEquipe":
        """Converte texto em PapelEquipe, aceitando variações PT/EN."""
        return resolver_sinonimo(cls, _SINONIMOS_PAPEL, value, "papel")


_SINONIMOS_PAPEL = {
    "DEV": PapelEquipe.DEV,
    "DESENVOLVEDOR": PapelEquipe.DEV,
    "DEVELOPER": PapelEquipe.DEV,
    "ANALISTA": PapelEquipe.ANALISTA,
    "ANALISTA DE SISTEMAS": PapelEquipe.ANALISTA,
    "SYSTEM ANALYST": PapelEquipe.ANALISTA,
    "ANALYST": PapelEquipe.ANALISTA,
    "DESIGNER": PapelEquipe.DESIGNER,
    "UI": PapelEquipe.DESIGNER,
    "UX": PapelEquipe.DESIGNER,
    "UI/UX": PapelEquipe.DESIGNER,
    "PRODUCT DESIGNER": PapelEquipe.DESIGNER,
    "QA": PapelEquipe.QA,
    "QUALIDADE": PapelEquipe.QA,
    "TESTER": PapelEquipe.QA,
    "QUALITY ASSURANCE": PapelEquipe.QA,
}


@dataclass
class EquipeEntity:
    """
    Entidade de Domínio: Equipe.

    Attributes:
        id: Identificador único (UUID)
        nome: Nome da equipe
        descricao: Descrição opcional
        _membros: Membros em ordem de inserção
        _papeis: Papel de cada membro (por ID de usuário), quando informado

    Example:
        equipe = EquipeEntity.criar("Plataforma", "Time de backend")
        equipe.adicionar_membro(usuario, PapelEquipe.DEV)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    descricao: str = ""
    _membros: List[UsuarioEntity] = field(default_factory=list, repr=False)
    _papeis: Dict[str, PapelEquipe] = field(default_factory=dict, repr=False)

    @classmethod
    def criar(cls, nome: str, descricao: Optional[str] = None) -> "EquipeEntity":
        """
        Factory method para criar equipe.

        Raises:
            RequiredFieldError: Se nome vazio
        """
        return cls(
            nome=exigir_texto(nome, "nome"),
            descricao=texto_ou_vazio(descricao),
        )

    def alterar_nome(self, novo_nome: str) -> None:
        self.nome = exigir_texto(novo_nome, "nome")

    def alterar_descricao(self, nova_descricao: Optional[str]) -> None:
        self.descricao = texto_ou_vazio(nova_descricao)

    def adicionar_membro(
        self,
        usuario: UsuarioEntity,
        papel: Union[None, str, PapelEquipe] = None,
    ) -> None:
        """
        Adiciona membro ao final da lista.

        Args:
            usuario: Usuário a incluir
            papel: Papel opcional (aceita sinônimos, ex: "tester")

        Raises:
            RequiredFieldError: Se usuário nulo
            AlreadyMemberError: Se usuário já é membro
        """
        exigir(usuario, "usuario")
        if self.contem_membro(usuario):
            raise AlreadyMemberError(usuario.login)

        papel_final = PapelEquipe.from_string(papel) if papel is not None else None

        self._membros.append(usuario)
        if papel_final is not None:
            self._papeis[usuario.id] = papel_final

    def remover_membro(self, usuario: UsuarioEntity) -> bool:
        """Remove membro. Retorna True se removeu."""
        exigir(usuario, "usuario")
        return self.remover_membro_por_id(usuario.id)

    def remover_membro_por_id(self, usuario_id: str) -> bool:
        """Remove membro pelo ID. Retorna True se removeu."""
        exigir_texto(usuario_id, "usuario_id")
        antes = len(self._membros)
        self._membros = [u for u in self._membros if u.id != usuario_id]
        self._papeis.pop(usuario_id, None)
        return len(self._membros) < antes

    def contem_membro(self, usuario: UsuarioEntity) -> bool:
        exigir(usuario, "usuario")
        return any(u.id == usuario.id for u in self._membros)

    def papel_de(self, usuario: UsuarioEntity) -> Optional[PapelEquipe]:
        return self._papeis.get(usuario.id)

    def definir_papel(self, usuario: UsuarioEntity, papel: Union[str, PapelEquipe]) -> None:
        """Define (ou troca) o papel de um membro existente."""
        if not self.contem_membro(usuario):
            raise BusinessRuleViolationError(
                f"Usuário não é membro da equipe: {usuario.login}",
                rule="papel_exige_membro",
            )
        self._papeis[usuario.id] = PapelEquipe.from_string(papel)

    def membros_por_papel(self, papel: Union[str, PapelEquipe]) -> List[UsuarioEntity]:
        alvo = PapelEquipe.from_string(papel)
        return [u for u in self._membros if self._papeis.get(u.id) is alvo]

    @property
    def membros(self) -> Tuple[UsuarioEntity, ...]:
        """Visão somente leitura dos membros, em ordem de inserção."""
        return tuple(self._membros)

    @property
    def quantidade_membros(self) -> int:
        return len(self._membros)

    @property
    def logins_dos_membros(self) -> List[str]:
        return [u.login for u in self._membros]

    def __repr__(self) -> str:
        return (
            f"EquipeEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome}', "
            f"membros={len(self._membros)}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EquipeEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
