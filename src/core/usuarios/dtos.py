"""
Data Transfer Objects (DTOs) do Contexto de Usuários.

O hash de senha nunca sai do domínio: os DTOs de saída expõem
apenas o CPF mascarado e o e-mail normalizado.
"""

from dataclasses import dataclass

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarUsuarioInputDTO:
    """
    DTO de entrada para cadastrar usuário.

    Attributes:
        nome_completo: Nome do usuário
        cpf: CPF com ou sem máscara
        email: E-mail (normalizado no domínio)
        cargo: Cargo/função
        login: Login único
        senha: Senha em claro (hash gerado no domínio)
        perfil: Perfil (aceita sinônimos, ex: "admin")
    """

    nome_completo: str
    cpf: str
    email: str
    cargo: str
    login: str
    senha: str
    perfil: str = "COLABORADOR"


@dataclass(frozen=True)
class TrocarSenhaInputDTO:
    usuario_id: str
    senha_atual: str
    nova_senha: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """DTO de saída com dados públicos do usuário."""

    id: str
    nome_completo: str
    cpf_mascarado: str
    email: str
    cargo: str
    login: str
    perfil: str

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            nome_completo=entity.nome_completo,
            cpf_mascarado=entity.cpf_mascarado,
            email=entity.email.valor if entity.email else "",
            cargo=entity.cargo,
            login=entity.login,
            perfil=entity.perfil.value,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome_completo": self.nome_completo,
            "cpf_mascarado": self.cpf_mascarado,
            "email": self.email,
            "cargo": self.cargo,
            "login": self.login,
            "perfil": self.perfil,
        }
