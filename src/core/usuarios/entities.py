"""
Entidades do Contexto de Usuários.

Entidades:
- UsuarioEntity: Usuário do sistema (com CPF e Email como Value Objects)
- Perfil: Perfis de acesso (Administrador, Gerente, Colaborador)

Regras de Negócio Encapsuladas:
- Nome, cargo e login obrigatórios
- Login com pelo menos 3 caracteres
- Senha com pelo menos 6 caracteres antes do hash
- Hash de senha didático (SHA-256 de "login:senha"), não usar em produção
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union
import hashlib
import uuid

from src.core.shared.exceptions import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.core.shared.sinonimos import resolver_sinonimo
from src.core.shared.validacao import exigir_texto
from src.core.shared.value_objects import CPF, Email


class Perfil(Enum):
    """Perfis de acesso do sistema."""

    ADMINISTRADOR = "Administrador"
    GERENTE = "Gerente"
    COLABORADOR = "Colaborador"

    @property
    def rotulo(self) -> str:
        return self.value

    @property
    def is_admin(self) -> bool:
        return self is Perfil.ADMINISTRADOR

    @property
    def is_gerente(self) -> bool:
        return self is Perfil.GERENTE

    @property
    def is_colaborador(self) -> bool:
        return self is Perfil.COLABORADOR

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Perfil":
        """
        Converte texto em Perfil aceitando sinônimos.

        Ex.: "admin", "adm", "administrador" → ADMINISTRADOR

        Raises:
            RequiredFieldError: Se valor vazio
            InvalidFormatError: Se valor não reconhecido
        """
        return resolver_sinonimo(cls, _SINONIMOS_PERFIL, value, "perfil")


_SINONIMOS_PERFIL = {
    "ADMIN": Perfil.ADMINISTRADOR,
    "ADM": Perfil.ADMINISTRADOR,
    "ADMINISTRADOR": Perfil.ADMINISTRADOR,
    "GERENTE": Perfil.GERENTE,
    "MANAGER": Perfil.GERENTE,
    "COLABORADOR": Perfil.COLABORADOR,
    "USUARIO": Perfil.COLABORADOR,
    "USUÁRIO": Perfil.COLABORADOR,
    "USER": Perfil.COLABORADOR,
}


@dataclass
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário.

    Invariantes:
    - CPF e e-mail sempre válidos (Value Objects)
    - Login com pelo menos 3 caracteres (unicidade garantida no caso de uso)
    - Senha nunca armazenada em claro

    Attributes:
        id: Identificador único (UUID)
        nome_completo: Nome do usuário
        cpf: CPF validado
        email: E-mail normalizado
        cargo: Cargo/função na empresa
        login: Login único
        senha_hash: Hash SHA-256 de "login:senha"
        perfil: Perfil de acesso

    Example:
        usuario = UsuarioEntity.criar(
            nome_completo="Ana Souza",
            cpf="529.982.247-25",
            email="ana@empresa.com",
            cargo="Gerente de Projetos",
            login="ana",
            senha="segredo123",
            perfil=Perfil.GERENTE,
        )
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome_completo: str = ""
    cpf: Optional[CPF] = None
    email: Optional[Email] = None
    cargo: str = ""
    login: str = ""
    senha_hash: str = field(default="", repr=False)
    perfil: Perfil = Perfil.COLABORADOR

    LOGIN_MIN_LENGTH: ClassVar[int] = 3
    SENHA_MIN_LENGTH: ClassVar[int] = 6

    @classmethod
    def criar(
        cls,
        nome_completo: str,
        cpf: Union[str, CPF],
        email: Union[str, Email],
        cargo: str,
        login: str,
        senha: str,
        perfil: Union[str, Perfil],
    ) -> "UsuarioEntity":
        """
        Factory method para criar usuário com validações.

        CPF e e-mail podem ser informados como texto (convertidos
        para Value Objects) ou já como Value Objects.

        Raises:
            RequiredFieldError: Campo obrigatório ausente
            InvalidArgumentError: Login ou senha curtos demais
            InvalidFormatError / InvalidChecksumError: CPF ou e-mail inválidos
        """
        nome = exigir_texto(nome_completo, "nome_completo")
        cargo_limpo = exigir_texto(cargo, "cargo")
        login_limpo = cls._validar_login(login)
        perfil_final = Perfil.from_string(perfil)
        cls._validar_senha(senha)

        cpf_vo = cpf if isinstance(cpf, CPF) else CPF.of(cpf)
        email_vo = email if isinstance(email, Email) else Email.of(email)

        return cls(
            nome_completo=nome,
            cpf=cpf_vo,
            email=email_vo,
            cargo=cargo_limpo,
            login=login_limpo,
            senha_hash=cls._hash_senha(login_limpo, senha),
            perfil=perfil_final,
        )

    @classmethod
    def _validar_login(cls, login: Optional[str]) -> str:
        login_limpo = exigir_texto(login, "login")
        if len(login_limpo) < cls.LOGIN_MIN_LENGTH:
            raise InvalidArgumentError(
                f"Login deve ter ao menos {cls.LOGIN_MIN_LENGTH} caracteres",
                field="login",
            )
        return login_limpo

    @classmethod
    def _validar_senha(cls, senha: Optional[str]) -> None:
        if senha is None or not senha.strip():
            raise RequiredFieldError("senha")
        if len(senha) < cls.SENHA_MIN_LENGTH:
            raise InvalidArgumentError(
                f"Senha deve ter ao menos {cls.SENHA_MIN_LENGTH} caracteres",
                field="senha",
            )

    @staticmethod
    def _hash_senha(login: str, senha: str) -> str:
        # Didático: login como "sal" simples.
        return hashlib.sha256(f"{login}:{senha}".encode("utf-8")).hexdigest()

    # ------------------------------------------------------------------
    # Métodos de domínio
    # ------------------------------------------------------------------

    def alterar_email(self, novo_email: Union[str, Email]) -> None:
        """Troca o e-mail (texto é validado e normalizado)."""
        self.email = novo_email if isinstance(novo_email, Email) else Email.of(novo_email)

    def alterar_cargo(self, novo_cargo: str) -> None:
        self.cargo = exigir_texto(novo_cargo, "cargo")

    def alterar_nome(self, novo_nome: str) -> None:
        self.nome_completo = exigir_texto(novo_nome, "nome_completo")

    def alterar_perfil(self, novo_perfil: Union[str, Perfil]) -> None:
        self.perfil = Perfil.from_string(novo_perfil)

    def verificar_senha(self, senha: Optional[str]) -> bool:
        """Compara a senha informada com o hash armazenado."""
        if senha is None:
            return False
        return self.senha_hash == self._hash_senha(self.login, senha)

    def trocar_senha(self, senha_atual: str, nova_senha: str) -> None:
        """
        Troca a senha verificando a senha atual.

        Raises:
            InvalidArgumentError: Senha atual incorreta ou nova senha curta
        """
        if not self.verificar_senha(senha_atual):
            raise InvalidArgumentError("Senha atual inválida", field="senha_atual")
        self._validar_senha(nova_senha)
        self.senha_hash = self._hash_senha(self.login, nova_senha)

    @property
    def pode_gerenciar_projetos(self) -> bool:
        """Gerentes e administradores podem ser responsáveis por projetos."""
        return self.perfil in (Perfil.GERENTE, Perfil.ADMINISTRADOR)

    @property
    def cpf_mascarado(self) -> str:
        return self.cpf.mascarado if self.cpf else ""

    def __repr__(self) -> str:
        return (
            f"UsuarioEntity("
            f"id={self.id[:8]}..., "
            f"login='{self.login}', "
            f"cpf={self.cpf_mascarado}, "
            f"perfil={self.perfil.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, UsuarioEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
