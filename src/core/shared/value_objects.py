"""
Value Objects do domínio: CPF e Email.

Características:
- Imutáveis (dataclass frozen)
- Validados na construção: uma instância existente é sempre válida
- Comparados por valor, não por identidade

Cada Value Object oferece duas portas de entrada:
- ``validar(texto)``: retorna ``Resultado`` e nunca lança exceção
- ``of(texto)``: atalho que lança o erro de domínio correspondente

O construtor direto (``CPF("52998224725")``) só aceita o valor já
normalizado e lança o mesmo erro de domínio caso contrário.
"""

from dataclasses import dataclass
import re
from typing import Optional

from .exceptions import (
    DomainException,
    InvalidChecksumError,
    InvalidFormatError,
    RequiredFieldError,
)
from .resultado import Resultado


# Somente dígitos ASCII: dígitos Unicode (ex: "５") são descartados
_NAO_DIGITO = re.compile(r"[^0-9]")

_EMAIL_RX = re.compile(
    r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class CPF:
    """
    CPF (Cadastro de Pessoa Física) com dígitos verificadores válidos.

    Attributes:
        valor: Os 11 dígitos, sem pontuação

    Example:
        cpf = CPF.of("529.982.247-25")
        cpf.valor       # "52998224725"
        cpf.formatado   # "529.982.247-25"
        cpf.mascarado   # "***.***.***-25"
    """

    valor: str

    TAMANHO = 11

    def __post_init__(self):
        erro = self._verificar(self.valor)
        if erro is not None:
            raise erro

    @classmethod
    def validar(cls, texto: Optional[str]) -> Resultado["CPF"]:
        """
        Valida um CPF com ou sem máscara.

        Regras:
        - Remove tudo que não for dígito ASCII
        - Exige exatamente 11 dígitos
        - Rejeita sequências repetidas (ex: 111.111.111-11)
        - Confere os dois dígitos verificadores (módulo 11)

        Args:
            texto: Entrada arbitrária

        Returns:
            Resultado com o CPF ou com o erro de domínio
        """
        if texto is None or not str(texto).strip():
            return Resultado.falha(RequiredFieldError("cpf"))

        digitos = _NAO_DIGITO.sub("", str(texto))

        erro = cls._verificar(digitos)
        if erro is not None:
            return Resultado.falha(erro)

        return Resultado.sucesso(cls(digitos))

    @classmethod
    def of(cls, texto: Optional[str]) -> "CPF":
        """
        Cria CPF validado.

        Raises:
            RequiredFieldError: Entrada nula ou vazia
            InvalidFormatError: Quantidade de dígitos ou sequência repetida
            InvalidChecksumError: Dígitos verificadores não conferem
        """
        return cls.validar(texto).unwrap()

    @classmethod
    def _verificar(cls, digitos: Optional[str]) -> Optional[DomainException]:
        """Erro de domínio para uma string de dígitos já limpa (None se válida)."""
        if not isinstance(digitos, str):
            return RequiredFieldError("cpf")

        if len(digitos) != cls.TAMANHO or _NAO_DIGITO.search(digitos):
            return InvalidFormatError("CPF deve conter 11 dígitos", field="cpf")

        if len(set(digitos)) == 1:
            return InvalidFormatError("CPF inválido (sequência repetida)", field="cpf")

        if not cls._digitos_verificadores_validos(digitos):
            return InvalidChecksumError("CPF inválido (dígitos verificadores)", field="cpf")

        return None

    @staticmethod
    def calcular_digito(digitos: str) -> int:
        """
        Calcula um dígito verificador por soma ponderada módulo 11.

        Os pesos vão de ``len(digitos) + 1`` até 2. Resto menor que 2
        gera dígito 0; caso contrário, ``11 - resto``.
        """
        peso_inicial = len(digitos) + 1
        soma = sum(
            int(d) * peso
            for d, peso in zip(digitos, range(peso_inicial, 1, -1))
        )
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @classmethod
    def _digitos_verificadores_validos(cls, digitos: str) -> bool:
        dv1 = cls.calcular_digito(digitos[:9])
        dv2 = cls.calcular_digito(digitos[:10])
        return dv1 == int(digitos[9]) and dv2 == int(digitos[10])

    @property
    def formatado(self) -> str:
        """CPF no formato ###.###.###-##."""
        d = self.valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def mascarado(self) -> str:
        """CPF mascarado (***.***.***-##), apenas os dígitos verificadores visíveis."""
        return f"***.***.***-{self.valor[9:]}"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class Email:
    """
    Endereço de e-mail normalizado (trim + minúsculas).

    Attributes:
        valor: Endereço completo normalizado

    Example:
        email = Email.of("  Ana.Souza@Empresa.COM ")
        email.valor     # "ana.souza@empresa.com"
        email.usuario   # "ana.souza"
        email.dominio   # "empresa.com"
    """

    valor: str

    def __post_init__(self):
        erro = self._verificar(self.valor)
        if erro is not None:
            raise erro

    @staticmethod
    def normalizar(texto: str) -> str:
        """Remove espaços das bordas e converte para minúsculas."""
        return texto.strip().lower()

    @classmethod
    def validar(cls, texto: Optional[str]) -> Resultado["Email"]:
        """
        Normaliza e valida o formato local@dominio.ext.

        Returns:
            Resultado com o Email ou com o erro de domínio
        """
        if texto is None or not str(texto).strip():
            return Resultado.falha(RequiredFieldError("email"))

        normalizado = cls.normalizar(str(texto))

        erro = cls._verificar(normalizado)
        if erro is not None:
            return Resultado.falha(erro)

        return Resultado.sucesso(cls(normalizado))

    @classmethod
    def of(cls, texto: Optional[str]) -> "Email":
        """
        Cria Email validado.

        Raises:
            RequiredFieldError: Entrada nula ou vazia
            InvalidFormatError: Formato inválido
        """
        return cls.validar(texto).unwrap()

    @classmethod
    def _verificar(cls, valor: Optional[str]) -> Optional[DomainException]:
        if not isinstance(valor, str) or not valor.strip():
            return RequiredFieldError("email")

        if valor != cls.normalizar(valor) or not _EMAIL_RX.match(valor):
            return InvalidFormatError(f"E-mail inválido: {valor}", field="email")

        return None

    @property
    def usuario(self) -> str:
        """Parte local (antes do último @)."""
        return self.valor.rpartition("@")[0]

    @property
    def dominio(self) -> str:
        """Domínio (após o último @)."""
        return self.valor.rpartition("@")[2]

    def __str__(self) -> str:
        return self.valor
