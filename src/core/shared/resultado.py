"""
Resultado - desfecho tipado de uma validação.

Permite que Value Objects sejam validados sem lançar exceção:
o chamador decide se trata o erro ou o propaga via ``unwrap()``.

Example:
    resultado = Email.validar(texto)
    if not resultado.ok:
        mostrar(resultado.erro.message)
    email = resultado.unwrap()
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import DomainException


T = TypeVar("T")


@dataclass(frozen=True)
class Resultado(Generic[T]):
    """
    Sucesso (``valor``) ou falha (``erro``), nunca ambos.

    Attributes:
        valor: Valor produzido em caso de sucesso
        erro: Exceção de domínio em caso de falha
    """

    valor: Optional[T] = None
    erro: Optional[DomainException] = None

    @classmethod
    def sucesso(cls, valor: T) -> "Resultado[T]":
        return cls(valor=valor)

    @classmethod
    def falha(cls, erro: DomainException) -> "Resultado[T]":
        return cls(erro=erro)

    @property
    def ok(self) -> bool:
        """Indica se a operação foi bem-sucedida."""
        return self.erro is None

    def unwrap(self) -> T:
        """
        Retorna o valor ou lança o erro armazenado.

        Raises:
            DomainException: Erro capturado na validação
        """
        if self.erro is not None:
            raise self.erro
        return self.valor
