"""
Conversão de texto em enum com sinônimos.

Cada enum declara um dicionário ``SINÔNIMO → membro`` (chaves em
maiúsculas). A busca ignora caixa e espaços nas bordas; o nome do
membro e seu rótulo (``value``) são sempre aceitos.
"""

from enum import Enum
from typing import Mapping, Optional, Type, TypeVar

from .exceptions import InvalidFormatError, RequiredFieldError


E = TypeVar("E", bound=Enum)


def chave_sinonimo(valor: str) -> str:
    """Normaliza texto para consulta na tabela de sinônimos."""
    return valor.strip().upper()


def resolver_sinonimo(
    enum_cls: Type[E],
    tabela: Mapping[str, E],
    valor: Optional[str],
    campo: str,
) -> E:
    """
    Converte texto no membro canônico do enum.

    Args:
        enum_cls: Classe do enum
        tabela: Sinônimos aceitos (chaves normalizadas) → membro
        valor: Texto informado pelo usuário
        campo: Nome do campo (para mensagens de erro)

    Returns:
        Membro correspondente

    Raises:
        RequiredFieldError: Se valor nulo ou vazio
        InvalidFormatError: Se nenhum sinônimo corresponder
    """
    if isinstance(valor, enum_cls):
        return valor

    if valor is None or not str(valor).strip():
        raise RequiredFieldError(campo)

    chave = chave_sinonimo(str(valor))

    if chave in tabela:
        return tabela[chave]

    for membro in enum_cls:
        if chave in (membro.name, chave_sinonimo(str(membro.value))):
            return membro

    raise InvalidFormatError(f"{campo.capitalize()} inválido: {valor}", field=campo)
