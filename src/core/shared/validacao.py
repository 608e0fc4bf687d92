"""Guardas de validação reutilizadas pelas fábricas das entidades."""

from typing import Any, Optional

from .exceptions import RequiredFieldError


def exigir_texto(valor: Optional[str], campo: str) -> str:
    """
    Valida campo textual obrigatório.

    Returns:
        Texto sem espaços nas bordas

    Raises:
        RequiredFieldError: Se nulo ou em branco
    """
    if valor is None or not str(valor).strip():
        raise RequiredFieldError(campo)
    return str(valor).strip()


def texto_ou_vazio(valor: Optional[str]) -> str:
    """Campo textual opcional: None vira string vazia."""
    return "" if valor is None else str(valor).strip()


def exigir(valor: Any, campo: str) -> Any:
    """Garante referência obrigatória (entidade, data, enum)."""
    if valor is None:
        raise RequiredFieldError(campo)
    return valor
