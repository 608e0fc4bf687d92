"""
Política de períodos compartilhada por Projeto, Tarefa e Alocação.

- Um período é válido se ``fim >= inicio`` quando ``fim`` existe
- Período aberto (``fim is None``) vale de ``inicio`` em diante
- Algo está atrasado quando não finalizado e o término previsto
  é anterior à data de referência
"""

from datetime import date
from typing import Optional

from .exceptions import InvalidArgumentError


def validar_periodo(
    inicio: date,
    fim: Optional[date],
    campo_fim: str = "data_fim",
    campo_inicio: str = "data_inicio",
) -> None:
    """
    Valida coerência do período.

    Raises:
        InvalidArgumentError: Se ``fim`` anterior a ``inicio``
    """
    if fim is not None and fim < inicio:
        raise InvalidArgumentError(
            f"{campo_fim} deve ser maior ou igual a {campo_inicio}",
            field=campo_fim,
        )


def esta_vigente(
    inicio: date,
    fim: Optional[date],
    referencia: Optional[date] = None,
) -> bool:
    """Indica se o período cobre a data de referência (default: hoje)."""
    ref = referencia or date.today()
    return inicio <= ref and (fim is None or fim >= ref)


def esta_atrasado(
    termino_previsto: date,
    finalizado: bool,
    referencia: Optional[date] = None,
) -> bool:
    """Indica atraso: não finalizado e término previsto antes da referência."""
    ref = referencia or date.today()
    return not finalizado and termino_previsto < ref
