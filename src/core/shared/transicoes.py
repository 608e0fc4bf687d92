"""
Tabelas de transição de status.

Cada enum de status declara sua tabela (estado → destinos permitidos)
como dado; as funções abaixo apenas consultam a tabela, sem conhecer
o tipo de entidade.
"""

from typing import FrozenSet, Mapping, TypeVar

from .exceptions import InvalidTransitionError


S = TypeVar("S")

TabelaTransicoes = Mapping[S, FrozenSet[S]]


def pode_transicionar(tabela: "TabelaTransicoes[S]", origem: S, destino: S) -> bool:
    """
    Verifica se a tabela permite ir de ``origem`` para ``destino``.

    Estados ausentes da tabela (ou destino nulo) não permitem transição.
    """
    if destino is None:
        return False
    return destino in tabela.get(origem, frozenset())


def exigir_transicao(tabela: "TabelaTransicoes[S]", origem: S, destino: S) -> None:
    """
    Garante que a transição é permitida.

    Raises:
        InvalidTransitionError: Se a tabela não prevê a transição
    """
    if not pode_transicionar(tabela, origem, destino):
        raise InvalidTransitionError(origem, destino)
