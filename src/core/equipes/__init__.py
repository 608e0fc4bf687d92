"""
Contexto de Equipes - membros e papéis.
"""

from .entities import EquipeEntity, PapelEquipe
from .ports import EquipeRepository
from .use_cases import AdicionarMembroService, CriarEquipeService, RemoverMembroService

__all__ = [
    "EquipeEntity",
    "PapelEquipe",
    "EquipeRepository",
    "AdicionarMembroService",
    "CriarEquipeService",
    "RemoverMembroService",
]
