"""
Contexto de Projetos - ciclo de vida do projeto e alocação de equipes.
"""

from .entities import (
    AlocacaoEquipeProjetoEntity,
    MotivoCancelamentoProjeto,
    ProjetoEntity,
    StatusProjeto,
    TRANSICOES_PROJETO,
)
from .ports import AlocacaoRepository, ProjetoRepository
from .use_cases import (
    AlocarEquipeService,
    AlterarStatusProjetoService,
    CancelarProjetoService,
    CriarProjetoService,
    EncerrarAlocacaoService,
    ListarProjetosAtrasadosService,
)

__all__ = [
    "AlocacaoEquipeProjetoEntity",
    "MotivoCancelamentoProjeto",
    "ProjetoEntity",
    "StatusProjeto",
    "TRANSICOES_PROJETO",
    "AlocacaoRepository",
    "ProjetoRepository",
    "AlocarEquipeService",
    "AlterarStatusProjetoService",
    "CancelarProjetoService",
    "CriarProjetoService",
    "EncerrarAlocacaoService",
    "ListarProjetosAtrasadosService",
]
