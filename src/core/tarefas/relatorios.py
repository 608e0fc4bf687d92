"""
Operações sobre coleções de registros de esforço e comentários.

Funções puras: recebem coleções (ou None) e devolvem listas, dicionários
ou texto CSV. Nenhuma delas acessa repositórios.

CSV:
- Separador ``;`` e linhas unidas por ``\\n``
- Em campos de texto livre, ``;`` vira ``,`` e quebras de linha viram espaço
- Coleção vazia gera somente o cabeçalho
"""

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from src.core.shared.validacao import exigir
from src.core.usuarios.entities import UsuarioEntity

from .entities import ComentarioTarefaEntity, RegistroEsforcoEntity, TarefaEntity


SEPARADOR_CSV = ";"
CABECALHO_ESFORCOS = "id;data;horas;usuario;task;obs"
CABECALHO_COMENTARIOS = "id;dataHora;autor;task;mensagem"


# =============================================================================
# Registros de esforço
# =============================================================================

def registrar_esforco(
    tarefa: TarefaEntity,
    usuario: UsuarioEntity,
    data: date,
    horas: int,
    observacao: Optional[str] = None,
) -> RegistroEsforcoEntity:
    """
    Cria o registro e acumula as horas na tarefa.

    O registro é validado antes de a tarefa ser alterada: se a criação
    falhar, o esforço real da tarefa permanece o mesmo.
    """
    registro = RegistroEsforcoEntity.criar(tarefa, usuario, data, horas, observacao)
    tarefa.registrar_esforco(horas)
    return registro


def somar_horas(registros: Optional[Iterable[RegistroEsforcoEntity]]) -> int:
    if registros is None:
        return 0
    return sum(r.horas for r in registros)


def horas_por_usuario(
    registros: Optional[Iterable[RegistroEsforcoEntity]],
) -> Dict[UsuarioEntity, int]:
    """Soma de horas agrupada por usuário (ordem de primeira aparição)."""
    totais: Dict[UsuarioEntity, int] = {}
    for registro in registros or ():
        totais[registro.usuario] = totais.get(registro.usuario, 0) + registro.horas
    return totais


def horas_por_tarefa(
    registros: Optional[Iterable[RegistroEsforcoEntity]],
) -> Dict[TarefaEntity, int]:
    totais: Dict[TarefaEntity, int] = {}
    for registro in registros or ():
        totais[registro.tarefa] = totais.get(registro.tarefa, 0) + registro.horas
    return totais


def filtrar_registros_por_periodo(
    registros: Optional[Iterable[RegistroEsforcoEntity]],
    inicio: date,
    fim: Optional[date] = None,
) -> List[RegistroEsforcoEntity]:
    """
    Registros com data em [inicio, fim] (inclusive), ordenados por data.

    Raises:
        RequiredFieldError: Se inicio não informado
    """
    if registros is None:
        return []
    exigir(inicio, "inicio")
    selecionados = [
        r for r in registros
        if r.data >= inicio and (fim is None or r.data <= fim)
    ]
    return sorted(selecionados, key=lambda r: r.data)


# =============================================================================
# Comentários
# =============================================================================

def comentar_agora(
    tarefa: TarefaEntity,
    autor: UsuarioEntity,
    mensagem: str,
    tamanho_max: Optional[int] = None,
) -> ComentarioTarefaEntity:
    """Cria comentário com a data/hora atual."""
    return ComentarioTarefaEntity.criar(
        tarefa, autor, datetime.now(), mensagem, tamanho_max=tamanho_max
    )


def listar_comentarios_por_tarefa(
    comentarios: Optional[Iterable[ComentarioTarefaEntity]],
    tarefa: Optional[TarefaEntity],
) -> List[ComentarioTarefaEntity]:
    """Comentários da tarefa em ordem cronológica."""
    if comentarios is None or tarefa is None:
        return []
    return sorted(
        (c for c in comentarios if c.tarefa == tarefa),
        key=lambda c: c.data_hora,
    )


def listar_comentarios_por_autor(
    comentarios: Optional[Iterable[ComentarioTarefaEntity]],
    autor: Optional[UsuarioEntity],
) -> List[ComentarioTarefaEntity]:
    if comentarios is None or autor is None:
        return []
    return sorted(
        (c for c in comentarios if c.autor == autor),
        key=lambda c: c.data_hora,
    )


def filtrar_comentarios_por_periodo(
    comentarios: Optional[Iterable[ComentarioTarefaEntity]],
    inicio: datetime,
    fim: Optional[datetime] = None,
) -> List[ComentarioTarefaEntity]:
    if comentarios is None:
        return []
    exigir(inicio, "inicio")
    selecionados = [
        c for c in comentarios
        if c.data_hora >= inicio and (fim is None or c.data_hora <= fim)
    ]
    return sorted(selecionados, key=lambda c: c.data_hora)


def ultimos_comentarios(
    comentarios: Optional[Iterable[ComentarioTarefaEntity]],
    n: int,
) -> List[ComentarioTarefaEntity]:
    """Os N comentários mais recentes, devolvidos em ordem cronológica."""
    if comentarios is None or n <= 0:
        return []
    ordenados = sorted(comentarios, key=lambda c: c.data_hora)
    return ordenados[-n:]


# =============================================================================
# Exportação CSV
# =============================================================================

def _texto_livre(valor: Optional[str]) -> str:
    if valor is None:
        return ""
    return (
        valor.replace(SEPARADOR_CSV, ",")
        .replace("\r\n", " ")
        .replace("\n", " ")
        .replace("\r", " ")
    )


def _montar_csv(cabecalho: str, linhas: List[List[str]]) -> str:
    return "\n".join([cabecalho] + [SEPARADOR_CSV.join(linha) for linha in linhas])


def esforcos_para_csv(registros: Optional[Iterable[RegistroEsforcoEntity]]) -> str:
    """
    Exporta registros de esforço.

    Example:
        id;data;horas;usuario;task;obs
        3f2a...;2025-01-02;4;maria;Modelar banco;revisão, ajustes
    """
    linhas = [
        [
            r.id,
            r.data.isoformat(),
            str(r.horas),
            _texto_livre(r.usuario.login),
            _texto_livre(r.tarefa.titulo),
            _texto_livre(r.observacao),
        ]
        for r in registros or ()
    ]
    return _montar_csv(CABECALHO_ESFORCOS, linhas)


def comentarios_para_csv(
    comentarios: Optional[Iterable[ComentarioTarefaEntity]],
) -> str:
    linhas = [
        [
            c.id,
            c.data_hora.isoformat(),
            _texto_livre(c.autor.login),
            _texto_livre(c.tarefa.titulo),
            _texto_livre(c.mensagem),
        ]
        for c in comentarios or ()
    ]
    return _montar_csv(CABECALHO_COMENTARIOS, linhas)
