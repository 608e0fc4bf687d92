#!/usr/bin/env python
"""
Demonstração rápida do Gestor de Projetos.

Este script:
1. Configura logging a partir das settings
2. Cadastra usuários, equipe, projeto e tarefa via container
3. Lança horas, comenta e conclui a tarefa
4. Mostra resumo de horas e exportações CSV (opcional)

Uso:
    python scripts/demo.py
    python scripts/demo.py --csv
    python scripts/demo.py --log-level DEBUG
"""

from datetime import date
import argparse
import logging
import os
import sys

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import settings  # noqa: E402
from src.config.container import Container, get_container  # noqa: E402
from src.core.equipes.dtos import AdicionarMembroInputDTO, CriarEquipeInputDTO  # noqa: E402
from src.core.projetos.dtos import (  # noqa: E402
    AlocarEquipeInputDTO,
    AlterarStatusProjetoInputDTO,
    CriarProjetoInputDTO,
)
from src.core.tarefas.dtos import (  # noqa: E402
    AlterarStatusTarefaInputDTO,
    ComentarTarefaInputDTO,
    ConcluirTarefaInputDTO,
    CriarTarefaInputDTO,
    RegistrarEsforcoInputDTO,
)
from src.core.usuarios.dtos import CadastrarUsuarioInputDTO  # noqa: E402


def executar_cenario(container: Container) -> dict:
    """
    Executa o cenário de exemplo e devolve os ids criados.

    Returns:
        {'gerente', 'dev', 'equipe', 'projeto', 'tarefa'}
    """
    gerente = container.cadastrar_usuario_service().execute(CadastrarUsuarioInputDTO(
        nome_completo="Ana Souza",
        cpf="529.982.247-25",
        email="Ana@Empresa.com",
        cargo="Gerente de Projetos",
        login="ana",
        senha="segredo123",
        perfil="gerente",
    ))
    dev = container.cadastrar_usuario_service().execute(CadastrarUsuarioInputDTO(
        nome_completo="Bruno Lima",
        cpf="11144477735",
        email="bruno@empresa.com",
        cargo="Desenvolvedor",
        login="bruno",
        senha="senha456",
        perfil="colaborador",
    ))

    equipe = container.criar_equipe_service().execute(
        CriarEquipeInputDTO(nome="Plataforma", descricao="Time de backend")
    )
    container.adicionar_membro_service().execute(
        AdicionarMembroInputDTO(equipe_id=equipe.id, usuario_id=dev.id, papel="dev")
    )

    projeto = container.criar_projeto_service().execute(CriarProjetoInputDTO(
        nome="Portal do Cliente",
        descricao="Novo portal de autoatendimento",
        data_inicio=date(2025, 1, 1),
        data_termino_prevista=date(2025, 6, 30),
        gerente_id=gerente.id,
    ))
    container.alterar_status_projeto_service().execute(
        AlterarStatusProjetoInputDTO(projeto_id=projeto.id, novo_status="em andamento")
    )
    container.alocar_equipe_service().execute(AlocarEquipeInputDTO(
        projeto_id=projeto.id,
        equipe_id=equipe.id,
        data_inicio=date(2025, 1, 1),
        capacidade_horas_semana=40,
    ))

    tarefa = container.criar_tarefa_service().execute(CriarTarefaInputDTO(
        projeto_id=projeto.id,
        titulo="Modelar banco",
        data_inicio=date(2025, 1, 1),
        data_termino_prevista=date(2025, 1, 10),
        responsavel_id=dev.id,
        prioridade="alta",
        esforco_estimado_horas=8,
    ))
    container.alterar_status_tarefa_service().execute(
        AlterarStatusTarefaInputDTO(tarefa_id=tarefa.id, novo_status="em andamento")
    )
    container.registrar_esforco_service().execute(RegistrarEsforcoInputDTO(
        tarefa_id=tarefa.id,
        usuario_id=dev.id,
        data=date(2025, 1, 3),
        horas=5,
        observacao="modelagem; revisão",
    ))
    container.comentar_tarefa_service().execute(
        ComentarTarefaInputDTO(tarefa_id=tarefa.id, autor_id=gerente.id, mensagem="Revisar índices")
    )
    container.concluir_tarefa_service().execute(
        ConcluirTarefaInputDTO(tarefa_id=tarefa.id, horas_reais=3, data_conclusao=date(2025, 1, 9))
    )

    return {
        'gerente': gerente.id,
        'dev': dev.id,
        'equipe': equipe.id,
        'projeto': projeto.id,
        'tarefa': tarefa.id,
    }


def show_info(container: Container, ids: dict, com_csv: bool) -> None:
    """Mostra o resultado do cenário."""
    tarefa = container.tarefa_repository().get_by_id(ids['tarefa'])
    resumo = container.resumo_horas_service().execute()

    print("\n" + "=" * 60)
    print("📊 Resultado")
    print("=" * 60)
    print(f"  Tarefa: {tarefa.titulo} ({tarefa.status.value})")
    print(f"  Esforço real: {tarefa.esforco_real_horas}h de {tarefa.esforco_estimado_horas}h")
    print(f"  Horas por usuário: {resumo.por_usuario}")
    print("=" * 60)

    if com_csv:
        print("\nEsforços:")
        print(container.exportar_esforcos_csv_service().execute())
        print("\nComentários:")
        print(container.exportar_comentarios_csv_service().execute())
    print()


def main():
    parser = argparse.ArgumentParser(description='Demonstração do Gestor de Projetos')
    parser.add_argument(
        '--csv',
        action='store_true',
        help='Mostrar exportações CSV'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Sobrescreve LOG_LEVEL (ex: DEBUG)'
    )

    args = parser.parse_args()

    settings.configurar_logging()
    if args.log_level:
        for nome in ('src.core', 'src.adapters'):
            logging.getLogger(nome).setLevel(args.log_level.upper())

    print("\n" + "=" * 60)
    print("🔧 Gestor de Projetos - Demo")
    print("=" * 60 + "\n")

    container = get_container()
    ids = executar_cenario(container)
    show_info(container, ids, args.csv)


if __name__ == '__main__':
    main()
