"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Contextos:
- shared: Exceções, value objects (CPF, Email), eventos, Unit of Work
- usuarios: Usuários e perfis
- equipes: Equipes e papéis dos membros
- projetos: Projetos e alocação de equipes
- tarefas: Tarefas, registros de esforço, comentários e relatórios
"""
