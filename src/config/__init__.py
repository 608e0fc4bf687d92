"""
Configuração do Gestor de Projetos.

Módulos:
- settings: Variáveis de ambiente e logging
- container: Dependency Injection Container
"""
