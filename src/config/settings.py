"""
Settings do Gestor de Projetos.

Valores lidos de variáveis de ambiente (arquivo .env suportado via
python-dotenv), com defaults para desenvolvimento.

Variáveis:
- LOG_LEVEL: Nível de log da aplicação (default: INFO)
- EVENT_LOG_LEVEL: Nível usado pelo LoggingEventPublisher (default: INFO)
- COMENTARIO_TAMANHO_MAX: Tamanho máximo de comentários (default: 1000)
"""

import logging
import logging.config
import os
from pathlib import Path

from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SRC_DIR = BASE_DIR / 'src'

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

EVENT_LOG_LEVEL = logging.getLevelName(os.getenv('EVENT_LOG_LEVEL', 'INFO').upper())
if not isinstance(EVENT_LOG_LEVEL, int):
    EVENT_LOG_LEVEL = logging.INFO

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configurar_logging() -> None:
    """Aplica a configuração LOGGING (chamar uma vez na inicialização)."""
    logging.config.dictConfig(LOGGING)


# =============================================================================
# Regras configuráveis (Domain)
# =============================================================================

COMENTARIO_TAMANHO_MAX = int(os.getenv('COMENTARIO_TAMANHO_MAX', 1000))

# =============================================================================
# Container
# =============================================================================

# Valores carregados em Container.config
CONTAINER_CONFIG = {
    'event_log_level': EVENT_LOG_LEVEL,
    'comentario_tamanho_max': COMENTARIO_TAMANHO_MAX,
}
