"""
Contexto de Usuários.

- Entidades (UsuarioEntity, Perfil)
- Use Cases (CadastrarUsuario, TrocarSenha, ObterUsuario, ListarUsuarios)
- Domain Events (UsuarioCadastrado, SenhaAlterada)
- Ports (UsuarioRepository)
"""

from .entities import Perfil, UsuarioEntity
from .events import SenhaAlteradaEvent, UsuarioCadastradoEvent
from .dtos import CadastrarUsuarioInputDTO, TrocarSenhaInputDTO, UsuarioOutputDTO
from .ports import UsuarioRepository
from .use_cases import (
    CadastrarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    TrocarSenhaService,
)

__all__ = [
    "Perfil",
    "UsuarioEntity",
    "SenhaAlteradaEvent",
    "UsuarioCadastradoEvent",
    "CadastrarUsuarioInputDTO",
    "TrocarSenhaInputDTO",
    "UsuarioOutputDTO",
    "UsuarioRepository",
    "CadastrarUsuarioService",
    "ListarUsuariosService",
    "ObterUsuarioService",
    "TrocarSenhaService",
]
