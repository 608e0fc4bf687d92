"""
Use Cases (Application Services) do Contexto de Usuários.

Use Cases implementados:
- CadastrarUsuarioService: Cadastra usuário com login único
- TrocarSenhaService: Troca senha verificando a atual
- ObterUsuarioService: Obtém usuário por ID
- ListarUsuariosService: Lista usuários, opcionalmente por perfil
"""

from typing import List, Optional

from src.core.shared.exceptions import DuplicateLoginError, EntityNotFoundError
from src.core.shared.interfaces import UnitOfWork

from .dtos import CadastrarUsuarioInputDTO, TrocarSenhaInputDTO, UsuarioOutputDTO
from .entities import Perfil, UsuarioEntity
from .events import SenhaAlteradaEvent, UsuarioCadastradoEvent
from .ports import UsuarioRepository


def obter_usuario_ou_erro(repo: UsuarioRepository, usuario_id: str) -> UsuarioEntity:
    """
    Busca usuário por ID.

    Raises:
        EntityNotFoundError: Se usuário não existe
    """
    usuario = repo.get_by_id(usuario_id)
    if not usuario:
        raise EntityNotFoundError(
            f"Usuário {usuario_id} não encontrado",
            entity_type="Usuario",
            entity_id=usuario_id,
        )
    return usuario


class CadastrarUsuarioService:
    """
    Use Case: Cadastrar um novo usuário.

    Fluxo:
    1. Verificar unicidade do login
    2. Criar entidade (valida CPF, e-mail, login e senha)
    3. Persistir via repositório
    4. Disparar evento UsuarioCadastrado
    5. Retornar DTO de saída

    Example:
        service = CadastrarUsuarioService(usuario_repo, uow)
        output = service.execute(CadastrarUsuarioInputDTO(...))
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CadastrarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            DuplicateLoginError: Se login já cadastrado
            ValidationError: Se dados inválidos
        """
        with self.uow:
            login = (input_dto.login or "").strip()
            if login and self.usuario_repo.exists_login(login):
                raise DuplicateLoginError(login)

            usuario = UsuarioEntity.criar(
                nome_completo=input_dto.nome_completo,
                cpf=input_dto.cpf,
                email=input_dto.email,
                cargo=input_dto.cargo,
                login=input_dto.login,
                senha=input_dto.senha,
                perfil=input_dto.perfil,
            )

            self.usuario_repo.save(usuario)

            self.uow.publish_event(
                UsuarioCadastradoEvent(
                    aggregate_id=usuario.id,
                    login=usuario.login,
                    perfil=usuario.perfil.value,
                )
            )

        return UsuarioOutputDTO.from_entity(usuario)


class TrocarSenhaService:
    """Use Case: Trocar a senha de um usuário."""

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: TrocarSenhaInputDTO) -> UsuarioOutputDTO:
        with self.uow:
            usuario = obter_usuario_ou_erro(self.usuario_repo, input_dto.usuario_id)
            usuario.trocar_senha(input_dto.senha_atual, input_dto.nova_senha)
            self.usuario_repo.save(usuario)
            self.uow.publish_event(
                SenhaAlteradaEvent(aggregate_id=usuario.id, login=usuario.login)
            )

        return UsuarioOutputDTO.from_entity(usuario)


class ObterUsuarioService:
    """Use Case: Obter usuário por ID (somente leitura)."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str) -> UsuarioOutputDTO:
        return UsuarioOutputDTO.from_entity(
            obter_usuario_ou_erro(self.usuario_repo, usuario_id)
        )


class ListarUsuariosService:
    """
    Use Case: Listar usuários.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, perfil: Optional[str] = None) -> List[UsuarioOutputDTO]:
        """
        Args:
            perfil: Filtrar por perfil (aceita sinônimos)

        Raises:
            InvalidFormatError: Se perfil não reconhecido
        """
        if perfil:
            usuarios = self.usuario_repo.list_by_perfil(Perfil.from_string(perfil))
        else:
            usuarios = self.usuario_repo.list_all()

        return [UsuarioOutputDTO.from_entity(u) for u in usuarios]
