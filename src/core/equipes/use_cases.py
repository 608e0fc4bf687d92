"""
Use Cases (Application Services) do Contexto de Equipes.

Use Cases implementados:
- CriarEquipeService
- AdicionarMembroService
- RemoverMembroService
"""

from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.ports import UsuarioRepository
from src.core.usuarios.use_cases import obter_usuario_ou_erro

from .dtos import AdicionarMembroInputDTO, CriarEquipeInputDTO, EquipeOutputDTO
from .entities import EquipeEntity
from .events import EquipeCriadaEvent, MembroAdicionadoEvent, MembroRemovidoEvent
from .ports import EquipeRepository


def obter_equipe_ou_erro(repo: EquipeRepository, equipe_id: str) -> EquipeEntity:
    equipe = repo.get_by_id(equipe_id)
    if not equipe:
        raise EntityNotFoundError(
            f"Equipe {equipe_id} não encontrada",
            entity_type="Equipe",
            entity_id=equipe_id,
        )
    return equipe


class CriarEquipeService:
    """Use Case: Criar equipe vazia."""

    def __init__(self, equipe_repo: EquipeRepository, uow: UnitOfWork):
        self.equipe_repo = equipe_repo
        self.uow = uow

    def execute(self, input_dto: CriarEquipeInputDTO) -> EquipeOutputDTO:
        with self.uow:
            equipe = EquipeEntity.criar(input_dto.nome, input_dto.descricao)
            self.equipe_repo.save(equipe)
            self.uow.publish_event(
                EquipeCriadaEvent(aggregate_id=equipe.id, nome=equipe.nome)
            )

        return EquipeOutputDTO.from_entity(equipe)


class AdicionarMembroService:
    """
    Use Case: Adicionar usuário a uma equipe.

    Fluxo:
    1. Buscar equipe e usuário
    2. Adicionar membro (entidade rejeita duplicidade)
    3. Persistir e disparar MembroAdicionado
    """

    def __init__(
        self,
        equipe_repo: EquipeRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.equipe_repo = equipe_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: AdicionarMembroInputDTO) -> EquipeOutputDTO:
        """
        Raises:
            EntityNotFoundError: Equipe ou usuário inexistente
            AlreadyMemberError: Usuário já é membro
        """
        with self.uow:
            equipe = obter_equipe_ou_erro(self.equipe_repo, input_dto.equipe_id)
            usuario = obter_usuario_ou_erro(self.usuario_repo, input_dto.usuario_id)

            equipe.adicionar_membro(usuario, input_dto.papel)
            self.equipe_repo.save(equipe)

            papel = equipe.papel_de(usuario)
            self.uow.publish_event(
                MembroAdicionadoEvent(
                    aggregate_id=equipe.id,
                    usuario_id=usuario.id,
                    papel=papel.value if papel else None,
                )
            )

        return EquipeOutputDTO.from_entity(equipe)


class RemoverMembroService:
    """Use Case: Remover membro. Remoção de não-membro é ignorada sem evento."""

    def __init__(self, equipe_repo: EquipeRepository, uow: UnitOfWork):
        self.equipe_repo = equipe_repo
        self.uow = uow

    def execute(self, equipe_id: str, usuario_id: str) -> EquipeOutputDTO:
        with self.uow:
            equipe = obter_equipe_ou_erro(self.equipe_repo, equipe_id)

            if equipe.remover_membro_por_id(usuario_id):
                self.equipe_repo.save(equipe)
                self.uow.publish_event(
                    MembroRemovidoEvent(aggregate_id=equipe.id, usuario_id=usuario_id)
                )

        return EquipeOutputDTO.from_entity(equipe)
