"""
Testes Unitários para Use Cases do Contexto de Equipes.

Coverage:
- CriarEquipeService
- AdicionarMembroService
- RemoverMembroService
"""

import pytest

from src.core.equipes.dtos import AdicionarMembroInputDTO, CriarEquipeInputDTO
from src.core.equipes.events import (
    EquipeCriadaEvent,
    MembroAdicionadoEvent,
    MembroRemovidoEvent,
)
from src.core.equipes.use_cases import (
    AdicionarMembroService,
    CriarEquipeService,
    RemoverMembroService,
)
from src.core.shared.exceptions import AlreadyMemberError, EntityNotFoundError


@pytest.fixture
def equipe_output(equipe_repo, uow):
    return CriarEquipeService(equipe_repo, uow).execute(
        CriarEquipeInputDTO(nome="Plataforma", descricao="Backend")
    )


class TestCriarEquipeService:
    def test_criar_equipe(self, equipe_repo, uow, equipe_output):
        assert equipe_output.nome == "Plataforma"
        assert equipe_output.membros == []
        assert equipe_repo.get_by_id(equipe_output.id) is not None
        assert isinstance(uow.collect_events()[0], EquipeCriadaEvent)


class TestAdicionarMembroService:
    """Testes para AdicionarMembroService."""

    def test_adicionar_membro_com_papel(
        self, equipe_repo, usuario_repo, uow, equipe_output, colaborador
    ):
        usuario_repo.save(colaborador)
        service = AdicionarMembroService(equipe_repo, usuario_repo, uow)

        output = service.execute(
            AdicionarMembroInputDTO(equipe_output.id, colaborador.id, "tester")
        )

        assert output.membros == ["bruno"]
        assert output.papeis == {"bruno": "Analista de Qualidade (QA)"}

        evento = uow.collect_events()[-1]
        assert isinstance(evento, MembroAdicionadoEvent)
        assert evento.usuario_id == colaborador.id
        assert evento.papel == "Analista de Qualidade (QA)"

    def test_membro_duplicado(
        self, equipe_repo, usuario_repo, uow, equipe_output, colaborador
    ):
        usuario_repo.save(colaborador)
        service = AdicionarMembroService(equipe_repo, usuario_repo, uow)
        service.execute(AdicionarMembroInputDTO(equipe_output.id, colaborador.id))

        with pytest.raises(AlreadyMemberError):
            service.execute(AdicionarMembroInputDTO(equipe_output.id, colaborador.id))

        assert uow.rolled_back

    def test_usuario_inexistente(self, equipe_repo, usuario_repo, uow, equipe_output):
        service = AdicionarMembroService(equipe_repo, usuario_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(AdicionarMembroInputDTO(equipe_output.id, "fantasma"))

        assert exc_info.value.entity_id == "fantasma"

    def test_equipe_inexistente(self, equipe_repo, usuario_repo, uow, colaborador):
        usuario_repo.save(colaborador)
        service = AdicionarMembroService(equipe_repo, usuario_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(AdicionarMembroInputDTO("sem-equipe", colaborador.id))

        assert exc_info.value.entity_type == "Equipe"


class TestRemoverMembroService:
    def test_remover_membro(
        self, equipe_repo, usuario_repo, uow, equipe_output, colaborador
    ):
        usuario_repo.save(colaborador)
        AdicionarMembroService(equipe_repo, usuario_repo, uow).execute(
            AdicionarMembroInputDTO(equipe_output.id, colaborador.id)
        )

        output = RemoverMembroService(equipe_repo, uow).execute(
            equipe_output.id, colaborador.id
        )

        assert output.membros == []
        assert isinstance(uow.collect_events()[-1], MembroRemovidoEvent)

    def test_remover_nao_membro_sem_evento(self, equipe_repo, uow, equipe_output):
        """Remover quem não é membro não deve gerar evento."""
        eventos_antes = len(uow.collect_events())

        RemoverMembroService(equipe_repo, uow).execute(equipe_output.id, "outro-id")

        assert len(uow.collect_events()) == eventos_antes
