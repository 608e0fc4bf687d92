"""
Testes Unitários para Use Cases do Contexto de Usuários.

Coverage:
- CadastrarUsuarioService
- TrocarSenhaService
- ObterUsuarioService
- ListarUsuariosService
"""

import pytest

from src.core.shared.exceptions import (
    DuplicateLoginError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.usuarios.dtos import CadastrarUsuarioInputDTO, TrocarSenhaInputDTO
from src.core.usuarios.events import SenhaAlteradaEvent, UsuarioCadastradoEvent
from src.core.usuarios.use_cases import (
    CadastrarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    TrocarSenhaService,
)


def _input(**sobrescritos):
    dados = dict(
        nome_completo="Ana Souza",
        cpf="529.982.247-25",
        email="ana@empresa.com",
        cargo="Gerente",
        login="ana",
        senha="segredo123",
        perfil="gerente",
    )
    dados.update(sobrescritos)
    return CadastrarUsuarioInputDTO(**dados)


class TestCadastrarUsuarioService:
    """Testes para CadastrarUsuarioService."""

    def test_cadastrar_usuario(self, usuario_repo, uow):
        """Deve persistir, publicar evento e devolver dados públicos."""
        service = CadastrarUsuarioService(usuario_repo, uow)

        output = service.execute(_input())

        assert output.login == "ana"
        assert output.perfil == "Gerente"
        assert output.cpf_mascarado == "***.***.***-25"
        assert usuario_repo.get_by_id(output.id) is not None
        assert uow.committed

        eventos = uow.collect_events()
        assert len(eventos) == 1
        assert isinstance(eventos[0], UsuarioCadastradoEvent)
        assert eventos[0].login == "ana"

    def test_login_duplicado(self, usuario_repo, uow):
        """Login já usado (sem diferenciar caixa) deve ser rejeitado."""
        service = CadastrarUsuarioService(usuario_repo, uow)
        service.execute(_input())

        with pytest.raises(DuplicateLoginError) as exc_info:
            service.execute(_input(login=" ANA ", cpf="111.444.777-35"))

        assert exc_info.value.rule == "login_unico"
        assert usuario_repo.count() == 1
        assert uow.rolled_back

    def test_dados_invalidos_nao_persistem(self, usuario_repo, uow):
        service = CadastrarUsuarioService(usuario_repo, uow)

        with pytest.raises(InvalidArgumentError):
            service.execute(_input(senha="123"))

        assert usuario_repo.count() == 0
        assert uow.collect_events() == []

    def test_output_to_dict_sem_senha(self, usuario_repo, uow):
        output = CadastrarUsuarioService(usuario_repo, uow).execute(_input())

        dados = output.to_dict()

        assert "senha" not in dados
        assert "senha_hash" not in dados
        assert dados["email"] == "ana@empresa.com"


class TestTrocarSenhaService:
    def test_trocar_senha(self, usuario_repo, uow, colaborador):
        usuario_repo.save(colaborador)
        service = TrocarSenhaService(usuario_repo, uow)

        service.execute(TrocarSenhaInputDTO(colaborador.id, "senha456", "nova-senha"))

        assert colaborador.verificar_senha("nova-senha")
        assert isinstance(uow.collect_events()[0], SenhaAlteradaEvent)

    def test_usuario_inexistente(self, usuario_repo, uow):
        service = TrocarSenhaService(usuario_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(TrocarSenhaInputDTO("nao-existe", "a", "b"))

        assert exc_info.value.entity_type == "Usuario"


class TestConsultasUsuario:
    """Testes para ObterUsuarioService e ListarUsuariosService."""

    def test_obter_usuario(self, usuario_repo, gerente):
        usuario_repo.save(gerente)

        output = ObterUsuarioService(usuario_repo).execute(gerente.id)

        assert output.login == "ana"

    def test_listar_por_perfil(self, usuario_repo, gerente, colaborador, admin):
        """Deve filtrar por perfil aceitando sinônimos."""
        for usuario in (gerente, colaborador, admin):
            usuario_repo.save(usuario)
        service = ListarUsuariosService(usuario_repo)

        assert len(service.execute()) == 3
        assert [u.login for u in service.execute("manager")] == ["ana"]
        assert [u.login for u in service.execute("adm")] == ["carla"]
