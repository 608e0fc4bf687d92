"""
Exceções de Domínio do Gestor de Projetos.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   ├── RequiredFieldError (campo obrigatório ausente)
    │   ├── InvalidFormatError (valor malformado: CPF, e-mail, enum)
    │   ├── InvalidChecksumError (dígito verificador do CPF)
    │   └── InvalidArgumentError (valor fora do intervalo permitido)
    ├── EntityNotFoundError (entidade não existe)
    └── BusinessRuleViolationError (regra de negócio violada)
        ├── InvalidTransitionError (transição de status proibida)
        ├── UseCompletionOperationError (conclusão fora de concluir())
        ├── TaskFinalizedError / ProjectFinalizedError
        └── AlreadyMemberError / DuplicateLoginError
"""

from typing import Any, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            tarefa.concluir(3, date(2025, 1, 9))
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil na camada de interface)."""
        return {
            "error": self.code,
            "message": self.message,
        }


# =============================================================================
# Validação
# =============================================================================

class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if len(login) < 3:
            raise ValidationError("Login deve ter ao menos 3 caracteres", field="login")
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        result["kind"] = self.__class__.__name__
        return result


class RequiredFieldError(ValidationError):
    """Campo obrigatório não informado (nulo ou em branco)."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(
            message or f"Campo obrigatório não informado: {field}",
            field=field,
        )


class InvalidFormatError(ValidationError):
    """Valor com formato inválido (e-mail, CPF, texto de enum)."""


class InvalidChecksumError(ValidationError):
    """Dígitos verificadores do CPF não conferem."""


class InvalidArgumentError(ValidationError):
    """Valor numérico ou data fora do intervalo permitido."""


# =============================================================================
# Busca
# =============================================================================

class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        tarefa = repo.get_by_id(tarefa_id)
        if not tarefa:
            raise EntityNotFoundError(f"Tarefa {tarefa_id} não encontrada")
    """

    def __init__(
        self,
        message: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


# =============================================================================
# Regras de negócio
# =============================================================================

class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.

    Example:
        if tarefa.status.is_finalizada:
            raise BusinessRuleViolationError(
                "Tarefa finalizada não pode ser alterada"
            )
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        result["kind"] = self.__class__.__name__
        return result


class InvalidTransitionError(BusinessRuleViolationError):
    """Transição de status não prevista na tabela de transições."""

    def __init__(self, origem: Any, destino: Any, message: Optional[str] = None):
        self.origem = origem
        self.destino = destino
        super().__init__(
            message or (
                f"Transição de status inválida: "
                f"{_rotulo(origem)} → {_rotulo(destino)}"
            ),
            rule="transicao_status_invalida",
        )


class UseCompletionOperationError(BusinessRuleViolationError):
    """Conclusão solicitada pelo setter genérico de status."""

    def __init__(self, message: str = "Use concluir(horas, data) para encerrar a tarefa"):
        super().__init__(message, rule="conclusao_exige_operacao_dedicada")


class TaskFinalizedError(BusinessRuleViolationError):
    """Alteração em tarefa concluída ou cancelada."""

    def __init__(self, message: str = "Tarefa finalizada não pode ser alterada"):
        super().__init__(message, rule="tarefa_finalizada_imutavel")


class ProjectFinalizedError(BusinessRuleViolationError):
    """Alteração em projeto concluído ou cancelado."""

    def __init__(self, message: str = "Projeto finalizado não pode ser alterado"):
        super().__init__(message, rule="projeto_finalizado_imutavel")


class AlreadyMemberError(BusinessRuleViolationError):
    """Usuário já pertence à equipe."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(
            f"Usuário já é membro da equipe: {login}",
            rule="membro_unico_por_equipe",
        )


class DuplicateLoginError(BusinessRuleViolationError):
    """Login já utilizado por outro usuário."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(
            f"Login já cadastrado: {login}",
            rule="login_unico",
        )


def _rotulo(valor: Any) -> str:
    return getattr(valor, "value", str(valor))
