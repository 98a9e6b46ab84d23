from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class UnauthorizedError(DomainError):
    """Operacao restrita a administradores."""


class UserNotFoundError(DomainError):
    """Usuario alvo nao existe."""


class LimitExceededError(DomainError):
    """Limite de links do plano gratuito atingido."""


class InvalidAmountError(DomainError):
    """Valor invalido para geracao de codigo PIX."""


class InvalidGrantDurationError(DomainError):
    """Duracao de concessao de plano invalida."""


class FeatureAccessDeniedError(DomainError):
    """Recurso disponivel apenas para planos pagos."""


class InvalidAppearanceOptionError(DomainError):
    """Tema, fundo, layout ou tamanho de botao desconhecido."""


class ProfileNotFoundError(DomainError):
    """Pagina de perfil nao encontrada."""


class LinkNotFoundError(DomainError):
    """Link nao existe ou nao pertence ao perfil."""


class EmailAlreadyExistsError(DomainError):
    """Email ja cadastrado."""


class UsernameAlreadyExistsError(DomainError):
    """Username ja cadastrado."""


class InvalidCredentialsError(DomainError):
    """Email ou senha invalidos."""


class PricingError(DomainError):
    """Plano ou duracao sem preco configurado."""
