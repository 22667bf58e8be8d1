"""Taxonomia de erros expostos pela API.

Cada classe carrega o status HTTP usado pelo envelope de resposta; rotas e
serviços apenas lançam, e o tratador registrado na aplicação formata.
"""
from __future__ import annotations


class ApiError(Exception):
    """Erro com status HTTP associado."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Entrada ausente ou malformada enviada pelo cliente."""

    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ApiError):
    """Recurso legitimamente inexistente."""

    status_code = 404
    default_message = "Resource not found"

    @classmethod
    def for_resource(cls, resource: str) -> "NotFoundError":
        return cls(f"{resource} not found")


class UpstreamUnavailable(ApiError):
    """Falha de rede ou da API externa sem dados em cache para servir."""

    status_code = 500
    default_message = "Upstream service unavailable"


def require_slug(value: str | None, label: str) -> str:
    """Valida um slug de rota, rejeitando valores vazios."""

    slug = (value or "").strip()
    if not slug:
        raise ValidationError(f"{label} slug is required")
    return slug


__all__ = [
    "ApiError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "UpstreamUnavailable",
    "ValidationError",
    "require_slug",
]
