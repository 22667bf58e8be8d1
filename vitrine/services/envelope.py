"""Envelope uniforme de resposta e classificação de erros da API.

Toda rota responde ``{"success": true, "data": ...}`` em caso de sucesso e
``{"success": false, "error": "..."}`` em caso de falha. As rotas não tratam
erros de domínio: os tratadores registrados por
:func:`configure_error_handlers` classificam a exceção e montam o envelope.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitrine.domain.errors import ApiError

STALE_WHILE_REVALIDATE_FRACTION = 0.1
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_log = logging.getLogger("vitrine.envelope")


def cache_control(ttl_seconds: int) -> str:
    """Monta o ``Cache-Control`` público a partir do TTL da rota."""

    stale = math.floor(ttl_seconds * STALE_WHILE_REVALIDATE_FRACTION)
    return (
        f"public, max-age={ttl_seconds}, s-maxage={ttl_seconds}, "
        f"stale-while-revalidate={stale}"
    )


def respond(
    data: Any,
    *,
    cache_ttl: int = 0,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Envolve ``data`` no envelope de sucesso aplicando cabeçalhos de cache."""

    response_headers = dict(headers or {})
    if cache_ttl > 0:
        response_headers["Cache-Control"] = cache_control(cache_ttl)
    return JSONResponse(
        {"success": True, "data": jsonable_encoder(data, by_alias=True)},
        status_code=status_code,
        headers=response_headers,
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def configure_error_handlers(app: FastAPI) -> None:
    """Registra os tratadores que convertem exceções no envelope de erro."""

    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            _log.error("[API Error] %s %s: %s", request.method, request.url.path, exc.message)
        else:
            _log.info("[API Error] %s %s: %s", request.method, request.url.path, exc.message)
        return error_response(exc.message, exc.status_code)

    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        )
        _log.info("[API Error] %s %s: %s", request.method, request.url.path, details)
        return error_response(details or "Bad request", 400)

    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(str(exc.detail), exc.status_code)

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        _log.exception("[API Error] %s %s", request.method, request.url.path)
        return error_response(UNEXPECTED_ERROR_MESSAGE, 500)

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)


def configure_cors(app: FastAPI, origins: tuple[str, ...] = ("*",)) -> None:
    """Aplica a configuração de CORS utilizada pelos serviços."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


__all__ = [
    "cache_control",
    "configure_cors",
    "configure_error_handlers",
    "error_response",
    "respond",
]
