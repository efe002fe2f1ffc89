# caminho: storefront_app/shared/errors.py
# Funções:
# - AppError: HTTPException com detail={'code': ...} traduzido na borda da API
# - ValidationError, NotFoundError, ResourceNotFoundError, ExpiredError,
#   AuthError, ForbiddenError, ConflictError, DeliveryError

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import HTTPException


class AppError(HTTPException):
    """Erro de aplicação; `code` é a chave do catálogo de mensagens (i18n)."""

    http_status: HTTPStatus = HTTPStatus.BAD_REQUEST

    def __init__(self, code: str, **context: Any) -> None:
        super().__init__(status_code=self.http_status, detail={'code': code, **context})
        self.code = code


class ValidationError(AppError):
    http_status = HTTPStatus.BAD_REQUEST


class NotFoundError(AppError):
    # Recuperação: "não existe" responde 400, igual a entrada inválida
    http_status = HTTPStatus.BAD_REQUEST


class ResourceNotFoundError(NotFoundError):
    http_status = HTTPStatus.NOT_FOUND


class ExpiredError(AppError):
    http_status = HTTPStatus.BAD_REQUEST


class AuthError(AppError):
    http_status = HTTPStatus.UNAUTHORIZED


class ForbiddenError(AppError):
    http_status = HTTPStatus.FORBIDDEN


class ConflictError(AppError):
    http_status = HTTPStatus.CONFLICT


class DeliveryError(AppError):
    http_status = HTTPStatus.BAD_GATEWAY
