# caminho: storefront_app/interfaces/api/errors.py
# Funções:
# - http_exception_handler(): detail={'code': ...} -> {"error": mensagem traduzida}
# - validation_exception_handler(): corpo inválido -> 400 {"error", "details"}
# - unhandled_exception_handler(): 500 com mensagem fixa (detalhe só no log)
# - register_exception_handlers(): registra os handlers na aplicação

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront_app.shared.i18n import get_translator, normalize_locale
from storefront_app.shared.logging import log_error, log_warning


def _translator_for(request: Request):
    return get_translator(normalize_locale(request.headers.get('accept-language')))


def _field_path(loc: tuple[Any, ...]) -> str:
    # Remove o prefixo 'body'/'query' do caminho do erro
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return '.'.join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    _ = _translator_for(request)
    detail = exc.detail
    if isinstance(detail, dict) and 'code' in detail:
        context = {key: value for key, value in detail.items() if key != 'code'}
        message = _(detail['code'], **context)
    elif isinstance(detail, str):
        message = detail
    else:
        message = _('INTERNAL_ERROR')

    headers = getattr(exc, 'headers', None)
    return JSONResponse(status_code=exc.status_code, content={'error': message}, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    _ = _translator_for(request)
    details = [
        {'field': _field_path(tuple(error.get('loc', ()))), 'message': error.get('msg', '')}
        for error in exc.errors()
    ]
    log_warning('REQUEST_VALIDATION_FAILED', {'path': request.url.path, 'details': details})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'error': _('VALIDATION_ERROR'), 'details': details},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_error(
        'UNHANDLED_EXCEPTION',
        {'path': request.url.path, 'method': request.method, 'error': repr(exc)},
    )
    _ = _translator_for(request)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'error': _('INTERNAL_ERROR')},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
