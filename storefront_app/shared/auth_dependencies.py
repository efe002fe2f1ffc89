# caminho: storefront_app/shared/auth_dependencies.py
# Funções:
# - require_session(): valida o cookie de sessão e confere a conta no banco
#   (401 se ausente/inválida, conta removida ou desativada)
# - require_roles(): fábrica de dependência que exige um dos papéis informados (403)
# - require_catalog_editor / require_super_admin: atalhos usados pelas rotas

from __future__ import annotations

from dataclasses import replace

from fastapi import Depends, Request
from jwt import InvalidTokenError

from storefront_app.config import get_settings
from storefront_app.domain.admins.entities import AdminSession
from storefront_app.domain.admins.enums import CATALOG_EDITORS, SUPER_ADMIN_ONLY, is_role_allowed
from storefront_app.domain.admins.repositories import AdminSessionRepository
from storefront_app.infrastructure.db.base import get_session
from storefront_app.infrastructure.repositories.admin_repository import AdminRepositoryImpl
from storefront_app.infrastructure.security.jwt import JWTService
from storefront_app.interfaces.api.dependencies import get_jwt_service, get_session_store
from storefront_app.shared.errors import AuthError, ForbiddenError
from storefront_app.shared.logging import log_warning


def read_session_id(request: Request, jwt_service: JWTService) -> str | None:
    """Extrai o sid do cookie assinado; None quando ausente, adulterado ou expirado."""
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        return jwt_service.decode_session_token(token).session_id
    except InvalidTokenError:
        return None


async def require_session(
    request: Request,
    jwt_service: JWTService = Depends(get_jwt_service),
    sessions: AdminSessionRepository = Depends(get_session_store),
    db=Depends(get_session),
) -> AdminSession:
    session_id = read_session_id(request, jwt_service)
    if session_id is None:
        raise AuthError('UNAUTHORIZED')

    session = await sessions.get(session_id)
    if session is None:
        log_warning('SESSION_NOT_FOUND', {'session_id': session_id})
        raise AuthError('UNAUTHORIZED')

    # Conta removida ou desativada derruba a sessão; papel e dados vêm sempre da conta atual
    admin = await AdminRepositoryImpl(db).get_by_id(session.admin_id)
    if admin is None or not admin.is_active:
        log_warning('SESSION_ACCOUNT_UNAVAILABLE', {'session_id': session_id, 'admin_id': session.admin_id})
        await sessions.destroy(session_id)
        raise AuthError('UNAUTHORIZED')

    return replace(session, email=admin.email, role=admin.role, full_name=admin.full_name)


def require_roles(allowed_roles: frozenset[str]):
    async def _dependency(session: AdminSession = Depends(require_session)) -> AdminSession:
        if not is_role_allowed(session.role, allowed_roles):
            log_warning('ROLE_FORBIDDEN', {'admin_id': session.admin_id, 'role': session.role})
            raise ForbiddenError('FORBIDDEN')
        return session

    return _dependency


require_catalog_editor = require_roles(CATALOG_EDITORS)
require_super_admin = require_roles(SUPER_ADMIN_ONLY)
