# caminho: storefront_app/interfaces/api/routers/auth.py
# Funções:
# - Endpoints de autenticação do painel (login, logout, usuário atual)

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from storefront_app.application.admins.dto import AuthUserOutput, LoginRequest, LoginResponse
from storefront_app.application.admins.use_cases import AdminService
from storefront_app.config import get_settings
from storefront_app.infrastructure.security.jwt import JWTService
from storefront_app.interfaces.api.dependencies import UserLocale, get_admin_service, get_jwt_service
from storefront_app.shared.auth_dependencies import read_session_id, require_session
from storefront_app.shared.i18n import get_translator
from storefront_app.shared.schemas import MessageResponse

router = APIRouter(prefix='/api', tags=['auth'])


@router.post(
    '/login',
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary='Iniciar sessão',
    description="""Autentica `email`/`password` contra o hash armazenado e abre uma sessão.

A sessão fica no session store configurado (`SESSION_BACKEND`) e o navegador recebe
um cookie HttpOnly assinado (`SESSION_COOKIE_NAME`) válido por `SESSION_TTL_SECONDS`.

**Proteções**:
- Credenciais inválidas ou conta inativa respondem 401 com a mesma mensagem.
""",
)
async def login(
    payload: LoginRequest,
    response: Response,
    locale: UserLocale,
    service: AdminService = Depends(get_admin_service),
) -> LoginResponse:
    settings = get_settings()
    issued = await service.login(payload.email, payload.password)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        issued.token,
        max_age=issued.max_age,
        httponly=True,
        samesite='lax',
        secure=settings.SESSION_COOKIE_SECURE,
    )
    _ = get_translator(locale)
    return LoginResponse(message=_('LOGIN_SUCCESSFUL'), user=service.to_auth_user(issued.session))


@router.post(
    '/logout',
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary='Encerrar sessão',
    description='Remove a sessão do session store e apaga o cookie. Sem sessão ativa, apenas responde.',
)
async def logout(
    request: Request,
    response: Response,
    locale: UserLocale,
    jwt_service: JWTService = Depends(get_jwt_service),
    service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    settings = get_settings()
    await service.logout(read_session_id(request, jwt_service))
    response.delete_cookie(settings.SESSION_COOKIE_NAME, httponly=True, samesite='lax', secure=settings.SESSION_COOKIE_SECURE)
    _ = get_translator(locale)
    return MessageResponse(message=_('LOGGED_OUT'))


@router.get(
    '/auth/user',
    response_model=AuthUserOutput,
    summary='Usuário autenticado',
    description="""Retorna `id`, `email`, `role` e `fullName` da sessão atual.

**Proteções**:
- Exige cookie de sessão válido (401 caso contrário).
""",
)
async def current_user(session=Depends(require_session)) -> AuthUserOutput:
    return AdminService.to_auth_user(session)
