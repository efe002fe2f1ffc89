# caminho: storefront_app/interfaces/api/dependencies.py
# Funções:
# - get_user_locale(): idioma do cliente a partir do Accept-Language
# - get_sms_gateway(): gateway HTTP de SMS (sobrescrito nos testes)
# - get_session_store(): session store configurado (memória ou Redis)
# - get_clock(): relógio do fluxo de recuperação (sobrescrito nos testes)
# - get_admin_service(), get_recovery_service(): serviços com adapters concretos
# - get_product_service(), get_it_service_service(), get_food_item_service()
# - get_cart_service(), get_contact_service(), get_cart_id()

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Callable, Optional
from uuid import uuid4

from fastapi import Depends, Header, Request, Response
from pwdlib import PasswordHash

from storefront_app.application.admins.use_cases import AdminAdapters, AdminService
from storefront_app.application.catalog.dto import FoodItemOutput, ITServiceOutput, ProductOutput
from storefront_app.application.catalog.use_cases import CartService, CatalogService, ContactService
from storefront_app.application.recovery.use_cases import PasswordRecoveryService, RecoveryAdapters, utc_now
from storefront_app.config import get_settings
from storefront_app.config.constants import GLOBAL_CART_ID
from storefront_app.domain.admins.repositories import AdminSessionRepository
from storefront_app.infrastructure.cache.redis import get_redis_client
from storefront_app.infrastructure.cache.session_store import RedisSessionStore, memory_session_store
from storefront_app.infrastructure.db.base import get_session
from storefront_app.infrastructure.repositories.admin_repository import AdminRepositoryImpl
from storefront_app.infrastructure.repositories.catalog_repository import (
    CartRepositoryImpl,
    ContactRequestRepositoryImpl,
    FoodItemRepositoryImpl,
    ITServiceRepositoryImpl,
    ProductRepositoryImpl,
)
from storefront_app.infrastructure.repositories.reset_token_repository import ResetTokenRepositoryImpl
from storefront_app.infrastructure.security.jwt import JWTService
from storefront_app.shared.email_notifications import RecoveryEmailNotifier
from storefront_app.shared.i18n import normalize_locale
from storefront_app.shared.sms_notifications import HttpSmsGateway, SmsGateway

password_hasher = PasswordHash.recommended()


# --- Dependências de Contexto da Requisição ---

# Primeiro idioma aceito pelo cliente (ex: 'es-PE,en;q=0.9' -> 'es'); padrão 'en'
def get_user_locale(accept_language: Annotated[str | None, Header()] = None) -> str:
    return normalize_locale(accept_language)


UserLocale = Annotated[str, Depends(get_user_locale)]


def get_clock() -> Callable[[], datetime]:
    return utc_now


def get_jwt_service() -> JWTService:
    settings = get_settings()
    return JWTService(settings.SECRET_KEY, settings.SECRET_ALGORITHM)


def get_sms_gateway() -> SmsGateway:
    return HttpSmsGateway(get_settings())


async def get_session_store(redis_client=Depends(get_redis_client)) -> AdminSessionRepository:
    if redis_client is None:
        return memory_session_store
    return RedisSessionStore(redis_client)


def get_cart_id(request: Request, response: Response) -> str:
    """Carrinho global (padrão) ou anônimo por navegador via cookie."""
    settings = get_settings()
    if settings.CART_SCOPE == 'global':
        return GLOBAL_CART_ID

    cart_id: Optional[str] = request.cookies.get(settings.CART_COOKIE_NAME)
    if not cart_id:
        cart_id = uuid4().hex
        response.set_cookie(
            settings.CART_COOKIE_NAME,
            cart_id,
            httponly=True,
            samesite='lax',
            secure=settings.SESSION_COOKIE_SECURE,
        )
    return cart_id


# --- Serviços ---

async def get_admin_service(
    session=Depends(get_session),
    session_store: AdminSessionRepository = Depends(get_session_store),
) -> AdminService:
    settings = get_settings()
    adapters = AdminAdapters(
        admins=AdminRepositoryImpl(session),
        sessions=session_store,
    )
    return AdminService(
        adapters=adapters,
        settings=settings,
        password_hasher=password_hasher,
        jwt_service=get_jwt_service(),
    )


async def get_recovery_service(
    session=Depends(get_session),
    clock: Callable[[], datetime] = Depends(get_clock),
    sms_gateway: SmsGateway = Depends(get_sms_gateway),
) -> PasswordRecoveryService:
    settings = get_settings()
    adapters = RecoveryAdapters(
        admins=AdminRepositoryImpl(session),
        tokens=ResetTokenRepositoryImpl(session),
    )
    return PasswordRecoveryService(
        adapters=adapters,
        settings=settings,
        password_hasher=password_hasher,
        sms_gateway=sms_gateway,
        email_sender=RecoveryEmailNotifier(settings),
        clock=clock,
    )


async def get_product_service(session=Depends(get_session)) -> CatalogService[ProductOutput]:
    return CatalogService(
        ProductRepositoryImpl(session),
        ProductOutput,
        entity='PRODUCT',
        not_found_code='PRODUCT_NOT_FOUND',
    )


async def get_it_service_service(session=Depends(get_session)) -> CatalogService[ITServiceOutput]:
    return CatalogService(
        ITServiceRepositoryImpl(session),
        ITServiceOutput,
        entity='IT_SERVICE',
        not_found_code='IT_SERVICE_NOT_FOUND',
    )


async def get_food_item_service(session=Depends(get_session)) -> CatalogService[FoodItemOutput]:
    return CatalogService(
        FoodItemRepositoryImpl(session),
        FoodItemOutput,
        entity='FOOD_ITEM',
        not_found_code='FOOD_ITEM_NOT_FOUND',
    )


async def get_cart_service(session=Depends(get_session)) -> CartService:
    return CartService(CartRepositoryImpl(session))


async def get_contact_service(session=Depends(get_session)) -> ContactService:
    return ContactService(ContactRequestRepositoryImpl(session))
