# caminho: storefront_app/interfaces/api/app.py
# Funções:
# - lifespan(): cria tabelas, garante o super_admin e os dados de exemplo no startup
# - create_application(): configura FastAPI com handlers de erro e rotas

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront_app.config import get_settings
from storefront_app.infrastructure.db.base import init_models
from storefront_app.interfaces.api.errors import register_exception_handlers
from storefront_app.interfaces.api.routers import admins, auth, cart, catalog, contact, password_reset
from storefront_app.shared.logging import log_info, log_warning, setup_logging
from storefront_app.shared.system_bootstrap import bootstrap_root_admin, seed_sample_data


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    if settings.DB_AUTO_CREATE:
        await init_models(reset=settings.DB_RESET_ON_STARTUP)
        log_info('DB_MODELS_READY', {'reset': settings.DB_RESET_ON_STARTUP})

    await bootstrap_root_admin()
    if settings.SEED_SAMPLE_DATA:
        await seed_sample_data()

    yield

    # Shutdown
    log_warning('APP_SHUTDOWN', {'reason': 'lifespan'})


def create_application() -> FastAPI:
    settings = get_settings()
    setup_logging(level=settings.LOG_LEVEL)

    app = FastAPI(
        title='storefront-app',
        version='0.1.0',
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(admins.router)
    app.include_router(password_reset.router)
    app.include_router(catalog.router)
    app.include_router(cart.router)
    app.include_router(contact.router)

    return app
