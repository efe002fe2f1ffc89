# caminho: storefront_app/infrastructure/db/base.py
# Funções:
# - create_async_engine_settings(): configura engine async do SQLAlchemy
# - init_models(): cria (e opcionalmente recria) as tabelas no startup
# - get_session(): fornece AsyncSession via FastAPI Depends

from __future__ import annotations

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import registry
from sqlalchemy.pool import NullPool

from storefront_app.config import get_settings

mapper_registry = registry()
Base = mapper_registry.generate_base()


def create_async_engine_settings():
    settings = get_settings()

    if settings.IS_SQLITE:
        # SQLite (testes/dev local): uma conexão por sessão, sem pool
        return create_async_engine(settings.DATABASE_URL, poolclass=NullPool)

    connect_args = {
        # Timeout de conexão/comando repassado ao asyncpg
        "timeout": 60,
    }

    engine = create_async_engine(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT_S,
        # Verifica a conexão antes de usar, forçando a reabertura se cair
        pool_pre_ping=True,
        pool_recycle=1800,
        connect_args=connect_args,
    )
    return engine


engine = create_async_engine_settings()
SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(reset: bool = False) -> None:
    # Importa os modelos para registrá-los no metadata
    from storefront_app.infrastructure.db import models  # noqa: F401

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = SessionLocal()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
