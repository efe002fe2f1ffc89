# caminho: storefront_app/infrastructure/db/utils.py
# Funções:
# - try_commit(): commit com rollback seguro
# - apply_changes(): aplica ao modelo apenas os campos presentes (merge parcial)

from __future__ import annotations

from typing import Any

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession


async def try_commit(session: AsyncSession) -> None:
    try:
        await session.commit()
    except (DBAPIError, SQLAlchemyError):
        await session.rollback()
        raise


def apply_changes(model: Any, changes: dict[str, Any], *, allowed: frozenset[str] | None = None) -> list[str]:
    """Copia para o modelo os valores de `changes`, ignorando None e campos fora de `allowed`.

    Retorna os nomes dos campos efetivamente alterados.
    """
    applied: list[str] = []
    for name, value in changes.items():
        if value is None:
            continue
        if allowed is not None and name not in allowed:
            continue
        if not hasattr(model, name):
            continue
        setattr(model, name, value)
        applied.append(name)
    return applied
