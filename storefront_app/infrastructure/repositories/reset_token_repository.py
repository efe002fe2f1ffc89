# caminho: storefront_app/infrastructure/repositories/reset_token_repository.py
# Funções:
# - ResetTokenRepositoryImpl: ledger de códigos de recuperação em password_reset_tokens
#   (invalidate() remove um código cuja entrega falhou)

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_app.domain.recovery.entities import ResetToken
from storefront_app.domain.recovery.repositories import ResetTokenRepository
from storefront_app.infrastructure.db.models import PasswordResetTokenModel
from storefront_app.infrastructure.db.utils import try_commit


def _to_domain_token(model: PasswordResetTokenModel) -> ResetToken:
    return ResetToken(
        id=model.id,
        admin_id=model.admin_id,
        code=model.code,
        phone=model.phone,
        email=model.email,
        expires_at=model.expires_at,
        used=model.used,
        created_at=model.created_at,
    )


class ResetTokenRepositoryImpl(ResetTokenRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, token: ResetToken) -> ResetToken:
        model = PasswordResetTokenModel(
            admin_id=token.admin_id,
            code=token.code,
            phone=token.phone,
            email=token.email,
            expires_at=token.expires_at,
            used=False,
        )
        self._session.add(model)
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return _to_domain_token(model)

    async def get_unused_by_code(self, code: str) -> Optional[ResetToken]:
        stmt = select(PasswordResetTokenModel).where(
            PasswordResetTokenModel.code == code,
            PasswordResetTokenModel.used.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain_token(model) if model else None

    async def mark_used(self, token_id: int) -> bool:
        # Check-and-set atômico: só uma redenção concorrente afeta a linha
        stmt = (
            update(PasswordResetTokenModel)
            .where(
                PasswordResetTokenModel.id == token_id,
                PasswordResetTokenModel.used.is_(False),
            )
            .values(used=True)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await try_commit(self._session)
        return result.rowcount == 1

    async def invalidate(self, token_id: int) -> None:
        stmt = (
            delete(PasswordResetTokenModel)
            .where(PasswordResetTokenModel.id == token_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        await try_commit(self._session)

    async def purge_expired(self, now: datetime) -> int:
        stmt = (
            delete(PasswordResetTokenModel)
            .where(PasswordResetTokenModel.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await try_commit(self._session)
        return result.rowcount or 0
