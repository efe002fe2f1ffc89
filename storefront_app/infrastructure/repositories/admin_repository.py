# caminho: storefront_app/infrastructure/repositories/admin_repository.py
# Funções:
# - AdminRepositoryImpl: implementação SQLAlchemy do protocolo AdminRepository (Credential Store)

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_app.domain.admins.entities import Admin
from storefront_app.domain.admins.repositories import AdminRepository
from storefront_app.infrastructure.db.models import AdminUserModel
from storefront_app.infrastructure.db.utils import apply_changes, try_commit

UPDATABLE_FIELDS = frozenset({
    'email',
    'password_hash',
    'role',
    'full_name',
    'document_type',
    'document_number',
    'recovery_email',
    'is_active',
})


def _to_domain_admin(model: AdminUserModel) -> Admin:
    return Admin(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash,
        role=model.role,
        full_name=model.full_name,
        document_type=model.document_type,
        document_number=model.document_number,
        recovery_email=model.recovery_email,
        is_active=model.is_active,
        created_by_id=model.created_by_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class AdminRepositoryImpl(AdminRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, admin: Admin) -> Admin:
        model = AdminUserModel(
            email=admin.email,
            password_hash=admin.password_hash,
            role=admin.role,
            full_name=admin.full_name,
            document_type=admin.document_type,
            document_number=admin.document_number,
            recovery_email=admin.recovery_email,
            is_active=admin.is_active,
            created_by_id=admin.created_by_id,
        )
        self._session.add(model)
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return _to_domain_admin(model)

    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        model = await self._session.get(AdminUserModel, admin_id)
        return _to_domain_admin(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Admin]:
        stmt = select(AdminUserModel).where(func.lower(AdminUserModel.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain_admin(model) if model else None

    async def get_by_recovery_email(self, email: str) -> Optional[Admin]:
        stmt = (
            select(AdminUserModel)
            .where(func.lower(AdminUserModel.recovery_email) == email.strip().lower())
            .order_by(AdminUserModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain_admin(model) if model else None

    async def get_by_document(self, document_number: str) -> Optional[Admin]:
        stmt = select(AdminUserModel).where(AdminUserModel.document_number == document_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain_admin(model) if model else None

    async def list(self) -> Sequence[Admin]:
        stmt = select(AdminUserModel).order_by(AdminUserModel.id)
        result = await self._session.execute(stmt)
        return [_to_domain_admin(model) for model in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(AdminUserModel))
        return int(result.scalar_one())

    async def update(self, admin_id: int, changes: dict[str, Any]) -> Optional[Admin]:
        model = await self._session.get(AdminUserModel, admin_id)
        if model is None:
            return None
        if apply_changes(model, changes, allowed=UPDATABLE_FIELDS):
            await self._session.flush()
            await try_commit(self._session)
            await self._session.refresh(model)
        return _to_domain_admin(model)

    async def update_password(self, admin_id: int, password_hash: str) -> Optional[Admin]:
        model = await self._session.get(AdminUserModel, admin_id)
        if model is None:
            return None
        model.password_hash = password_hash
        await self._session.flush()
        await try_commit(self._session)
        await self._session.refresh(model)
        return _to_domain_admin(model)

    async def remove(self, admin_id: int) -> bool:
        model = await self._session.get(AdminUserModel, admin_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        await try_commit(self._session)
        return True
