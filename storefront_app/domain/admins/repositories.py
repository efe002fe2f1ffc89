# caminho: storefront_app/domain/admins/repositories.py
# Funções:
# - AdminRepository: porta de persistência das contas administrativas
# - AdminSessionRepository: porta do session store (create/read/destroy)

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from storefront_app.domain.admins.entities import Admin, AdminSession


class AdminRepository(Protocol):
    async def add(self, admin: Admin) -> Admin: ...
    async def get_by_id(self, admin_id: int) -> Optional[Admin]: ...
    async def get_by_email(self, email: str) -> Optional[Admin]: ...
    async def get_by_recovery_email(self, email: str) -> Optional[Admin]: ...
    async def get_by_document(self, document_number: str) -> Optional[Admin]: ...
    async def list(self) -> Sequence[Admin]: ...
    async def count(self) -> int: ...
    async def update(self, admin_id: int, changes: dict[str, Any]) -> Optional[Admin]: ...
    async def update_password(self, admin_id: int, password_hash: str) -> Optional[Admin]: ...
    async def remove(self, admin_id: int) -> bool: ...


class AdminSessionRepository(Protocol):
    async def create(self, session: AdminSession, ttl_seconds: int) -> AdminSession: ...
    async def get(self, session_id: str) -> Optional[AdminSession]: ...
    async def destroy(self, session_id: str) -> None: ...
