# caminho: storefront_app/application/admins/use_cases.py
# Funções:
# - Casos de uso de administradores: login/logout (sessão), usuário atual,
#   listar, criar, atualizar (merge parcial) e remover contas

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from storefront_app.application.admins.dto import (
    AdminCreateInput,
    AdminOutput,
    AdminUpdateInput,
    AuthUserOutput,
)
from storefront_app.config.constants import DNI_LENGTH
from storefront_app.config.settings import Settings
from storefront_app.domain.admins.entities import Admin, AdminSession
from storefront_app.domain.admins.repositories import AdminRepository, AdminSessionRepository
from storefront_app.infrastructure.security.jwt import JWTService
from storefront_app.shared.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    ResourceNotFoundError,
    ValidationError,
)
from storefront_app.shared.logging import log_info, log_warning


@dataclass(slots=True)
class AdminAdapters:
    admins: AdminRepository
    sessions: AdminSessionRepository


@dataclass(slots=True)
class IssuedSession:
    token: str
    session: AdminSession
    max_age: int


class AdminService:
    def __init__(
        self,
        adapters: AdminAdapters,
        settings: Settings,
        password_hasher: PasswordHash,
        jwt_service: JWTService,
    ) -> None:
        self._admins = adapters.admins
        self._sessions = adapters.sessions
        self._settings = settings
        self._hasher = password_hasher
        self._jwt = jwt_service

    # -- Sessão -----------------------------------------------------------------

    async def login(self, email: str, password: str) -> IssuedSession:
        email_normalized = email.strip().lower()
        admin = await self._admins.get_by_email(email_normalized)

        if admin is None or not admin.is_active or not self._verify_password(password, admin.password_hash):
            log_warning('ADMIN_INVALID_CREDENTIALS', {'email': email_normalized})
            raise AuthError('INVALID_CREDENTIALS')

        ttl = self._settings.SESSION_TTL_SECONDS
        session = AdminSession(
            session_id=str(uuid4()),
            admin_id=admin.id,
            email=admin.email,
            role=admin.role,
            full_name=admin.full_name,
            created_at=datetime.now(timezone.utc),
        )
        await self._sessions.create(session, ttl)
        token = self._jwt.create_session_token(session.session_id, expires_seconds=ttl)
        log_info('ADMIN_LOGIN', {'admin_id': admin.id, 'session_id': session.session_id})
        return IssuedSession(token=token, session=session, max_age=ttl)

    async def logout(self, session_id: str | None) -> None:
        if not session_id:
            return
        await self._sessions.destroy(session_id)
        log_info('ADMIN_LOGOUT', {'session_id': session_id})

    @staticmethod
    def to_auth_user(session: AdminSession) -> AuthUserOutput:
        return AuthUserOutput(
            id=session.admin_id,
            email=session.email,
            role=session.role,
            full_name=session.full_name,
        )

    # -- Gestão de contas -----------------------------------------------------

    async def list_admins(self) -> Sequence[AdminOutput]:
        admins = await self._admins.list()
        return [self._to_output(admin) for admin in admins]

    async def create_admin(self, payload: AdminCreateInput, acting_admin_id: int | None = None) -> AdminOutput:
        self._ensure_document_shape(payload.document_type, payload.document_number)
        await self._ensure_unique(payload.email, payload.document_number)

        admin = Admin(
            email=payload.email.lower(),
            password_hash=self._hasher.hash(payload.password),
            role=payload.role,
            full_name=payload.full_name,
            document_type=payload.document_type,
            document_number=payload.document_number,
            recovery_email=payload.recovery_email.lower() if payload.recovery_email else None,
            created_by_id=acting_admin_id,
        )
        admin = await self._admins.add(admin)
        log_info('ADMIN_CREATED', {'admin_id': admin.id, 'acting_admin_id': acting_admin_id})
        return self._to_output(admin)

    async def update_admin(self, admin_id: int, payload: AdminUpdateInput, acting_admin_id: int) -> AdminOutput:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError('UPDATE_PAYLOAD_EMPTY')

        current = await self._require_admin(admin_id)

        if 'email' in changes:
            changes['email'] = changes['email'].lower()
            if changes['email'] != current.email:
                await self._ensure_unique(changes['email'], None)
        if 'recovery_email' in changes:
            changes['recovery_email'] = changes['recovery_email'].lower()
        if 'document_number' in changes and changes['document_number'] != current.document_number:
            await self._ensure_unique(None, changes['document_number'])
        if 'document_type' in changes or 'document_number' in changes:
            self._ensure_document_shape(
                changes.get('document_type', current.document_type),
                changes.get('document_number', current.document_number),
            )
        if 'password' in changes:
            changes['password_hash'] = self._hasher.hash(changes.pop('password'))

        admin = await self._admins.update(admin_id, changes)
        if admin is None:
            raise ResourceNotFoundError('ADMIN_NOT_FOUND')
        log_info('ADMIN_UPDATED', {'admin_id': admin_id, 'acting_admin_id': acting_admin_id, 'fields': sorted(changes)})
        return self._to_output(admin)

    async def delete_admin(self, admin_id: int, acting_admin_id: int) -> None:
        if admin_id == acting_admin_id:
            raise ForbiddenError('ADMIN_SELF_DELETE_FORBIDDEN')

        deleted = await self._admins.remove(admin_id)
        if not deleted:
            raise ResourceNotFoundError('ADMIN_NOT_FOUND')
        log_info('ADMIN_DELETED', {'admin_id': admin_id, 'acting_admin_id': acting_admin_id})

    # -- Helpers ----------------------------------------------------------------

    def _verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password, password_hash)
        except UnknownHashError:
            return False

    async def _require_admin(self, admin_id: int) -> Admin:
        admin = await self._admins.get_by_id(admin_id)
        if admin is None:
            raise ResourceNotFoundError('ADMIN_NOT_FOUND')
        return admin

    @staticmethod
    def _ensure_document_shape(document_type: str | None, document_number: str | None) -> None:
        if document_type == 'DNI' and document_number is not None and len(document_number) != DNI_LENGTH:
            raise ValidationError('ADMIN_DNI_LENGTH')

    async def _ensure_unique(self, email: str | None, document_number: str | None) -> None:
        if email and await self._admins.get_by_email(email) is not None:
            log_warning('ADMIN_ALREADY_EXISTS', {'email': email})
            raise ConflictError('ADMIN_EMAIL_EXISTS')

        if document_number and await self._admins.get_by_document(document_number) is not None:
            log_warning('ADMIN_ALREADY_EXISTS', {'document_number': document_number})
            raise ConflictError('ADMIN_DOCUMENT_EXISTS')

    @staticmethod
    def _to_output(admin: Admin) -> AdminOutput:
        return AdminOutput.model_validate(admin)
