# caminho: storefront_app/application/recovery/use_cases.py
# Funções:
# - generate_reset_code(): código numérico uniforme (zeros à esquerda preservados)
# - utc_now(): relógio padrão do fluxo
# - PasswordRecoveryService: verificação de identidade -> emissão do código ->
#   entrega (SMS/e-mail) -> redenção com troca de senha

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from secrets import choice
from string import digits
from typing import Awaitable, Callable, Optional, Protocol, Sequence

from pwdlib import PasswordHash

from storefront_app.application.recovery.dto import (
    RedeemCodeRequest,
    RequestEmailCodeRequest,
    RequestSmsCodeRequest,
)
from storefront_app.application.recovery.gate import VerificationGate
from storefront_app.config.settings import Settings
from storefront_app.domain.admins.entities import Admin
from storefront_app.domain.admins.repositories import AdminRepository
from storefront_app.domain.recovery.entities import ResetToken
from storefront_app.domain.recovery.repositories import ResetTokenRepository
from storefront_app.shared.errors import ConflictError, DeliveryError, ExpiredError, NotFoundError, ValidationError
from storefront_app.shared.logging import log_info, log_warning
from storefront_app.shared.sms_notifications import SmsGateway

# Tentativas de sortear um código que não colida com outro ainda não usado
MAX_CODE_ATTEMPTS = 10


def generate_reset_code(length: int = 6) -> str:
    return ''.join(choice(digits) for _ in range(length))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecoveryEmailSender(Protocol):
    async def send_recovery_code(
        self,
        *,
        admin_name: str,
        recipients: Sequence[str],
        code: str,
        expires_in_minutes: int,
    ) -> bool: ...

    async def send_password_changed(
        self,
        *,
        admin_name: str,
        recipients: Sequence[str],
        changed_at_iso: str,
    ) -> bool: ...


@dataclass(slots=True)
class RecoveryAdapters:
    admins: AdminRepository
    tokens: ResetTokenRepository


@dataclass(slots=True)
class IssuedCode:
    admin_id: int
    channel: str
    code: str
    expires_at: datetime
    delivered: bool


class PasswordRecoveryService:
    def __init__(
        self,
        adapters: RecoveryAdapters,
        settings: Settings,
        password_hasher: PasswordHash,
        sms_gateway: SmsGateway,
        email_sender: RecoveryEmailSender,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._admins = adapters.admins
        self._tokens = adapters.tokens
        self._gate = VerificationGate(adapters.admins)
        self._settings = settings
        self._hasher = password_hasher
        self._sms = sms_gateway
        self._email = email_sender
        self._clock = clock

    # -- Verificação ------------------------------------------------------------

    async def verify_document_simple(self, document_number: str) -> Admin:
        admin = await self._gate.check_document(document_number)
        log_info('RECOVERY_DOCUMENT_VERIFIED', {'admin_id': admin.id})
        return admin

    async def verify_document(self, email: str, document_number: str) -> Admin:
        admin = await self._gate.check_email_and_document(email, document_number)
        log_info('RECOVERY_DOCUMENT_VERIFIED', {'admin_id': admin.id})
        return admin

    # -- Emissão ----------------------------------------------------------------

    async def request_sms_code(self, payload: RequestSmsCodeRequest) -> IssuedCode:
        admin = await self._gate.resolve_account(email=payload.email, document_number=payload.document_number)
        if admin is None:
            log_warning('RECOVERY_SMS_REQUEST_REJECTED', {'email': payload.email})
            raise ValidationError('RECOVERY_REQUEST_INVALID')

        token = await self._issue(admin, phone=payload.phone)
        message = (
            f'{self._settings.PROJECT_NAME}: tu código de recuperación es {token.code}. '
            f'Vence en {self._expires_in_minutes()} minutos.'
        )
        delivered = await self._deliver(
            token,
            admin,
            lambda: self._sms.send(phone=payload.phone, message=message),
        )
        return IssuedCode(admin_id=admin.id, channel='sms', code=token.code, expires_at=token.expires_at, delivered=delivered)

    async def request_email_code(self, payload: RequestEmailCodeRequest) -> IssuedCode:
        destination = payload.email.lower()
        if payload.admin_email or payload.document_number:
            admin = await self._gate.resolve_account(
                admin_email=payload.admin_email,
                document_number=payload.document_number,
            )
        else:
            admin = await self._gate.resolve_account(email=destination)

        # O destino precisa ser um e-mail já cadastrado na conta
        allowed = {value.lower() for value in (admin.email, admin.recovery_email) if value} if admin else set()
        if admin is None or destination not in allowed:
            log_warning('RECOVERY_EMAIL_REQUEST_REJECTED', {'email': destination})
            raise ValidationError('RECOVERY_REQUEST_INVALID')

        token = await self._issue(admin, email=destination)
        delivered = await self._deliver(
            token,
            admin,
            lambda: self._email.send_recovery_code(
                admin_name=admin.full_name,
                recipients=[destination],
                code=token.code,
                expires_in_minutes=self._expires_in_minutes(),
            ),
        )
        return IssuedCode(admin_id=admin.id, channel='email', code=token.code, expires_at=token.expires_at, delivered=delivered)

    # -- Redenção ---------------------------------------------------------------

    async def redeem(self, payload: RedeemCodeRequest) -> Admin:
        code = payload.code.strip()
        if not (code.isdigit() and len(code) == self._settings.PASSWORD_RESET_CODE_LENGTH):
            raise ValidationError('RECOVERY_CODE_INVALID')

        token = await self._tokens.get_unused_by_code(code)
        if token is None:
            log_warning('RECOVERY_CODE_UNKNOWN', {})
            raise NotFoundError('RECOVERY_CODE_INVALID')

        if token.is_expired(self._clock()):
            log_warning('RECOVERY_CODE_EXPIRED', {'token_id': token.id, 'admin_id': token.admin_id})
            raise ExpiredError('RECOVERY_CODE_EXPIRED')

        # Só uma redenção concorrente vence o check-and-set
        if not await self._tokens.mark_used(token.id):
            log_warning('RECOVERY_CODE_ALREADY_USED', {'token_id': token.id})
            raise NotFoundError('RECOVERY_CODE_INVALID')

        admin = await self._admins.update_password(token.admin_id, self._hasher.hash(payload.new_password))
        if admin is None:
            log_warning('RECOVERY_ACCOUNT_GONE', {'admin_id': token.admin_id})
            raise NotFoundError('RECOVERY_CODE_INVALID')

        log_info('RECOVERY_PASSWORD_RESET', {'admin_id': admin.id, 'token_id': token.id})
        await self._notify_password_changed(admin)
        return admin

    # -- Helpers ----------------------------------------------------------------

    async def _issue(self, admin: Admin, *, phone: Optional[str] = None, email: Optional[str] = None) -> ResetToken:
        now = self._clock()
        purged = await self._tokens.purge_expired(now)
        if purged:
            log_info('RECOVERY_TOKENS_PURGED', {'count': purged})

        code = await self._unique_code()
        token = await self._tokens.add(
            ResetToken(
                admin_id=admin.id,
                code=code,
                phone=phone,
                email=email,
                expires_at=now + timedelta(seconds=self._settings.PASSWORD_RESET_CODE_EXPIRE_SECONDS),
            )
        )
        log_info('RECOVERY_CODE_ISSUED', {'admin_id': admin.id, 'token_id': token.id, 'channel': 'sms' if phone else 'email'})
        return token

    async def _unique_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_reset_code(self._settings.PASSWORD_RESET_CODE_LENGTH)
            if await self._tokens.get_unused_by_code(code) is None:
                return code
        log_warning('RECOVERY_CODE_SPACE_EXHAUSTED', {'attempts': MAX_CODE_ATTEMPTS})
        raise ConflictError('RECOVERY_CODE_UNAVAILABLE')

    async def _deliver(self, token: ResetToken, admin: Admin, send: Callable[[], Awaitable[bool]]) -> bool:
        channel = 'sms' if token.phone else 'email'
        strict = self._settings.RECOVERY_DELIVERY_STRICT
        try:
            delivered = await send()
        except Exception as exc:
            log_warning('RECOVERY_DELIVERY_FAILED', {'admin_id': admin.id, 'channel': channel, 'error': str(exc)})
            if strict:
                await self._discard(token)
                raise DeliveryError('RECOVERY_DELIVERY_FAILED') from exc
            return False

        if not delivered and strict:
            log_warning('RECOVERY_DELIVERY_SKIPPED', {'admin_id': admin.id, 'channel': channel})
            await self._discard(token)
            raise DeliveryError('RECOVERY_DELIVERY_FAILED')
        return delivered

    async def _discard(self, token: ResetToken) -> None:
        # Código que não chegou ao usuário não pode ser redimido
        await self._tokens.invalidate(token.id)
        log_info('RECOVERY_CODE_DISCARDED', {'token_id': token.id, 'admin_id': token.admin_id})

    async def _notify_password_changed(self, admin: Admin) -> None:
        try:
            await self._email.send_password_changed(
                admin_name=admin.full_name,
                recipients=[admin.email],
                changed_at_iso=self._clock().isoformat(),
            )
        except Exception as exc:  # pragma: no cover - notificação não deve quebrar fluxo
            log_warning('PASSWORD_CHANGED_EMAIL_FAILED', {'admin_id': admin.id, 'error': str(exc)})

    def _expires_in_minutes(self) -> int:
        return max(1, self._settings.PASSWORD_RESET_CODE_EXPIRE_SECONDS // 60)
