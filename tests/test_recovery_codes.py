import asyncio
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from pwdlib import PasswordHash

from storefront_app.application.recovery.dto import RedeemCodeRequest
from storefront_app.application.recovery.use_cases import (
    PasswordRecoveryService,
    RecoveryAdapters,
    generate_reset_code,
)
from storefront_app.config import get_settings
from storefront_app.domain.admins.entities import Admin
from storefront_app.domain.recovery.entities import ResetToken
from storefront_app.shared.email_notifications import RecoveryEmailNotifier
from storefront_app.shared.errors import ExpiredError, NotFoundError
from storefront_app.shared.sms_notifications import HttpSmsGateway

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


def test_generate_reset_code_shape():
    for _ in range(200):
        code = generate_reset_code()
        assert len(code) == 6
        assert code.isdigit()


def test_generate_reset_code_keeps_leading_zeros():
    codes = {generate_reset_code(2) for _ in range(2000)}

    # 100 combinações possíveis; as que começam com zero precisam aparecer
    assert any(code.startswith('0') for code in codes)
    assert all(len(code) == 2 for code in codes)


def test_token_expiry_boundary():
    token = ResetToken(admin_id=1, code='123456', expires_at=NOW)

    assert not token.is_expired(NOW)
    assert token.is_expired(NOW + timedelta(seconds=1))


def test_token_expiry_with_naive_datetime():
    token = ResetToken(admin_id=1, code='123456', expires_at=NOW.replace(tzinfo=None))

    assert token.is_expired(NOW + timedelta(minutes=1))
    assert token.is_redeemable(NOW - timedelta(minutes=1))


# -------------------------------------------------------------------------
# Serviço com adapters em memória
# -------------------------------------------------------------------------
class FakeAdmins:
    def __init__(self):
        self.admin = Admin(
            id=1,
            email='ana@x.com',
            password_hash='old',
            role='viewer',
            full_name='Ana',
            document_type='DNI',
            document_number='12345678',
        )

    async def update_password(self, admin_id, password_hash):
        self.admin.password_hash = password_hash
        return self.admin


class FakeTokens:
    def __init__(self, token, mark_result=True):
        self.token = token
        self.mark_result = mark_result

    async def get_unused_by_code(self, code):
        return self.token if self.token.code == code else None

    async def mark_used(self, token_id):
        return self.mark_result


class SilentEmail:
    async def send_password_changed(self, **kwargs):
        return False


def _service(tokens, admins, now=NOW):
    return PasswordRecoveryService(
        adapters=RecoveryAdapters(admins=admins, tokens=tokens),
        settings=get_settings(),
        password_hasher=PasswordHash.recommended(),
        sms_gateway=None,
        email_sender=SilentEmail(),
        clock=lambda: now,
    )


def test_redeem_updates_password_hash():
    admins = FakeAdmins()
    token = ResetToken(id=7, admin_id=1, code='004213', expires_at=NOW + timedelta(minutes=15))
    service = _service(FakeTokens(token), admins)

    asyncio.run(service.redeem(RedeemCodeRequest(code='004213', new_password='secret1')))

    assert admins.admin.password_hash.startswith('$argon2')
    assert PasswordHash.recommended().verify('secret1', admins.admin.password_hash)


def test_redeem_lost_race_is_rejected():
    admins = FakeAdmins()
    token = ResetToken(id=7, admin_id=1, code='004213', expires_at=NOW + timedelta(minutes=15))
    # outra requisição marcou o token entre a leitura e o update condicional
    service = _service(FakeTokens(token, mark_result=False), admins)

    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(service.redeem(RedeemCodeRequest(code='004213', new_password='secret1')))

    assert exc_info.value.detail == {'code': 'RECOVERY_CODE_INVALID'}
    assert admins.admin.password_hash == 'old'


def test_redeem_expired_does_not_touch_password():
    admins = FakeAdmins()
    token = ResetToken(id=7, admin_id=1, code='004213', expires_at=NOW - timedelta(seconds=1))
    service = _service(FakeTokens(token), admins)

    with pytest.raises(ExpiredError):
        asyncio.run(service.redeem(RedeemCodeRequest(code='004213', new_password='secret1')))

    assert admins.admin.password_hash == 'old'


# -------------------------------------------------------------------------
# Gateway SMS
# -------------------------------------------------------------------------
def test_sms_gateway_posts_message():
    captured = {}

    def handler(request):
        captured['url'] = str(request.url)
        captured['body'] = json.loads(request.content)
        captured['auth'] = request.headers.get('authorization')
        return httpx.Response(202, json={'queued': True})

    settings = get_settings().model_copy(
        update={'SMS_GATEWAY_URL': 'https://sms.example.com/send', 'SMS_SENDER_ID': 'FLABEF'}
    )
    gateway = HttpSmsGateway(settings, transport=httpx.MockTransport(handler))

    delivered = asyncio.run(gateway.send(phone='+51999999999', message='codigo 123456'))

    assert delivered is True
    assert captured['url'] == 'https://sms.example.com/send'
    assert captured['body'] == {'to': '+51999999999', 'from': 'FLABEF', 'message': 'codigo 123456'}
    assert captured['auth'] is None


def test_sms_gateway_error_is_raised():
    settings = get_settings().model_copy(update={'SMS_GATEWAY_URL': 'https://sms.example.com/send'})
    gateway = HttpSmsGateway(settings, transport=httpx.MockTransport(lambda request: httpx.Response(500)))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(gateway.send(phone='+51999999999', message='x'))


def test_sms_gateway_without_url_is_skipped():
    gateway = HttpSmsGateway(get_settings())

    assert asyncio.run(gateway.send(phone='+51999999999', message='x')) is False


# -------------------------------------------------------------------------
# E-mail
# -------------------------------------------------------------------------
def test_recovery_templates_render():
    settings = get_settings()
    notifier = RecoveryEmailNotifier(settings)

    code_html = notifier._render(
        settings.PASSWORD_RECOVERY_TEMPLATE_NAME,
        admin_name='Ana <b>',
        code='004213',
        expires_in_minutes=15,
        product_name='FLABEF',
    )
    changed_html = notifier._render(
        settings.PASSWORD_CHANGED_TEMPLATE_NAME,
        admin_name='Ana',
        changed_at='2026-01-10T12:00:00+00:00',
        product_name='FLABEF',
    )

    assert '004213' in code_html
    assert 'Ana &lt;b&gt;' in code_html
    assert '2026-01-10T12:00:00+00:00' in changed_html


def test_recovery_email_skipped_without_smtp():
    notifier = RecoveryEmailNotifier(get_settings())

    sent = asyncio.run(
        notifier.send_recovery_code(admin_name='Ana', recipients=['ana@x.com'], code='004213', expires_in_minutes=15)
    )

    assert sent is False
