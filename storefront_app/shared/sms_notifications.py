# caminho: storefront_app/shared/sms_notifications.py
# Funções:
# - SmsGateway: porta de envio de SMS usada pela recuperação de senha
# - HttpSmsGateway: envia via gateway HTTP (POST JSON) com httpx
#   (retorna False quando SMS_GATEWAY_URL não está configurado)

from __future__ import annotations

from typing import Protocol

import httpx

from storefront_app.config.settings import Settings
from storefront_app.shared.logging import log_info, log_warning


class SmsGateway(Protocol):
    async def send(self, *, phone: str, message: str) -> bool: ...


class HttpSmsGateway:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    async def send(self, *, phone: str, message: str) -> bool:
        url = (self._settings.SMS_GATEWAY_URL or '').strip()
        if not url:
            log_warning('SMS_SKIPPED_GATEWAY_MISCONFIGURED', {'phone': _mask(phone)})
            return False

        headers = {'Accept': 'application/json'}
        token = self._settings.SMS_GATEWAY_TOKEN.get_secret_value()
        if token:
            headers['Authorization'] = f'Bearer {token}'

        async with httpx.AsyncClient(
            timeout=self._settings.SMS_GATEWAY_TIMEOUT_S,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                json={'to': phone, 'from': self._settings.SMS_SENDER_ID, 'message': message},
                headers=headers,
            )
            # 4xx/5xx do gateway viram httpx.HTTPStatusError para quem chamou
            response.raise_for_status()

        log_info('SMS_SENT', {'phone': _mask(phone), 'status': response.status_code})
        return True


def _mask(phone: str) -> str:
    return f'***{phone[-4:]}' if len(phone) > 4 else '***'
