# caminho: storefront_app/shared/email_notifications.py
# Funções:
# - RecoveryEmailNotifier: envia o código de recuperação e a confirmação de troca
#   de senha via SMTP renderizando templates Jinja2
#   (retorna False quando o envio é ignorado por falta de configuração)

from __future__ import annotations

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from storefront_app.config.settings import Settings
from storefront_app.shared.logging import log_error, log_info, log_warning


def _clean_addresses(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [addr.strip() for addr in raw.split(',') if addr.strip()]


def _resolve_template_dir(settings: Settings) -> Path:
    template_dir = Path(settings.EMAIL_SERVER_TEMPLATE_DIR or '')
    if not template_dir.is_absolute():
        package_root = Path(__file__).resolve().parents[1]
        template_dir = package_root / template_dir
    return template_dir


class RecoveryEmailNotifier:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        template_dir = _resolve_template_dir(settings)
        self._template_dir = template_dir
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml']),
        )

    async def send_recovery_code(
        self,
        *,
        admin_name: str,
        recipients: Sequence[str],
        code: str,
        expires_in_minutes: int,
    ) -> bool:
        if not recipients:
            log_info('PASSWORD_RECOVERY_EMAIL_SKIPPED_NO_RECIPIENTS', {'admin_name': admin_name})
            return False
        if not self._smtp_ready('PASSWORD_RECOVERY_EMAIL'):
            return False

        html_body = await asyncio.to_thread(
            self._render,
            self._settings.PASSWORD_RECOVERY_TEMPLATE_NAME,
            admin_name=admin_name,
            code=code,
            expires_in_minutes=expires_in_minutes,
            product_name=self._settings.PROJECT_NAME,
        )
        plain_body = (
            f'Hola {admin_name},\n\n'
            f'Tu código de recuperación es {code}. '
            f'Vence en {expires_in_minutes} minutos.\n\n'
            'Si no solicitaste este código, ignora este mensaje.'
        )
        subject = self._settings.PASSWORD_RECOVERY_SUBJECT or f'Código de recuperación - {self._settings.PROJECT_NAME}'

        email_message = self._compose_message(
            subject=subject,
            recipients=recipients,
            html_body=html_body,
            plain_body=plain_body,
        )

        await asyncio.to_thread(self._deliver, email_message, recipients)
        return True

    async def send_password_changed(
        self,
        *,
        admin_name: str,
        recipients: Sequence[str],
        changed_at_iso: str,
    ) -> bool:
        if not recipients:
            log_info('PASSWORD_CHANGED_EMAIL_SKIPPED_NO_RECIPIENTS', {'admin_name': admin_name})
            return False
        if not self._smtp_ready('PASSWORD_CHANGED_EMAIL'):
            return False

        html_body = await asyncio.to_thread(
            self._render,
            self._settings.PASSWORD_CHANGED_TEMPLATE_NAME,
            admin_name=admin_name,
            changed_at=changed_at_iso,
            product_name=self._settings.PROJECT_NAME,
        )
        plain_body = (
            f'Hola {admin_name},\n\n'
            'Confirmamos que la contraseña de tu cuenta fue actualizada. '
            'Si no reconoces este cambio, recupera tu cuenta de inmediato.\n'
        )
        subject = self._settings.PASSWORD_CHANGED_SUBJECT or f'Contraseña actualizada - {self._settings.PROJECT_NAME}'

        email_message = self._compose_message(
            subject=subject,
            recipients=recipients,
            html_body=html_body,
            plain_body=plain_body,
        )

        await asyncio.to_thread(self._deliver, email_message, recipients)
        return True

    def _smtp_ready(self, event_prefix: str) -> bool:
        smtp_host = self._settings.EMAIL_SERVER_SMTP_HOST
        smtp_username = self._settings.EMAIL_SERVER_USERNAME
        smtp_password = self._settings.EMAIL_SERVER_PASSWORD.get_secret_value()

        if not smtp_host or not smtp_username or not smtp_password:
            missing = [item for item, value in {
                'host': smtp_host,
                'username': smtp_username,
                'password': smtp_password,
            }.items() if not value]
            log_warning(f'{event_prefix}_SKIPPED_SMTP_MISCONFIGURED', {'missing': missing})
            return False
        return True

    def _render(self, template_name: str, **context: Any) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as exc:  # pragma: no cover - configuração incorreta
            log_error('EMAIL_TEMPLATE_NOT_FOUND', {'template': template_name})
            raise RuntimeError(f'Email template {template_name} not found in {self._template_dir}') from exc

        return template.render(**context)

    def _compose_message(
        self,
        *,
        subject: str,
        recipients: Sequence[str],
        html_body: str,
        plain_body: str,
    ) -> EmailMessage:
        message = EmailMessage()
        sender_address = (self._settings.EMAIL_FROM_ADDRESS or self._settings.EMAIL_SERVER_USERNAME or '').strip()
        sender_name = (self._settings.EMAIL_FROM_NAME or self._settings.EMAIL_SERVER_NAME or '').strip()

        message['Subject'] = subject
        message['From'] = formataddr((sender_name, sender_address)) if sender_address else sender_name or 'Storefront'
        message['To'] = ', '.join(recipients)

        cc_list = _clean_addresses(self._settings.EMAIL_CC_ADDRESSES)
        if cc_list:
            message['Cc'] = ', '.join(cc_list)

        message['Message-ID'] = make_msgid()
        message.set_content(plain_body)
        message.add_alternative(html_body, subtype='html')

        return message

    def _deliver(self, message: EmailMessage, to_recipients: Sequence[str]) -> None:
        cc_list = _clean_addresses(self._settings.EMAIL_CC_ADDRESSES)
        bcc_list = _clean_addresses(self._settings.EMAIL_BCC_ADDRESSES)
        all_recipients = list(dict.fromkeys([*to_recipients, *cc_list, *bcc_list]))

        encryption = (self._settings.EMAIL_SERVER_SMTP_ENCRYPTION or '').upper()
        context = ssl.create_default_context()
        password = self._settings.EMAIL_SERVER_PASSWORD.get_secret_value()

        if encryption in {'SSL', 'SSL/TLS'}:
            with smtplib.SMTP_SSL(self._settings.EMAIL_SERVER_SMTP_HOST, self._settings.EMAIL_SERVER_SMTP_PORT, context=context) as smtp:
                smtp.login(self._settings.EMAIL_SERVER_USERNAME, password)
                smtp.send_message(message, to_addrs=all_recipients)
                return

        with smtplib.SMTP(self._settings.EMAIL_SERVER_SMTP_HOST, self._settings.EMAIL_SERVER_SMTP_PORT) as smtp:
            smtp.ehlo()
            if encryption in {'STARTTLS', 'TLS'}:
                smtp.starttls(context=context)
                smtp.ehlo()
            smtp.login(self._settings.EMAIL_SERVER_USERNAME, password)
            smtp.send_message(message, to_addrs=all_recipients)
