# caminho: storefront_app/interfaces/api/routers/password_reset.py
# Funções:
# - Fluxo público de recuperação de senha: verificação de documento,
#   pedido de código (SMS/e-mail) e redenção do código com nova senha

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from storefront_app.application.recovery.dto import (
    RecoveryCodeResponse,
    RedeemCodeRequest,
    RequestEmailCodeRequest,
    RequestSmsCodeRequest,
    VerifyDocumentRequest,
    VerifyDocumentSimpleRequest,
)
from storefront_app.application.recovery.use_cases import IssuedCode, PasswordRecoveryService
from storefront_app.config import get_settings
from storefront_app.interfaces.api.dependencies import UserLocale, get_recovery_service
from storefront_app.shared.i18n import get_translator
from storefront_app.shared.schemas import MessageResponse

router = APIRouter(prefix='/api/password-reset', tags=['password-reset'])


def _code_response(issued: IssuedCode, message: str) -> RecoveryCodeResponse:
    # Fora de produção o código volta na resposta (atalho de desenvolvimento)
    code = None if get_settings().IS_PRODUCTION else issued.code
    return RecoveryCodeResponse(message=message, code=code)


@router.post(
    '/verify-document-simple',
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary='Verificar documento',
    description='Confere se o `documentNumber` pertence a uma conta ativa. Documento desconhecido responde 400.',
)
async def verify_document_simple(
    payload: VerifyDocumentSimpleRequest,
    locale: UserLocale,
    service: PasswordRecoveryService = Depends(get_recovery_service),
) -> MessageResponse:
    await service.verify_document_simple(payload.document_number)
    _ = get_translator(locale)
    return MessageResponse(message=_('DOCUMENT_VERIFIED'))


@router.post(
    '/verify-document',
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary='Verificar e-mail e documento',
    description="""Confere o par `email` + `documentNumber`.

E-mail desconhecido e documento divergente respondem com a mesma mensagem (400),
sem revelar se a conta existe.
""",
)
async def verify_document(
    payload: VerifyDocumentRequest,
    locale: UserLocale,
    service: PasswordRecoveryService = Depends(get_recovery_service),
) -> MessageResponse:
    await service.verify_document(payload.email, payload.document_number)
    _ = get_translator(locale)
    return MessageResponse(message=_('DOCUMENT_VERIFIED'))


@router.post(
    '/request-sms',
    response_model=RecoveryCodeResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary='Enviar código por SMS',
    description="""Emite um código de 6 dígitos válido por 15 minutos e envia ao `phone` informado.

A conta é identificada por `email` e/ou `documentNumber` (ambos, quando enviados, devem apontar para a mesma conta).
Fora de produção o código também é devolvido no campo `code`.

**Entrega**:
- Falha do gateway é registrada em log; com `RECOVERY_DELIVERY_STRICT=true` responde 502.
""",
)
async def request_sms(
    payload: RequestSmsCodeRequest,
    locale: UserLocale,
    service: PasswordRecoveryService = Depends(get_recovery_service),
) -> RecoveryCodeResponse:
    issued = await service.request_sms_code(payload)
    _ = get_translator(locale)
    return _code_response(issued, _('RECOVERY_CODE_SENT_SMS'))


@router.post(
    '/request-email',
    response_model=RecoveryCodeResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary='Enviar código por e-mail',
    description="""Emite um código de 6 dígitos válido por 15 minutos e envia ao `email` informado.

A conta é identificada por `adminEmail` e/ou `documentNumber`; sem eles, pelo próprio `email`.
O destino precisa ser o e-mail da conta ou o e-mail de recuperação cadastrado.
Fora de produção o código também é devolvido no campo `code`.
""",
)
async def request_email(
    payload: RequestEmailCodeRequest,
    locale: UserLocale,
    service: PasswordRecoveryService = Depends(get_recovery_service),
) -> RecoveryCodeResponse:
    issued = await service.request_email_code(payload)
    _ = get_translator(locale)
    return _code_response(issued, _('RECOVERY_CODE_SENT_EMAIL'))


@router.post(
    '/verify',
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary='Redefinir senha com o código',
    description="""Consome o código (uso único) e grava a `newPassword` como hash.

**Respostas**:
- Código desconhecido ou já utilizado: 400 "Invalid or expired code".
- Código vencido: 400 "Code has expired".
""",
)
async def redeem_code(
    payload: RedeemCodeRequest,
    locale: UserLocale,
    service: PasswordRecoveryService = Depends(get_recovery_service),
) -> MessageResponse:
    await service.redeem(payload)
    _ = get_translator(locale)
    return MessageResponse(message=_('PASSWORD_RESET_SUCCESSFUL'))
