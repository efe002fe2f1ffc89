# caminho: storefront_app/application/recovery/dto.py
# Funções:
# - DTOs Pydantic do fluxo de recuperação de senha
#   (verificação de documento, pedido de código por SMS/e-mail, redenção)

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from storefront_app.config.constants import (
    DOCUMENT_NUMBER_LENGTH_MAX,
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    PHONE_PATTERN,
)
from storefront_app.shared.schemas import CamelInput, RawPassword

DocumentNumber = Annotated[str, Field(min_length=1, max_length=DOCUMENT_NUMBER_LENGTH_MAX)]


class VerifyDocumentSimpleRequest(CamelInput):
    document_number: DocumentNumber


class VerifyDocumentRequest(CamelInput):
    email: EmailStr
    document_number: DocumentNumber


class RequestSmsCodeRequest(CamelInput):
    email: Optional[EmailStr] = None
    phone: str = Field(pattern=PHONE_PATTERN)
    document_number: Optional[DocumentNumber] = None

    @field_validator('phone', mode='before')
    @classmethod
    def _strip_separators(cls, value):
        if isinstance(value, str):
            return value.replace(' ', '').replace('-', '')
        return value


class RequestEmailCodeRequest(CamelInput):
    # email = destino do código; adminEmail/documentNumber identificam a conta
    email: EmailStr
    admin_email: Optional[EmailStr] = None
    document_number: Optional[DocumentNumber] = None


class RedeemCodeRequest(CamelInput):
    # Formato do código é conferido no serviço para responder com a mesma mensagem de código inválido
    code: str = Field(min_length=1, max_length=32)
    new_password: RawPassword = Field(min_length=PASSWORD_LENGTH_MIN, max_length=PASSWORD_LENGTH_MAX)


class RecoveryCodeResponse(BaseModel):
    message: str
    code: Optional[str] = None
