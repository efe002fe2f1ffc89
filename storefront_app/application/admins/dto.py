# caminho: storefront_app/application/admins/dto.py
# Funções:
# - DTOs Pydantic para login/sessão e gestão de administradores

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from storefront_app.config.constants import DOCUMENT_NUMBER_LENGTH_MAX, PASSWORD_LENGTH_MAX, PASSWORD_LENGTH_MIN
from storefront_app.domain.admins.enums import (
    ADMIN_ROLE_DEFAULT,
    DOCUMENT_TYPE_DEFAULT,
    AdminRole,
    DocumentType,
)
from storefront_app.shared.schemas import CamelInput, CamelModel, RawPassword


class LoginRequest(CamelInput):
    # Sem validação de formato: credencial ruim é 401, não 400
    email: str = Field(min_length=1, max_length=254)
    password: RawPassword = Field(min_length=1, max_length=PASSWORD_LENGTH_MAX)


class AuthUserOutput(CamelModel):
    id: int
    email: str
    role: str
    full_name: str


class LoginResponse(CamelModel):
    message: str
    user: AuthUserOutput


class AdminCreateInput(CamelInput):
    email: EmailStr
    password: RawPassword = Field(min_length=PASSWORD_LENGTH_MIN, max_length=PASSWORD_LENGTH_MAX)
    role: AdminRole = Field(default=ADMIN_ROLE_DEFAULT)
    full_name: str = Field(min_length=1, max_length=120)
    document_type: DocumentType = Field(default=DOCUMENT_TYPE_DEFAULT)
    document_number: Optional[str] = Field(default=None, min_length=1, max_length=DOCUMENT_NUMBER_LENGTH_MAX)
    recovery_email: Optional[EmailStr] = None


class AdminUpdateInput(CamelInput):
    """Atualização parcial: só os campos enviados são aplicados."""

    email: Optional[EmailStr] = None
    password: Optional[RawPassword] = Field(default=None, min_length=PASSWORD_LENGTH_MIN, max_length=PASSWORD_LENGTH_MAX)
    role: Optional[AdminRole] = None
    full_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    document_type: Optional[DocumentType] = None
    document_number: Optional[str] = Field(default=None, min_length=1, max_length=DOCUMENT_NUMBER_LENGTH_MAX)
    recovery_email: Optional[EmailStr] = None
    is_active: Optional[bool] = None


class AdminOutput(CamelModel):
    id: int
    email: str
    role: str
    full_name: str
    document_type: str
    document_number: Optional[str] = None
    recovery_email: Optional[str] = None
    is_active: bool
    created_by_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
