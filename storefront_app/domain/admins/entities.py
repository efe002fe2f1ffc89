# caminho: storefront_app/domain/admins/entities.py
# Funções:
# - Admin: conta de back-office (Credential Store)
# - AdminSession: sessão autenticada guardada no session store

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class AdminSession:
    session_id: str
    admin_id: int
    email: str
    role: str
    full_name: str
    created_at: datetime


@dataclass(slots=True)
class Admin:
    email: str
    password_hash: str
    role: str
    full_name: str
    document_type: str
    document_number: Optional[str] = None
    recovery_email: Optional[str] = None
    is_active: bool = True
    created_by_id: Optional[int] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
