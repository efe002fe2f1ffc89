# caminho: storefront_app/domain/recovery/entities.py
# Funções:
# - ResetToken: concessão de uso único para redefinir a senha (Reset Token Ledger)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def as_utc(value: datetime) -> datetime:
    """Alguns drivers (SQLite) devolvem datetime ingênuo; tratamos como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(slots=True)
class ResetToken:
    admin_id: int
    code: str
    expires_at: datetime
    phone: Optional[str] = None
    email: Optional[str] = None
    used: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return as_utc(now) > as_utc(self.expires_at)

    def is_redeemable(self, now: datetime) -> bool:
        return not self.used and not self.is_expired(now)
