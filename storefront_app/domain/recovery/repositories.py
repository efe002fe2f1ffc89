# caminho: storefront_app/domain/recovery/repositories.py
# Funções:
# - ResetTokenRepository: porta do ledger de códigos de recuperação

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from storefront_app.domain.recovery.entities import ResetToken


class ResetTokenRepository(Protocol):
    async def add(self, token: ResetToken) -> ResetToken: ...
    async def get_unused_by_code(self, code: str) -> Optional[ResetToken]: ...
    async def mark_used(self, token_id: int) -> bool: ...
    async def invalidate(self, token_id: int) -> None: ...
    async def purge_expired(self, now: datetime) -> int: ...
