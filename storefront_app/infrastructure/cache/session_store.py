# caminho: storefront_app/infrastructure/cache/session_store.py
# Funções:
# - InMemorySessionStore: sessões em dicionário do processo (dev/testes);
#   expiradas saem na leitura ou na criação de uma nova
# - RedisSessionStore: sessões em Redis com TTL nativo (SET ... EX)
# - memory_session_store: instância única usada quando SESSION_BACKEND=memory

from __future__ import annotations

import json
import time
from datetime import datetime
from typing import Optional

import redis.asyncio as redis

from storefront_app.domain.admins.entities import AdminSession
from storefront_app.domain.admins.repositories import AdminSessionRepository


def _dump(session: AdminSession) -> str:
    return json.dumps({
        'session_id': session.session_id,
        'admin_id': session.admin_id,
        'email': session.email,
        'role': session.role,
        'full_name': session.full_name,
        'created_at': session.created_at.isoformat(),
    })


def _load(raw: str) -> AdminSession:
    data = json.loads(raw)
    return AdminSession(
        session_id=data['session_id'],
        admin_id=int(data['admin_id']),
        email=data['email'],
        role=data['role'],
        full_name=data['full_name'],
        created_at=datetime.fromisoformat(data['created_at']),
    )


class InMemorySessionStore(AdminSessionRepository):
    def __init__(self) -> None:
        # session_id -> (expira_em monotonic, payload serializado)
        self._items: dict[str, tuple[float, str]] = {}

    async def create(self, session: AdminSession, ttl_seconds: int) -> AdminSession:
        now = time.monotonic()
        self._sweep(now)
        self._items[session.session_id] = (now + max(1, int(ttl_seconds)), _dump(session))
        return session

    async def get(self, session_id: str) -> Optional[AdminSession]:
        entry = self._items.get(session_id)
        if entry is None:
            return None
        expires_at, raw = entry
        if time.monotonic() >= expires_at:
            self._items.pop(session_id, None)
            return None
        return _load(raw)

    async def destroy(self, session_id: str) -> None:
        self._items.pop(session_id, None)

    def clear(self) -> None:
        self._items.clear()

    def _sweep(self, now: float) -> None:
        expired = [session_id for session_id, (expires_at, _) in self._items.items() if now >= expires_at]
        for session_id in expired:
            del self._items[session_id]


class RedisSessionStore(AdminSessionRepository):
    def __init__(self, client: redis.Redis, *, prefix: str = 'storefront:session') -> None:
        self._client = client
        self._prefix = prefix

    async def create(self, session: AdminSession, ttl_seconds: int) -> AdminSession:
        await self._client.set(self._key(session.session_id), _dump(session), ex=max(1, int(ttl_seconds)))
        return session

    async def get(self, session_id: str) -> Optional[AdminSession]:
        raw = await self._client.get(self._key(session_id))
        if raw is None:
            return None
        return _load(raw)

    async def destroy(self, session_id: str) -> None:
        await self._client.delete(self._key(session_id))

    def _key(self, session_id: str) -> str:
        return f'{self._prefix}:{session_id}'


memory_session_store = InMemorySessionStore()
