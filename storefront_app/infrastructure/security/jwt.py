# caminho: storefront_app/infrastructure/security/jwt.py
# Funções:
# - JWTService: assina e valida o token do cookie de sessão (claim sid + exp)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jwt import InvalidTokenError, decode, encode
from pydantic import SecretStr


@dataclass(slots=True)
class SessionPayload:
    session_id: str
    expires_at: datetime


class JWTService:
    def __init__(self, secret_key: SecretStr, algorithm: str) -> None:
        self._secret = secret_key
        self._algorithm = algorithm

    def create_session_token(self, session_id: str, expires_seconds: int) -> str:
        return self._encode(data={'sid': session_id, 'typ': 'session'}, expires_seconds=expires_seconds)

    def decode_session_token(self, token: str) -> SessionPayload:
        """Valida assinatura e expiração; levanta InvalidTokenError se o token não servir."""
        payload = decode(token, self._secret.get_secret_value(), algorithms=[self._algorithm])

        session_id = str(payload.get('sid') or '')
        if not session_id or payload.get('typ') != 'session':
            raise InvalidTokenError('session token without sid')

        return SessionPayload(
            session_id=session_id,
            expires_at=datetime.fromtimestamp(int(payload['exp']), tz=timezone.utc),
        )

    def _encode(self, data: dict, expires_seconds: int) -> str:
        payload = {
            **data,
            'exp': datetime.now(timezone.utc) + timedelta(seconds=expires_seconds),
        }
        secret_key = self._secret.get_secret_value()
        return encode(payload, secret_key, algorithm=self._algorithm)
