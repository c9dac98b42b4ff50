# storefront/services/token_service.py
from datetime import datetime, timedelta, timezone

import jwt

from storefront.domain.errors import AuthError, AuthReason
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class SessionTokenService:
    """
    Bezstanowe tokeny sesji (JWT) z claimem {"user": {"id": ...}}.

    Sekret jest podawany w konstruktorze - nowy sekret uniewaznia
    wszystkie wczesniej wydane tokeny. Bez ttl tokeny nie wygasaja.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_seconds: int | None = None):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl_seconds = ttl_seconds or None

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"user": {"id": user_id}, "iat": now}
        if self.ttl_seconds:
            payload["exp"] = now + timedelta(seconds=self.ttl_seconds)
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> str:
        if not token:
            raise AuthError(AuthReason.MISSING)

        try:
            data = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected session token: {e}")
            raise AuthError(AuthReason.INVALID) from e

        user = data.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id or not isinstance(user_id, str):
            raise AuthError(AuthReason.INVALID)
        return user_id
