# storefront/api/dependencies.py
from functools import lru_cache

from storefront.services.asset_storage import AssetStorage
from storefront.services.lock_service import LockService
from storefront.services.password_hasher import PasswordHasher
from storefront.services.token_service import SessionTokenService
from storefront.utils.settings import (
    JWT_SECRET,
    JWT_ALGORITHM,
    TOKEN_TTL_SECONDS,
    REDIS_URL,
)


#sekret czytany raz przy starcie, wspolny dla wszystkich zadan
@lru_cache
def get_token_service() -> SessionTokenService:
    return SessionTokenService(
        secret=JWT_SECRET,
        algorithm=JWT_ALGORITHM,
        ttl_seconds=TOKEN_TTL_SECONDS,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache
def get_lock_service() -> LockService | None:
    if not REDIS_URL:
        return None
    return LockService(REDIS_URL)


def get_asset_storage() -> AssetStorage:
    return AssetStorage()
