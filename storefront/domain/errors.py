# storefront/domain/errors.py
from enum import Enum


class ShopError(Exception):
    """Bazowy blad domeny, niesie status HTTP dla routera."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    status_code = 400


class NotFoundError(ShopError):
    status_code = 404


class ConflictError(ShopError):
    status_code = 409


class WriteConflict(ConflictError):
    """Ktos inny zapisal pierwszy - operacje mozna powtorzyc."""


class LockBusy(ConflictError):
    """Blokada koszyka jest trzymana przez inne zadanie."""


class StoreError(ShopError):
    status_code = 500


class AuthReason(str, Enum):
    MISSING = "missing"
    INVALID = "invalid"
    WRONG_PASSWORD = "wrong_password"


class AuthError(ShopError):
    status_code = 401

    def __init__(self, reason: AuthReason, message: str | None = None):
        defaults = {
            AuthReason.MISSING: "Please authenticate using a valid token",
            AuthReason.INVALID: "Please authenticate using a valid token",
            AuthReason.WRONG_PASSWORD: "Wrong password",
        }
        super().__init__(message or defaults[reason])
        self.reason = reason
