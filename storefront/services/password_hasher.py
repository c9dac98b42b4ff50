# storefront/services/password_hasher.py
import bcrypt

from storefront.domain.errors import ValidationError
from storefront.utils.settings import BCRYPT_ROUNDS

#bcrypt bierze pod uwage tylko 72 bajty
_BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Jednokierunkowe hashowanie hasel (bcrypt, nowa sol przy kazdym hash).
    """

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        raw = plaintext.encode("utf-8")
        if len(raw) > _BCRYPT_MAX_BYTES:
            raise ValidationError("Password is too long")
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        #zly digest to po prostu False, nigdy wyjatek
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False
