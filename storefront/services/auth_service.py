# storefront/services/auth_service.py
from typing import Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import ValidationError, ConflictError, NotFoundError, AuthError, AuthReason
from storefront.repos.user_repo import UserRepo
from storefront.services.password_hasher import PasswordHasher
from storefront.services.token_service import SessionTokenService
from storefront.utils.settings import CART_PREFILL_SIZE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def prefilled_cart(size: int = CART_PREFILL_SIZE) -> Dict[str, int]:
    #legacy: klucze 1..size z zerami, niezaleznie od rozmiaru katalogu
    return {str(i): 0 for i in range(1, size + 1)}


class AuthService:
    """
    Use case'y konta: rejestracja i logowanie.
    Oba zwracaja token sesji dla uzytkownika.
    """

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher,
        token_service: SessionTokenService,
        prefill_size: int = CART_PREFILL_SIZE,
    ):
        self.repo = UserRepo(db)
        self.hasher = hasher
        self.token_service = token_service
        self.prefill_size = prefill_size

    def signup(self, name: str, email: str, password: str) -> str:
        if not name or not email or not password:
            raise ValidationError("Name, email and password are required")

        if self.repo.get_user_by_email(email):
            raise ConflictError("Existing user found with same email")

        user = UserModel(
            name=name,
            email=email,
            password=self.hasher.hash(password),
            cart_data=prefilled_cart(self.prefill_size),
            cart_version=1,
        )

        try:
            created = self.repo.create_user(user)
        except IntegrityError as e:
            #rownolegla rejestracja na ten sam email - zlapal ja unique
            logger.warning(f"Duplicate signup for {email} rejected by store")
            raise ConflictError("Existing user found with same email") from e

        logger.info(f"Created user {created.id}")
        return self.token_service.issue(created.id)

    def login(self, email: str, password: str) -> str:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.repo.get_user_by_email(email)
        if not user:
            raise NotFoundError("Wrong email id")

        if not self.hasher.verify(password, user.password):
            logger.info(f"Wrong password for user {user.id}")
            raise AuthError(AuthReason.WRONG_PASSWORD)

        return self.token_service.issue(user.id)
