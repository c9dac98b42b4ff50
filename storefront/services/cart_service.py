from typing import Dict

from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import ValidationError, NotFoundError, WriteConflict
from storefront.repos.user_repo import UserRepo
from storefront.services.lock_service import LockService
from storefront.services.token_service import SessionTokenService
from storefront.utils.retry import conflict_retry
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _validate_product_id(product_id) -> None:
    #bool to tez int w pythonie
    if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id <= 0:
        raise ValidationError("itemId must be a positive integer")


class CartService:
    """
    Koszyk uzytkownika jako rzadka mapa product_id -> ilosc.
    commands (add, remove) modyfikuja stan, query (get) tylko odczyt

    Zapis to dwa kroki: odczyt calej mapy i nadpisanie jej w calosci.
    Sam w sobie gubilby rownolegle zmiany (lost update), dlatego:
    - nadpisanie jest warunkowe na cart_version (optimistic locking)
      i cala operacja jest powtarzana gdy ktos zapisal pierwszy,
    - opcjonalnie (Redis) zmiany jednego uzytkownika ida po kolei.
    """

    def __init__(
        self,
        db: Session,
        token_service: SessionTokenService,
        lock_service: LockService | None = None,
    ):
        self.repo = UserRepo(db)
        self.token_service = token_service
        self.lock_service = lock_service

    def _resolve_user(self, token: str | None) -> UserModel:
        user_id = self.token_service.verify(token)
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    #query
    def get_cart(self, token: str | None) -> Dict[str, int]:
        return self._resolve_user(token).cart_data

    #commands
    def add_to_cart(self, token: str | None, product_id: int) -> Dict[str, int]:
        user = self._resolve_user(token)
        _validate_product_id(product_id)
        logger.info(f"Adding product {product_id} to cart of user {user.id}")
        return self._mutate(user.id, product_id, +1)

    def remove_from_cart(self, token: str | None, product_id: int) -> Dict[str, int]:
        user = self._resolve_user(token)
        _validate_product_id(product_id)
        logger.info(f"Removing product {product_id} from cart of user {user.id}")
        return self._mutate(user.id, product_id, -1)

    def _mutate(self, user_id: str, product_id: int, delta: int) -> Dict[str, int]:
        if self.lock_service is None:
            return self._read_modify_write(user_id, product_id, delta)

        with self.lock_service.cart_lock(user_id):
            return self._read_modify_write(user_id, product_id, delta)

    @conflict_retry()
    def _read_modify_write(self, user_id: str, product_id: int, delta: int) -> Dict[str, int]:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        cart = dict(user.cart_data or {})
        key = str(product_id)
        current = cart.get(key, 0)

        if delta < 0 and current <= 0:
            raise ValidationError("Item is not in cart")

        quantity = current + delta
        if quantity > 0:
            cart[key] = quantity
        else:
            #zero nie jest przechowywane - brak klucza == 0
            cart.pop(key, None)

        # Optimistic locking
        # update set cart_version 2 where id X and cart_version 1
        rowcount = self.repo.update_cart(user.id, user.cart_version, cart)
        if rowcount == 0:
            self.repo.rollback()
            logger.warning(f"Cart of user {user_id} changed concurrently, retrying")
            raise WriteConflict("Cart was modified by another request, please try again")

        self.repo.commit()
        return cart
