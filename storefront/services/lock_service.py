import uuid
from contextlib import contextmanager

import redis

from storefront.domain.errors import LockBusy, StoreError
from storefront.utils.retry import redis_retry, lock_wait_retry
from storefront.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec nie zwolnimy locka, ktory po wygasnieciu przejal ktos inny


class LockService:
    """
    -blokada koszyka jednego uzytkownika (lock)
    -zwalnianie locka tylko przez wlasciciela
    -atomowosc przy pomocy lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None,
                 ttl: int = CART_LOCK_TTL_SECONDS):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl

    @staticmethod
    def _key(user_id: str) -> str:
        return f"cart:{user_id}:lock"

    @redis_retry()
    def acquire_cart_lock(self, user_id: str, owner: str) -> bool:
        key = self._key(user_id)
        logger.debug(f"Acquire lock {key} for {owner}")
        #SET cart:abc:lock "owner" NX EX 5
        return bool(self.redis.set(name=key, value=owner, nx=True, ex=self.ttl))

    @redis_retry()
    def release_cart_lock(self, user_id: str, owner: str) -> bool:
        key = self._key(user_id)
        logger.debug(f"Release lock {key} for {owner}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, owner)
        return bool(res)

    @contextmanager
    def cart_lock(self, user_id: str, attempts: int = 10):
        owner = uuid.uuid4().hex

        @lock_wait_retry(attempts)
        def _acquire():
            if not self.acquire_cart_lock(user_id, owner):
                raise LockBusy("Cart is being modified by another request, please try again")

        try:
            _acquire()
        except redis.RedisError as e:
            logger.error(f"Cart lock for user {user_id} unavailable: {e}")
            raise StoreError("Cart lock service unavailable") from e

        try:
            yield
        finally:
            #zapis juz zatwierdzony, lock wygasnie po ttl
            try:
                released = self.release_cart_lock(user_id, owner)
            except redis.RedisError as e:
                logger.warning(f"Failed to release cart lock for user {user_id}: {e}")
            else:
                if not released:
                    logger.warning(f"Cart lock for user {user_id} expired before release")
