# storefront/repos/base.py
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.domain.errors import StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def store_call(fn):
    """
    Zamienia nieoczekiwane bledy bazy na StoreError.
    IntegrityError przepuszczamy - serwisy traktuja go jako konflikt.
    """

    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Store failure in {fn.__qualname__}: {e}")
            self.db.rollback()
            raise StoreError("Store operation failed") from e

    return wrapper
