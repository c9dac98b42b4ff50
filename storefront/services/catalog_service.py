# storefront/services/catalog_service.py
import uuid
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import ValidationError, NotFoundError, WriteConflict
from storefront.repos.product_repo import ProductRepo
from storefront.utils.retry import conflict_retry
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

NEW_COLLECTION_SIZE = 8
POPULAR_SIZE = 4
POPULAR_CATEGORY = "women"


class CatalogService:
    """
    Katalog produktow:
    - commands (add, remove)
    - query (all, new collection, popular in women)

    Numer katalogowy jest przydzielany jako max + 1 (odczyt, potem zapis).
    Dwa rownolegle add moga dostac ten sam numer - unique w bazie
    odrzuca drugi insert, a my powtarzamy przydzial razem z insertem.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def next_id(self) -> int:
        current = self.repo.max_product_id()
        return 1 if current is None else current + 1

    def add_product(
        self,
        name: str,
        image: str,
        category: str,
        new_price: float,
        old_price: float,
    ) -> ProductModel:
        if not name or not image or not category:
            raise ValidationError("Name, image and category are required")
        if new_price is None or old_price is None or new_price < 0 or old_price < 0:
            raise ValidationError("Prices must be non-negative numbers")

        return self._allocate_and_insert(name, image, category, new_price, old_price)

    @conflict_retry()
    def _allocate_and_insert(self, name, image, category, new_price, old_price) -> ProductModel:
        product_id = self.next_id()
        product = ProductModel(
            id=product_id,
            name=name,
            image=image,
            category=category,
            new_price=new_price,
            old_price=old_price,
        )

        try:
            created = self.repo.create_product(product)
        except IntegrityError as e:
            logger.warning(f"Product id {product_id} taken by a concurrent insert, retrying")
            raise WriteConflict("Product with this id already exists, please try again") from e

        logger.info(f"Product {created.id} ({created.name}) saved")
        return created

    def remove_product(self, record_id: str) -> ProductModel:
        if not record_id:
            raise ValidationError("Product id is required")
        try:
            key = uuid.UUID(record_id).hex
        except (ValueError, AttributeError, TypeError):
            raise ValidationError("Invalid product id format")

        removed = self.repo.delete_product(key)
        if not removed:
            raise NotFoundError("Product not found")

        logger.info(f"Product {removed.id} ({removed.name}) removed")
        return removed

    #query
    def all_products(self) -> List[ProductModel]:
        return self.repo.list_products()

    def new_collection(self) -> List[ProductModel]:
        return self.repo.latest_products(NEW_COLLECTION_SIZE)

    def popular_in_women(self) -> List[ProductModel]:
        return self.repo.products_in_category(POPULAR_CATEGORY, POPULAR_SIZE)
