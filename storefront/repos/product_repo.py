# storefront/repos/product_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.repos.base import store_call


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    @store_call
    def list_products(self) -> List[ProductModel]:
        #kolejnosc wstawiania == kolejnosc numerow katalogowych
        return list(self.db.execute(
            select(ProductModel).order_by(ProductModel.id)
        ).scalars().all())

    @store_call
    def max_product_id(self) -> int | None:
        return self.db.execute(select(func.max(ProductModel.id))).scalar()

    @store_call
    def get_product(self, record_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, record_id)

    @store_call
    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(product)
        return product

    @store_call
    def delete_product(self, record_id: str) -> ProductModel | None:
        product = self.get_product(record_id)
        if product:
            self.db.delete(product)
            self.db.commit()
        return product

    @store_call
    def latest_products(self, limit: int) -> List[ProductModel]:
        newest = self.db.execute(
            select(ProductModel).order_by(ProductModel.id.desc()).limit(limit)
        ).scalars().all()
        return list(reversed(newest))

    @store_call
    def products_in_category(self, category: str, limit: int) -> List[ProductModel]:
        return list(self.db.execute(
            select(ProductModel)
            .where(func.lower(ProductModel.category) == category.lower())
            .order_by(ProductModel.id)
            .limit(limit)
        ).scalars().all())
