# storefront/repos/user_repo.py
from typing import Dict

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.repos.base import store_call


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    @store_call
    def get_user(self, user_id: str) -> UserModel | None:
        #populate_existing - zawsze swiezy odczyt, nie z identity map
        return self.db.get(UserModel, user_id, populate_existing=True)

    @store_call
    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    @store_call
    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    @store_call
    def update_cart(self, user_id: str, old_version: int, cart_data: Dict[str, int]) -> int:
        # update users set cart_data=..., cart_version=v+1 where id=... and cart_version=v
        result = self.db.execute(
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.cart_version == old_version)
            .values(cart_data=cart_data, cart_version=old_version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    @store_call
    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
