# storefront/data/models/user.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, JSON

from storefront.data.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=True)
    email = Column(String, nullable=False, unique=True, index=True)
    #hash bcrypt, nigdy plaintext
    password = Column(String, nullable=False)

    #mapa "product_id" -> ilosc, zawsze nadpisywana w calosci
    cart_data = Column(JSON, nullable=False, default=dict)
    #optimistic locking dla koszyka
    cart_version = Column(Integer, nullable=False, default=1)

    date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
