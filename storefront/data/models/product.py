# storefront/data/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Boolean, Numeric

from storefront.data.database import Base


def _new_record_id() -> str:
    return uuid.uuid4().hex


class ProductModel(Base):
    __tablename__ = "products"

    #tozsamosc rekordu w bazie (po niej kasujemy)
    record_id = Column(String(32), primary_key=True, default=_new_record_id)
    #numer katalogowy, unique jest jedynym zabezpieczeniem przed wyscigiem alokacji
    id = Column(Integer, nullable=False, unique=True, index=True)

    name = Column(String, nullable=False)
    image = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    new_price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    old_price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    available = Column(Boolean, nullable=False, default=True)

    date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
