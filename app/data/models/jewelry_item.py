from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.sql import func

from app.data.database import Base
from app.domain.enums import JewelryCategory


class JewelryItemModel(Base):
    __tablename__ = "jewelry_items"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    materials = Column(String(500), nullable=False)  # comma separated
    category = Column(
        Enum(JewelryCategory, name="jewelry_category", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )

    #cents
    price = Column(Integer, nullable=False)
    image_url = Column(String(1000), nullable=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_jewelry_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_jewelry_stock_non_negative"),
    )
