from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    session_id = Column(String(255), nullable=False, index=True)
    jewelry_item_id = Column(Integer, ForeignKey("jewelry_items.id", ondelete="CASCADE"), nullable=False)

    quantity = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    jewelry_item = relationship("JewelryItemModel", lazy="joined")

    __table_args__ = (
        UniqueConstraint("session_id", "jewelry_item_id", name="u_session_jewelry_item"),
        CheckConstraint("quantity >= 1", name="ck_cart_quantity_positive"),
    )
