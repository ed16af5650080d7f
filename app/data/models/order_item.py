from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    #history survives catalog deletes
    jewelry_item_id = Column(Integer, ForeignKey("jewelry_items.id", ondelete="SET NULL"), nullable=True)

    quantity = Column(Integer, nullable=False)
    price_at_time = Column(Integer, nullable=False)  # cents, never updated

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    order = relationship("OrderModel", back_populates="items")
    jewelry_item = relationship("JewelryItemModel")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_item_quantity_positive"),
        CheckConstraint("price_at_time >= 0", name="ck_order_item_price_non_negative"),
    )
