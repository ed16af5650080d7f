from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base
from app.domain.enums import OrderStatus


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    session_id = Column(String(255), nullable=False, index=True)

    customer_name = Column(String(200), nullable=False)
    customer_email = Column(String(320), nullable=False)
    customer_phone = Column(String(50), nullable=True)
    shipping_address = Column(Text, nullable=False)
    billing_address = Column(Text, nullable=True)  # null = same as shipping

    total_amount = Column(Integer, nullable=False)  # cents
    status = Column(
        Enum(OrderStatus, name="order_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )
