# app/repos/order_repo.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.domain.enums import OrderStatus


def _with_items(stmt):
    return stmt.options(
        selectinload(OrderModel.items).selectinload(OrderItemModel.jewelry_item)
    )


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        #flush only, the order engine commits the whole unit
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            _with_items(select(OrderModel).where(OrderModel.id == order_id))
        ).scalar_one_or_none()

    def list_orders(self) -> List[OrderModel]:
        stmt = _with_items(select(OrderModel)).order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            self.db.commit()
            self.db.refresh(order)
        return order

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
