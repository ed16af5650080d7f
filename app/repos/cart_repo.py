# app/repos/cart_repo.py
from typing import List
from sqlalchemy import delete, select
from sqlalchemy.orm import Session, contains_eager

from app.data.models.cart_item import CartItemModel
from app.data.models.jewelry_item import JewelryItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_lines(self, session_id: str, for_update: bool = False) -> List[CartItemModel]:
        """
        All lines of a session joined with their catalog row.

        Plain reads come back by line id. for_update=True locks the lines and
        their catalog rows (SELECT ... FOR UPDATE OF cart_items, jewelry_items)
        in item id order, so two checkouts touching the same items or the same
        cart serialize and never deadlock each other. Backends without
        FOR UPDATE (sqlite) silently skip the lock.
        """
        stmt = (
            select(CartItemModel)
            .join(CartItemModel.jewelry_item)
            .options(contains_eager(CartItemModel.jewelry_item))
            .where(CartItemModel.session_id == session_id)
        )
        if for_update:
            stmt = (
                stmt.order_by(JewelryItemModel.id)
                .with_for_update(of=(CartItemModel, JewelryItemModel))
                .execution_options(populate_existing=True)
            )
        else:
            stmt = stmt.order_by(CartItemModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_cart_item(self, line_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, line_id)

    def get_cart_item_for_jewelry(self, session_id: str, jewelry_item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.session_id == session_id,
                CartItemModel.jewelry_item_id == jewelry_item_id,
            )
        ).scalar_one_or_none()

    def add_cart_item(self, line: CartItemModel) -> CartItemModel:
        self.db.add(line)
        self.db.flush()
        return line

    def delete_cart_item(self, line: CartItemModel) -> None:
        self.db.delete(line)
        self.db.flush()

    def delete_cart_lines(self, session_id: str, line_ids: List[int] | None = None) -> int:
        """Delete a session's lines, or only the given ones. Returns rows deleted."""
        stmt = delete(CartItemModel).where(CartItemModel.session_id == session_id)
        if line_ids is not None:
            stmt = stmt.where(CartItemModel.id.in_(line_ids))
        return self.db.execute(stmt).rowcount

    def delete_lines_for_jewelry(self, jewelry_item_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.jewelry_item_id == jewelry_item_id)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, line: CartItemModel):
        self.db.refresh(line)
