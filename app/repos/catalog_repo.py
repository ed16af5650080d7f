# app/repos/catalog_repo.py
from typing import List
from sqlalchemy import select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.data.models.jewelry_item import JewelryItemModel
from app.domain.enums import JewelryCategory


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_items(self, category: JewelryCategory | None = None, featured_only: bool = False) -> List[JewelryItemModel]:
        stmt = select(JewelryItemModel)
        if category is not None:
            stmt = stmt.where(JewelryItemModel.category == category)
        if featured_only:
            stmt = stmt.where(JewelryItemModel.is_featured.is_(True))
        return list(self.db.execute(stmt.order_by(JewelryItemModel.id)).scalars().all())

    def get_item(self, item_id: int) -> JewelryItemModel | None:
        return self.db.get(JewelryItemModel, item_id)

    def add_item(self, item: JewelryItemModel) -> JewelryItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_item(self, item: JewelryItemModel) -> None:
        self.db.delete(item)
        self.db.flush()

    def decrement_stock(self, item_id: int, quantity: int) -> bool:
        """
        Conditional decrement: UPDATE ... SET stock = stock - q WHERE id = :id AND stock >= q.
        Returns False when no row matched (item gone or not enough stock);
        the caller owns the transaction and decides what to roll back.
        """
        result = self.db.execute(
            update(JewelryItemModel)
            .where(
                JewelryItemModel.id == item_id,
                JewelryItemModel.stock_quantity >= quantity,
            )
            .values(
                stock_quantity=JewelryItemModel.stock_quantity - quantity,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, item: JewelryItemModel):
        self.db.refresh(item)
