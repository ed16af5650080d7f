# app/services/catalog_service.py
from typing import List
from sqlalchemy.orm import Session

from app.data.models.jewelry_item import JewelryItemModel
from app.domain.enums import JewelryCategory
from app.domain.schemas import JewelryItemCreate, JewelryItemUpdate
from app.repos.cart_repo import CartRepo
from app.repos.catalog_repo import CatalogRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Catalog use cases. Queries are public, commands are reached only through
    admin-guarded routes.
    """

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)
        self.cart_repo = CartRepo(db)

    #query
    def list_items(self, category: JewelryCategory | None = None, featured_only: bool = False) -> List[JewelryItemModel]:
        return self.repo.list_items(category=category, featured_only=featured_only)

    def get_item(self, item_id: int) -> JewelryItemModel | None:
        return self.repo.get_item(item_id)

    #commands
    def create_item(self, payload: JewelryItemCreate) -> JewelryItemModel:
        item = JewelryItemModel(**payload.model_dump())
        self.repo.add_item(item)
        self.repo.commit()
        self.repo.refresh(item)

        logger.info(f"Created jewelry item {item.id} ({item.name}, {item.price} cents, stock {item.stock_quantity})")
        return item

    def update_item(self, item_id: int, payload: JewelryItemUpdate) -> JewelryItemModel | None:
        item = self.repo.get_item(item_id)
        if not item:
            return None

        changes = payload.model_dump(exclude_unset=True)
        if not changes:
            return item

        for field, value in changes.items():
            setattr(item, field, value)

        self.repo.commit()
        self.repo.refresh(item)

        logger.info(f"Updated jewelry item {item_id}: {sorted(changes)}")
        return item

    def delete_item(self, item_id: int) -> bool:
        item = self.repo.get_item(item_id)
        if not item:
            return False

        #cart lines go with the item, order history keeps its rows (FK SET NULL)
        removed_lines = self.cart_repo.delete_lines_for_jewelry(item_id)
        self.repo.delete_item(item)
        self.repo.commit()

        logger.info(f"Deleted jewelry item {item_id} (removed from {removed_lines} carts)")
        return True
