# app/services/cart_service.py
from typing import Dict, Any
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.domain.money import line_total, sum_cents
from app.repos.cart_repo import CartRepo
from app.repos.catalog_repo import CatalogRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Guest cart keyed by an opaque session id.
    query (get_cart) only reads, commands (add, update, remove) modify lines
    of one session and need no cross-session coordination.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.catalog = CatalogRepo(db)

    #query
    def get_cart(self, session_id: str) -> Dict[str, Any]:
        lines = self.repo.get_cart_lines(session_id)
        total = sum_cents(line_total(line.jewelry_item.price, line.quantity) for line in lines)

        return {
            "session_id": session_id,
            "items": lines,
            "total_amount": total,
        }

    #commands
    def add_item(self, session_id: str, jewelry_item_id: int, quantity: int) -> CartItemModel:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        item = self.catalog.get_item(jewelry_item_id)
        if not item:
            raise LookupError(f"Jewelry item with ID {jewelry_item_id} not found")

        existing = self.repo.get_cart_item_for_jewelry(session_id, jewelry_item_id)
        new_quantity = quantity + (existing.quantity if existing else 0)

        if new_quantity > item.stock_quantity:
            raise ValueError(
                f"Insufficient stock. Available: {item.stock_quantity}, requested: {new_quantity}"
            )

        if existing:
            logger.info(
                f"Item {jewelry_item_id} already in cart {session_id}, "
                f"raising quantity {existing.quantity} -> {new_quantity}"
            )
            existing.quantity = new_quantity
            line = existing
        else:
            logger.info(f"Adding item {jewelry_item_id} x{quantity} to cart {session_id}")
            line = self.repo.add_cart_item(
                CartItemModel(
                    session_id=session_id,
                    jewelry_item_id=jewelry_item_id,
                    quantity=quantity,
                )
            )

        self.repo.commit()
        self.repo.refresh(line)
        return line

    def update_item(self, line_id: int, quantity: int) -> CartItemModel | None:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        line = self.repo.get_cart_item(line_id)
        if not line:
            return None

        if quantity > line.jewelry_item.stock_quantity:
            raise ValueError(
                f"Insufficient stock. Available: {line.jewelry_item.stock_quantity}, requested: {quantity}"
            )

        line.quantity = quantity
        self.repo.commit()
        self.repo.refresh(line)

        logger.info(f"Cart line {line_id} ({line.session_id}) set to quantity {quantity}")
        return line

    def remove_item(self, line_id: int) -> bool:
        line = self.repo.get_cart_item(line_id)
        if not line:
            return False

        self.repo.delete_cart_item(line)
        self.repo.commit()

        logger.info(f"Removed cart line {line_id} from cart {line.session_id}")
        return True
