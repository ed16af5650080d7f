# app/domain/enums.py
from enum import Enum


class JewelryCategory(str, Enum):
    RINGS = "rings"
    EARRINGS = "earrings"
    NECKLACES = "necklaces"
    CUFFLINKS = "cufflinks"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderRejection(str, Enum):
    """Expected outcomes of placing an order that leave no state behind."""

    EMPTY_CART = "empty_cart"
    INSUFFICIENT_STOCK = "insufficient_stock"

    @property
    def message(self) -> str:
        if self is OrderRejection.EMPTY_CART:
            return "Cannot place order: the cart is empty"
        return "Cannot place order: not enough stock for one or more items"
