# app/services/order_service.py
from dataclasses import dataclass
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.domain.enums import OrderRejection, OrderStatus
from app.domain.money import line_total, sum_cents
from app.domain.schemas import JewelryItemOut, OrderCreate, OrderItemOut, OrderOut
from app.repos.cart_repo import CartRepo
from app.repos.catalog_repo import CatalogRepo
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartLineSnapshot:
    """Price and stock of one cart line as read at the start of checkout."""

    jewelry_item_id: int
    quantity: int
    unit_price: int
    stock_quantity: int
    jewelry_item: JewelryItemOut

    @classmethod
    def from_line(cls, line: CartItemModel) -> "CartLineSnapshot":
        item = line.jewelry_item
        return cls(
            jewelry_item_id=item.id,
            quantity=line.quantity,
            unit_price=item.price,
            stock_quantity=item.stock_quantity,
            jewelry_item=JewelryItemOut.model_validate(item),
        )

    @property
    def in_stock(self) -> bool:
        return self.quantity <= self.stock_quantity

    @property
    def subtotal(self) -> int:
        return line_total(self.unit_price, self.quantity)


class StockConflict(Exception):
    """A conditional stock decrement matched no row inside the order transaction."""

    def __init__(self, jewelry_item_id: int, quantity: int):
        super().__init__(f"Stock for item {jewelry_item_id} dropped below {quantity} during checkout")
        self.jewelry_item_id = jewelry_item_id
        self.quantity = quantity


class CartConsumed(Exception):
    """The cart lines read at the start of checkout were deleted by a concurrent checkout."""

    def __init__(self, session_id: str, expected: int, deleted: int):
        super().__init__(f"Cart of session {session_id} changed during checkout ({deleted} of {expected} lines left)")
        self.session_id = session_id
        self.expected = expected
        self.deleted = deleted


class OrderService:
    """
    Orders are created only here, from a session's cart.

    place_order reads the cart (locking the touched catalog rows), validates
    every line against live stock, then inserts the order and its lines,
    decrements stock and clears the cart in one transaction. Either all of it
    commits or none of it is visible.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.catalog_repo = CatalogRepo(db)

    def place_order(self, payload: OrderCreate) -> OrderOut | OrderRejection:
        session_id = payload.session_id

        try:
            #1. cart + live price/stock, catalog rows locked until commit/rollback
            lines = self.cart_repo.get_cart_lines(session_id, for_update=True)
            if not lines:
                self.db.rollback()
                logger.info(f"Order rejected for session {session_id}: empty cart")
                return OrderRejection.EMPTY_CART

            snapshots = [CartLineSnapshot.from_line(line) for line in lines]
            touched_items = [line.jewelry_item for line in lines]

            #2. all-or-nothing stock check before any write
            short = [s for s in snapshots if not s.in_stock]
            if short:
                self.db.rollback()
                logger.warning(
                    f"Order rejected for session {session_id}: insufficient stock for "
                    + ", ".join(f"item {s.jewelry_item_id} ({s.quantity} > {s.stock_quantity})" for s in short)
                )
                return OrderRejection.INSUFFICIENT_STOCK

            #3. integer cents only
            total = sum_cents(s.subtotal for s in snapshots)

            #4a/4b. order + lines, price_at_time from the snapshot, not re-read
            order = OrderModel(
                session_id=session_id,
                customer_name=payload.customer_name,
                customer_email=str(payload.customer_email),
                customer_phone=payload.customer_phone,
                shipping_address=payload.shipping_address,
                billing_address=payload.billing_address,
                notes=payload.notes,
                total_amount=total,
                status=OrderStatus.PENDING,
            )
            order_items = [
                OrderItemModel(
                    jewelry_item_id=s.jewelry_item_id,
                    quantity=s.quantity,
                    price_at_time=s.unit_price,
                )
                for s in snapshots
            ]
            order.items.extend(order_items)
            self.repo.add_order(order)

            #4c. conditional decrement, guards backends that ignore FOR UPDATE
            for s in snapshots:
                if not self.catalog_repo.decrement_stock(s.jewelry_item_id, s.quantity):
                    raise StockConflict(s.jewelry_item_id, s.quantity)

            #4d. only the lines read in step 1; fewer deleted means another checkout took them
            deleted = self.cart_repo.delete_cart_lines(session_id, [line.id for line in lines])
            if deleted != len(lines):
                raise CartConsumed(session_id, len(lines), deleted)

            self.repo.commit()

        except CartConsumed as e:
            self.db.rollback()
            logger.warning(f"Order rejected for session {session_id}: {e}")
            return OrderRejection.EMPTY_CART

        except StockConflict as e:
            self.db.rollback()
            logger.warning(f"Order rejected for session {session_id}: {e}")
            return OrderRejection.INSUFFICIENT_STOCK

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Order transaction for session {session_id} failed, rolled back")
            raise

        #stock was changed with a bulk UPDATE, drop the cached values
        for item in touched_items:
            self.db.expire(item)

        logger.info(
            f"Order {order.id} placed for session {session_id}: "
            f"{len(order_items)} lines, total {total} cents"
        )

        return self._compose(order, order_items, snapshots)

    def _compose(
        self,
        order: OrderModel,
        order_items: List[OrderItemModel],
        snapshots: List[CartLineSnapshot],
    ) -> OrderOut:
        return OrderOut(
            id=order.id,
            session_id=order.session_id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            total_amount=order.total_amount,
            status=order.status,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemOut(
                    id=order_item.id,
                    quantity=order_item.quantity,
                    price_at_time=order_item.price_at_time,
                    jewelry_item_id=snapshot.jewelry_item_id,
                    jewelry_item=snapshot.jewelry_item,
                )
                for order_item, snapshot in zip(order_items, snapshots)
            ],
        )

    def get_order(self, order_id: int) -> OrderOut | None:
        order = self.repo.get_order(order_id)
        if not order:
            return None
        return OrderOut.model_validate(order)

    def list_orders(self) -> List[OrderOut]:
        return [OrderOut.model_validate(order) for order in self.repo.list_orders()]

    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderOut | None:
        """
        Admin status change. Any status may follow any other; there is no
        transition table.
        """
        current = self.repo.get_order(order_id)
        if not current:
            return None

        previous = current.status
        order = self.repo.update_order_status(order_id, status)

        logger.info(f"Order {order_id} status {previous.value} -> {status.value}")
        return OrderOut.model_validate(order)
