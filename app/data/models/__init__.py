#import all models so SQLAlchemy registers them in Base.metadata

from app.data.models.jewelry_item import JewelryItemModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.data.models.admin_user import AdminUserModel

__all__ = ["JewelryItemModel", "CartItemModel", "OrderModel", "OrderItemModel", "AdminUserModel"]
