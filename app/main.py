# app/main.py
from app.api import create_app
from app.data.database import Base, engine
from app.utils.logging import get_logger
import uvicorn

logger = get_logger(__name__)

# import all models before create_all
from app.data.models.jewelry_item import JewelryItemModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.data.models.admin_user import AdminUserModel


def init_db():
    logger.info(f"Initializing database, models registered: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")


init_db()
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
