# app/data/seed.py
"""
Provisioning: python -m app.data.seed

Creates the admin from SEED_ADMIN_* settings (if set and missing) and a
small sample catalog when the catalog is empty.
"""
from app.data.database import Base, SessionLocal, engine
from app.data.models import JewelryItemModel
from app.domain.enums import JewelryCategory
from app.services.auth_service import AuthService
from app.utils import settings
from app.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_CATALOG = [
    {
        "name": "Solitaire Ring",
        "description": "Round brilliant solitaire on a slim band",
        "materials": "18k white gold, diamond",
        "category": JewelryCategory.RINGS,
        "price": 129900,
        "stock_quantity": 5,
        "is_featured": True,
    },
    {
        "name": "Pearl Drop Earrings",
        "description": "Freshwater pearls on hook wires",
        "materials": "sterling silver, freshwater pearl",
        "category": JewelryCategory.EARRINGS,
        "price": 8900,
        "stock_quantity": 12,
        "is_featured": False,
    },
    {
        "name": "Herringbone Necklace",
        "description": "Flat herringbone chain, 45 cm",
        "materials": "14k yellow gold",
        "category": JewelryCategory.NECKLACES,
        "price": 45000,
        "stock_quantity": 3,
        "is_featured": True,
    },
    {
        "name": "Onyx Cufflinks",
        "description": "Square onyx inlay cufflinks",
        "materials": "sterling silver, onyx",
        "category": JewelryCategory.CUFFLINKS,
        "price": 12500,
        "stock_quantity": 8,
        "is_featured": False,
    },
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if settings.SEED_ADMIN_USERNAME and settings.SEED_ADMIN_PASSWORD:
            auth = AuthService(db)
            if auth.repo.get_by_username(settings.SEED_ADMIN_USERNAME):
                logger.info(f"Admin {settings.SEED_ADMIN_USERNAME} already exists, skipping")
            else:
                auth.create_admin(
                    settings.SEED_ADMIN_USERNAME,
                    settings.SEED_ADMIN_EMAIL,
                    settings.SEED_ADMIN_PASSWORD,
                )
        else:
            logger.warning("SEED_ADMIN_USERNAME/SEED_ADMIN_PASSWORD not set, no admin provisioned")

        # not forcing: only seed if empty
        if db.query(JewelryItemModel).first():
            return
        db.add_all(JewelryItemModel(**row) for row in SAMPLE_CATALOG)
        db.commit()
        logger.info(f"Seeded {len(SAMPLE_CATALOG)} catalog items")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
