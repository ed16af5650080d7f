import os

#settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_TOKEN_SECRET"] = "test-secret"
os.environ["ADMIN_TOKEN_TTL_SECONDS"] = str(24 * 60 * 60)
os.environ["ADMIN_TOKEN_REQUIRE_EXP"] = "false"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api import create_app
from app.data import models  # noqa: F401  registers tables
from app.data.database import Base, get_db, make_engine
from app.data.models import AdminUserModel, CartItemModel, JewelryItemModel
from app.domain.enums import JewelryCategory
from app.domain.schemas import OrderCreate
from app.services.auth_service import AuthService
from app.utils.tokens import TokenSigner

ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture()
def engine(tmp_path):
    #file backed so separate sessions get separate connections
    eng = make_engine(f"sqlite:///{tmp_path / 'store.db'}")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    application = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = override_get_db
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture()
def signer():
    return TokenSigner(secret="test-secret", ttl_seconds=24 * 60 * 60)


@pytest.fixture()
def make_item(db):
    counter = {"n": 0}

    def _make(**overrides) -> JewelryItemModel:
        counter["n"] += 1
        data = {
            "name": f"Piece {counter['n']}",
            "description": "Hand finished",
            "materials": "sterling silver",
            "category": JewelryCategory.RINGS,
            "price": 1000,
            "stock_quantity": 10,
            "is_featured": False,
        }
        data.update(overrides)
        item = JewelryItemModel(**data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    return _make


@pytest.fixture()
def put_in_cart(db):
    def _put(session_id: str, item: JewelryItemModel, quantity: int) -> CartItemModel:
        line = CartItemModel(session_id=session_id, jewelry_item_id=item.id, quantity=quantity)
        db.add(line)
        db.commit()
        db.refresh(line)
        return line

    return _put


@pytest.fixture()
def admin(db, signer) -> AdminUserModel:
    return AuthService(db, signer=signer).create_admin("admin", "admin@example.com", ADMIN_PASSWORD)


@pytest.fixture()
def admin_headers(admin, signer):
    return {"Authorization": f"Bearer {signer.issue(admin.id, username=admin.username)}"}


def _checkout_form(session_id: str, **overrides) -> OrderCreate:
    data = {
        "session_id": session_id,
        "customer_name": "Ada Lovelace",
        "customer_email": "ada@example.com",
        "customer_phone": None,
        "shipping_address": "12 St James's Square, London",
        "billing_address": None,
        "notes": None,
    }
    data.update(overrides)
    return OrderCreate(**data)


@pytest.fixture()
def checkout_form():
    return _checkout_form


@pytest.fixture()
def admin_password():
    return ADMIN_PASSWORD
