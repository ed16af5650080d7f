# app/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.utils.settings import DATABASE_URL


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        #fastapi runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False

    eng = create_engine(url, pool_pre_ping=True, connect_args=connect_args)

    if eng.dialect.name == "sqlite":
        #sqlite ignores FKs (ondelete SET NULL / CASCADE) unless enabled per connection
        @event.listens_for(eng, "connect")
        def _enable_fk(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
