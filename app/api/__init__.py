# app/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.routers import admin, carts, health, jewelry, orders
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.__class__.__name__}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Jewelry Store",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

    app.include_router(health.router)
    app.include_router(jewelry.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(admin.router)

    return app
