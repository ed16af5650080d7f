# app/api/routers/admin.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_auth_service, require_admin
from app.data.database import get_db
from app.domain.schemas import AdminLoginIn, AdminUserOut, OrderOut, OrderStatusUpdate, TokenIn, TokenOut
from app.services.auth_service import AuthService
from app.services.order_service import OrderService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=TokenOut)
def login(payload: AdminLoginIn, auth: AuthService = Depends(get_auth_service)):
    token = auth.login(payload.username, payload.password)
    if not token:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return token


@router.post("/verify", response_model=AdminUserOut)
def verify(payload: TokenIn, auth: AuthService = Depends(get_auth_service)):
    admin = auth.verify(payload.token)
    if not admin:
        raise HTTPException(status_code=401, detail="Unauthorized: invalid admin token")
    return admin


@router.get("/orders", response_model=List[OrderOut], dependencies=[Depends(require_admin)])
def list_orders(db: Session = Depends(get_db)):
    return OrderService(db).list_orders()


@router.patch("/orders/{order_id}/status", response_model=OrderOut, dependencies=[Depends(require_admin)])
def update_order_status(order_id: int, payload: OrderStatusUpdate, db: Session = Depends(get_db)):
    order = OrderService(db).update_order_status(order_id, payload.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
