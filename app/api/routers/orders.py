# app/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.enums import OrderRejection
from app.domain.schemas import OrderCreate, OrderOut
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("/", response_model=OrderOut, status_code=201)
def place_order(payload: OrderCreate, db: Session = Depends(get_db)):
    """
    Checkout: turns the session's cart into an order.
    Empty cart / not enough stock -> 400 with a machine readable reason,
    nothing is written in that case.
    """
    result = get_service(db).place_order(payload)
    if isinstance(result, OrderRejection):
        raise HTTPException(
            status_code=400,
            detail={"reason": result.value, "message": result.message},
        )
    return result


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, db: Session = Depends(get_db)):
    order = get_service(db).get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
