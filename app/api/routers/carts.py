#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import CartItemIn, CartItemOut, CartItemUpdate, CartOut
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("/{session_id}", response_model=CartOut)
def get_cart(session_id: str, db: Session = Depends(get_db)):
    return get_service(db).get_cart(session_id)


@router.post("/items", response_model=CartItemOut)
def add_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.add_item(
            session_id=payload.session_id,
            jewelry_item_id=payload.jewelry_item_id,
            quantity=payload.quantity,
        )
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/items/{line_id}", response_model=CartItemOut)
def update_item(line_id: int, payload: CartItemUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        line = svc.update_item(line_id, payload.quantity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not line:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return line


@router.delete("/items/{line_id}", status_code=204)
def remove_item(line_id: int, db: Session = Depends(get_db)):
    if not get_service(db).remove_item(line_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return Response(status_code=204)
