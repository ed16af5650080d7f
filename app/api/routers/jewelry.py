# app/api/routers/jewelry.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.data.database import get_db
from app.domain.enums import JewelryCategory
from app.domain.schemas import JewelryItemCreate, JewelryItemOut, JewelryItemUpdate
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/jewelry", tags=["jewelry"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("/", response_model=List[JewelryItemOut])
def list_jewelry(
    category: JewelryCategory | None = Query(None),
    featured: bool = Query(False),
    db: Session = Depends(get_db),
):
    return get_service(db).list_items(category=category, featured_only=featured)


@router.get("/featured", response_model=List[JewelryItemOut])
def list_featured(db: Session = Depends(get_db)):
    return get_service(db).list_items(featured_only=True)


@router.get("/{item_id}", response_model=JewelryItemOut)
def get_jewelry(item_id: int, db: Session = Depends(get_db)):
    item = get_service(db).get_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Jewelry item not found")
    return item


#admin

@router.post("/", response_model=JewelryItemOut, status_code=201, dependencies=[Depends(require_admin)])
def create_jewelry(payload: JewelryItemCreate, db: Session = Depends(get_db)):
    return get_service(db).create_item(payload)


@router.patch("/{item_id}", response_model=JewelryItemOut, dependencies=[Depends(require_admin)])
def update_jewelry(item_id: int, payload: JewelryItemUpdate, db: Session = Depends(get_db)):
    item = get_service(db).update_item(item_id, payload)
    if not item:
        raise HTTPException(status_code=404, detail="Jewelry item not found")
    return item


@router.delete("/{item_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_jewelry(item_id: int, db: Session = Depends(get_db)):
    if not get_service(db).delete_item(item_id):
        raise HTTPException(status_code=404, detail="Jewelry item not found")
    return Response(status_code=204)
