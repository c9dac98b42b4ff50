from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import ShopError
from storefront.domain.schemas import ProductIn, RemoveProductIn, ProductNameOut, ProductOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["products"])


def get_service(db: Session):
    return CatalogService(db)


@router.post("/addproduct", response_model=ProductNameOut)
def add_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        product = svc.add_product(
            name=payload.name,
            image=payload.image,
            category=payload.category,
            new_price=payload.new_price,
            old_price=payload.old_price,
        )
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "name": product.name}


@router.post("/removeproduct", response_model=ProductNameOut)
def remove_product(payload: RemoveProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        product = svc.remove_product(payload.id)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "name": product.name}


@router.get("/allproducts", response_model=List[ProductOut])
def all_products(db: Session = Depends(get_db)):
    try:
        return get_service(db).all_products()
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/newcollection", response_model=List[ProductOut])
def new_collection(db: Session = Depends(get_db)):
    try:
        return get_service(db).new_collection()
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/popularinwomen", response_model=List[ProductOut])
def popular_in_women(db: Session = Depends(get_db)):
    try:
        return get_service(db).popular_in_women()
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
