#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from storefront.api.dependencies import get_lock_service, get_token_service
from storefront.data.database import get_db
from storefront.domain.errors import ShopError
from storefront.domain.schemas import CartItemIn, CartOut
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService
from storefront.services.token_service import SessionTokenService

router = APIRouter(tags=["carts"])


def get_service(db: Session, tokens: SessionTokenService, locks: LockService | None):
    return CartService(
        db=db,
        token_service=tokens,
        lock_service=locks,
    )


@router.post("/addtocart", response_model=CartOut)
def add_to_cart(
    payload: CartItemIn,
    auth_token: str | None = Header(None, alias="auth-token"),
    db: Session = Depends(get_db),
    tokens: SessionTokenService = Depends(get_token_service),
    locks: LockService | None = Depends(get_lock_service),
):
    svc = get_service(db, tokens, locks)
    try:
        cart = svc.add_to_cart(auth_token, payload.itemId)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "cartData": cart}


@router.post("/removefromcart", response_model=CartOut)
def remove_from_cart(
    payload: CartItemIn,
    auth_token: str | None = Header(None, alias="auth-token"),
    db: Session = Depends(get_db),
    tokens: SessionTokenService = Depends(get_token_service),
    locks: LockService | None = Depends(get_lock_service),
):
    svc = get_service(db, tokens, locks)
    try:
        cart = svc.remove_from_cart(auth_token, payload.itemId)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "cartData": cart}


@router.post("/getcart", response_model=CartOut)
def get_cart(
    auth_token: str | None = Header(None, alias="auth-token"),
    db: Session = Depends(get_db),
    tokens: SessionTokenService = Depends(get_token_service),
):
    svc = get_service(db, tokens, None)
    try:
        cart = svc.get_cart(auth_token)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "cartData": cart}
