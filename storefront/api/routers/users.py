from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.dependencies import get_password_hasher, get_token_service
from storefront.data.database import get_db
from storefront.domain.errors import ShopError
from storefront.domain.schemas import SignupIn, LoginIn, TokenOut
from storefront.services.auth_service import AuthService
from storefront.services.password_hasher import PasswordHasher
from storefront.services.token_service import SessionTokenService

router = APIRouter(tags=["users"])


def get_service(db: Session, hasher: PasswordHasher, tokens: SessionTokenService):
    return AuthService(db=db, hasher=hasher, token_service=tokens)


@router.post("/signup", response_model=TokenOut)
def signup(
    payload: SignupIn,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    service = get_service(db, hasher, tokens)
    try:
        token = service.signup(payload.name, payload.email, payload.password)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "token": token}


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    service = get_service(db, hasher, tokens)
    try:
        token = service.login(payload.email, payload.password)
    except ShopError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"success": True, "token": token}
