# shop/api/routers/auth.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from shop.api.deps import get_current_user, get_token_service
from shop.data.database import get_db
from shop.domain.errors import DuplicateUsernameError, StoreError
from shop.domain.schemas import CredentialsIn, MessageOut, TokenOut, ProtectedOut
from shop.services.auth_service import AuthService
from shop.services.token_service import IdentityClaims, TokenService
from shop.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def get_service(db: Session, token_service: TokenService):
    return AuthService(db=db, token_service=token_service)


@router.post("/signup", response_model=MessageOut)
def signup(
    payload: CredentialsIn,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    svc = get_service(db, token_service)
    try:
        svc.signup(payload.username, payload.password)
    except DuplicateUsernameError:
        return JSONResponse(status_code=500, content={"error": "Failed to create user"})
    except StoreError as e:
        logger.error(f"Signup failed: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to create user"})
    return {"message": "User created successfully"}


@router.post("/login", response_model=TokenOut)
def login(
    payload: CredentialsIn,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    # InvalidCredentialsError -> 401 przez handler AuthError
    svc = get_service(db, token_service)
    try:
        token = svc.login(payload.username, payload.password)
    except StoreError as e:
        logger.error(f"Login failed: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to query database"})
    return {"token": token}


@router.get("/protected", response_model=ProtectedOut)
def protected(user: IdentityClaims = Depends(get_current_user)):
    return {"message": "This is a protected route.", "user": user.as_dict()}
