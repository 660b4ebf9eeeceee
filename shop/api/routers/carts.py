#shop/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shop.api.deps import get_current_user
from shop.data.database import get_db
from shop.domain.errors import PricingError, StoreError
from shop.domain.schemas import CartAddIn, CartOut, DetailOut
from shop.services.cart_service import CartService
from shop.services.token_service import IdentityClaims
from shop.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db=db)


@router.get("", response_model=CartOut)
def get_cart(
    user: IdentityClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_cart(user.id)
    except (StoreError, PricingError) as e:
        # brak produktu dla linii to blad serwera, nie klienta
        logger.error(f"Pricing cart of user {user.id} failed: {e}")
        raise HTTPException(status_code=500, detail="Error occurred")


@router.post("/add", response_model=DetailOut)
def add_to_cart(
    payload: CartAddIn,
    user: IdentityClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.add_to_cart(user.id, payload.product_id, payload.quantity)
    except StoreError as e:
        logger.error(f"Adding to cart of user {user.id} failed: {e}")
        raise HTTPException(status_code=500, detail="Error occurred while inserting to cart")
    return {"detail": "Added to cart successfully"}


@router.delete("", response_model=DetailOut)
def clear_cart(
    user: IdentityClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.clear_cart(user.id)
    except StoreError as e:
        logger.error(f"Clearing cart of user {user.id} failed: {e}")
        raise HTTPException(status_code=500, detail="Error occurred while clearing the cart")
    return {"detail": "Cart cleared successfully"}
