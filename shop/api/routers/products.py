# shop/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shop.api.deps import get_current_user
from shop.data.database import get_db
from shop.domain.errors import StoreError
from shop.domain.schemas import ProductOut
from shop.services.catalog_service import CatalogService
from shop.services.token_service import IdentityClaims
from shop.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    user: IdentityClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = CatalogService(db)
    try:
        return svc.list_products()
    except StoreError as e:
        logger.error(f"Listing products failed: {e}")
        raise HTTPException(status_code=500, detail="Something went wrong while retrieving data.")
