from typing import List

from sqlalchemy.orm import Session

from shop.domain.schemas import ProductOut
from shop.repos.product_repo import ProductRepo


class CatalogService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products()]
