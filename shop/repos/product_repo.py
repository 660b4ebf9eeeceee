# shop/repos/product_repo.py
from typing import Dict, Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop.data.models.product import ProductModel
from shop.domain.errors import STORE_ERRORS, translate_store_error


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> List[ProductModel]:
        try:
            return list(
                self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars()
            )
        except STORE_ERRORS as e:
            raise translate_store_error(e) from e

    def get_products(self, product_ids: Iterable[int]) -> Dict[int, ProductModel]:
        ids = set(product_ids)
        if not ids:
            return {}
        try:
            rows = self.db.execute(
                select(ProductModel).where(ProductModel.id.in_(ids))
            ).scalars()
            return {p.id: p for p in rows}
        except STORE_ERRORS as e:
            raise translate_store_error(e) from e

    def count(self) -> int:
        try:
            return self.db.query(ProductModel).count()
        except STORE_ERRORS as e:
            raise translate_store_error(e) from e

    def add_products(self, products: List[ProductModel]) -> None:
        try:
            self.db.add_all(products)
            self.db.commit()
        except STORE_ERRORS as e:
            self.db.rollback()
            raise translate_store_error(e) from e
