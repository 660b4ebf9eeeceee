# shop/repos/cart_repo.py
from typing import List

from sqlalchemy import select, insert, delete
from sqlalchemy.orm import Session

from shop.data.models.cart import carts_table
from shop.domain.errors import STORE_ERRORS, translate_store_error
from shop.domain.pricing import CartLine


class CartRepo:
    """
    Operacje na tabeli carts (bez PK, wiec przez Core a nie ORM).
    Linie sie nie scalaja - kazde dodanie to nowy wiersz.
    """

    def __init__(self, db: Session):
        self.db = db

    def add_line(self, owner_id: int, product_id: int, quantity: int) -> None:
        try:
            self.db.execute(
                insert(carts_table).values(
                    owner_id=owner_id,
                    product_id=product_id,
                    product_quantity=quantity,
                )
            )
            self.db.commit()
        except STORE_ERRORS as e:
            self.db.rollback()
            raise translate_store_error(e) from e

    def list_lines(self, owner_id: int) -> List[CartLine]:
        c = carts_table.c
        try:
            rows = self.db.execute(
                select(c.owner_id, c.product_id, c.product_quantity)
                .where(c.owner_id == owner_id)
            ).all()
        except STORE_ERRORS as e:
            raise translate_store_error(e) from e

        return [
            CartLine(owner_id=r.owner_id, product_id=r.product_id, quantity=r.product_quantity)
            for r in rows
        ]

    def clear(self, owner_id: int) -> int:
        try:
            result = self.db.execute(
                delete(carts_table).where(carts_table.c.owner_id == owner_id)
            )
            self.db.commit()
        except STORE_ERRORS as e:
            self.db.rollback()
            raise translate_store_error(e) from e
        # 0 usunietych wierszy to tez sukces
        return result.rowcount
