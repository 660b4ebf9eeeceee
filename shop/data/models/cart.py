#shop/data/models/cart.py
from sqlalchemy import Table, Column, Integer, ForeignKey, CheckConstraint

from shop.data.database import Base

# carts nie ma klucza glownego - ta sama para (owner, product) moze wystapic
# wiele razy, wiec to zwykla tabela Core a nie model ORM
carts_table = Table(
    "carts",
    Base.metadata,
    Column("owner_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("product_id", Integer, ForeignKey("products.id"), nullable=False),
    Column("product_quantity", Integer, nullable=False),
    CheckConstraint("product_quantity > 0", name="ck_carts_quantity_positive"),
)
