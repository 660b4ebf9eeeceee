from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint
from shop.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(12, 2, asdecimal=True), nullable=False)

    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)
