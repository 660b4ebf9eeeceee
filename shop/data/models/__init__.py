#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from shop.data.models.user import UserModel
from shop.data.models.product import ProductModel
from shop.data.models.cart import carts_table

__all__ = ["UserModel", "ProductModel", "carts_table"]
