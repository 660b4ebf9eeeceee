# shop/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from shop.data.models.product import ProductModel
from shop.repos.product_repo import ProductRepo
from shop.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    ("Handcrafted Wooden Chair", "89.99"),
    ("Ergonomic Cotton Shirt", "24.50"),
    ("Rustic Steel Lamp", "640.00"),
    ("Sleek Granite Table", "1000.00"),
    ("Refined Bronze Keyboard", "1499.00"),
    ("Generic Fresh Bike", "3250.75"),
    ("Practical Plastic Monitor", "5000.00"),
    ("Intelligent Rubber Laptop", "7899.99"),
    ("Licensed Concrete Sofa", "12500.00"),
    ("Small Frozen Towels", "9.99"),
]


def seed_products(db: Session) -> int:
    """Dodaje przykladowy katalog tylko gdy tabela products jest pusta."""
    repo = ProductRepo(db)
    if repo.count():
        return 0

    repo.add_products(
        [ProductModel(name=name, price=Decimal(price)) for name, price in SAMPLE_PRODUCTS]
    )
    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)
