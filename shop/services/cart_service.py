# shop/services/cart_service.py
from sqlalchemy.orm import Session

from shop.domain.pricing import PricedCart, price_cart
from shop.domain.schemas import CartLineOut, CartOut
from shop.repos.cart_repo import CartRepo
from shop.repos.product_repo import ProductRepo
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    query (get_cart) - odczyt linii + produktow i wycena
    commands (add_to_cart, clear_cart) - zapis do tabeli carts
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def price_for(self, owner_id: int) -> PricedCart:
        lines = self.repo.list_lines(owner_id)

        # jedno zapytanie o wszystkie produkty; wycena startuje dopiero jak
        # wszystkie sa pobrane. Cena moze sie zmienic miedzy dwoma odczytami -
        # nie ma wspolnej transakcji i to jest akceptowane
        products = self.products.get_products(line.product_id for line in lines)

        return price_cart([(line, products.get(line.product_id)) for line in lines])

    def get_cart(self, owner_id: int) -> CartOut:
        priced = self.price_for(owner_id)

        logger.info(
            f"Cart of user {owner_id}: {len(priced.line_items)} lines, total {priced.order_total}"
        )

        return CartOut(
            cart_details=[
                CartLineOut(
                    product_id=i.product_id,
                    product_name=i.product_name,
                    unit_price=i.unit_price,
                    quantity=i.quantity,
                    tax=i.tax,
                    total_price=i.line_total,
                )
                for i in priced.line_items
            ],
            total_amount=priced.order_total,
        )

    #commands
    def add_to_cart(self, owner_id: int, product_id: int, quantity: int) -> None:
        self.repo.add_line(owner_id, product_id, quantity)
        logger.info(f"Added product {product_id} x{quantity} to cart of user {owner_id}")

    def clear_cart(self, owner_id: int) -> int:
        removed = self.repo.clear(owner_id)
        logger.info(f"Cleared cart of user {owner_id}, removed {removed} lines")
        return removed
