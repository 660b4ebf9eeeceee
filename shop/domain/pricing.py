# shop/domain/pricing.py
"""
Wycena koszyka: podatek per linia, suma linii, suma zamowienia.

Czysta funkcja - bez sesji, bez I/O. Wejscie to pary (linia koszyka, produkt)
zebrane wczesniej przez CartService.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

from shop.domain.errors import ProductNotFoundError


class LineCategory(str, Enum):
    PRODUCT = "product"
    # progi dla uslug sa zdefiniowane, ale linie koszyka nie maja jeszcze
    # pola kategorii - wszystko wyceniane jako PRODUCT
    SERVICE = "service"


@dataclass(frozen=True)
class TaxBracket:
    upper_bound: Optional[Decimal]  # None = bez gornej granicy
    flat: Optional[Decimal] = None
    rate: Optional[Decimal] = None

    def applies_to(self, unit_price: Decimal) -> bool:
        return self.upper_bound is None or unit_price <= self.upper_bound

    def tax_for(self, unit_price: Decimal) -> Decimal:
        if self.flat is not None:
            return self.flat
        return unit_price * self.rate


FLAT_TAX = Decimal("200")

TAX_BRACKETS = {
    LineCategory.PRODUCT: (
        TaxBracket(upper_bound=Decimal("1000"), flat=FLAT_TAX),
        TaxBracket(upper_bound=Decimal("5000"), rate=Decimal("0.12")),
        TaxBracket(upper_bound=None, rate=Decimal("0.18")),
    ),
    LineCategory.SERVICE: (
        TaxBracket(upper_bound=Decimal("1000"), flat=FLAT_TAX),
        TaxBracket(upper_bound=Decimal("8000"), rate=Decimal("0.10")),
        TaxBracket(upper_bound=None, rate=Decimal("0.15")),
    ),
}


class ProductLike(Protocol):
    id: int
    name: str
    price: Decimal


@dataclass(frozen=True)
class CartLine:
    owner_id: int
    product_id: int
    quantity: int
    category: LineCategory = LineCategory.PRODUCT


@dataclass(frozen=True)
class LineItem:
    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int
    tax: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class PricedCart:
    line_items: List[LineItem]
    order_total: Decimal


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # float -> str, zeby nie ciagnac bledu reprezentacji binarnej
    return Decimal(str(value))


def compute_tax(unit_price, category: LineCategory = LineCategory.PRODUCT) -> Decimal:
    price = _as_decimal(unit_price)
    if price < 0:
        raise ValueError(f"Price must be non-negative, got {price}")

    for bracket in TAX_BRACKETS[category]:
        if bracket.applies_to(price):
            return bracket.tax_for(price)

    # ostatni prog nie ma granicy, tu nie dojdziemy
    raise AssertionError(f"No tax bracket for {category} price {price}")


def price_line(line: CartLine, product: ProductLike) -> LineItem:
    unit_price = _as_decimal(product.price)
    tax = compute_tax(unit_price, line.category)

    return LineItem(
        product_id=product.id,
        product_name=product.name,
        unit_price=unit_price,
        quantity=line.quantity,
        tax=tax,
        line_total=line.quantity * unit_price + tax,
    )


def price_cart(lines: Sequence[Tuple[CartLine, Optional[ProductLike]]]) -> PricedCart:
    """
    Wycenia wszystkie linie koszyka.

    Brak produktu dla linii to naruszenie integralnosci danych (nie blad
    uzytkownika) - rzucamy ProductNotFoundError zamiast pomijac linie.
    """
    items: List[LineItem] = []

    for line, product in lines:
        if product is None:
            raise ProductNotFoundError(line.product_id)
        items.append(price_line(line, product))

    total = sum((i.line_total for i in items), Decimal("0"))
    return PricedCart(line_items=items, order_total=total)
