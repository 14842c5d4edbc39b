from enum import Enum
from typing import Mapping

from fruit_shop.pricing.errors import InvalidArgumentError


class GoodKind(str, Enum):
    APPLE = "apple"
    STRAWBERRY = "strawberry"
    MANGO = "mango"


DEFAULT_BASE_PRICES: Mapping[GoodKind, float] = {
    GoodKind.APPLE: 8.0,
    GoodKind.STRAWBERRY: 13.0,
    GoodKind.MANGO: 20.0,
}


class PricedGood:
    """
    One kind of good sold by weight.

    The base price is fixed at construction. The discount factor can be
    replaced at any time and applies to every later price computation,
    including those made by carts that already hold this good's catalog.
    """

    __slots__ = ("_base_price", "_discount")

    def __init__(self, base_price: float) -> None:
        if base_price <= 0:
            raise InvalidArgumentError.not_positive("base_price", base_price)
        self._base_price = float(base_price)
        self._discount = 1.0

    @property
    def base_price(self) -> float:
        return self._base_price

    @property
    def discount(self) -> float:
        return self._discount

    def set_discount(self, factor: float) -> None:
        # any factor is accepted, markups included
        self._discount = factor

    def price_for(self, quantity: float) -> float:
        return self._base_price * quantity * self._discount

    def __repr__(self) -> str:
        return f"PricedGood(base_price={self._base_price}, discount={self._discount})"


Catalog = dict[GoodKind, PricedGood]


def create_catalog(prices: Mapping[GoodKind, float] | None = None) -> Catalog:
    if prices is None:
        prices = DEFAULT_BASE_PRICES
    return {kind: PricedGood(price) for kind, price in prices.items()}
