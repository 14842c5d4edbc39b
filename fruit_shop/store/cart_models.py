from dataclasses import dataclass
from typing import List

from fruit_shop.pricing.goods import GoodKind


@dataclass(slots=True)
class CartItemInfo:
    kind: GoodKind
    quantity: float
    price: float
    available: bool


@dataclass(slots=True)
class CartInfo:
    items: List[CartItemInfo]
    promotion: bool
    price: float


@dataclass(slots=True)
class CartEntity:
    id: int
    info: CartInfo
