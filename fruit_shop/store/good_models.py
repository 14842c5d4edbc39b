from dataclasses import dataclass

from fruit_shop.pricing.goods import GoodKind


@dataclass(slots=True)
class GoodInfo:
    base_price: float
    discount: float


@dataclass(slots=True)
class GoodEntity:
    kind: GoodKind
    info: GoodInfo
