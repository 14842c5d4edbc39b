import logging
from typing import Iterator

from fruit_shop.pricing.errors import InvalidArgumentError
from fruit_shop.pricing.goods import Catalog, GoodKind

logger = logging.getLogger(__name__)

PROMOTION_THRESHOLD = 100.0
PROMOTION_AMOUNT = 10.0


class Cart:
    """
    Accumulates weights per good kind and prices them against a catalog.

    The catalog is held by reference: discount changes made on it after the
    cart was created are reflected by the next ``total_price`` call.
    Not thread-safe; callers sharing a cart or catalog must lock externally.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._quantities: dict[GoodKind, float] = {}
        self._promotion = False

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def promotion_enabled(self) -> bool:
        return self._promotion

    def add_item(self, kind: GoodKind, quantity: float) -> None:
        if quantity < 0:
            raise InvalidArgumentError.negative("quantity", quantity)
        self._quantities[kind] = self._quantities.get(kind, 0.0) + quantity
        logger.debug("added %s x %s, now %s", kind, quantity, self._quantities[kind])

    def set_promotion(self, enabled: bool) -> None:
        self._promotion = enabled

    def quantity_of(self, kind: GoodKind) -> float:
        return self._quantities.get(kind, 0.0)

    def items(self) -> Iterator[tuple[GoodKind, float]]:
        return iter(list(self._quantities.items()))

    def total_price(self) -> float:
        total = 0.0
        for kind, quantity in self._quantities.items():
            good = self._catalog.get(kind)
            if good is not None:
                total += good.price_for(quantity)

        if self._promotion and total >= PROMOTION_THRESHOLD:
            logger.debug("promotion applied to %s", total)
            total -= PROMOTION_AMOUNT

        return total
