import logging
from typing import Iterable

from fruit_shop.config import settings
from fruit_shop.pricing.goods import Catalog, GoodKind, PricedGood, create_catalog
from fruit_shop.store.good_models import GoodEntity, GoodInfo

logger = logging.getLogger(__name__)

# shared by every cart created through the store
catalog: Catalog = create_catalog(settings.base_prices)


def _to_good_entity(kind: GoodKind, good: PricedGood) -> GoodEntity:
    return GoodEntity(kind=kind, info=GoodInfo(base_price=good.base_price, discount=good.discount))


def get_one(kind: GoodKind) -> GoodEntity | None:
    good = catalog.get(kind)
    if good is None:
        return None
    return _to_good_entity(kind, good)


def get_many() -> Iterable[GoodEntity]:
    for kind, good in catalog.items():
        yield _to_good_entity(kind, good)


def set_discount(kind: GoodKind, factor: float) -> GoodEntity | None:
    good = catalog.get(kind)
    if good is None:
        return None
    good.set_discount(factor)
    logger.info("discount for %s set to %s", kind.value, factor)
    return _to_good_entity(kind, good)
