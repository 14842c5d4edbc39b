from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fruit_shop.pricing.goods import GoodKind
from fruit_shop.store.good_models import GoodEntity


class GoodResponse(BaseModel):
    kind: GoodKind
    base_price: float
    discount: float

    @staticmethod
    def from_entity(entity: GoodEntity) -> GoodResponse:
        return GoodResponse(
            kind=entity.kind,
            base_price=entity.info.base_price,
            discount=entity.info.discount,
        )


class PatchGoodRequest(BaseModel):
    discount: float

    model_config = ConfigDict(extra="forbid")
