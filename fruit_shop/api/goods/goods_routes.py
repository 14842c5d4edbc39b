from http import HTTPStatus

from fastapi import APIRouter, HTTPException

from fruit_shop.pricing.goods import GoodKind
from fruit_shop.store import good_queries as store

from .goods_contracts import GoodResponse, PatchGoodRequest

goods_router = APIRouter(prefix="/goods")


@goods_router.get("/")
async def get_goods_list() -> list[GoodResponse]:
    return [GoodResponse.from_entity(e) for e in store.get_many()]


@goods_router.get(
    "/{kind}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested good",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to return requested good as it is not in the catalog",
        },
    },
)
async def get_good(kind: GoodKind) -> GoodResponse:
    entity = store.get_one(kind)

    if entity is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /goods/{kind.value} was not found",
        )

    return GoodResponse.from_entity(entity)


@goods_router.patch(
    "/{kind}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully changed discount of the good",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to change discount as the good is not in the catalog",
        },
    },
)
async def patch_good(kind: GoodKind, info: PatchGoodRequest) -> GoodResponse:
    # the change is visible to every cart sharing the catalog
    entity = store.set_discount(kind, info.discount)

    if entity is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Requested resource /goods/{kind.value} was not found",
        )

    return GoodResponse.from_entity(entity)
