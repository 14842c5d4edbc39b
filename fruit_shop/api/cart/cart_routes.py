from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response

from fruit_shop.pricing.errors import InvalidArgumentError
from fruit_shop.pricing.goods import GoodKind
from fruit_shop.store import cart_queries as store

from .cart_contracts import CartResponse, PromotionRequest

cart_router = APIRouter(prefix="/cart")


@cart_router.get(
    "/{id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested cart",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to return requested cart as one was not found",
        },
    },
)
async def get_cart_by_id(id: int) -> CartResponse:
    entity = store.get_one(id)

    if not entity:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /cart/{id} was not found",
        )

    return CartResponse.from_entity(entity)


@cart_router.post(
    "/",
    status_code=HTTPStatus.CREATED,
)
async def post_cart(response: Response) -> dict[str, int]:
    entity = store.add_empty()

    response.headers["location"] = f"/cart/{entity.id}"
    return {"id": entity.id}


@cart_router.post(
    "/{cart_id}/add/{kind}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully added weight to cart",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to add weight as cart was not found",
        },
        HTTPStatus.UNPROCESSABLE_ENTITY: {
            "description": "Failed to add weight as quantity is negative",
        },
    },
)
async def add_item(
    cart_id: int,
    kind: GoodKind,
    quantity: Annotated[float, Query()] = 1.0,
) -> CartResponse:
    try:
        entity = store.add_item(cart_id, kind, quantity)
    except InvalidArgumentError as e:
        raise HTTPException(HTTPStatus.UNPROCESSABLE_ENTITY, str(e)) from e

    if entity is None:
        raise HTTPException(HTTPStatus.NOT_FOUND, f"/cart/{cart_id} not found")

    return CartResponse.from_entity(entity)


@cart_router.put(
    "/{id}/promotion",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully switched cart promotion",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to switch promotion as cart was not found",
        },
    },
)
async def put_promotion(id: int, info: PromotionRequest) -> CartResponse:
    entity = store.set_promotion(id, info.enabled)

    if entity is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Requested resource /cart/{id} was not found",
        )

    return CartResponse.from_entity(entity)
