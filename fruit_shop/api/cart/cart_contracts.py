from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from typing import List

from fruit_shop.pricing.goods import GoodKind
from fruit_shop.store.cart_models import CartEntity, CartItemInfo


class CartItemResponse(BaseModel):
    kind: GoodKind
    quantity: float
    price: float
    available: bool

    @staticmethod
    def from_cart_item_info(cart_item: CartItemInfo) -> CartItemResponse:
        return CartItemResponse(
            kind=cart_item.kind,
            quantity=cart_item.quantity,
            price=cart_item.price,
            available=cart_item.available,
        )


class CartResponse(BaseModel):
    id: int
    items: List[CartItemResponse]
    promotion: bool
    price: float

    @staticmethod
    def from_entity(entity: CartEntity) -> CartResponse:
        return CartResponse(
            id=entity.id,
            items=[CartItemResponse.from_cart_item_info(item) for item in entity.info.items],
            promotion=entity.info.promotion,
            price=entity.info.price,
        )


class PromotionRequest(BaseModel):
    enabled: bool

    model_config = ConfigDict(extra="forbid")
