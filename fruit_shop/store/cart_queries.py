import itertools
import logging

from fruit_shop.pricing.cart import Cart
from fruit_shop.pricing.goods import GoodKind
from fruit_shop.store import good_queries
from fruit_shop.store.cart_models import CartEntity, CartInfo, CartItemInfo

logger = logging.getLogger(__name__)

id_generator = itertools.count()

carts_data = dict[int, Cart]()


def _cart_info(cart: Cart) -> CartInfo:
    items: list[CartItemInfo] = []
    for kind, quantity in cart.items():
        good = cart.catalog.get(kind)
        available = good is not None
        price = good.price_for(quantity) if good is not None else 0.0
        items.append(CartItemInfo(kind=kind, quantity=quantity, price=price, available=available))
    return CartInfo(items=items, promotion=cart.promotion_enabled, price=cart.total_price())


def add_empty() -> CartEntity:
    _id = next(id_generator)
    carts_data[_id] = Cart(good_queries.catalog)
    logger.info("cart %s created", _id)
    return CartEntity(_id, _cart_info(carts_data[_id]))


def get_one(id: int) -> CartEntity | None:
    cart = carts_data.get(id)
    if cart is None:
        return None
    return CartEntity(id=id, info=_cart_info(cart))


def add_item(cart_id: int, kind: GoodKind, quantity: float) -> CartEntity | None:
    """
    Add weight of one kind to a cart.

    Returns None if the cart does not exist; lets InvalidArgumentError from
    the cart propagate so the caller can report it.
    """
    cart = carts_data.get(cart_id)
    if cart is None:
        return None
    cart.add_item(kind, quantity)
    return CartEntity(id=cart_id, info=_cart_info(cart))


def set_promotion(cart_id: int, enabled: bool) -> CartEntity | None:
    cart = carts_data.get(cart_id)
    if cart is None:
        return None
    cart.set_promotion(enabled)
    return CartEntity(id=cart_id, info=_cart_info(cart))
