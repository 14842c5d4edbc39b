import logging

from fastapi import FastAPI

from fruit_shop.api.cart.cart_routes import cart_router
from fruit_shop.api.goods.goods_routes import goods_router
from fruit_shop.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

app = FastAPI(title=settings.title)

app.include_router(cart_router)
app.include_router(goods_router)
