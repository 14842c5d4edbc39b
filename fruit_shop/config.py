from __future__ import annotations

import os
from dataclasses import dataclass

from fruit_shop.pricing.goods import DEFAULT_BASE_PRICES, GoodKind


def _get_env(key: str, default: str) -> str:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_float(key: str, default: float) -> float:
    return float(_get_env(key, str(default)))


@dataclass(frozen=True)
class Settings:
    title: str
    log_level: str
    base_prices: dict[GoodKind, float]


settings = Settings(
    title=_get_env("FRUIT_SHOP_TITLE", "Fruit Shop API"),
    log_level=_get_env("FRUIT_SHOP_LOG_LEVEL", "INFO").upper(),
    base_prices={
        kind: _get_float(f"FRUIT_SHOP_{kind.name}_PRICE", price)
        for kind, price in DEFAULT_BASE_PRICES.items()
    },
)
