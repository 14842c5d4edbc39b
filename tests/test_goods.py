from __future__ import annotations

import pytest

from fruit_shop.pricing.errors import InvalidArgumentError
from fruit_shop.pricing.goods import (
	DEFAULT_BASE_PRICES,
	GoodKind,
	PricedGood,
	create_catalog,
)


def test_price_for_without_discount() -> None:
	good = PricedGood(8.0)
	assert good.discount == 1.0
	assert good.price_for(5) == pytest.approx(40.0, abs=1e-3)
	assert good.price_for(0) == 0.0


def test_price_for_uses_latest_discount() -> None:
	good = PricedGood(13.0)
	good.set_discount(0.8)
	assert good.price_for(3) == pytest.approx(31.2, abs=1e-3)

	good.set_discount(0.5)
	assert good.price_for(3) == pytest.approx(19.5, abs=1e-3)
	assert good.base_price == 13.0


@pytest.mark.parametrize("factor", [1.5, 0.0, -0.2])
def test_set_discount_accepts_any_factor(factor: float) -> None:
	good = PricedGood(20.0)
	good.set_discount(factor)
	assert good.discount == factor
	assert good.price_for(2) == pytest.approx(40.0 * factor, abs=1e-3)


def test_base_price_is_read_only() -> None:
	good = PricedGood(8.0)
	with pytest.raises(AttributeError):
		good.base_price = 9.0  # type: ignore[misc]


@pytest.mark.parametrize("price", [0.0, -1.0])
def test_non_positive_base_price_rejected(price: float) -> None:
	with pytest.raises(InvalidArgumentError) as exc:
		PricedGood(price)
	assert exc.value.name == "base_price"
	assert exc.value.value == price


def test_default_catalog() -> None:
	catalog = create_catalog()
	assert set(catalog) == set(GoodKind)
	assert catalog[GoodKind.APPLE].base_price == 8.0
	assert catalog[GoodKind.STRAWBERRY].base_price == 13.0
	assert catalog[GoodKind.MANGO].base_price == 20.0


def test_catalogs_are_independent() -> None:
	first = create_catalog()
	second = create_catalog()
	first[GoodKind.STRAWBERRY].set_discount(0.8)
	assert second[GoodKind.STRAWBERRY].discount == 1.0


def test_custom_catalog_prices() -> None:
	catalog = create_catalog({GoodKind.MANGO: 25.0})
	assert list(catalog) == [GoodKind.MANGO]
	assert catalog[GoodKind.MANGO].price_for(2) == pytest.approx(50.0)
	assert DEFAULT_BASE_PRICES[GoodKind.MANGO] == 20.0
