import pytest

from travelquote.models import DateRange, TravelPackage
from travelquote.pricing.base import round_half_up
from travelquote.pricing.calculator import PriceCalculator
from travelquote.pricing.season import SeasonPricingRule

from conftest import MONDAY, SATURDAY, SUNDAY, WEDNESDAY

SUMMER_PACKAGE = TravelPackage(id=1, destination="Kasauli", duration_days=4, base_price=1200, season="Summer")


def test_catalog_prices_without_range(catalog):
    calculator = PriceCalculator()
    assert [calculator.final_price(p) for p in catalog] == [1320, 5250, 4100]


def test_no_range_matches_season_only_price(synthetic_catalog):
    calculator = PriceCalculator()
    season_rule = SeasonPricingRule()
    for package in synthetic_catalog:
        expected = round_half_up(package.base_price * season_rule.multiplier(package.season))
        assert calculator.final_price(package) == expected
        assert calculator.final_price(package, DateRange()) == expected


def test_weekday_range_has_no_surcharge():
    assert PriceCalculator().final_price(SUMMER_PACKAGE, DateRange(MONDAY, WEDNESDAY)) == 1320


def test_weekend_range_is_surcharged():
    assert PriceCalculator().final_price(SUMMER_PACKAGE, DateRange(SATURDAY, SUNDAY)) == 1452


def test_unknown_season_is_neutral():
    package = TravelPackage(id=9, destination="Ooty", duration_days=2, base_price=1001, season="")
    assert PriceCalculator().final_price(package) == 1001


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (1320.0000000000002, 1320)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
