from ..models import DateRange, TravelPackage
from .base import round_half_up
from .season import SeasonPricingRule
from .weekends import WeekendSurchargeRule


class PriceCalculator:
    """Per-unit price of a package: base price x season factor x weekend factor, rounded."""

    def __init__(self, season_rule: SeasonPricingRule | None = None,
                 weekend_rule: WeekendSurchargeRule | None = None):
        self.season_rule = season_rule or SeasonPricingRule()
        self.weekend_rule = weekend_rule or WeekendSurchargeRule()

    def final_price(self, package: TravelPackage, date_range: DateRange | None = None) -> int:
        price = package.base_price
        price *= self.season_rule.multiplier(package.season)
        if date_range is not None:
            price *= self.weekend_rule.multiplier(date_range.check_in, date_range.check_out)
        return round_half_up(price)
