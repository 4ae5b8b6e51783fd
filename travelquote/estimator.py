"""Live booking estimate.

BookingEstimator is invoked on every form change. It never raises for user input:
missing or malformed values degrade to neutral prices and an invalid result.
"""
import logging
from datetime import date

from .catalog import PackageCatalog
from .models import BookingInput, DateRange, EstimateResult
from .parsing import parse_date, parse_package_id
from .pricing.calculator import PriceCalculator
from .pricing.promo import PromoCodeRule

logger = logging.getLogger(__name__)


class BookingEstimator:
    def __init__(self, catalog: PackageCatalog, calculator: PriceCalculator | None = None,
                 promo_rule: PromoCodeRule | None = None):
        self.catalog = catalog
        self.calculator = calculator or PriceCalculator()
        self.promo_rule = promo_rule or PromoCodeRule()

    @staticmethod
    def build_input(name: str | None, check_in: str | date | None, check_out: str | date | None,
                    package_id: str | int | None, promo_code: str | None = None) -> BookingInput:
        return BookingInput(
            name=name or "",
            range=DateRange(parse_date(check_in), parse_date(check_out)),
            package_id=parse_package_id(package_id),
            promo_code=promo_code,
        )

    def estimate(self, booking: BookingInput) -> EstimateResult:
        date_range = booking.range
        nights = date_range.nights()
        package = self.catalog.resolve(booking.package_id)
        if package is None:
            logger.warning("Empty package catalog, nothing to price")
            return EstimateResult(nights=nights, per_unit_price=0, total=0, valid=False)

        per_unit_price = self.calculator.final_price(package, date_range)
        # one night minimum for pricing, validity below still requires a real stay
        raw_total = per_unit_price * max(1, nights)
        total = self.promo_rule.apply_discount(raw_total, booking.promo_code)

        valid = (
            booking.name.strip() != ""
            and date_range.is_complete()
            and nights > 0
            and booking.package_id is not None
        )
        logger.debug("Estimate for package %s (%s): nights=%d per_unit=%d total=%d valid=%s",
                     package.id, package.destination, nights, per_unit_price, total, valid)
        return EstimateResult(nights=nights, per_unit_price=per_unit_price, total=total, valid=valid)

    def estimate_raw(self, name: str | None, check_in: str | date | None, check_out: str | date | None,
                     package_id: str | int | None, promo_code: str | None = None) -> EstimateResult:
        return self.estimate(self.build_input(name, check_in, check_out, package_id, promo_code))
