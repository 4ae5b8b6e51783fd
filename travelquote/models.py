from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class TravelPackage:
    """Catalog entry for a bookable travel itinerary.

    season is a free-form label ("Summer", "Winter", ...); unknown labels price neutrally.
    """
    id: int
    destination: str
    duration_days: int
    base_price: float
    season: str = "Unknown"


@dataclass(frozen=True, slots=True)
class DateRange:
    """Stay between check_in (inclusive) and check_out (exclusive)."""
    check_in: date | None = None
    check_out: date | None = None

    def is_complete(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    def is_valid(self) -> bool:
        return self.is_complete() and self.check_out > self.check_in

    def nights(self) -> int:
        if not self.is_valid():
            return 0
        return (self.check_out - self.check_in).days


@dataclass(frozen=True, slots=True)
class BookingInput:
    name: str = ""
    range: DateRange = field(default_factory=DateRange)
    package_id: int | float | None = None
    promo_code: str | None = None


@dataclass(frozen=True, slots=True)
class EstimateResult:
    nights: int
    per_unit_price: int
    total: int
    valid: bool
