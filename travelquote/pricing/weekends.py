from datetime import date, timedelta
from typing import Iterator

WEEKEND_DAYS = {5, 6}  # Sat, Sun
WEEKEND_SURCHARGE = 1.10
_FULL_WEEK = 7


class WeekendSurchargeRule:
    """Surcharge a stay that includes at least one Saturday or Sunday night.

    Days are scanned over [check_in, check_out); the checkout day itself never counts.
    """

    def __init__(self, surcharge: float = WEEKEND_SURCHARGE, weekend_days: set[int] | None = None):
        self.surcharge = surcharge
        self.weekend_days = WEEKEND_DAYS if weekend_days is None else set(weekend_days)
        if not self.weekend_days <= set(range(_FULL_WEEK)):
            raise ValueError(f"weekend_days must be weekday numbers 0-6 (Mon=0), got {sorted(self.weekend_days)}")

    @staticmethod
    def stay_days(check_in: date, check_out: date) -> Iterator[date]:
        current = check_in
        while current < check_out:
            yield current
            current += timedelta(days=1)

    def includes_weekend(self, check_in: date | None, check_out: date | None) -> bool:
        if check_in is None or check_out is None:
            return False
        if check_out <= check_in:
            return False
        # seven consecutive days always contain every weekday
        if self.weekend_days and (check_out - check_in).days >= _FULL_WEEK:
            return True
        return any(d.weekday() in self.weekend_days for d in self.stay_days(check_in, check_out))

    def multiplier(self, check_in: date | None, check_out: date | None) -> float:
        return self.surcharge if self.includes_weekend(check_in, check_out) else 1.0
