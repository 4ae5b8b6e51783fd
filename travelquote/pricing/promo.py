import logging
from typing import Mapping

from .base import FactorRule, round_half_up

PROMO_FACTORS: Mapping[str, float] = {
    "EARLYBIRD": 0.90,
    "FESTIVE5": 0.95,
}

logger = logging.getLogger(__name__)


class PromoCodeRule(FactorRule):
    """Discount a total by promo code. Unrecognized codes are ignored, not rejected."""

    @staticmethod
    def normalize(key: str) -> str:
        return key.strip().upper()

    @staticmethod
    def default_factors() -> Mapping[str, float]:
        return PROMO_FACTORS

    def is_known(self, code: str | None) -> bool:
        return bool(code) and self.normalize(code) in self.factors

    def apply_discount(self, total: int, code: str | None) -> int:
        if not self.is_known(code):
            if code and code.strip():
                logger.debug("Ignoring unknown promo code %r", code)
            return total
        return round_half_up(total * self.factor_for(code))
