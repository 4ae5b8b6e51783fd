from typing import Mapping

from .base import FactorRule

SEASON_FACTORS: Mapping[str, float] = {
    "summer": 1.10,
    "winter": 1.05,
}


class SeasonPricingRule(FactorRule):
    """Season label -> price multiplier; labels match case-insensitively, unknown ones price at 1.0."""

    @staticmethod
    def normalize(key: str) -> str:
        return key.lower()

    @staticmethod
    def default_factors() -> Mapping[str, float]:
        return SEASON_FACTORS

    def multiplier(self, season: str | None) -> float:
        return self.factor_for(season)
