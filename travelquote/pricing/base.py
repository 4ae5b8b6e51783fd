from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (Python's round() is banker's)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class FactorRule(ABC):
    """Lookup of a normalized key in a fixed factor table, with a neutral default."""
    default_factor: float = 1.0

    def __init__(self, factors: Mapping[str, float] | None = None):
        table = self.default_factors() if factors is None else factors
        self.factors: dict[str, float] = {self.normalize(k): v for k, v in table.items()}

    @staticmethod
    @abstractmethod
    def normalize(key: str) -> str:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def default_factors() -> Mapping[str, float]:  # pragma: no cover
        raise NotImplementedError

    def factor_for(self, key: str | None) -> float:
        if not key:
            return self.default_factor
        return self.factors.get(self.normalize(key), self.default_factor)
