"""
Static tariff table for car rentals.

Each category has a base daily rate, a list of contracted-duration
brackets (each scaling the base rate) and a penalty multiplier applied
on top of extra days when a car is returned late.
"""
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from rental_populate.core.exceptions import InvalidTermException
from rental_populate.schemas import CarCategory

PREMIUM_BASE = Decimal("300")
SUV_BASE = Decimal("150")
SMALL_BASE = Decimal("50")

FIRST_INTERVAL_DAYS = 7
SECOND_INTERVAL_DAYS = 30


@dataclass(frozen=True)
class Bracket:
    max_days: Optional[int]  # None = open-ended
    multiplier: Decimal

    def contains(self, contracted_days: int) -> bool:
        return self.max_days is None or contracted_days <= self.max_days


@dataclass(frozen=True)
class Tariff:
    base_rate: Decimal
    brackets: Tuple[Bracket, ...]
    overage_penalty: Decimal

    def rate_for(self, contracted_days: int) -> Decimal:
        for bracket in self.brackets:
            if bracket.contains(contracted_days):
                return self.base_rate * bracket.multiplier
        raise InvalidTermException(f"No bracket covers {contracted_days} days")


TARIFFS: Mapping[CarCategory, Tariff] = MappingProxyType(
    {
        CarCategory.PREMIUM: Tariff(
            base_rate=PREMIUM_BASE,
            brackets=(Bracket(None, Decimal("1")),),
            overage_penalty=Decimal("0.2"),
        ),
        CarCategory.SUV: Tariff(
            base_rate=SUV_BASE,
            brackets=(
                Bracket(FIRST_INTERVAL_DAYS, Decimal("1")),
                Bracket(SECOND_INTERVAL_DAYS, Decimal("0.8")),
                Bracket(None, Decimal("0.5")),
            ),
            overage_penalty=Decimal("0.6"),
        ),
        CarCategory.SMALL: Tariff(
            base_rate=SMALL_BASE,
            brackets=(
                Bracket(FIRST_INTERVAL_DAYS, Decimal("1")),
                Bracket(None, Decimal("0.6")),
            ),
            overage_penalty=Decimal("0.3"),
        ),
    }
)
