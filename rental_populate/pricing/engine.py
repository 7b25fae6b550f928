from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from rental_populate.core.exceptions import InvalidCategoryException, InvalidTermException
from rental_populate.pricing.tariffs import TARIFFS, Tariff
from rental_populate.schemas import CarCategory, PriceQuote, RentalTerm

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

CategoryLike = Union[CarCategory, str]


def _to_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def _is_day_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_contracted_days(contracted_days: int) -> None:
    if not _is_day_count(contracted_days) or contracted_days < 1:
        raise InvalidTermException(
            f"contracted_days must be a positive integer, got {contracted_days!r}"
        )


def _check_base_price(base_price) -> Decimal:
    if isinstance(base_price, bool):
        raise InvalidTermException(f"base_price must be a number, got {base_price!r}")
    try:
        amount = base_price if isinstance(base_price, Decimal) else Decimal(str(base_price))
    except InvalidOperation:
        raise InvalidTermException(f"base_price must be a number, got {base_price!r}") from None
    if not amount.is_finite() or amount < 0:
        raise InvalidTermException(
            f"base_price must be a finite non-negative amount, got {base_price!r}"
        )
    return amount


def get_tariff(category: CategoryLike) -> Tariff:
    parsed = CarCategory.parse(category)
    try:
        return TARIFFS[parsed]
    except KeyError:
        raise InvalidCategoryException(category) from None


def rate_per_day(category: CategoryLike, contracted_days: int) -> Decimal:
    """Bracketed daily rate for a category and contracted duration."""
    _check_contracted_days(contracted_days)
    return get_tariff(category).rate_for(contracted_days)


def compute_base_price(category: CategoryLike, contracted_days: int) -> Decimal:
    """
    Base price of a rental: the bracketed daily rate times the contracted days.

    Bracket edges are inclusive, so 7 and 30 days already get the cheaper rate
    of the bracket they close.
    """
    rate = rate_per_day(category, contracted_days)
    return _to_money(rate * contracted_days)


def compute_surcharge(
    category: CategoryLike,
    contracted_days: int,
    actual_days_used: int,
    base_price: Decimal,
) -> Decimal:
    """
    Overage charged when a car is kept longer than contracted.

    Extra days are billed at the daily rate already baked into base_price,
    plus the category's penalty multiplier on top of that amount.
    """
    tariff = get_tariff(category)
    _check_contracted_days(contracted_days)
    if not _is_day_count(actual_days_used) or actual_days_used < 0:
        raise InvalidTermException(
            f"actual_days_used must be a non-negative integer, got {actual_days_used!r}"
        )

    base_price = _check_base_price(base_price)

    if actual_days_used <= contracted_days:
        return ZERO

    per_day = base_price / contracted_days
    extra_days = actual_days_used - contracted_days
    overage = per_day * extra_days
    return _to_money(overage + overage * tariff.overage_penalty)


def quote_rental(term: RentalTerm) -> PriceQuote:
    base_price = compute_base_price(term.category, term.contracted_days)
    surcharge = ZERO
    if term.actual_days_used is not None:
        surcharge = compute_surcharge(
            term.category, term.contracted_days, term.actual_days_used, base_price
        )
    return PriceQuote(base_price=base_price, surcharge=surcharge)
