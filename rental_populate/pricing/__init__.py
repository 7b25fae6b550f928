from .engine import compute_base_price, compute_surcharge, quote_rental, rate_per_day
from .tariffs import TARIFFS, Bracket, Tariff

__all__ = [
    "compute_base_price",
    "compute_surcharge",
    "quote_rental",
    "rate_per_day",
    "TARIFFS",
    "Bracket",
    "Tariff",
]
