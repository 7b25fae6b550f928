from .car import CarRepository
from .rental import RentalRepository
from .user import UserRepository

__all__ = [
    "CarRepository",
    "UserRepository",
    "RentalRepository",
]
