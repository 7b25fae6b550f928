from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from rental_populate.core.exceptions import InvalidCategoryException
from rental_populate.core.utils import uuid4, whole_days_between


class CarCategory(str, Enum):
    PREMIUM = "Premium"
    SUV = "Suv"
    SMALL = "Small"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "CarCategory":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidCategoryException(value)


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    def __str__(self):
        return self.value


class PriceQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_price: Decimal
    surcharge: Decimal = Decimal("0.00")

    @property
    def total(self) -> Decimal:
        return self.base_price + self.surcharge


@dataclass(frozen=True)
class RentalTerm:
    """Input to a price calculation. Not persisted."""

    category: CarCategory
    contracted_days: int
    actual_days_used: Optional[int] = None

    @classmethod
    def from_dates(
        cls,
        category: CarCategory,
        delivery: Union[date, datetime],
        contracted_return: Union[date, datetime],
        actual_return: Optional[Union[date, datetime]] = None,
    ) -> "RentalTerm":
        actual_days = None
        if actual_return is not None:
            actual_days = whole_days_between(delivery, actual_return)
        return cls(
            category=category,
            contracted_days=whole_days_between(delivery, contracted_return),
            actual_days_used=actual_days,
        )


# Persisted documents
class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    partition_key: str = Field(alias="partitionKey")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        return cls.model_validate(document)


class Car(Document):
    name: str
    brand: str
    category: CarCategory
    is_rented: bool = False

    @classmethod
    def new(cls, car_id: str, name: str, brand: str, category: CarCategory) -> "Car":
        return cls(id=car_id, partition_key=brand, name=name, brand=brand, category=category)


class User(Document):
    name: str
    surname: str
    dni: str
    age: int
    sex: Sex
    loyalty_points: int = 0

    @classmethod
    def new(cls, name: str, surname: str, dni: str, age: int, sex: Sex) -> "User":
        return cls(
            id=dni,
            partition_key=sex.value,
            name=name,
            surname=surname,
            dni=dni,
            age=age,
            sex=sex,
        )


class Rental(Document):
    id: str = Field(default_factory=uuid4)
    car_id: str
    car_type: CarCategory
    user_id: str
    contracted_days: int
    actual_days_used: Optional[int] = None
    price: PriceQuote
    is_car_returned: bool = False

    @staticmethod
    def partition_key_for(car_partition_key: str, contracted_days: int) -> str:
        return f"{car_partition_key}#{contracted_days}"

    @property
    def term(self) -> RentalTerm:
        return RentalTerm(
            category=self.car_type,
            contracted_days=self.contracted_days,
            actual_days_used=self.actual_days_used,
        )


@dataclass
class PopulationReport:
    cars_created: int = 0
    cars_skipped: int = 0
    users_created: int = 0
    users_skipped: int = 0
    queried_cars: List[Car] = field(default_factory=list)
    queried_rentals: List[Rental] = field(default_factory=list)
    rental_id: Optional[str] = None
    rental_price: Optional[PriceQuote] = None
    rental_cancelled: bool = False
