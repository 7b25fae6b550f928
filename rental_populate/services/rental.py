from loguru import logger

from rental_populate.core.exceptions import (
    CarAlreadyRentedException,
    CarNotFoundException,
    RentalAlreadyReturnedException,
    RentalNotFoundException,
    RentalPopulateException,
)
from rental_populate.db.repositories.car import CarRepository
from rental_populate.db.repositories.rental import RentalRepository
from rental_populate.pricing import compute_base_price, compute_surcharge
from rental_populate.schemas import PriceQuote, Rental


class RentalService:
    def __init__(self, car_repo: CarRepository, rental_repo: RentalRepository):
        self.car_repo = car_repo
        self.rental_repo = rental_repo

    def start_rental(
        self, car_id: str, brand: str, user_id: str, contracted_days: int
    ) -> Rental:
        logger.info(f"Renting car {car_id} to user {user_id} for {contracted_days} days")

        car = self.car_repo.get_car(car_id, brand)
        if not car:
            logger.error(f"Car {car_id} not found")
            raise CarNotFoundException(car_id)
        if car.is_rented:
            logger.warning(f"Car {car_id} is already rented")
            raise CarAlreadyRentedException(car_id)

        base_price = compute_base_price(car.category, contracted_days)

        rental = Rental(
            partition_key=Rental.partition_key_for(car.partition_key, contracted_days),
            car_id=car.id,
            car_type=car.category,
            user_id=user_id,
            contracted_days=contracted_days,
            price=PriceQuote(base_price=base_price),
        )

        if not self.rental_repo.create_rental(rental):
            raise RentalPopulateException(f"Rental {rental.id} already exists")

        try:
            marked = self.car_repo.set_rented(car.id, car.brand, True)
        except RentalPopulateException:
            self._discard(rental)
            raise
        if marked is None:
            self._discard(rental)
            raise CarNotFoundException(car_id)

        logger.info(f"Rental {rental.id} started, base price {base_price}")
        return rental

    def return_car(self, rental_id: str, partition_key: str, actual_days_used: int) -> Rental:
        rental = self.rental_repo.get_rental(rental_id, partition_key)
        if not rental:
            logger.error(f"Rental {rental_id} not found")
            raise RentalNotFoundException(rental_id)
        if rental.is_car_returned:
            raise RentalAlreadyReturnedException(rental_id)

        surcharge = compute_surcharge(
            rental.car_type,
            rental.contracted_days,
            actual_days_used,
            rental.price.base_price,
        )

        rental.actual_days_used = actual_days_used
        rental.price = PriceQuote(base_price=rental.price.base_price, surcharge=surcharge)
        rental.is_car_returned = True
        rental = self.rental_repo.update_rental(rental)

        self._release_car(rental)

        if surcharge:
            logger.info(
                f"Rental {rental_id} returned {actual_days_used - rental.contracted_days} "
                f"days late, surcharge {surcharge}"
            )
        else:
            logger.info(f"Rental {rental_id} returned on time")
        return rental

    def cancel_rental(self, rental_id: str, partition_key: str) -> None:
        rental = self.rental_repo.get_rental(rental_id, partition_key)
        if not rental:
            logger.error(f"Rental {rental_id} not found")
            raise RentalNotFoundException(rental_id)

        self.rental_repo.delete_rental(rental_id, partition_key)
        if not rental.is_car_returned:
            self._release_car(rental)

    def _discard(self, rental: Rental) -> None:
        logger.warning(
            f"Car {rental.car_id} could not be marked rented, discarding rental {rental.id}"
        )
        self.rental_repo.delete_rental(rental.id, rental.partition_key)

    def _release_car(self, rental: Rental) -> None:
        # Rental partition keys are "<brand>#<days>"
        brand = rental.partition_key.rsplit("#", 1)[0]
        if self.car_repo.set_rented(rental.car_id, brand, False) is None:
            logger.warning(f"Car {rental.car_id} of rental {rental.id} no longer exists")
