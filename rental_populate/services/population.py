from typing import Iterable

from loguru import logger

from rental_populate.config.settings import Settings
from rental_populate.core.exceptions import UserNotFoundException
from rental_populate.db.repositories.car import CarRepository
from rental_populate.db.repositories.rental import RentalRepository
from rental_populate.db.repositories.user import UserRepository
from rental_populate.schemas import Car, PopulationReport, User
from rental_populate.seed import sample_cars, sample_users
from rental_populate.services.rental import RentalService


class PopulationService:
    """Seeds the demo data set and walks one rental through its lifecycle."""

    def __init__(
        self,
        car_repo: CarRepository,
        user_repo: UserRepository,
        rental_repo: RentalRepository,
        rental_service: RentalService,
        settings: Settings,
    ):
        self._car_repo = car_repo
        self._user_repo = user_repo
        self._rental_repo = rental_repo
        self._rental_service = rental_service
        self._settings = settings

    def seed_cars(self, cars: Iterable[Car], report: PopulationReport) -> None:
        for car in cars:
            if self._car_repo.create_car(car):
                report.cars_created += 1
            else:
                report.cars_skipped += 1

    def seed_users(self, users: Iterable[User], report: PopulationReport) -> None:
        for user in users:
            if self._user_repo.create_user(user):
                report.users_created += 1
            else:
                report.users_skipped += 1

    def run(self) -> PopulationReport:
        settings = self._settings
        report = PopulationReport()

        self.seed_cars(sample_cars(), report)
        self.seed_users(sample_users(), report)
        logger.info(
            f"Seeded cars: created={report.cars_created}, skipped={report.cars_skipped}; "
            f"users: created={report.users_created}, skipped={report.users_skipped}"
        )

        report.queried_cars = self._car_repo.list_by_brand(settings.demo_query_brand)
        for car in report.queried_cars:
            logger.info(f"Read car {car.id}: {car.name} rented={car.is_rented}")

        user = self._user_repo.find_by_name_surname(
            settings.demo_user_name, settings.demo_user_surname
        )
        if not user:
            raise UserNotFoundException(
                f"{settings.demo_user_name} {settings.demo_user_surname}"
            )

        rental = self._rental_service.start_rental(
            settings.demo_car_id,
            settings.demo_car_brand,
            user.dni,
            settings.demo_contracted_days,
        )
        report.rental_id = rental.id
        report.rental_price = rental.price

        report.queried_rentals = self._rental_repo.list_by_partition(rental.partition_key)
        for item in report.queried_rentals:
            logger.info(f"Read rental {item.id}: car={item.car_id} price={item.price.total}")

        self._rental_service.cancel_rental(rental.id, rental.partition_key)
        report.rental_cancelled = True

        logger.info("Population finished")
        return report
