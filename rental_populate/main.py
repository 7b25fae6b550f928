import sys
from contextlib import contextmanager

from loguru import logger

from rental_populate.config.logging import setup_logging
from rental_populate.config.settings import Settings
from rental_populate.core.exceptions import DocumentStoreError, RentalPopulateException
from rental_populate.db import build_store
from rental_populate.db.repositories import CarRepository, RentalRepository, UserRepository
from rental_populate.db.store import DocumentStore
from rental_populate.services.population import PopulationService
from rental_populate.services.rental import RentalService


def build_population_service(store: DocumentStore, settings: Settings) -> PopulationService:
    car_repo = CarRepository(store, settings.cars_container)
    user_repo = UserRepository(store, settings.users_container)
    rental_repo = RentalRepository(store, settings.rentals_container)
    rental_service = RentalService(car_repo, rental_repo)
    return PopulationService(car_repo, user_repo, rental_repo, rental_service, settings)


@contextmanager
def get_population_service(settings: Settings):
    with build_store(settings) as store:
        yield build_population_service(store, settings)


def main() -> int:
    settings = Settings()
    setup_logging(settings.log_level)
    logger.info(f"Beginning population ({settings.store_backend} store)")

    try:
        with get_population_service(settings) as population:
            report = population.run()
    except DocumentStoreError as e:
        logger.error(f"Document store error {e.status_code}: {e}")
        return 1
    except RentalPopulateException as e:
        logger.error(f"Population failed: {e}")
        return 1

    logger.info(
        f"Rental {report.rental_id} priced at {report.rental_price.total}, "
        f"cancelled={report.rental_cancelled}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
