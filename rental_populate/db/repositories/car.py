from typing import List, Optional

from loguru import logger

from rental_populate.db.store import DocumentStore
from rental_populate.schemas import Car


class CarRepository:
    def __init__(self, store: DocumentStore, container: str = "Cars"):
        self.store = store
        self.container = container

    def create_car(self, car: Car) -> bool:
        created = self.store.create_if_absent(self.container, car.to_document())
        if created:
            logger.info(f"Created car {car.id} ({car.name})")
        else:
            logger.info(f"Car {car.id} already exists")
        return created

    def get_car(self, car_id: str, brand: str) -> Optional[Car]:
        document = self.store.read(self.container, car_id, brand)
        if document is None:
            return None
        return Car.from_document(document)

    def update_car(self, car: Car) -> Car:
        return Car.from_document(self.store.replace(self.container, car.to_document()))

    def list_by_brand(self, brand: str) -> List[Car]:
        cars = [Car.from_document(d) for d in self.store.query(self.container, brand)]
        logger.debug(f"Found {len(cars)} cars for brand {brand}")
        return cars

    def set_rented(self, car_id: str, brand: str, rented: bool) -> Optional[Car]:
        car = self.get_car(car_id, brand)
        if not car:
            return None

        car.is_rented = rented
        updated = self.update_car(car)
        logger.info(f"Car {car_id} is_rented -> {rented}")
        return updated


__all__ = ["CarRepository"]
