from typing import List, Optional

from loguru import logger

from rental_populate.db.store import DocumentStore
from rental_populate.schemas import Rental


class RentalRepository:
    def __init__(self, store: DocumentStore, container: str = "Rentals"):
        self.store = store
        self.container = container

    def create_rental(self, rental: Rental) -> bool:
        created = self.store.create_if_absent(self.container, rental.to_document())
        if created:
            logger.info(
                f"Created rental {rental.id} for car {rental.car_id}, "
                f"base price {rental.price.base_price}"
            )
        return created

    def get_rental(self, rental_id: str, partition_key: str) -> Optional[Rental]:
        document = self.store.read(self.container, rental_id, partition_key)
        if document is None:
            return None
        return Rental.from_document(document)

    def update_rental(self, rental: Rental) -> Rental:
        return Rental.from_document(self.store.replace(self.container, rental.to_document()))

    def delete_rental(self, rental_id: str, partition_key: str) -> bool:
        deleted = self.store.delete(self.container, rental_id, partition_key)
        if deleted:
            logger.info(f"Deleted rental [{partition_key},{rental_id}]")
        return deleted

    def list_by_partition(self, partition_key: str) -> List[Rental]:
        return [Rental.from_document(d) for d in self.store.query(self.container, partition_key)]


__all__ = ["RentalRepository"]
