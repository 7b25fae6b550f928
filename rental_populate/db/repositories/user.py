from typing import List, Optional

from loguru import logger

from rental_populate.db.store import DocumentStore
from rental_populate.schemas import Sex, User


class UserRepository:
    def __init__(self, store: DocumentStore, container: str = "Users"):
        self.store = store
        self.container = container

    def create_user(self, user: User) -> bool:
        created = self.store.create_if_absent(self.container, user.to_document())
        if created:
            logger.info(f"Created user {user.dni} ({user.name} {user.surname})")
        else:
            logger.info(f"User {user.dni} already exists")
        return created

    def get_user(self, dni: str, sex: Sex) -> Optional[User]:
        document = self.store.read(self.container, dni, Sex(sex).value)
        if document is None:
            return None
        return User.from_document(document)

    def find_by_name_surname(self, name: str, surname: str) -> Optional[User]:
        documents = self.store.query(self.container, name=name, surname=surname)
        if not documents:
            logger.warning(f"No user named {name} {surname}")
            return None
        return User.from_document(documents[0])

    def list_by_sex(self, sex: Sex) -> List[User]:
        return [User.from_document(d) for d in self.store.query(self.container, Sex(sex).value)]


__all__ = ["UserRepository"]
