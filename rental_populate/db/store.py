from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]


class DocumentStore(ABC):
    """
    Minimal contract the population flow needs from a document database.

    Every document carries an ``id`` and a ``partitionKey``; the pair
    identifies it within a container.
    """

    @abstractmethod
    def read(self, container: str, item_id: str, partition_key: str) -> Optional[Document]:
        ...

    @abstractmethod
    def create(self, container: str, document: Document) -> Document:
        ...

    @abstractmethod
    def replace(self, container: str, document: Document) -> Document:
        ...

    @abstractmethod
    def delete(self, container: str, item_id: str, partition_key: str) -> bool:
        ...

    @abstractmethod
    def query(
        self, container: str, partition_key: Optional[str] = None, **filters: Any
    ) -> List[Document]:
        ...

    def create_if_absent(self, container: str, document: Document) -> bool:
        if self.read(container, document["id"], document["partitionKey"]) is not None:
            return False
        self.create(container, document)
        return True

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
