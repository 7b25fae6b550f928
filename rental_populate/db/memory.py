import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from rental_populate.core.exceptions import DocumentNotFoundException, DocumentStoreError
from rental_populate.db.store import Document, DocumentStore


class InMemoryDocumentStore(DocumentStore):
    def __init__(self):
        self._containers: Dict[str, Dict[Tuple[str, str], Document]] = defaultdict(dict)

    def read(self, container: str, item_id: str, partition_key: str) -> Optional[Document]:
        document = self._containers.get(container, {}).get((partition_key, item_id))
        return copy.deepcopy(document) if document is not None else None

    def create(self, container: str, document: Document) -> Document:
        key = (document["partitionKey"], document["id"])
        if key in self._containers[container]:
            raise DocumentStoreError(
                f"Document {document['id']} already exists in {container}",
                status_code=409,
            )
        self._containers[container][key] = copy.deepcopy(document)
        logger.debug(f"Created {document['id']} in {container}")
        return copy.deepcopy(document)

    def replace(self, container: str, document: Document) -> Document:
        key = (document["partitionKey"], document["id"])
        if key not in self._containers.get(container, {}):
            raise DocumentNotFoundException(container, document["id"], document["partitionKey"])
        self._containers[container][key] = copy.deepcopy(document)
        return copy.deepcopy(document)

    def delete(self, container: str, item_id: str, partition_key: str) -> bool:
        removed = self._containers.get(container, {}).pop((partition_key, item_id), None)
        return removed is not None

    def query(
        self, container: str, partition_key: Optional[str] = None, **filters: Any
    ) -> List[Document]:
        results = []
        for (pk, _), document in self._containers.get(container, {}).items():
            if partition_key is not None and pk != partition_key:
                continue
            if all(document.get(field) == value for field, value in filters.items()):
                results.append(copy.deepcopy(document))
        return results

    def count(self, container: str) -> int:
        return len(self._containers.get(container, {}))

    def container_names(self) -> List[str]:
        return sorted(self._containers)
