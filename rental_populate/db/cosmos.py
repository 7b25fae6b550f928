from contextlib import ExitStack
from typing import Any, Dict, Iterable, List, Optional, Tuple

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy, CosmosClient, PartitionKey, exceptions
from loguru import logger

from rental_populate.config.settings import Settings
from rental_populate.core.exceptions import DocumentNotFoundException, DocumentStoreError
from rental_populate.db.store import Document, DocumentStore


def _store_error(error: AzureError) -> DocumentStoreError:
    # Transport failures carry no status code
    return DocumentStoreError(str(error), status_code=getattr(error, "status_code", None))


def build_query(
    partition_key: Optional[str], filters: Dict[str, Any]
) -> Tuple[str, List[Dict[str, Any]]]:
    """Parameterised equality filter over top-level document fields."""
    clauses = []
    parameters = []
    conditions = list(filters.items())
    if partition_key is not None:
        conditions.insert(0, ("partitionKey", partition_key))
    for index, (field, value) in enumerate(conditions):
        name = f"@p{index}"
        clauses.append(f"c.{field} = {name}")
        parameters.append({"name": name, "value": value})

    query = "SELECT * FROM c"
    if clauses:
        query += " WHERE " + " AND ".join(clauses)
    return query, parameters


class CosmosDocumentStore(DocumentStore):
    def __init__(self, client: CosmosClient, settings: Settings):
        self._client = client
        self._settings = settings
        self._stack = ExitStack()
        self._containers: Dict[str, ContainerProxy] = {}

    @classmethod
    def connect(cls, settings: Settings) -> "CosmosDocumentStore":
        if not settings.cosmos_endpoint or not settings.cosmos_key:
            raise DocumentStoreError("cosmos_endpoint and cosmos_key must be configured")
        try:
            client = CosmosClient(settings.cosmos_endpoint, credential=settings.cosmos_key)
        except AzureError as e:
            raise _store_error(e) from e
        store = cls(client, settings)
        store.open(
            [
                settings.cars_container,
                settings.rentals_container,
                settings.users_container,
            ]
        )
        return store

    def open(self, container_ids: Iterable[str]) -> None:
        self._stack.enter_context(self._client)
        try:
            database = self._client.create_database_if_not_exists(id=self._settings.database_id)
            logger.info(f"Using database {self._settings.database_id}")
            for container_id in container_ids:
                self._containers[container_id] = database.create_container_if_not_exists(
                    id=container_id,
                    partition_key=PartitionKey(path=self._settings.partition_key_path),
                )
                logger.info(f"Using container {container_id}")
        except AzureError as e:
            self.close()
            raise _store_error(e) from e

    def _container(self, container: str) -> ContainerProxy:
        try:
            return self._containers[container]
        except KeyError:
            raise DocumentStoreError(f"Container {container} is not open") from None

    def read(self, container: str, item_id: str, partition_key: str) -> Optional[Document]:
        try:
            return self._container(container).read_item(item=item_id, partition_key=partition_key)
        except exceptions.CosmosResourceNotFoundError:
            return None
        except AzureError as e:
            raise _store_error(e) from e

    def create(self, container: str, document: Document) -> Document:
        try:
            return self._container(container).create_item(body=document)
        except AzureError as e:
            raise _store_error(e) from e

    def replace(self, container: str, document: Document) -> Document:
        try:
            return self._container(container).replace_item(item=document["id"], body=document)
        except exceptions.CosmosResourceNotFoundError as e:
            raise DocumentNotFoundException(
                container, document["id"], document["partitionKey"]
            ) from e
        except AzureError as e:
            raise _store_error(e) from e

    def delete(self, container: str, item_id: str, partition_key: str) -> bool:
        try:
            self._container(container).delete_item(item=item_id, partition_key=partition_key)
        except exceptions.CosmosResourceNotFoundError:
            return False
        except AzureError as e:
            raise _store_error(e) from e
        return True

    def query(
        self, container: str, partition_key: Optional[str] = None, **filters: Any
    ) -> List[Document]:
        query, parameters = build_query(partition_key, filters)
        logger.debug(f"Running query on {container}: {query}")

        kwargs: Dict[str, Any] = {"query": query, "parameters": parameters}
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        else:
            kwargs["enable_cross_partition_query"] = True

        try:
            return list(self._container(container).query_items(**kwargs))
        except AzureError as e:
            raise _store_error(e) from e

    def close(self) -> None:
        self._stack.close()
