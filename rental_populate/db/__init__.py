from rental_populate.config.settings import Settings
from rental_populate.db.cosmos import CosmosDocumentStore
from rental_populate.db.memory import InMemoryDocumentStore
from rental_populate.db.store import DocumentStore


def build_store(settings: Settings) -> DocumentStore:
    if settings.store_backend == "cosmos":
        return CosmosDocumentStore.connect(settings)
    return InMemoryDocumentStore()


__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "CosmosDocumentStore",
    "build_store",
]
