import pytest

from rental_populate.config.settings import Settings
from rental_populate.db.memory import InMemoryDocumentStore
from rental_populate.db.repositories import CarRepository, RentalRepository, UserRepository
from rental_populate.main import build_population_service
from rental_populate.schemas import Car, CarCategory, Sex, User
from rental_populate.services.rental import RentalService


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, store_backend="memory")


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def repositories(store):
    return CarRepository(store), UserRepository(store), RentalRepository(store)


@pytest.fixture
def rental_service(repositories) -> RentalService:
    car_repo, _, rental_repo = repositories
    return RentalService(car_repo, rental_repo)


@pytest.fixture
def population_service(store, settings):
    return build_population_service(store, settings)


@pytest.fixture
def bmw() -> Car:
    return Car.new("0000BBB", "BMW 6", "BMW", CarCategory.PREMIUM)


@pytest.fixture
def fabia() -> Car:
    return Car.new("2222AAA", "Skoda Fabia", "Skoda", CarCategory.SMALL)


@pytest.fixture
def manuel() -> User:
    return User.new("Manuel", "Gomez", "5334369R", 33, Sex.MALE)


def pytest_configure(config):
    config.addinivalue_line("markers", "pricing: mark test as pricing-related")
    config.addinivalue_line("markers", "store: mark test as document-store related")
