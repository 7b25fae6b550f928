from decimal import Decimal
from unittest.mock import patch

import pytest

from rental_populate.core.exceptions import (
    CarAlreadyRentedException,
    CarNotFoundException,
    DocumentStoreError,
    InvalidTermException,
    RentalAlreadyReturnedException,
    RentalNotFoundException,
    RentalPopulateException,
)


@pytest.fixture
def seeded(repositories, bmw, fabia):
    car_repo, _, _ = repositories
    car_repo.create_car(bmw)
    car_repo.create_car(fabia)
    return repositories


def test_start_rental_prices_and_marks_car(seeded, rental_service):
    car_repo, _, rental_repo = seeded

    rental = rental_service.start_rental("0000BBB", "BMW", "5334369R", 10)

    assert rental.partition_key == "BMW#10"
    assert rental.price.base_price == Decimal(3000)
    assert rental.price.surcharge == 0
    assert car_repo.get_car("0000BBB", "BMW").is_rented is True
    assert rental_repo.get_rental(rental.id, "BMW#10") == rental


def test_start_rental_unknown_car(seeded, rental_service):
    with pytest.raises(CarNotFoundException):
        rental_service.start_rental("9999ZZZ", "BMW", "u1", 3)


def test_start_rental_already_rented(seeded, rental_service):
    rental_service.start_rental("0000BBB", "BMW", "u1", 3)
    with pytest.raises(CarAlreadyRentedException):
        rental_service.start_rental("0000BBB", "BMW", "u2", 3)


def test_start_rental_invalid_days_leaves_car_free(seeded, rental_service):
    car_repo, _, _ = seeded
    with pytest.raises(InvalidTermException):
        rental_service.start_rental("0000BBB", "BMW", "u1", 0)
    assert car_repo.get_car("0000BBB", "BMW").is_rented is False


def test_return_late_adds_surcharge(seeded, rental_service):
    car_repo, _, rental_repo = seeded
    rental = rental_service.start_rental("2222AAA", "Skoda", "u1", 7)

    returned = rental_service.return_car(rental.id, rental.partition_key, 10)

    assert returned.is_car_returned is True
    assert returned.actual_days_used == 10
    assert returned.price.base_price == Decimal(350)
    assert returned.price.surcharge == Decimal(195)
    assert rental_repo.get_rental(rental.id, "Skoda#7").price.total == Decimal(545)
    assert car_repo.get_car("2222AAA", "Skoda").is_rented is False


def test_return_on_time(seeded, rental_service):
    rental = rental_service.start_rental("2222AAA", "Skoda", "u1", 7)
    returned = rental_service.return_car(rental.id, rental.partition_key, 5)
    assert returned.price.surcharge == 0


def test_return_twice(seeded, rental_service):
    rental = rental_service.start_rental("2222AAA", "Skoda", "u1", 7)
    rental_service.return_car(rental.id, rental.partition_key, 7)
    with pytest.raises(RentalAlreadyReturnedException):
        rental_service.return_car(rental.id, rental.partition_key, 7)


def test_return_unknown_rental(rental_service):
    with pytest.raises(RentalNotFoundException):
        rental_service.return_car("nope", "BMW#1", 1)


def test_cancel_rental_frees_car(seeded, rental_service):
    car_repo, _, rental_repo = seeded
    rental = rental_service.start_rental("0000BBB", "BMW", "u1", 10)

    rental_service.cancel_rental(rental.id, rental.partition_key)

    assert rental_repo.get_rental(rental.id, rental.partition_key) is None
    assert car_repo.get_car("0000BBB", "BMW").is_rented is False


def test_cancel_unknown_rental(rental_service):
    with pytest.raises(RentalNotFoundException):
        rental_service.cancel_rental("nope", "BMW#1")


def test_failed_rental_write_leaves_car_free(seeded, rental_service):
    car_repo, _, rental_repo = seeded

    with patch.object(
        rental_repo, "create_rental", side_effect=DocumentStoreError("boom", status_code=503)
    ):
        with pytest.raises(DocumentStoreError):
            rental_service.start_rental("0000BBB", "BMW", "u1", 10)

    assert car_repo.get_car("0000BBB", "BMW").is_rented is False


def test_rejected_rental_write_leaves_car_free(seeded, rental_service):
    car_repo, _, rental_repo = seeded

    with patch.object(rental_repo, "create_rental", return_value=False):
        with pytest.raises(RentalPopulateException):
            rental_service.start_rental("0000BBB", "BMW", "u1", 10)

    assert car_repo.get_car("0000BBB", "BMW").is_rented is False


def test_failed_car_update_discards_rental(seeded, rental_service, store):
    car_repo, _, _ = seeded

    with patch.object(
        car_repo, "set_rented", side_effect=DocumentStoreError("boom", status_code=503)
    ):
        with pytest.raises(DocumentStoreError):
            rental_service.start_rental("0000BBB", "BMW", "u1", 10)

    assert store.count("Rentals") == 0
    assert car_repo.get_car("0000BBB", "BMW").is_rented is False
