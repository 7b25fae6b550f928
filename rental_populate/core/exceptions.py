from typing import Optional


class RentalPopulateException(Exception):
    pass


class InvalidCategoryException(RentalPopulateException):
    def __init__(self, category):
        super().__init__(f"Invalid car category: {category!r}")
        self.category = category


class InvalidTermException(RentalPopulateException):
    pass


class DocumentStoreError(RentalPopulateException):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DocumentNotFoundException(DocumentStoreError):
    def __init__(self, container: str, item_id: str, partition_key: str):
        super().__init__(
            f"Document {item_id} not found in {container} (partition {partition_key})",
            status_code=404,
        )
        self.container = container
        self.item_id = item_id
        self.partition_key = partition_key


class CarNotFoundException(RentalPopulateException):
    pass


class CarAlreadyRentedException(RentalPopulateException):
    pass


class UserNotFoundException(RentalPopulateException):
    pass


class RentalNotFoundException(RentalPopulateException):
    pass


class RentalAlreadyReturnedException(RentalPopulateException):
    pass
