"""
Error taxonomy for the orders service

Every failure raised by the repository carries an explicit ``ErrorKind`` so
the API layer can pick a status code without inspecting message text.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure raised by the order repository"""
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    CONFLICT = "conflict"
    STORAGE = "storage"
    UNEXPECTED = "unexpected"


class OrderServiceError(Exception):
    """Base exception for all orders service errors"""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class OrderNotFoundError(OrderServiceError):
    """Order not found"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order with id={order_id} not found")


class InvalidArgumentError(OrderServiceError):
    """Bad pagination arguments or malformed order"""

    kind = ErrorKind.INVALID_ARGUMENT


class OrderConflictError(OrderServiceError):
    """Write rejected by a uniqueness or integrity constraint"""

    kind = ErrorKind.CONFLICT


class RepositoryError(OrderServiceError):
    """Storage failure while reading or writing orders"""

    kind = ErrorKind.STORAGE
