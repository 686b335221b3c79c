# product_api/errors.py
from fastapi import status


class ProductAPIError(Exception):
    """Base for errors the HTTP layer turns into ``{"error": ...}`` bodies."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class NotFoundError(ProductAPIError):
    """A single-row lookup came back empty."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class StoreError(ProductAPIError):
    """Any other failure while executing a statement against the store.

    The driver's message is passed through to the client unchanged.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
