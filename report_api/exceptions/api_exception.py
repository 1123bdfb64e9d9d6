"""API exception module."""
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
    ):
        super().__init__(status_code=status_code, detail=detail)


class StoreError(APIException):
    """Record store unavailable, timed out or rejected a query."""

    def __init__(self, detail: str = "Record store operation failed"):
        super().__init__(detail=detail)


class SeedFetchError(APIException):
    """Seed data could not be fetched from the external source."""

    def __init__(self, detail: str = "Failed to fetch seed data"):
        super().__init__(detail=detail)


class SeedDataError(APIException):
    """Seed payload is not a JSON array of transaction objects."""

    def __init__(self, detail: str = "Seed data is malformed"):
        super().__init__(detail=detail)
