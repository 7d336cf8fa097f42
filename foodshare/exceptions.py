"""
Exception hierarchy for FoodShare.

Each exception carries the HTTP status and error code it maps to; the API
exception handlers turn them into JSON error bodies.
"""


class FoodShareException(Exception):
    """Base exception for FoodShare errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        detail: str = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)

    def extra_content(self) -> dict:
        """Additional top-level fields for the error body."""
        return {}


class ValidationError(FoodShareException):
    """Input validation failed."""

    def __init__(self, message: str, detail: str = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            detail=detail,
        )


class AuthenticationError(FoodShareException):
    """Unknown user or wrong password."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="AUTHENTICATION_ERROR",
            status_code=400,
        )


class DatabaseError(FoodShareException):
    """Persistence failure. Details are logged, never returned."""

    def __init__(self, message: str = "Database error"):
        super().__init__(
            message=message,
            code="DATABASE_ERROR",
            status_code=500,
        )


class PaymentError(FoodShareException):
    """Payment gateway rejected or failed the request."""

    def __init__(self, message: str, detail: str = None):
        super().__init__(
            message=message,
            code="PAYMENT_ERROR",
            status_code=500,
            detail=detail,
        )

    def extra_content(self) -> dict:
        return {"success": False}

