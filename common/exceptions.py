"""
Seed Haven - Custom Exceptions
================================
Business-level exceptions that can be caught and converted to HTTP responses.
"""

from fastapi import HTTPException


class SeedHavenError(Exception):
    """Base exception for all business logic errors."""
    def __init__(self, message: str = "Something went wrong."):
        self.message = message
        super().__init__(self.message)


class ValidationError(SeedHavenError):
    """Raised when user input is missing or inconsistent."""
    pass


class DuplicateError(SeedHavenError):
    """Raised for unique key violations at the business level."""
    pass


class AuthenticationError(SeedHavenError):
    """Raised when credentials do not match."""
    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message)


class AuthorizationError(SeedHavenError):
    """Raised when an update targets an account that is not the active one."""
    pass


class NoActiveUserError(SeedHavenError):
    """Raised when an operation needs a logged-in user and there is none."""
    def __init__(self, message: str = "You must be logged in to do that."):
        super().__init__(message)


class EmptyCartError(SeedHavenError):
    """Raised when checking out an empty cart."""
    def __init__(self):
        super().__init__("Your cart is empty.")


class NotFoundError(SeedHavenError):
    """Raised when a requested resource doesn't exist."""
    pass


class InvalidAssertionError(SeedHavenError):
    """Raised when an external identity assertion cannot be decoded."""
    pass


class CheckoutStateError(SeedHavenError):
    """Raised when a checkout step is taken out of order."""
    pass


class SummaryUnavailableError(SeedHavenError):
    """Raised when the order summary service is missing or failing."""
    pass


def raise_http(error: SeedHavenError, status_code: int = 400):
    """Convert a business exception to an HTTP exception."""
    raise HTTPException(status_code=status_code, detail=error.message)
