"""UI framework exceptions."""


class UiTestingError(Exception):
    """Base class for page object errors."""
    pass


class ElementNotFoundError(UiTestingError):
    """Raised when an optional page feature required by an action is absent."""
    pass


class LoginResultTimeoutError(UiTestingError):
    """Raised when neither a success nor a failure signal appears after login."""

    def __init__(self, timeout: int):
        self.timeout = timeout
        super().__init__(f"Login result not received within {timeout}ms")


__all__ = [
    "UiTestingError",
    "ElementNotFoundError",
    "LoginResultTimeoutError",
]
