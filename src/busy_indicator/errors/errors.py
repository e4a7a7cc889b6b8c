"""Busy indicator exceptions."""


class BusyIndicatorError(Exception):
    """Base class for busy indicator registry errors."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnregisteredKeyError(BusyIndicatorError):
    """Raised in strict mode when an operation targets a key that was never added."""

    key: str

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)
