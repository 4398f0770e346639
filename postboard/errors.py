"""Exception types shared across postboard"""


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or malformed."""


class StorageError(RuntimeError):
    """Raised when a statement could not be executed against the database.

    The driver exception is always chained as ``__cause__``.
    """

    def __init__(self, query: str, message: str):
        super().__init__(message)
        self.query = query


class HandlerError(Exception):
    """Raised by a handler to end the request with a bare status code."""

    def __init__(self, status_code: int):
        super().__init__(status_code)
        self.status_code = status_code
