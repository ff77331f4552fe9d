"""
Domain errors raised by the service layer.

``ValidationError`` marks bad input supplied by a client and is turned
into an HTTP 400 response.  ``StorageError`` wraps a failure of the
underlying database driver and is turned into an HTTP 500 response.
Both carry a human readable ``message`` that is sent back to the
client verbatim.
"""


class ValidationError(ValueError):
    """Input is missing, malformed or outside the accepted range."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StorageError(RuntimeError):
    """A Record Store operation failed.

    Raise with ``raise StorageError(str(exc)) from exc`` so the driver
    exception stays available as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
