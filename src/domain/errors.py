"""Domain error types."""


class TreasuryError(Exception):
    """Base class for treasury errors."""


class ValidationError(TreasuryError, ValueError):
    """Input rejected before any remote call is made."""


class NotFoundError(TreasuryError, LookupError):
    """Referenced entity is not present in the current snapshot."""


class RemoteApiError(TreasuryError, RuntimeError):
    """Remote API call failed (non-2xx status or network error).

    Attributes:
        status_code: HTTP status, or None when no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "TreasuryError",
    "ValidationError",
    "NotFoundError",
    "RemoteApiError",
]
