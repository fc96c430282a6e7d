"""Error taxonomy for the patent atlas."""

from typing import Optional


class PatentAtlasError(Exception):
    """Base class for atlas errors."""


class TransportError(PatentAtlasError):
    """The patent service could not be used: network error, non-success status or bad payload.

    Always recovered by falling back to the embedded dataset.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PatentNotFoundError(PatentAtlasError):
    """A patent number is absent from both the service and the embedded dataset."""

    def __init__(self, *patent_nos: str):
        self.patent_nos = patent_nos
        super().__init__(f"Patent not found: {', '.join(patent_nos)}")


class ValidationFailure(PatentAtlasError):
    """User input is incomplete; raised before any network call."""
