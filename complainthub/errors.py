"""Error taxonomy and the Result value returned across the intent boundary."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ComplaintHubError(Exception):
    """Base class for every error the client reports."""


class ValidationError(ComplaintHubError):
    """Draft rejected before reaching the network."""


class MissingField(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidCategory(ValidationError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid category: {value!r}")
        self.value = value


class TransportError(ComplaintHubError):
    """Backend call did not produce a usable answer."""


class NetworkFailure(TransportError):
    pass


class BadResponse(TransportError):
    pass


class NotFound(TransportError):
    def __init__(self, complaint_id: str) -> None:
        super().__init__(f"Complaint not found: {complaint_id}")
        self.complaint_id = complaint_id


class InvalidComplaintId(ComplaintHubError):
    def __init__(self) -> None:
        super().__init__("Please enter a complaint ID")


class InvalidStatus(ComplaintHubError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid status: {value!r}")
        self.value = value


class NotAuthorized(ComplaintHubError):
    def __init__(self) -> None:
        super().__init__("Admin login required to update complaint status")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one operation: either a value or an error, never both."""
    value: Optional[T] = None
    error: Optional[ComplaintHubError] = None

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ComplaintHubError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
