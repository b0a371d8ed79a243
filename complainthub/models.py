from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from complainthub.errors import BadResponse, InvalidCategory, MissingField, Result


class Category(str, Enum):
    SERVICE_ISSUE = "Service Issue"
    PRODUCT_QUALITY = "Product Quality"
    BILLING_PROBLEM = "Billing Problem"
    DELIVERY_ISSUE = "Delivery Issue"
    OTHER = "Other"


class ComplaintStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"


CATEGORY_VALUES = {c.value for c in Category}
STATUS_VALUES = {s.value for s in ComplaintStatus}

REQUIRED_FIELDS = ("name", "email", "category", "description")


@dataclass
class ComplaintDraft:
    """What a user typed into the registration form, not yet accepted."""
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    category: str = ""
    description: str = ""

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone or "",
            "category": _enum_value(self.category),
            "description": self.description,
        }


@dataclass(frozen=True)
class Complaint:
    complaint_id: str
    name: str
    email: str
    phone: Optional[str]
    category: Category
    description: str
    status: ComplaintStatus
    created_date: str

    @classmethod
    def from_payload(cls, data: Any) -> "Complaint":
        """Parse a backend complaint object (camelCase keys)."""
        if not isinstance(data, dict):
            raise BadResponse(f"Expected a complaint object, got {type(data).__name__}")
        phone = data.get("phone")
        if phone is not None and not isinstance(phone, str):
            raise BadResponse(f"Complaint object has a non-text phone: {phone!r}")
        try:
            return cls(
                complaint_id=_required_text(data, "complaintId"),
                name=_required_text(data, "name"),
                email=_required_text(data, "email"),
                phone=phone or None,
                category=Category(data["category"]),
                description=_required_text(data, "description"),
                status=ComplaintStatus(data["status"]),
                created_date=_required_text(data, "createdDate"),
            )
        except KeyError as e:
            raise BadResponse(f"Complaint object missing field {e.args[0]!r}") from e
        except ValueError as e:
            raise BadResponse(f"Complaint object has invalid value: {e}") from e

    def to_payload(self) -> dict:
        return {
            "complaintId": self.complaint_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone or "",
            "category": self.category.value,
            "description": self.description,
            "status": self.status.value,
            "createdDate": self.created_date,
        }

    def matches(self, draft: ComplaintDraft) -> bool:
        """True if the user-supplied fields equal the draft's."""
        payload = self.to_payload()
        return all(payload[k] == v for k, v in draft.to_payload().items())


def _required_text(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise BadResponse(f"Complaint object has an empty or non-text {key}: {value!r}")
    return value


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_draft(draft: ComplaintDraft) -> Result[ComplaintDraft]:
    """Check required fields and the category; phone is free-form and optional."""
    for field in REQUIRED_FIELDS:
        if _is_blank(getattr(draft, field)):
            return Result.failure(MissingField(field))

    category = _enum_value(draft.category)
    if category not in CATEGORY_VALUES:
        return Result.failure(InvalidCategory(draft.category))

    return Result.success(replace(draft, category=Category(category)))
