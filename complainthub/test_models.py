"""Tests for complaint drafts, records and validation."""
import pytest

from complainthub.errors import BadResponse, InvalidCategory, MissingField
from complainthub.models import Category, Complaint, ComplaintDraft, ComplaintStatus, validate_draft


def make_draft(**overrides):
    fields = {
        "name": "Alice",
        "email": "a@x.com",
        "phone": "",
        "category": "Billing Problem",
        "description": "Overcharged",
    }
    fields.update(overrides)
    return ComplaintDraft(**fields)


def test_accepts_complete_draft_without_phone():
    result = validate_draft(make_draft(phone=None))
    assert result.ok
    assert result.value.category is Category.BILLING_PROBLEM
    assert result.value.phone is None


@pytest.mark.parametrize("field", ["name", "email", "description", "category"])
def test_rejects_empty_required_field(field):
    result = validate_draft(make_draft(**{field: ""}))
    assert not result.ok
    assert isinstance(result.error, MissingField)
    assert result.error.field == field


def test_whitespace_only_counts_as_empty():
    result = validate_draft(make_draft(name="   "))
    assert isinstance(result.error, MissingField)


def test_rejects_unknown_category():
    result = validate_draft(make_draft(category="Rudeness"))
    assert isinstance(result.error, InvalidCategory)
    assert result.error.value == "Rudeness"


def test_phone_is_never_validated():
    assert validate_draft(make_draft(phone="call me maybe")).ok


def test_every_listed_category_is_valid():
    for category in ["Service Issue", "Product Quality", "Billing Problem", "Delivery Issue", "Other"]:
        assert validate_draft(make_draft(category=category)).ok


def test_validation_does_not_modify_the_draft():
    draft = make_draft()
    validate_draft(draft)
    assert draft.category == "Billing Problem"


def test_unwrap_raises_the_carried_error():
    with pytest.raises(MissingField):
        validate_draft(make_draft(email="")).unwrap()


def test_parse_backend_complaint(complaint_payload):
    c = Complaint.from_payload(complaint_payload)
    assert c.complaint_id == "COMP-AB12CD34"
    assert c.status is ComplaintStatus.PENDING
    assert c.category is Category.BILLING_PROBLEM
    assert c.phone is None
    assert c.created_date == "2024-01-01"
    assert c.to_payload() == complaint_payload


def test_parsed_complaint_matches_its_draft(complaint_payload):
    c = Complaint.from_payload(complaint_payload)
    assert c.matches(make_draft())
    assert not c.matches(make_draft(description="Late delivery"))


@pytest.mark.parametrize("broken", [
    {"complaintId": None},
    {"complaintId": ""},
    {"status": "closed"},
    {"category": "Rudeness"},
    {"name": None},
    {"email": None},
    {"description": None},
    {"createdDate": None},
    {"name": "   "},
    {"createdDate": ""},
    {"createdDate": 20240101},
    {"phone": 5551234},
])
def test_malformed_complaint_is_bad_response(complaint_payload, broken):
    with pytest.raises(BadResponse):
        Complaint.from_payload({**complaint_payload, **broken})


def test_missing_key_is_bad_response(complaint_payload):
    del complaint_payload["createdDate"]
    with pytest.raises(BadResponse):
        Complaint.from_payload(complaint_payload)


def test_non_object_is_bad_response():
    with pytest.raises(BadResponse):
        Complaint.from_payload(["COMP-1"])
