from __future__ import annotations
from dataclasses import replace
from datetime import date
from typing import Callable, Dict, List
import secrets
import string

from complainthub.models import Category, Complaint, ComplaintDraft, ComplaintStatus

ID_ALPHABET = string.ascii_uppercase + string.digits


def random_suffix(length: int = 8) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class ComplaintStore:
    """In-memory complaint store backing the reference HTTP service."""

    def __init__(self, id_prefix: str = "COMP-", id_factory: Callable[[], str] = random_suffix,
                 today: Callable[[], date] = date.today) -> None:
        self.id_prefix = id_prefix
        self._id_factory = id_factory
        self._today = today
        self._complaints: Dict[str, Complaint] = {}

    def _new_id(self) -> str:
        while True:
            complaint_id = f"{self.id_prefix}{self._id_factory()}"
            if complaint_id not in self._complaints:
                return complaint_id

    def create(self, draft: ComplaintDraft) -> Complaint:
        c = Complaint(
            complaint_id=self._new_id(),
            name=draft.name,
            email=draft.email,
            phone=draft.phone or None,
            category=Category(draft.category),
            description=draft.description,
            status=ComplaintStatus.PENDING,
            created_date=self._today().isoformat(),
        )
        self._complaints[c.complaint_id] = c
        return c

    def list_all(self) -> List[Complaint]:
        return list(self._complaints.values())

    def update_status(self, complaint_id: str, status: ComplaintStatus) -> Complaint:
        current = self._complaints[complaint_id]
        updated = replace(current, status=ComplaintStatus(status))
        self._complaints[complaint_id] = updated
        return updated

    def stats(self) -> dict:
        statuses = [c.status for c in self._complaints.values()]
        return {
            "count": len(statuses),
            "pending": statuses.count(ComplaintStatus.PENDING),
            "resolved": statuses.count(ComplaintStatus.RESOLVED),
        }
