"""Lifecycle controller: the client's single owner of the complaint list.

Intents (register, refresh, set_status) run concurrently on one event loop.
Each is tracked on its own and applies its effect when it completes:

* refresh replaces the whole list with the fetched snapshot, so the last
  refresh to complete wins;
* register and set_status never touch the list; callers refresh afterwards
  to pick up the server's view.

Every intent returns a ``Result``; errors never propagate to the caller.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from complainthub.errors import ComplaintHubError, InvalidComplaintId, Result
from complainthub.models import Complaint, ComplaintDraft, validate_draft
from complainthub.services.transport import ComplaintTransport, normalize_status
from complainthub.utils.logger import ServiceLogger
from complainthub.utils.metrics import MetricsCollector

logger = ServiceLogger("lifecycle")
metrics = MetricsCollector("lifecycle")


class LifecycleController:
    def __init__(self, transport: ComplaintTransport) -> None:
        self.transport = transport
        self._complaints: List[Complaint] = []
        self._in_flight: Dict[int, str] = {}
        self._next_intent = 1
        self.error: Optional[str] = None

    @property
    def complaints(self) -> Tuple[Complaint, ...]:
        """Snapshot of the authoritative list, in backend order."""
        return tuple(self._complaints)

    @property
    def loading(self) -> bool:
        return bool(self._in_flight)

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def find(self, complaint_id: str) -> Optional[Complaint]:
        for complaint in self._complaints:
            if complaint.complaint_id == complaint_id:
                return complaint
        return None

    async def register(self, draft: ComplaintDraft) -> Result[Complaint]:
        validated = validate_draft(draft)
        if not validated.ok:
            return self._fail("register", validated.error)

        intent = self._begin("register")
        try:
            complaint = await self.transport.create(validated.value)
        except ComplaintHubError as e:
            return self._fail("register", e)
        finally:
            self._end(intent)

        metrics.increment("register_succeeded")
        logger.info(f"Complaint registered successfully, ID: {complaint.complaint_id}",
                    complaint_id=complaint.complaint_id)
        return Result.success(complaint)

    async def refresh(self) -> Result[None]:
        intent = self._begin("refresh")
        try:
            with metrics.timed("refresh_duration"):
                complaints = await self.transport.list()
        except ComplaintHubError as e:
            logger.warning(f"Keeping {len(self._complaints)} previously loaded complaints")
            return self._fail("refresh", e)
        finally:
            self._end(intent)

        self._complaints = list(complaints)
        metrics.increment("refresh_succeeded")
        metrics.gauge("complaints_known", len(self._complaints))
        logger.info(f"Loaded {len(self._complaints)} complaints", count=len(self._complaints))
        return Result.success()

    async def set_status(self, complaint_id: str, status) -> Result[Complaint]:
        if not complaint_id:
            return self._fail("set_status", InvalidComplaintId())
        try:
            status = normalize_status(status)
        except ComplaintHubError as e:
            return self._fail("set_status", e)

        intent = self._begin("set_status")
        try:
            complaint = await self.transport.update_status(complaint_id, status)
        except ComplaintHubError as e:
            return self._fail("set_status", e)
        finally:
            self._end(intent)

        metrics.increment("set_status_succeeded")
        logger.info(f"Complaint {complaint.complaint_id} marked as {complaint.status.value}",
                    complaint_id=complaint.complaint_id, status=complaint.status.value)
        return Result.success(complaint)

    def _begin(self, kind: str) -> int:
        intent = self._next_intent
        self._next_intent += 1
        self._in_flight[intent] = kind
        self.error = None
        logger.debug(f"Intent #{intent} ({kind}) in flight", intent=intent, kind=kind)
        return intent

    def _end(self, intent: int) -> None:
        self._in_flight.pop(intent, None)

    def _fail(self, kind: str, error: ComplaintHubError) -> Result:
        self.error = str(error)
        metrics.increment(f"{kind}_failed")
        logger.warning(f"{kind} failed: {error}", kind=kind, error=type(error).__name__)
        return Result.failure(error)
