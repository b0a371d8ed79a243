"""HTTP client for the complaint backend.

Each call runs the blocking ``requests`` round trip in a worker thread, so
callers await it without stalling their event loop. Nothing is retried: a
call either returns a domain value or raises a ``TransportError``.
"""
from __future__ import annotations
import asyncio
from urllib.parse import quote
from typing import Any, List, Optional

import requests

from complainthub.config import API_BASE_URL, REQUEST_TIMEOUT
from complainthub.errors import BadResponse, InvalidComplaintId, InvalidStatus, NetworkFailure, NotFound
from complainthub.models import STATUS_VALUES, Complaint, ComplaintDraft, ComplaintStatus
from complainthub.utils.logger import ServiceLogger
from complainthub.utils.metrics import MetricsCollector

logger = ServiceLogger("transport")
metrics = MetricsCollector("transport")


def normalize_status(status: Any) -> ComplaintStatus:
    value = status.value if isinstance(status, ComplaintStatus) else status
    if value not in STATUS_VALUES:
        raise InvalidStatus(status)
    return ComplaintStatus(value)


class ComplaintTransport:
    def __init__(self, base_url: str = API_BASE_URL, session: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    async def create(self, draft: ComplaintDraft) -> Complaint:
        data = await asyncio.to_thread(self._request, "create", "POST", self.base_url, json=draft.to_payload())
        complaint = self._parse("create", data)
        logger.info(f"Complaint {complaint.complaint_id} created", complaint_id=complaint.complaint_id)
        return complaint

    async def list(self) -> List[Complaint]:
        data = await asyncio.to_thread(self._request, "list", "GET", self.base_url)
        if not isinstance(data, list):
            raise self._malformed("list", BadResponse(f"Expected a list of complaints, got {type(data).__name__}"))
        complaints = [self._parse("list", item) for item in data]
        logger.debug(f"Fetched {len(complaints)} complaints", count=len(complaints))
        return complaints

    async def update_status(self, complaint_id: str, status: Any) -> Complaint:
        # Preconditions are checked here too so a bad call never leaves the client
        status = normalize_status(status)
        if not complaint_id:
            raise InvalidComplaintId()

        url = f"{self.base_url}/{quote(complaint_id, safe='')}/status"
        data = await asyncio.to_thread(
            self._request, "update_status", "PUT", url,
            params={"status": status.value}, complaint_id=complaint_id,
        )
        complaint = self._parse("update_status", data)
        logger.info(f"Complaint {complaint.complaint_id} marked as {status.value}",
                    complaint_id=complaint.complaint_id, status=status.value)
        return complaint

    def _parse(self, operation: str, data: Any) -> Complaint:
        try:
            return Complaint.from_payload(data)
        except BadResponse as e:
            self._malformed(operation, e)
            raise

    def _malformed(self, operation: str, error: BadResponse) -> BadResponse:
        metrics.increment("responses_malformed")
        logger.error(f"{operation} returned an unexpected response: {error}", operation=operation)
        return error

    def _request(self, operation: str, method: str, url: str, complaint_id: Optional[str] = None, **kwargs) -> Any:
        metrics.increment("requests_total")
        metrics.increment(f"requests_{operation}")
        logger.debug(f"{method} {url}", operation=operation)

        try:
            with metrics.timed(f"{operation}_duration"):
                resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            metrics.increment("requests_failed")
            logger.warning(f"{operation} failed: {e}", operation=operation)
            raise NetworkFailure(f"Failed to reach complaint service: {e}") from e

        if resp.status_code == 404 and complaint_id is not None:
            metrics.increment("requests_failed")
            logger.warning(f"{operation}: complaint {complaint_id} not found", operation=operation,
                           complaint_id=complaint_id)
            raise NotFound(complaint_id)

        try:
            resp.raise_for_status()
        except requests.exceptions.HTTPError as e:
            metrics.increment("requests_failed")
            logger.warning(f"{operation} failed with HTTP {resp.status_code}", operation=operation,
                           status_code=resp.status_code)
            raise NetworkFailure(f"Complaint service returned HTTP {resp.status_code}") from e

        try:
            return resp.json()
        except ValueError as e:
            metrics.increment("requests_failed")
            logger.error(f"{operation} returned a body that is not JSON", operation=operation)
            raise BadResponse("Complaint service returned a body that is not JSON") from e

    def close(self) -> None:
        self.session.close()
