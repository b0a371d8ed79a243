"""Shared fixtures: fake HTTP sessions for the client, a fresh backend for each test."""
import json
import os
import sys
import tempfile
from pathlib import Path

# Keep test runs from writing into ./logs
os.environ.setdefault("COMPLAINTHUB_LOG_DIR", tempfile.mkdtemp(prefix="complainthub-logs-"))

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

import pytest
import requests
from fastapi.testclient import TestClient

from complainthub.services.store import ComplaintStore

BASE_URL = "http://testserver/api/complaints"


def make_response(status_code: int, body=None, raw: bytes = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = raw if raw is not None else json.dumps(body).encode()
    resp.headers["Content-Type"] = "application/json"
    resp.url = BASE_URL
    return resp


class FakeSession:
    """Stands in for requests.Session: replays queued responses, records calls."""

    def __init__(self):
        self.calls = []
        self.queued = []
        self.closed = False

    def queue(self, status_code: int = 200, body=None, raw: bytes = None):
        self.queued.append(make_response(status_code, body, raw))

    def fail(self, exc: Exception):
        self.queued.append(exc)

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        item = self.queued.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


class BackendSession(FakeSession):
    """Forwards every request to the reference complaint service app."""

    def __init__(self, client: TestClient):
        super().__init__()
        self.client = client
        self.offline = False

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.offline:
            raise requests.exceptions.ConnectionError("backend offline")
        r = self.client.request(method, url, **kwargs)
        return make_response(r.status_code, raw=r.content)


def sequential_ids():
    counter = iter(range(1, 10_000))
    return lambda: f"{next(counter):08d}"


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def backend(monkeypatch):
    """A fresh, empty reference backend and a client for it."""
    from services.complaint import service
    store = ComplaintStore(id_factory=sequential_ids())
    monkeypatch.setattr(service, "complaint_svc", store)
    return TestClient(service.app)


@pytest.fixture
def backend_session(backend):
    return BackendSession(backend)


@pytest.fixture
def complaint_payload():
    return {
        "complaintId": "COMP-AB12CD34",
        "name": "Alice",
        "email": "a@x.com",
        "phone": "",
        "category": "Billing Problem",
        "description": "Overcharged",
        "status": "pending",
        "createdDate": "2024-01-01",
    }
