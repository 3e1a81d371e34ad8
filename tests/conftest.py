"""Pytest fixtures for roster dashboard tests"""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# =============================================================================
# Global Test Setup
# =============================================================================

# Add src to Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roster.application.services import DashboardSession  # noqa: E402
from roster.infrastructure.api import (  # noqa: E402
    RemoteDataService,
    RosterRequestClient,
)
from tests.factories import BASE_URL  # noqa: E402


class FakeRosterAPI:
    """In-memory stand-in for the remote data service

    Records every request it receives and answers from a configurable
    roster. Individual endpoints can be made to fail with a status code.
    """

    def __init__(self, candidates: list[dict] | None = None):
        self.candidates = candidates if candidates is not None else []
        self.requests: list[httpx.Request] = []
        self.failures: dict[str, int] = {}
        self.network_errors: set[str] = set()

    def fail(self, path: str, status_code: int = 500) -> None:
        self.failures[path] = status_code

    def disconnect(self, path: str) -> None:
        self.network_errors.add(path)

    def bodies(self, path: str) -> list[dict]:
        return [
            json.loads(r.content) for r in self.requests if r.url.path == path
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.network_errors:
            raise httpx.ConnectError("Connection refused", request=request)
        if path in self.failures:
            return httpx.Response(
                self.failures[path], json={"error": "boom"}, request=request
            )
        if path == "/api/candidates":
            return httpx.Response(200, json=self.candidates, request=request)
        if path == "/api/update-candidate":
            return httpx.Response(200, json={"success": True}, request=request)
        if path == "/api/send-reminders":
            return httpx.Response(200, json={"success": True}, request=request)
        return httpx.Response(404, text="Not Found", request=request)


@pytest.fixture
def raw_candidates() -> list[dict]:
    """Roster payload as served by GET /api/candidates"""
    return [
        {
            "id": 1,
            "fullName": "Asha Rao",
            "contactNumber": "9876543210",
            "emailId": "asha@example.com",
            "nameOfCollege": "City College",
            "stream": "CSE",
            "dateOfApplication": "2024-03-05",
            "yearOfCompletion": "2024",
            "batch": "Batch March 2024",
            "whatsappMsg": "pending",
            "phoneEnquiry": "done",
            "online": "attended",
            "program": "attended",
        },
        {
            "id": 2,
            "fullName": "Ravi Kumar",
            "contactNumber": 9123456780,
            "emailId": "ravi@example.com",
            "nameOfCollege": "State University",
            "stream": "ECE",
            "dateOfApplication": "2024-04-11T09:30:00.000Z",
            "yearOfCompletion": "2023",
            "batch": "Batch April 2024",
            "whatsappMsg": "sent",
            "phoneEnquiry": "not done",
            "online": "absent",
            "program": "ghosted",
        },
        {
            "id": 3,
            "fullName": "Meera Iyer",
            "contactNumber": "9000000000",
            "emailId": "meera@example.com",
            "nameOfCollege": "City College",
            "stream": "IT",
            "dateOfApplication": "2024-03-07",
            "yearOfCompletion": "2024",
            "batch": "Batch March 2024",
            "whatsappMsg": "sent",
            "phoneEnquiry": "done",
            "online": "attended",
            "program": "",
        },
        {
            "id": 4,
            "fullName": "Unassigned Applicant",
            "contactNumber": "",
            "emailId": "late@example.com",
            "nameOfCollege": "",
            "stream": "",
            "dateOfApplication": "",
            "yearOfCompletion": "",
            "batch": "",
            "whatsappMsg": "pending",
            "phoneEnquiry": "not done",
            "online": "absent",
            "program": "ghosted",
        },
    ]


@pytest.fixture
def fake_api(raw_candidates) -> FakeRosterAPI:
    return FakeRosterAPI(raw_candidates)


@pytest.fixture
def make_request_client() -> Callable[[Callable], RosterRequestClient]:
    """Build a RosterRequestClient backed by an httpx.MockTransport"""

    def _make(handler: Callable) -> RosterRequestClient:
        client = RosterRequestClient(BASE_URL, timeout=5)
        client.set_http_client(
            client._build_http_client(transport=httpx.MockTransport(handler))
        )
        return client

    return _make


@pytest.fixture
def service(fake_api, make_request_client) -> RemoteDataService:
    return RemoteDataService(make_request_client(fake_api))


@pytest.fixture
def session(service) -> DashboardSession:
    return DashboardSession(service)
