"""Shared fixtures for offline tests."""

import json

import httplib2
import pytest
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpMock

from pdum.resource import ClientConfig, Resource


def make_http(payload=None, status: str = "200") -> HttpMock:
    """An ``HttpMock`` answering every request with ``payload`` as JSON."""
    http = HttpMock(headers={"status": status})
    http.data = json.dumps(payload if payload is not None else {}).encode("utf-8")
    return http


def http_error(status: int = 404, message: str = "Not found.") -> HttpError:
    body = {"error": {"code": status, "message": message, "status": "NOT_FOUND"}}
    return HttpError(httplib2.Response({"status": str(status)}), json.dumps(body).encode("utf-8"))


class FakeRequest:
    """Stand-in for ``request(req_opts)`` that records calls and replays responses.

    Each queued item is returned in order; exceptions are raised instead.
    The last item is repeated once the queue runs dry.
    """

    def __init__(self, *responses):
        self.calls: list[dict] = []
        self._responses = list(responses) or [{}]

    def __call__(self, req_opts: dict):
        self.calls.append(req_opts)
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def resource():
    return Resource(ClientConfig(auto_retry=False), http=make_http())


@pytest.fixture
def project(resource):
    return resource.project("project-id")
