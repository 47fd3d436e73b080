"""Tests for request dispatch and credential resolution."""

import json

import google.auth
import google_auth_httplib2
import pytest
from conftest import make_http
from google.auth.credentials import AnonymousCredentials
from google.oauth2 import service_account

from pdum.resource import ClientConfig, HttpError
from pdum.resource._clients import resolve_credentials
from pdum.resource.service import Service


def test_request_builds_url_and_body():
    http = make_http({"ok": True})
    service = Service(ClientConfig(auto_retry=False), http=http)

    result = service.request({"method": "POST", "uri": "/projects/p1:getOrgPolicy", "json": {"constraint": "c"}})

    assert result == {"ok": True}
    assert http.method == "POST"
    assert http.uri == "https://cloudresourcemanager.googleapis.com/v1/projects/p1:getOrgPolicy?alt=json"
    assert json.loads(http.body) == {"constraint": "c"}
    assert http.headers["content-type"] == "application/json"


def test_request_without_body():
    http = make_http({})
    service = Service(ClientConfig(auto_retry=False), http=http)

    service.request({"method": "POST", "uri": "/projects/p1:undelete"})

    assert http.body is None
    assert "content-type" not in http.headers


def test_request_defaults_to_get():
    http = make_http({})
    Service(ClientConfig(auto_retry=False), http=http).request({"uri": "/projects"})
    assert http.method == "GET"


def test_request_raises_http_error():
    http = make_http({"error": {"code": 404, "message": "Requested entity was not found."}}, status="404")
    service = Service(ClientConfig(auto_retry=False), http=http)

    with pytest.raises(HttpError) as excinfo:
        service.request({"uri": "/projects/missing"})

    assert excinfo.value.resp.status == 404


def test_construction_does_not_resolve_credentials(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("credentials resolved too early")

    monkeypatch.setattr(google.auth, "default", fail)
    Service(ClientConfig())


def test_http_is_authorized_with_explicit_credentials():
    creds = AnonymousCredentials()
    service = Service(ClientConfig(credentials=creds, timeout=30))

    http = service.http

    assert isinstance(http, google_auth_httplib2.AuthorizedHttp)
    assert http.credentials is creds
    assert service.http is http


def test_num_retries():
    assert ClientConfig().num_retries == 3
    assert ClientConfig(max_retries=5).num_retries == 5
    assert ClientConfig(auto_retry=False, max_retries=5).num_retries == 0


def test_resolve_credentials_prefers_explicit(monkeypatch):
    creds = AnonymousCredentials()
    monkeypatch.setattr(google.auth, "default", lambda **kwargs: pytest.fail("ADC should not be used"))
    assert resolve_credentials(credentials=creds, key_filename="key.json") is creds


def test_resolve_credentials_from_key_file(monkeypatch):
    sentinel = AnonymousCredentials()
    calls = []

    def from_file(filename, scopes=None):
        calls.append((filename, scopes))
        return sentinel

    monkeypatch.setattr(service_account.Credentials, "from_service_account_file", from_file)

    result = resolve_credentials(key_filename="key.json", scopes=("scope-a",))

    assert result is sentinel
    assert calls == [("key.json", ["scope-a"])]


def test_resolve_credentials_falls_back_to_adc(monkeypatch):
    sentinel = AnonymousCredentials()
    seen = {}

    def default(scopes=None):
        seen["scopes"] = scopes
        return sentinel, "adc-project"

    monkeypatch.setattr(google.auth, "default", default)

    assert resolve_credentials(scopes=("https://www.googleapis.com/auth/cloud-platform",)) is sentinel
    assert seen["scopes"] == ["https://www.googleapis.com/auth/cloud-platform"]
