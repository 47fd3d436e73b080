"""Tests for the pdum_resource CLI."""

import json

import pytest
from conftest import make_http
from typer.testing import CliRunner

from pdum.resource import ClientConfig, Operation, Resource, cli

runner = CliRunner()


@pytest.fixture
def use_http(monkeypatch):
    """Route the CLI's client through an ``HttpMock`` answering with ``payload``."""

    def install(payload, status="200"):
        resource = Resource(ClientConfig(auto_retry=False), http=make_http(payload, status))
        monkeypatch.setattr(cli, "_build_resource", lambda config_file, endpoint: resource)
        return resource.http

    return install


def test_version(use_http):
    use_http({})
    result = runner.invoke(cli.app, ["version"])
    assert result.exit_code == 0
    assert "pdum_resource version" in result.output


def test_projects(use_http):
    use_http(
        {
            "projects": [
                {"projectId": "alpha-123", "name": "Alpha", "projectNumber": "1", "lifecycleState": "ACTIVE"},
                {"projectId": "beta-456", "name": "Beta", "projectNumber": "2", "lifecycleState": "ACTIVE"},
            ]
        }
    )

    result = runner.invoke(cli.app, ["projects", "--filter", "name:A*"])

    assert result.exit_code == 0
    assert "alpha-123" in result.output
    assert "beta-456" in result.output


def test_ancestry(use_http):
    http = use_http(
        {
            "ancestor": [
                {"resourceId": {"id": "my-proj", "type": "project"}},
                {"resourceId": {"id": "42", "type": "organization"}},
            ]
        }
    )

    result = runner.invoke(cli.app, ["ancestry", "my-proj"])

    assert result.exit_code == 0
    assert "project/my-proj" in result.output
    assert "organization/42" in result.output
    assert "/projects/my-proj:getAncestry" in http.uri


def test_iam_policy(use_http):
    http = use_http({"version": 3, "bindings": [{"role": "roles/owner", "members": ["user:a@example.com"]}]})

    result = runner.invoke(cli.app, ["iam-policy", "my-proj", "--policy-version", "3"])

    assert result.exit_code == 0
    assert "roles/owner" in result.output
    assert json.loads(http.body) == {"options": {"requestedPolicyVersion": 3}}


def test_org_policy_effective(use_http):
    http = use_http({"constraint": "constraints/compute.disableSerialPortAccess"})

    result = runner.invoke(
        cli.app, ["org-policy", "my-proj", "constraints/compute.disableSerialPortAccess", "--effective"]
    )

    assert result.exit_code == 0
    assert ":getEffectiveOrgPolicy" in http.uri


def test_restore(use_http):
    http = use_http({})
    result = runner.invoke(cli.app, ["restore", "my-proj"])
    assert result.exit_code == 0
    assert ":undelete" in http.uri
    assert http.method == "POST"


def test_delete(use_http):
    http = use_http({})
    result = runner.invoke(cli.app, ["delete", "my-proj"])
    assert result.exit_code == 0
    assert http.method == "DELETE"


def test_create_no_wait(use_http):
    http = use_http({"name": "operations/cp.77"})

    result = runner.invoke(cli.app, ["create", "fresh-project-1", "--name", "Fresh", "--folder", "123", "--no-wait"])

    assert result.exit_code == 0
    assert "operations/cp.77" in result.output
    assert json.loads(http.body) == {
        "name": "Fresh",
        "parent": {"type": "folder", "id": "123"},
        "projectId": "fresh-project-1",
    }


def test_create_interrupted_while_waiting(use_http, monkeypatch):
    use_http({"name": "operations/cp.88", "done": False})

    def interrupt(self, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(Operation, "wait", interrupt)
    result = runner.invoke(cli.app, ["create", "fresh-project-2"])

    assert result.exit_code == 130
    assert "operations/cp.88 is still running" in result.output


def test_create_rejects_two_parents(use_http):
    use_http({})
    result = runner.invoke(cli.app, ["create", "fresh-project-1", "--folder", "1", "--organization", "2"])
    assert result.exit_code == 2


def test_constraints(use_http):
    use_http({"constraints": [{"name": "constraints/a.b", "displayName": "A B", "constraintDefault": "ALLOW"}]})

    result = runner.invoke(cli.app, ["constraints", "my-proj"])

    assert result.exit_code == 0
    assert "constraints/a.b" in result.output


def test_api_error_propagates(use_http):
    use_http({"error": {"code": 404, "message": "Not found."}}, status="404")
    result = runner.invoke(cli.app, ["ancestry", "missing"])
    assert result.exit_code != 0
    assert isinstance(result.exception, cli.HttpError)
