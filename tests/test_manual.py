"""Tests that hit the real Cloud Resource Manager API.

These tests use Application Default Credentials (ADC) and are skipped by
default. They only read state; nothing is created or deleted.

To run these tests locally:
    PDUM_RESOURCE_MANUAL_TESTS=1 GOOGLE_CLOUD_PROJECT=my-project uv run pytest tests/test_manual.py -v
"""

import os

import pytest

from pdum.resource import ClientConfig, Resource

# Skip these tests in CI unless PDUM_RESOURCE_MANUAL_TESTS environment variable is set
manual_test = pytest.mark.skipif(
    not os.getenv("PDUM_RESOURCE_MANUAL_TESTS"),
    reason="Manual test - requires GCP credentials. Set PDUM_RESOURCE_MANUAL_TESTS=1 to run.",
)


@pytest.fixture
def live_resource():
    return Resource(ClientConfig.from_env())


@manual_test
def test_get_projects(live_resource):
    """List a few projects and check their shape."""
    projects, _, _ = live_resource.get_projects({"maxResults": 5})

    assert isinstance(projects, list)
    for project in projects:
        assert project.id == project.metadata["projectId"]
        print(f"  - {project.id} ({project.metadata.get('lifecycleState')})")


@manual_test
def test_quota_project_metadata(live_resource):
    """The default project exists and has an IAM policy and ancestry."""
    project = live_resource.project()

    assert project.exists()
    assert project.get_metadata()["projectId"] == project.id

    policy = project.get_iam_policy({"requestedPolicyVersion": 3})
    assert "etag" in policy

    ancestry = project.get_ancestry()
    assert ancestry["ancestor"][0]["resourceId"] == {"id": project.id, "type": "project"}


@manual_test
def test_available_constraints(live_resource):
    project = live_resource.project()
    constraints = list(project.iter_available_org_policy_constraints({"maxResults": 10}))
    assert all(c["name"].startswith("constraints/") for c in constraints)
