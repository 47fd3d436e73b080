"""Project resource implementation."""

from __future__ import annotations

import random
import string
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, TypedDict

import coolname

from pdum.resource._helpers import _next_query, _paged, _request_query, _walk_pages, _with_callback

from .constants import _PROJECT_ID_PATTERN, _PROJECT_METHODS
from .service_object import ServiceObject

if TYPE_CHECKING:
    from pdum.resource.client import Resource

    from .ancestry import Ancestry
    from .operation import Operation
    from .org_policy import Constraint, OrgPolicy
    from .policy import GetIamPolicyOptions, Policy


class LifecycleState(str, Enum):
    """Values of a project's ``lifecycleState`` field."""

    LIFECYCLE_STATE_UNSPECIFIED = "LIFECYCLE_STATE_UNSPECIFIED"
    ACTIVE = "ACTIVE"
    DELETE_REQUESTED = "DELETE_REQUESTED"
    DELETE_IN_PROGRESS = "DELETE_IN_PROGRESS"


class ProjectParent(TypedDict):
    """``type`` is ``"organization"`` or ``"folder"``."""

    type: str
    id: str


class ProjectMetadata(TypedDict, total=False):
    """Project document as returned by ``projects.get``/``projects.list``."""

    projectNumber: str
    projectId: str
    lifecycleState: str
    name: str
    createTime: str
    labels: dict[str, str]
    parent: ProjectParent


class CreateProjectOptions(TypedDict, total=False):
    name: str
    labels: dict[str, str]
    parent: ProjectParent


class GetProjectsOptions(TypedDict, total=False):
    """Listing query plus paging controls that never reach the wire.

    Attributes
    ----------
    autoPaginate : bool
        Follow ``nextPageToken`` automatically (default True).
    maxApiCalls, maxResults : int
        Caps for automatic paging.
    filter : str
        Server-side filter, e.g. ``"labels.env:prod"``.
    pageSize : int
    pageToken : str
    """

    autoPaginate: bool
    filter: str
    maxApiCalls: int
    maxResults: int
    pageSize: int
    pageToken: str


class Project:
    """A Cloud Resource Manager project.

    Construction is local and makes no API call; ``metadata`` stays empty until
    :meth:`get`, :meth:`get_metadata` or a listing fills it. After
    :meth:`delete` the handle remains usable (e.g. for :meth:`restore`).

    Every method that talks to the API also accepts a keyword-only
    ``callback``. See :func:`pdum.resource._helpers._with_callback`.

    Attributes
    ----------
    id : str
        Project id (e.g. ``"my-project-12345"``).
    parent : Resource
        The client this handle routes requests through.
    metadata : dict
        Last project document seen.
    """

    def __init__(self, resource: "Resource", id: str) -> None:
        self._object = ServiceObject(
            parent=resource,
            base_url="/projects",
            id=id,
            methods=_PROJECT_METHODS,
            create_method=resource.create_project,
        )

    def __repr__(self) -> str:
        return f"Project(id={self.id!r})"

    @property
    def id(self) -> str:
        return self._object.id

    project_id = id

    @property
    def parent(self) -> "Resource":
        return self._object.parent

    @property
    def metadata(self) -> dict:
        return self._object.metadata

    @metadata.setter
    def metadata(self, value: dict) -> None:
        self._object.metadata = value

    def full_resource_name(self) -> str:
        return f"projects/{self.id}"

    def request(self, req_opts: dict) -> dict:
        """Send a request scoped to ``/projects/{id}``."""
        return self._object.request(req_opts)

    # Generic CRUD

    @_with_callback(arity=3)
    def create(self, options: Optional[dict] = None) -> tuple["Project", "Operation", dict]:
        """Create this project. Returns ``(self, operation, api_response)``."""
        _, operation, api_response = self._object.create(options)
        return self, operation, api_response

    @_with_callback()
    def delete(self) -> dict:
        """Mark the project for deletion (``DELETE_REQUESTED``)."""
        return self._object.delete()

    @_with_callback()
    def exists(self) -> bool:
        return self._object.exists()

    @_with_callback(arity=2)
    def get(self, *, auto_create: bool = False) -> tuple["Project", dict]:
        """Fetch the project, creating it first when ``auto_create`` is set and it is missing.

        Returns ``(self, api_response)``; after a creation the response is the
        create operation.
        """
        result = self._object.get(auto_create=auto_create)
        if isinstance(result, tuple):
            return self, result[2]
        return self, result

    @_with_callback()
    def get_metadata(self) -> dict:
        return self._object.get_metadata()

    @_with_callback()
    def set_metadata(self, metadata: dict) -> dict:
        """Replace the project's updatable fields (``name``, ``labels``) with a PUT."""
        return self._object.set_metadata(metadata)

    # Project RPCs

    @_with_callback()
    def get_iam_policy(self, options: Optional["GetIamPolicyOptions"] = None) -> "Policy":
        """Return the project's IAM policy exactly as the server sent it.

        Parameters
        ----------
        options : dict, optional
            ``{"requestedPolicyVersion": 3}`` to receive conditional bindings.
        """
        return self.request(
            {
                "method": "POST",
                "uri": ":getIamPolicy",
                "json": {"options": options or {}},
            }
        )

    @_with_callback()
    def restore(self) -> dict:
        """Undelete a project in ``DELETE_REQUESTED`` state."""
        return self.request({"method": "POST", "uri": ":undelete"})

    @_with_callback()
    def get_ancestry(self) -> "Ancestry":
        """Return the project's ancestors, starting with the project itself."""
        return self.request({"method": "POST", "uri": ":getAncestry"})

    @_with_callback()
    def get_effective_org_policy(self, constraint: str) -> "OrgPolicy":
        """Return the effective policy for ``constraint`` after hierarchy evaluation."""
        return self.request(
            {
                "method": "POST",
                "uri": ":getEffectiveOrgPolicy",
                "json": {"constraint": constraint},
            }
        )

    @_with_callback()
    def get_org_policy(self, constraint: str) -> "OrgPolicy":
        """Return the policy for ``constraint`` set directly on this project."""
        return self.request(
            {
                "method": "POST",
                "uri": ":getOrgPolicy",
                "json": {"constraint": constraint},
            }
        )

    def _get_available_org_policy_constraints_page(self, query: dict) -> tuple[list["Constraint"], Optional[dict], dict]:
        response = self.request(
            {
                "method": "POST",
                "uri": ":listAvailableOrgPolicyConstraints",
                "qs": _request_query(query),
            }
        )
        return response.get("constraints", []), _next_query(query, response), response

    @_with_callback(arity=3)
    def get_available_org_policy_constraints(
        self, options: Optional[dict] = None
    ) -> tuple[list["Constraint"], Optional[dict], dict]:
        """List constraints that can be applied to this project.

        Parameters
        ----------
        options : dict, optional
            ``pageSize``/``pageToken`` plus the paging controls
            ``autoPaginate`` (default True), ``maxApiCalls`` and ``maxResults``.

        Returns
        -------
        tuple
            ``(constraints, next_query, api_response)``. ``next_query`` is the
            options to pass back for the next page, or ``None`` when there is none.
        """
        return _paged(self._get_available_org_policy_constraints_page, options)

    def iter_available_org_policy_constraints(self, options: Optional[dict] = None) -> Iterator["Constraint"]:
        """Lazily yield constraints across pages."""
        for constraints, _, _ in _walk_pages(self._get_available_org_policy_constraints_page, options):
            yield from constraints

    @classmethod
    def suggest_id(cls, *, prefix: Optional[str] = None, random_digits: int = 5) -> str:
        """Suggest an id that ``create_project`` will accept.

        The id is ``prefix`` followed by ``-`` and ``random_digits`` digits.
        Without a prefix a two-word coolname slug is drawn, and redrawn until
        the id fits the 30 character limit. An explicit prefix that cannot
        produce a valid id raises ``ValueError``.
        """
        if not 0 <= random_digits <= 10:
            raise ValueError("random_digits must be between 0 and 10")

        suffix = "-" + "".join(random.choices(string.digits, k=random_digits)) if random_digits else ""

        if prefix is not None:
            candidate = prefix + suffix
            if not _PROJECT_ID_PATTERN.match(candidate):
                raise ValueError(
                    f"{candidate!r} is not a valid project id: use 6-30 lowercase letters, digits or hyphens, "
                    "starting with a letter and not ending with a hyphen"
                )
            return candidate

        while True:
            candidate = coolname.generate_slug(2) + suffix
            if _PROJECT_ID_PATTERN.match(candidate):
                return candidate


__all__ = [
    "CreateProjectOptions",
    "GetProjectsOptions",
    "LifecycleState",
    "Project",
    "ProjectMetadata",
    "ProjectParent",
]
