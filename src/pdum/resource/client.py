"""Cloud Resource Manager client.

``Resource`` is the entry point: it owns configuration and the transport,
creates and lists projects, and hands out :class:`Project` and
:class:`Operation` handles that route their requests through it.

Example:
    >>> from pdum.resource import Resource
    >>> resource = Resource()
    >>> projects, _, _ = resource.get_projects({"filter": "labels.env:prod"})
    >>> for project in projects:
    ...     print(project.id, project.metadata["lifecycleState"])
"""

from __future__ import annotations

from typing import Iterator, Optional

from pdum.resource._helpers import _next_query, _paged, _request_query, _walk_pages, _with_callback
from pdum.resource.config import ClientConfig
from pdum.resource.service import Service
from pdum.resource.types.operation import Operation
from pdum.resource.types.project import CreateProjectOptions, GetProjectsOptions, Project


class Resource(Service):
    """Root client for the Cloud Resource Manager v1 API.

    Parameters
    ----------
    config : ClientConfig, optional
        Endpoint, default project, credentials and retry options.
    http : httplib2.Http-like, optional
        Transport override (mostly for tests).
    """

    def __init__(self, config: Optional[ClientConfig] = None, *, http=None) -> None:
        super().__init__(config, http=http)

    def project(self, id: Optional[str] = None) -> Project:
        """Return a handle for project ``id`` (or the configured default). No API call is made."""
        id = id or self.project_id
        if not id:
            raise ValueError("A project ID is required.")
        return Project(self, id)

    def operation(self, name: str) -> Operation:
        """Return a handle for the operation called ``name``."""
        if not name:
            raise ValueError("A name must be specified for an operation.")
        return Operation(self, name)

    @_with_callback(arity=3)
    def create_project(self, id: str, options: Optional[CreateProjectOptions] = None) -> tuple[Project, Operation, dict]:
        """Create a project.

        Parameters
        ----------
        id : str
            The new project's id.
        options : dict, optional
            Extra project fields such as ``name``, ``labels`` or
            ``parent: {"type": "folder", "id": "123"}``.

        Returns
        -------
        tuple
            ``(project, operation, api_response)``. ``operation.metadata`` holds
            the raw response; call ``operation.wait()`` to block until the
            project exists.
        """
        response = self.request(
            {
                "method": "POST",
                "uri": "/projects",
                "json": {**(options or {}), "projectId": id},
            }
        )
        project = self.project(response.get("projectId") or id)
        operation = self.operation(response["name"])
        operation.metadata = response
        return project, operation, response

    def _get_projects_page(self, query: dict) -> tuple[list[Project], Optional[dict], dict]:
        response = self.request({"method": "GET", "uri": "/projects", "qs": _request_query(query)})

        projects = []
        for record in response.get("projects", []):
            project = self.project(record["projectId"])
            project.metadata = record
            projects.append(project)

        return projects, _next_query(query, response), response

    @_with_callback(arity=3)
    def get_projects(self, options: Optional[GetProjectsOptions] = None) -> tuple[list[Project], Optional[dict], dict]:
        """List projects visible to the caller.

        Parameters
        ----------
        options : dict, optional
            Query options (``filter``, ``pageSize``, ``pageToken``) plus the
            paging controls ``autoPaginate`` (default True), ``maxApiCalls``
            and ``maxResults``.

        Returns
        -------
        tuple
            ``(projects, next_query, api_response)``. With ``autoPaginate``
            False only one page is fetched and ``next_query`` is the options for
            the following page (``None`` on the last page). With automatic
            paging all pages are merged; ``next_query`` is only set when
            ``maxApiCalls`` or ``maxResults`` stopped the walk
            early on a page boundary.
        """
        return _paged(self._get_projects_page, options)

    def iter_projects(self, options: Optional[GetProjectsOptions] = None) -> Iterator[Project]:
        """Lazily yield projects, fetching pages as needed."""
        for projects, _, _ in _walk_pages(self._get_projects_page, options):
            yield from projects


__all__ = ["Resource"]
