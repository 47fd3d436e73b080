"""Generic CRUD capability for addressable resources."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from googleapiclient.errors import HttpError

from pdum.resource._helpers import _join_uri

logger = logging.getLogger(__name__)


class _Parent(Protocol):
    def request(self, req_opts: dict) -> dict: ...


class ServiceObject:
    """Request routing and generic CRUD for one resource under a parent.

    Instances are composed into handles such as ``Project``; the handle
    forwards to the operations it enables in ``methods``.

    Parameters
    ----------
    parent : object with ``request(req_opts)``
        Where scoped requests are sent, usually the ``Resource`` client.
        The reference is non-owning.
    base_url : str
        Collection path, e.g. ``"/projects"`` (empty for operations).
    id : str
        Resource id appended to ``base_url``.
    methods : dict
        Enabled operations. A value of ``True`` enables the default request;
        a dict overrides request options (``{"method": "PUT"}``).
    create_method : callable, optional
        ``create_method(id, options)`` returning ``(instance, operation, response)``.
    """

    def __init__(
        self,
        *,
        parent: _Parent,
        base_url: str,
        id: str,
        methods: dict,
        create_method: Optional[Callable[..., tuple]] = None,
    ) -> None:
        self.parent = parent
        self.base_url = base_url
        self.id = id
        self.methods = methods
        self.create_method = create_method
        self.metadata: dict = {}

    def _enabled(self, name: str) -> dict:
        opts = self.methods.get(name)
        if not opts:
            raise NotImplementedError(f"{name}() is not supported for {self.base_url or '/'}{self.id}")
        return opts if isinstance(opts, dict) else {}

    def request(self, req_opts: dict) -> dict:
        """Scope ``req_opts["uri"]`` under ``base_url/id`` and send it to the parent."""
        scoped = dict(req_opts)
        scoped["uri"] = "/" + _join_uri(self.base_url, self.id, req_opts.get("uri", ""))
        return self.parent.request(scoped)

    def create(self, options: Optional[dict] = None) -> tuple:
        self._enabled("create")
        if self.create_method is None:
            raise NotImplementedError(f"No create method configured for {self.id}")
        return self.create_method(self.id, options)

    def delete(self) -> dict:
        opts = self._enabled("delete")
        return self.request({"method": "DELETE", "uri": "", **opts})

    def exists(self) -> bool:
        self._enabled("exists")
        try:
            self.get_metadata()
        except HttpError as err:
            if err.resp.status == 404:
                return False
            raise
        return True

    def get(self, *, auto_create: bool = False, create_options: Optional[dict] = None) -> Any:
        """Fetch metadata; on 404 with ``auto_create`` create the resource instead.

        Returns the metadata, or the ``create_method`` result when created.
        """
        self._enabled("get")
        try:
            return self.get_metadata()
        except HttpError as err:
            if auto_create and err.resp.status == 404:
                logger.info("%s not found, creating it", _join_uri(self.base_url, self.id))
                return self.create(create_options)
            raise

    def get_metadata(self) -> dict:
        opts = self._enabled("get_metadata")
        self.metadata = self.request({"method": "GET", "uri": "", **opts})
        return self.metadata

    def set_metadata(self, metadata: dict) -> dict:
        opts = self._enabled("set_metadata")
        self.metadata = self.request({"method": "PATCH", "uri": "", "json": metadata, **opts})
        return self.metadata


__all__ = ["ServiceObject"]
