"""Long-running operation handle."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

from pdum.resource._helpers import _with_callback

from .constants import _OPERATION_METHODS
from .exceptions import OperationError, OperationTimeoutError
from .service_object import ServiceObject

if TYPE_CHECKING:
    from pdum.resource.client import Resource

logger = logging.getLogger(__name__)


class Operation:
    """Handle to a server-side job such as a project creation.

    Attributes
    ----------
    name : str
        Operation resource name, e.g. ``"operations/cp.1234"``.
    parent : Resource
        Client used to poll the operation.
    metadata : dict
        Last operation document seen (set by ``create_project`` and refreshed
        by :meth:`get_metadata`).
    """

    def __init__(self, parent: "Resource", name: str) -> None:
        self._object = ServiceObject(parent=parent, base_url="", id=name, methods=_OPERATION_METHODS)

    def __repr__(self) -> str:
        return f"Operation(name={self.name!r})"

    @property
    def name(self) -> str:
        return self._object.id

    id = name

    @property
    def parent(self) -> "Resource":
        return self._object.parent

    @property
    def metadata(self) -> dict:
        return self._object.metadata

    @metadata.setter
    def metadata(self, value: dict) -> None:
        self._object.metadata = value

    @property
    def done(self) -> bool:
        return bool(self.metadata.get("done", False))

    def request(self, req_opts: dict) -> dict:
        return self._object.request(req_opts)

    @_with_callback()
    def get_metadata(self) -> dict:
        """Fetch the current operation document."""
        return self._object.get_metadata()

    @_with_callback()
    def exists(self) -> bool:
        return self._object.exists()

    @_with_callback(arity=2)
    def get(self) -> tuple["Operation", dict]:
        return self, self._object.get()

    def wait(self, *, timeout: float = 600.0, polling_interval: float = 5.0) -> dict:
        """Poll until the operation is done.

        Parameters
        ----------
        timeout : float, default 600.0
            Max seconds to wait.
        polling_interval : float, default 5.0
            Seconds between polls.

        Returns
        -------
        dict
            The operation's ``response`` payload (``{}`` when it has none).

        Raises
        ------
        OperationError
            If the operation finished with an ``error``.
        OperationTimeoutError
            If it is still running after ``timeout`` seconds.
        googleapiclient.errors.HttpError
            If polling fails.
        """
        start = time.monotonic()
        while not self.done:
            if time.monotonic() - start > timeout:
                raise OperationTimeoutError(self.name, timeout)
            if self.metadata:
                time.sleep(polling_interval)
            self.get_metadata()

        if "error" in self.metadata:
            raise OperationError(self.name, self.metadata["error"])

        logger.info("Operation %s finished", self.name)
        return self.metadata.get("response", {})


__all__ = ["Operation"]
