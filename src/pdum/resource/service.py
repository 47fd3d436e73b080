"""Request dispatch shared by every client object.

A request is described by a plain dict::

    {"method": "POST", "uri": "/projects/my-project:getIamPolicy", "json": {...}, "qs": {...}}

``Service.request`` serializes it with googleapiclient's ``JsonModel``, executes
it through ``HttpRequest`` (which owns retries) and returns the decoded JSON
body. Non-2xx responses raise ``googleapiclient.errors.HttpError``.
"""

from __future__ import annotations

import logging
from typing import Optional

from google.auth.credentials import Credentials
from googleapiclient.http import HttpRequest
from googleapiclient.model import JsonModel

from pdum.resource._clients import authorized_http, resolve_credentials
from pdum.resource.config import ClientConfig
from pdum.resource.types.constants import API_VERSION

logger = logging.getLogger(__name__)


class Service:
    """Holds configuration and the authorized transport for a client.

    Parameters
    ----------
    config : ClientConfig, optional
        Client options. Defaults to ``ClientConfig()``.
    http : httplib2.Http-like, optional
        Transport to use instead of an authorized ``httplib2.Http``. Tests pass
        ``googleapiclient.http.HttpMock`` here.
    """

    def __init__(self, config: Optional[ClientConfig] = None, *, http=None) -> None:
        self.config = config or ClientConfig()
        self.api_endpoint = self.config.api_endpoint
        self.base_url = f"https://{self.api_endpoint}/{API_VERSION}"
        self.scopes = list(self.config.scopes)
        self.project_id = self.config.project_id
        self._credentials: Optional[Credentials] = self.config.credentials
        self._http = http
        self._model = JsonModel()

    def _get_credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = resolve_credentials(
                credentials=self.config.credentials,
                key_filename=self.config.key_filename,
                scopes=self.scopes,
            )
        return self._credentials

    @property
    def http(self):
        """The transport, built on first use so that construction stays offline."""
        if self._http is None:
            self._http = authorized_http(self._get_credentials(), timeout=self.config.timeout)
        return self._http

    def request(self, req_opts: dict) -> dict:
        """Execute a request descriptor and return the decoded response body."""
        method = req_opts.get("method", "GET")
        headers, _, query, body = self._model.request({}, {}, dict(req_opts.get("qs") or {}), req_opts.get("json"))
        uri = "/".join([self.base_url.rstrip("/"), req_opts.get("uri", "").lstrip("/")]) + query

        logger.debug("%s %s", method, uri)
        request = HttpRequest(self.http, self._model.response, uri, method=method, body=body, headers=headers)
        return request.execute(num_retries=self.config.num_retries)


__all__ = ["Service"]
