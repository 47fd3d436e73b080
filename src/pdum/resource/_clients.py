"""Internal helpers to construct authorized transports.

These helpers centralize credential resolution and ``httplib2`` setup so that
every request goes through the same options. They are intentionally private;
the public API surface remains in ``client.py`` and ``types``.
"""

from __future__ import annotations

from typing import Optional, Sequence

import google.auth
import google_auth_httplib2
from google.auth.credentials import Credentials
from google.oauth2 import service_account
from googleapiclient.http import build_http


def resolve_credentials(
    *,
    credentials: Optional[Credentials] = None,
    key_filename: Optional[str] = None,
    scopes: Sequence[str] = (),
) -> Credentials:
    """Get credentials for API calls (explicit > key file > ADC)."""
    if credentials is not None:
        return credentials
    if key_filename:
        return service_account.Credentials.from_service_account_file(key_filename, scopes=list(scopes))
    creds, _ = google.auth.default(scopes=list(scopes))
    return creds


def authorized_http(credentials: Credentials, *, timeout: Optional[float] = None):
    """An ``httplib2`` transport that signs every request with ``credentials``."""
    http = build_http()
    if timeout is not None:
        http.timeout = timeout
    return google_auth_httplib2.AuthorizedHttp(credentials, http=http)
