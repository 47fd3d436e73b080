"""Shared constants for pdum.resource types."""

from __future__ import annotations

import re

DEFAULT_API_ENDPOINT = "cloudresourcemanager.googleapis.com"
API_VERSION = "v1"

_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/cloud-platform",)

# 6-30 chars of [a-z0-9-], starting with a letter, not ending with a hyphen.
_PROJECT_ID_PATTERN = re.compile(r"^[a-z][a-z0-9-]{4,28}[a-z0-9]$")

_PROJECT_METHODS: dict = {
    "create": True,
    "delete": True,
    "exists": True,
    "get": True,
    "get_metadata": True,
    "set_metadata": {"method": "PUT"},
}

_OPERATION_METHODS: dict = {
    "exists": True,
    "get": True,
    "get_metadata": True,
}

__all__ = [
    "API_VERSION",
    "DEFAULT_API_ENDPOINT",
    "_OPERATION_METHODS",
    "_PROJECT_ID_PATTERN",
    "_PROJECT_METHODS",
    "_SCOPES",
]
