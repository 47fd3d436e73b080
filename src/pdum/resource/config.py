"""Client configuration for pdum.resource."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

import yaml
from google.auth.credentials import Credentials

from pdum.resource.types.constants import _SCOPES, DEFAULT_API_ENDPOINT


@dataclass
class ClientConfig:
    """Options accepted by :class:`pdum.resource.Resource`.

    Everything except ``api_endpoint`` and ``project_id`` is handed to the
    transport layer unmodified.

    Attributes
    ----------
    api_endpoint : str
        Hostname of the Cloud Resource Manager API.
    project_id : str, optional
        Default project used by ``Resource.project()`` when no id is passed.
    scopes : tuple[str, ...]
        OAuth scopes requested when credentials are resolved.
    credentials : Credentials, optional
        Explicit credentials. Takes precedence over ``key_filename`` and ADC.
    key_filename : str, optional
        Path to a service-account JSON key.
    auto_retry : bool, default True
        Retry 429/5xx responses and connection errors.
    max_retries : int, default 3
        Number of retries when ``auto_retry`` is enabled.
    timeout : float, optional
        Socket timeout in seconds for the HTTP transport.
    """

    api_endpoint: str = DEFAULT_API_ENDPOINT
    project_id: Optional[str] = None
    scopes: tuple[str, ...] = _SCOPES
    credentials: Optional[Credentials] = field(default=None, repr=False, compare=False)
    key_filename: Optional[str] = None
    auto_retry: bool = True
    max_retries: int = 3
    timeout: Optional[float] = None

    @property
    def num_retries(self) -> int:
        """Retry count handed to ``HttpRequest.execute``."""
        return self.max_retries if self.auto_retry else 0

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from ``GOOGLE_CLOUD_PROJECT``/``GCLOUD_PROJECT`` and ``RESOURCE_API_ENDPOINT``."""
        values: dict = {}
        project_id = os.getenv("GOOGLE_CLOUD_PROJECT") or os.getenv("GCLOUD_PROJECT")
        if project_id:
            values["project_id"] = project_id
        endpoint = os.getenv("RESOURCE_API_ENDPOINT")
        if endpoint:
            values["api_endpoint"] = endpoint
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], **overrides) -> "ClientConfig":
        """Load a config from a YAML mapping.

        Unknown keys raise ``ValueError`` so that typos are not silently ignored.
        ``credentials`` cannot be set from a file; use ``key_filename`` instead.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

        allowed = {f.name for f in fields(cls)} - {"credentials"}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        if "scopes" in data:
            data["scopes"] = tuple(data["scopes"])
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


def default_config_path() -> Path:
    """Return ``~/.config/gcloud/pdum_resource/config.yaml``."""
    return Path.home() / ".config" / "gcloud" / "pdum_resource" / "config.yaml"


__all__ = ["ClientConfig", "default_config_path"]
