"""Ancestry wire types."""

from __future__ import annotations

from typing import TypedDict


class ResourceId(TypedDict):
    """Identifies a container: ``type`` is ``project``, ``folder`` or ``organization``."""

    id: str
    type: str


class Ancestor(TypedDict):
    resourceId: ResourceId


class Ancestry(TypedDict):
    """Ordered chain from the queried project up to its organization."""

    ancestor: list[Ancestor]


__all__ = ["Ancestor", "Ancestry", "ResourceId"]
