"""Organization policy and constraint wire types."""

from __future__ import annotations

from typing import TypedDict


class ListPolicy(TypedDict, total=False):
    """List-type policy value.

    Attributes
    ----------
    allowedValues, deniedValues : list[str]
        Explicitly allowed or denied values.
    allValues : str
        ``"ALLOW"``, ``"DENY"`` or ``"ALL_VALUES_UNSPECIFIED"``.
    suggestedValue : str
        Value suggested to callers configuring the resource.
    inheritFromParent : bool
        Whether the parent's policy is merged into this one.
    """

    allowedValues: list[str]
    deniedValues: list[str]
    allValues: str
    suggestedValue: str
    inheritFromParent: bool


class BooleanPolicy(TypedDict, total=False):
    enforced: bool


class RestoreDefault(TypedDict, total=False):
    pass


class OrgPolicy(TypedDict, total=False):
    """Configured or effective value of a constraint on a resource.

    Exactly one of ``listPolicy``, ``booleanPolicy`` or ``restoreDefault`` is
    set by the server.
    """

    version: int
    constraint: str
    etag: str
    updateTime: str
    listPolicy: ListPolicy
    booleanPolicy: BooleanPolicy
    restoreDefault: RestoreDefault


class ListConstraint(TypedDict, total=False):
    suggestedValue: str
    supportsUnder: bool


class BooleanConstraint(TypedDict, total=False):
    pass


class Constraint(TypedDict, total=False):
    """A constraint that can be applied to the project.

    ``constraintDefault`` is ``"ALLOW"`` or ``"DENY"``; one of
    ``listConstraint`` or ``booleanConstraint`` describes the value type.
    """

    version: int
    name: str
    displayName: str
    description: str
    constraintDefault: str
    listConstraint: ListConstraint
    booleanConstraint: BooleanConstraint


class ListAvailableOrgPolicyConstraintsResponse(TypedDict, total=False):
    constraints: list[Constraint]
    nextPageToken: str


__all__ = [
    "BooleanConstraint",
    "BooleanPolicy",
    "Constraint",
    "ListAvailableOrgPolicyConstraintsResponse",
    "ListConstraint",
    "ListPolicy",
    "OrgPolicy",
    "RestoreDefault",
]
