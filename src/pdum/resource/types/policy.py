"""IAM policy wire types."""

from __future__ import annotations

from typing import TypedDict


class Expression(TypedDict, total=False):
    """A CEL condition attached to a binding."""

    expression: str
    title: str
    description: str
    location: str


class Binding(TypedDict, total=False):
    """Associates ``members`` with a ``role``.

    Attributes
    ----------
    role : str
        Role granted to the members (e.g., ``"roles/owner"``).
    members : list[str]
        Principals such as ``"user:alice@example.com"`` or
        ``"serviceAccount:bot@project.iam.gserviceaccount.com"``.
    condition : Expression
        Optional condition limiting when the binding applies.
    """

    role: str
    members: list[str]
    condition: Expression


class AuditLogConfig(TypedDict, total=False):
    logType: str
    exemptedMembers: list[str]


class AuditConfig(TypedDict, total=False):
    service: str
    auditLogConfigs: list[AuditLogConfig]


class Policy(TypedDict, total=False):
    """Snapshot of a project's IAM policy as returned by ``getIamPolicy``.

    Bindings are kept in server order. The library never mutates a policy;
    ``etag`` must be echoed back unchanged by anything that writes one.
    """

    bindings: list[Binding]
    auditConfigs: list[AuditConfig]
    etag: str
    version: int


class GetIamPolicyOptions(TypedDict, total=False):
    requestedPolicyVersion: int


__all__ = [
    "AuditConfig",
    "AuditLogConfig",
    "Binding",
    "Expression",
    "GetIamPolicyOptions",
    "Policy",
]
