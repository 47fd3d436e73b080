"""Public exports for pdum.resource types."""

from __future__ import annotations

from .ancestry import Ancestor, Ancestry, ResourceId
from .constants import API_VERSION, DEFAULT_API_ENDPOINT
from .exceptions import HttpError, OperationError, OperationTimeoutError
from .operation import Operation
from .org_policy import (
    BooleanConstraint,
    BooleanPolicy,
    Constraint,
    ListConstraint,
    ListPolicy,
    OrgPolicy,
    RestoreDefault,
)
from .policy import AuditConfig, AuditLogConfig, Binding, Expression, GetIamPolicyOptions, Policy
from .project import (
    CreateProjectOptions,
    GetProjectsOptions,
    LifecycleState,
    Project,
    ProjectMetadata,
    ProjectParent,
)
from .service_object import ServiceObject

__all__ = [
    "API_VERSION",
    "DEFAULT_API_ENDPOINT",
    "Ancestor",
    "Ancestry",
    "AuditConfig",
    "AuditLogConfig",
    "Binding",
    "BooleanConstraint",
    "BooleanPolicy",
    "Constraint",
    "CreateProjectOptions",
    "Expression",
    "GetIamPolicyOptions",
    "GetProjectsOptions",
    "HttpError",
    "LifecycleState",
    "ListConstraint",
    "ListPolicy",
    "Operation",
    "OperationError",
    "OperationTimeoutError",
    "OrgPolicy",
    "Policy",
    "Project",
    "ProjectMetadata",
    "ProjectParent",
    "ResourceId",
    "RestoreDefault",
    "ServiceObject",
]
