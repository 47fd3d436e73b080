"""Client for the Google Cloud Resource Manager projects API"""

from pdum.resource.client import Resource
from pdum.resource.config import ClientConfig
from pdum.resource.types import (
    Ancestry,
    Constraint,
    HttpError,
    LifecycleState,
    Operation,
    OperationError,
    OperationTimeoutError,
    OrgPolicy,
    Policy,
    Project,
    ProjectMetadata,
)

__version__ = "0.1.0-alpha"


__all__ = [
    "__version__",
    "Ancestry",
    "ClientConfig",
    "Constraint",
    "HttpError",
    "LifecycleState",
    "Operation",
    "OperationError",
    "OperationTimeoutError",
    "OrgPolicy",
    "Policy",
    "Project",
    "ProjectMetadata",
    "Resource",
]
