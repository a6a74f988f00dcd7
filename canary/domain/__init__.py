"""Domain layer: action models, audit schema, validators, exceptions. No OS side effects."""

from canary.domain.exceptions import (
    CanaryError,
    CommandNotFoundError,
    ConnectionFailedError,
    ExecutionError,
    NetworkResolutionError,
    ProcessSpawnError,
    TargetFileNotFoundError,
    UsageError,
)
from canary.domain.models import (
    ActionKind,
    ActionRequest,
    FileActivity,
    FileRequest,
    InvocationContext,
    NetProtocol,
    NetRequest,
    ProcRequest,
    VersionRequest,
)
from canary.domain.schemas import AuditLine
from canary.domain.validators import parse_action_request

__all__ = [
    "ActionKind",
    "ActionRequest",
    "AuditLine",
    "CanaryError",
    "CommandNotFoundError",
    "ConnectionFailedError",
    "ExecutionError",
    "FileActivity",
    "FileRequest",
    "InvocationContext",
    "NetProtocol",
    "NetRequest",
    "NetworkResolutionError",
    "ProcRequest",
    "ProcessSpawnError",
    "TargetFileNotFoundError",
    "UsageError",
    "VersionRequest",
    "parse_action_request",
]
