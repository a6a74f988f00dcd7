"""Domain models. Action requests and invocation identity."""

from canary.domain.models.action import (
    ActionKind,
    ActionRequest,
    FileActivity,
    FileRequest,
    NetProtocol,
    NetRequest,
    ProcRequest,
    VersionRequest,
)
from canary.domain.models.invocation import InvocationContext

__all__ = [
    "ActionKind",
    "ActionRequest",
    "FileActivity",
    "FileRequest",
    "InvocationContext",
    "NetProtocol",
    "NetRequest",
    "ProcRequest",
    "VersionRequest",
]
