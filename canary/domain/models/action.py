"""Action requests. One closed set of request types, one per canary action."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ActionKind(str, Enum):
    """Top-level action verbs."""

    PROC = "proc"
    FILE = "file"
    NET = "net"
    VERSION = "version"


class FileActivity(str, Enum):
    CREATE = "create"
    DELETE = "delete"
    MODIFY = "modify"


class NetProtocol(str, Enum):
    TCP = "tcp"
    UDP = "udp"


@dataclass(frozen=True)
class ProcRequest:
    """Spawn `command` silently and wait for it."""

    command: str
    kind: ActionKind = field(default=ActionKind.PROC, init=False)


@dataclass(frozen=True)
class FileRequest:
    """Create, delete or append to `filename`. `content` is only set for modify."""

    activity: FileActivity
    filename: str
    content: Optional[str] = None
    kind: ActionKind = field(default=ActionKind.FILE, init=False)


@dataclass(frozen=True)
class NetRequest:
    """Send `data` to host:port. `port` is kept as the raw token for the destination field."""

    protocol: NetProtocol
    host: str
    port: str
    data: str = ""
    kind: ActionKind = field(default=ActionKind.NET, init=False)


@dataclass(frozen=True)
class VersionRequest:
    kind: ActionKind = field(default=ActionKind.VERSION, init=False)


ActionRequest = Union[ProcRequest, FileRequest, NetRequest, VersionRequest]
