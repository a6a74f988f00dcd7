"""Immutable audit record model. One record per completed canary action."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

IDENTITY_FIELDS = ("timestamp", "username", "proc_name", "proc_command", "pid")
# Serialized order of the action fields after `type`.
ACTION_FIELDS = (
    "path",
    "activity",
    "data_size",
    "protocol",
    "destination",
    "source",
)


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable audit record: invocation identity (who, when, which process)
    plus what was done. Conditional fields stay None when they do not apply.
    """

    timestamp: datetime
    username: str
    proc_name: str
    proc_command: str
    pid: int
    type: str
    path: Optional[str] = None
    activity: Optional[str] = None
    protocol: Optional[str] = None
    destination: Optional[str] = None
    source: Optional[str] = None
    data_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None:
            raise ValueError("audit timestamp must be timezone-aware")
        if self.data_size is not None and self.data_size < 0:
            raise ValueError(f"data_size must be non-negative, got {self.data_size}")
        # Enum members (ActionKind, FileActivity, ...) are stored as their plain values.
        for name in ("type", "activity", "protocol"):
            value = getattr(self, name)
            if value is not None and hasattr(value, "value"):
                object.__setattr__(self, name, value.value)

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation in log key order. Absent action fields are omitted."""
        out: Dict[str, Any] = {
            "timestamp": self.timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT),
            "username": self.username,
            "proc_name": self.proc_name,
            "proc_command": self.proc_command,
            "pid": self.pid,
            "type": self.type,
        }
        for name in ACTION_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out

    def to_json_line(self) -> str:
        """Single newline-terminated JSON line."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")) + "\n"
