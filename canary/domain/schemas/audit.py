"""Pydantic schema for one audit log line. Used to read the log back, never to write it."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

_FILE_KEYS = ("path", "activity")
_NET_KEYS = ("protocol", "destination", "source", "data_size")


class AuditLine(BaseModel):
    """One parsed audit record. Identity keys are always present; action keys depend on `type`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timestamp: datetime
    username: str
    proc_name: str
    proc_command: str
    pid: int
    type: Literal["proc", "file", "net"]

    # file
    path: Optional[str] = None
    activity: Optional[Literal["create", "delete", "modify"]] = None

    # net
    protocol: Optional[Literal["tcp", "udp"]] = None
    destination: Optional[str] = None
    source: Optional[str] = None
    data_size: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def action_keys_match_type(self) -> "AuditLine":
        required = {"file": _FILE_KEYS, "net": _NET_KEYS}.get(self.type, ())
        missing = [key for key in required if getattr(self, key) is None]
        if missing:
            raise ValueError(f"{self.type} record missing keys: {', '.join(missing)}")
        return self
