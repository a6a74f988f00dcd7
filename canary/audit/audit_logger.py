"""Append-only audit logging for canary actions."""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from canary.audit.audit_models import AuditRecord
from canary.audit.audit_repository import AuditRepository
from canary.domain.models.invocation import InvocationContext

logger = logging.getLogger(__name__)


class AuditLogger:
    """
    Merges invocation identity (timestamp, username, proc_name, proc_command, pid)
    into the action fields and hands the record to the repository.
    Identity always comes from the context, even if `fields` names the same keys.
    """

    def __init__(self, context: InvocationContext, repository: AuditRepository) -> None:
        self._context = context
        self._repository = repository

    def append(self, fields: Mapping[str, Any]) -> AuditRecord:
        """Write one audit record. Timestamp is UTC."""
        record = AuditRecord(
            **{
                **fields,
                "timestamp": datetime.now(timezone.utc),
                "username": self._context.username,
                "proc_name": self._context.program_name,
                "proc_command": self._context.proc_command,
                "pid": self._context.pid,
            }
        )
        self._repository.save(record)
        logger.debug(
            "audit_record_appended",
            extra={"type": record.type, "log_file": self._context.log_file},
        )
        return record
