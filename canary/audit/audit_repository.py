"""Audit repository protocol. The audit logger depends on this; infrastructure implements it."""

from typing import Protocol

from canary.audit.audit_models import AuditRecord


class AuditRepository(Protocol):
    """Protocol for persisting immutable audit records."""

    def save(self, record: AuditRecord) -> None:
        """Append an immutable audit record. Must never rewrite earlier records."""
        ...
