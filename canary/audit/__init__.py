"""Audit: immutable records and the append-only logger."""

from canary.audit.audit_logger import AuditLogger
from canary.audit.audit_models import AuditRecord
from canary.audit.audit_repository import AuditRepository

__all__ = [
    "AuditLogger",
    "AuditRecord",
    "AuditRepository",
]
