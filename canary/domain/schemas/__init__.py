"""Pydantic schemas for reading the audit log."""

from canary.domain.schemas.audit import AuditLine

__all__ = ["AuditLine"]
