# canary/infrastructure/audit_log/jsonl_repository.py

import os
from pathlib import Path
from typing import List, Union

from canary.audit.audit_models import AuditRecord
from canary.domain.schemas.audit import AuditLine

LOG_FILE_MODE = 0o644


class JsonlAuditRepository:
    """Audit records as JSON Lines in an append-only file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, record: AuditRecord) -> None:
        """Append one line with a single O_APPEND write so concurrent runs never interleave."""
        # Lone surrogates (undecodable argv bytes) become JSON \uXXXX escapes.
        data = record.to_json_line().encode("utf-8", "backslashreplace")
        fd = os.open(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, LOG_FILE_MODE)
        try:
            written = os.write(fd, data)
            # Regular files take the whole buffer; keep going on a short write anyway.
            while written < len(data):
                written += os.write(fd, data[written:])
        finally:
            os.close(fd)

    def read_records(self) -> List[AuditLine]:
        """Parse every line of the log. A missing log reads as empty."""
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as handle:
            return [AuditLine.model_validate_json(line) for line in handle if line.strip()]
