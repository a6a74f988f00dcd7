"""File canary actions: touch, delete, append. Each returns the audit fields it produced."""

from pathlib import Path
from typing import Any, Dict

from canary.domain.exceptions import TargetFileNotFoundError
from canary.domain.models.action import ActionKind, FileActivity


def _fields(path: Path, activity: FileActivity) -> Dict[str, Any]:
    return {"type": ActionKind.FILE, "path": str(path), "activity": activity}


def _target(filename: str) -> Path:
    # Path("") means the working directory, which is never a canary target.
    if not filename:
        raise TargetFileNotFoundError(filename)
    return Path(filename)


def create_file(filename: str) -> Dict[str, Any]:
    """Touch semantics: create when absent, never truncate an existing file."""
    path = _target(filename)
    path.touch(exist_ok=True)
    return _fields(path.resolve(strict=True), FileActivity.CREATE)


def delete_file(filename: str) -> Dict[str, Any]:
    """Delete an existing file. The path is resolved before it disappears."""
    path = _target(filename)
    if not path.exists():
        raise TargetFileNotFoundError(filename)

    resolved = path.resolve(strict=True)
    path.unlink()
    return _fields(resolved, FileActivity.DELETE)


def modify_file(filename: str, content: str) -> Dict[str, Any]:
    """Append `content` to an existing file."""
    path = _target(filename)
    if not path.exists():
        raise TargetFileNotFoundError(filename)

    # surrogateescape writes undecodable argv bytes back out unchanged.
    with open(path, "a", encoding="utf-8", errors="surrogateescape") as handle:
        handle.write(content)
    return _fields(path.resolve(strict=True), FileActivity.MODIFY)
