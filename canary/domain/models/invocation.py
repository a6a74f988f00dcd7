"""Invocation identity. Built once per run by the entry point, never mutated."""

from dataclasses import dataclass
from typing import Tuple

from canary.config.settings import DEFAULT_LOG_FILE


@dataclass(frozen=True)
class InvocationContext:
    """
    Who ran the canary and how: program name, raw arguments, pid, username
    and the audit sink path. Identity fields of every audit record come from here.
    """

    program_name: str
    argv: Tuple[str, ...]
    pid: int
    username: str
    log_file: str = DEFAULT_LOG_FILE

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", tuple(self.argv))
        if not self.log_file:
            object.__setattr__(self, "log_file", DEFAULT_LOG_FILE)

    @property
    def proc_command(self) -> str:
        """The original argument line, program name excluded."""
        return " ".join(self.argv)
