"""Silent subprocess execution. The child's output is discarded, never captured."""

import logging
import re
import subprocess
from typing import Any, Dict

from canary.domain.exceptions import CommandNotFoundError, ProcessSpawnError
from canary.domain.models.action import ActionKind

logger = logging.getLogger(__name__)

# Commands containing any of these need a shell to mean what they say.
SHELL_METACHARACTERS = re.compile(r"[*?{}\[\]<>()~&|\\$;'`\"\n#=%]")
SHELL = "/bin/sh"


def needs_shell(command: str) -> bool:
    return bool(SHELL_METACHARACTERS.search(command))


def run_process(command: str) -> Dict[str, Any]:
    """
    Run `command` with stdout and stderr sent to the null device and wait for it to exit.
    The exit status is not inspected. Returns the audit fields for a proc action.
    """
    if needs_shell(command):
        args = [SHELL, "-c", command]
    else:
        args = command.split()
    if not args:
        raise CommandNotFoundError(command)

    try:
        completed = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError as e:
        raise CommandNotFoundError(command) from e
    except OSError as e:
        raise ProcessSpawnError(command, f"could not start process: {command}: {e.strerror or e}") from e

    logger.info(
        "process_exited",
        extra={"returncode": completed.returncode, "shell": args[0] == SHELL},
    )
    return {"type": ActionKind.PROC}
