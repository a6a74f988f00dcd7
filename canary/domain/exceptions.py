"""Canary exceptions. Usage problems are recoverable; execution failures are fatal."""

from typing import Optional


class CanaryError(Exception):
    """Base for all canary errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageError(CanaryError):
    """Raised when the argument shape does not match any action. Message is the usage line."""


class ExecutionError(CanaryError):
    """Base for failures raised while performing an action. Nothing is audited."""


class TargetFileNotFoundError(ExecutionError):
    """Raised by delete/modify when the target file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"file not found: {path}")


class ProcessSpawnError(ExecutionError):
    """Raised when the subprocess cannot be started."""

    def __init__(self, command: str, message: Optional[str] = None) -> None:
        self.command = command
        super().__init__(message or f"could not start process: {command}")


class CommandNotFoundError(ProcessSpawnError):
    """Raised when the executable of the command does not exist."""

    def __init__(self, command: str) -> None:
        super().__init__(command, f"command not found: {command}")


class NetworkResolutionError(ExecutionError):
    """Raised when host or port cannot be resolved to a socket address."""

    def __init__(self, host: str, port: str, reason: str) -> None:
        self.host = host
        self.port = port
        super().__init__(f"cannot resolve {host}:{port}: {reason}")


class ConnectionFailedError(ExecutionError):
    """Raised when the socket connect fails (e.g. connection refused)."""

    def __init__(self, host: str, port: str, reason: str) -> None:
        self.host = host
        self.port = port
        super().__init__(f"cannot connect to {host}:{port}: {reason}")
