"""Failure categorization for diagnostics and exit status. Maps exceptions to taxonomy."""

from enum import Enum

from canary.domain.exceptions import (
    CanaryError,
    ConnectionFailedError,
    NetworkResolutionError,
    ProcessSpawnError,
    TargetFileNotFoundError,
    UsageError,
)


class FailureCategory(str, Enum):
    """Taxonomy for failure classification."""

    USAGE_ERROR = "USAGE_ERROR"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PROCESS_SPAWN_ERROR = "PROCESS_SPAWN_ERROR"
    NETWORK_RESOLUTION_ERROR = "NETWORK_RESOLUTION_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    IO_ERROR = "IO_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


EXIT_SUCCESS = 0

_EXIT_CODES = {
    FailureCategory.USAGE_ERROR: 2,
    FailureCategory.FILE_NOT_FOUND: 3,
    FailureCategory.PROCESS_SPAWN_ERROR: 4,
    FailureCategory.NETWORK_RESOLUTION_ERROR: 5,
    FailureCategory.CONNECTION_ERROR: 6,
    FailureCategory.IO_ERROR: 74,
    FailureCategory.UNEXPECTED_ERROR: 1,
}


class FailureClassifier:
    """Classifies exceptions into FailureCategory. The caller decides what to log and how to exit."""

    @staticmethod
    def classify(exception: BaseException) -> FailureCategory:
        """Map exception to FailureCategory. Unknown -> UNEXPECTED_ERROR."""
        if isinstance(exception, UsageError):
            return FailureCategory.USAGE_ERROR
        if isinstance(exception, TargetFileNotFoundError):
            return FailureCategory.FILE_NOT_FOUND
        if isinstance(exception, ProcessSpawnError):
            return FailureCategory.PROCESS_SPAWN_ERROR
        if isinstance(exception, NetworkResolutionError):
            return FailureCategory.NETWORK_RESOLUTION_ERROR
        if isinstance(exception, ConnectionFailedError):
            return FailureCategory.CONNECTION_ERROR
        if isinstance(exception, CanaryError):
            return FailureCategory.UNEXPECTED_ERROR
        if isinstance(exception, OSError):
            return FailureCategory.IO_ERROR
        return FailureCategory.UNEXPECTED_ERROR


def exit_code_for(category: FailureCategory) -> int:
    return _EXIT_CODES[category]
