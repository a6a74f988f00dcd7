"""Argument-shape validation for canary actions. Pure functions, no side effects."""

from typing import Sequence

from canary.config.settings import DEFAULT_WRAPPER_NAME
from canary.domain.exceptions import UsageError
from canary.domain.models.action import (
    ActionKind,
    ActionRequest,
    FileActivity,
    FileRequest,
    NetProtocol,
    NetRequest,
    ProcRequest,
    VersionRequest,
)

ACTIONS_USAGE = "[" + "|".join(kind.value for kind in ActionKind) + "] ..."
PROC_USAGE = "proc [command ...]"
NET_USAGE = "net [tcp|udp] [host] [port] [data ...]"
FILE_USAGE = "file [create|modify|delete] ..."
FILE_CREATE_USAGE = "file create [filename]"
FILE_DELETE_USAGE = "file delete [filename]"
FILE_MODIFY_USAGE = "file modify [filename] [contents ...]"

# net <protocol> <host> <port> <data...>
NET_MIN_ARGS = 5


def usage(shape: str, wrapper_name: str = DEFAULT_WRAPPER_NAME) -> str:
    return f"usage: {wrapper_name} {shape}"


def join_tokens(tokens: Sequence[str]) -> str:
    """Rejoin trailing tokens with single spaces, as they are executed and logged."""
    return " ".join(tokens)


def parse_action_request(
    argv: Sequence[str], wrapper_name: str = DEFAULT_WRAPPER_NAME
) -> ActionRequest:
    """
    Turn the raw argument list into an ActionRequest.
    Raises UsageError whose message is the usage line for the closest matching shape.
    """
    if not argv:
        raise UsageError(usage(ACTIONS_USAGE, wrapper_name))

    verb = argv[0]
    if verb == ActionKind.PROC.value:
        return _parse_proc(argv, wrapper_name)
    if verb == ActionKind.NET.value:
        return _parse_net(argv, wrapper_name)
    if verb == ActionKind.FILE.value:
        return _parse_file(argv, wrapper_name)
    if verb == ActionKind.VERSION.value:
        return VersionRequest()
    raise UsageError(usage(ACTIONS_USAGE, wrapper_name))


def _parse_proc(argv: Sequence[str], wrapper_name: str) -> ProcRequest:
    if len(argv) < 2:
        raise UsageError(usage(PROC_USAGE, wrapper_name))
    return ProcRequest(command=join_tokens(argv[1:]))


def _parse_net(argv: Sequence[str], wrapper_name: str) -> NetRequest:
    if len(argv) < NET_MIN_ARGS:
        raise UsageError(usage(NET_USAGE, wrapper_name))
    try:
        protocol = NetProtocol(argv[1])
    except ValueError:
        raise UsageError(usage(NET_USAGE, wrapper_name)) from None
    host, port, *data = argv[2:]
    return NetRequest(protocol=protocol, host=host, port=port, data=join_tokens(data))


def _parse_file(argv: Sequence[str], wrapper_name: str) -> FileRequest:
    if len(argv) < 2:
        raise UsageError(usage(FILE_USAGE, wrapper_name))
    try:
        activity = FileActivity(argv[1])
    except ValueError:
        raise UsageError(usage(FILE_USAGE, wrapper_name)) from None

    if activity is FileActivity.CREATE:
        if len(argv) != 3:
            raise UsageError(usage(FILE_CREATE_USAGE, wrapper_name))
        return FileRequest(activity=activity, filename=argv[2])
    if activity is FileActivity.DELETE:
        if len(argv) != 3:
            raise UsageError(usage(FILE_DELETE_USAGE, wrapper_name))
        return FileRequest(activity=activity, filename=argv[2])

    if len(argv) < 4:
        raise UsageError(usage(FILE_MODIFY_USAGE, wrapper_name))
    return FileRequest(activity=activity, filename=argv[2], content=join_tokens(argv[3:]))
