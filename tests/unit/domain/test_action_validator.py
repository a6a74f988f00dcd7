"""Argument-shape validation: exact usage lines and parsed requests."""

import pytest

from canary.domain.exceptions import UsageError
from canary.domain.models.action import (
    FileActivity,
    FileRequest,
    NetProtocol,
    NetRequest,
    ProcRequest,
    VersionRequest,
)
from canary.domain.validators.action_validator import parse_action_request, usage


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], "usage: lc [proc|file|net|version] ..."),
        (["bogus"], "usage: lc [proc|file|net|version] ..."),
        (["proc"], "usage: lc proc [command ...]"),
        (["net"], "usage: lc net [tcp|udp] [host] [port] [data ...]"),
        (["net", "tcp", "localhost", "80"], "usage: lc net [tcp|udp] [host] [port] [data ...]"),
        (["net", "icmp", "localhost", "80", "hi"], "usage: lc net [tcp|udp] [host] [port] [data ...]"),
        (["file"], "usage: lc file [create|modify|delete] ..."),
        (["file", "rename", "a"], "usage: lc file [create|modify|delete] ..."),
        (["file", "create"], "usage: lc file create [filename]"),
        (["file", "create", "a", "b"], "usage: lc file create [filename]"),
        (["file", "delete"], "usage: lc file delete [filename]"),
        (["file", "delete", "a", "b"], "usage: lc file delete [filename]"),
        (["file", "modify"], "usage: lc file modify [filename] [contents ...]"),
        (["file", "modify", "a"], "usage: lc file modify [filename] [contents ...]"),
    ],
)
def test_malformed_invocations_raise_usage(argv, expected):
    with pytest.raises(UsageError) as exc_info:
        parse_action_request(argv)
    assert exc_info.value.message == expected


def test_arity_is_checked_before_protocol():
    """Too few net tokens reports the net usage even when the protocol is unknown."""
    with pytest.raises(UsageError) as exc_info:
        parse_action_request(["net", "sctp"])
    assert exc_info.value.message == usage("net [tcp|udp] [host] [port] [data ...]")


def test_wrapper_name_is_used_in_usage():
    with pytest.raises(UsageError) as exc_info:
        parse_action_request(["proc"], wrapper_name="little-canary")
    assert exc_info.value.message == "usage: little-canary proc [command ...]"


def test_proc_joins_command_tokens():
    request = parse_action_request(["proc", "ls", "-la", "/tmp"])
    assert request == ProcRequest(command="ls -la /tmp")


def test_net_parses_host_port_and_data():
    request = parse_action_request(["net", "udp", "localhost", "9988", "ab", "cd"])
    assert isinstance(request, NetRequest)
    assert request.protocol is NetProtocol.UDP
    assert request.host == "localhost"
    assert request.port == "9988"
    assert request.data == "ab cd"


def test_file_requests():
    assert parse_action_request(["file", "create", "x.txt"]) == FileRequest(
        activity=FileActivity.CREATE, filename="x.txt"
    )
    assert parse_action_request(["file", "delete", "x.txt"]) == FileRequest(
        activity=FileActivity.DELETE, filename="x.txt"
    )
    modify = parse_action_request(["file", "modify", "x.txt", "hello", "world"])
    assert modify.activity is FileActivity.MODIFY
    assert modify.content == "hello world"


def test_version_ignores_trailing_arguments():
    assert parse_action_request(["version"]) == VersionRequest()
    assert parse_action_request(["version", "proc", "ls"]) == VersionRequest()
