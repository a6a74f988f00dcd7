"""Shared fixtures: a scratch audit log, invocation contexts, loopback listeners."""

import json
import logging
import socket
import threading

import pytest

from canary.config.logging import JsonFormatter
from canary.config.settings import get_settings
from canary.domain.models.invocation import InvocationContext


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging():
    """Settings are cached and logging is process-global; reset both around every test."""
    root = logging.getLogger()
    level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "activity.log"


@pytest.fixture
def make_context(log_file):
    def _make(argv, program_name="little-canary", pid=1234, username="robert"):
        return InvocationContext(
            program_name=program_name,
            argv=tuple(argv),
            pid=pid,
            username=username,
            log_file=str(log_file),
        )

    return _make


@pytest.fixture
def read_activity(log_file):
    """All audit lines written so far, parsed as dicts. No log file means no activity."""

    def _read():
        if not log_file.exists():
            return []
        return [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line]

    return _read


class TcpListener:
    """One-shot loopback TCP server: accepts a single connection and reads until EOF."""

    def __init__(self):
        self._server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._server.bind(("127.0.0.1", 0))
        self._server.listen(1)
        self._server.settimeout(5)
        self.port = self._server.getsockname()[1]
        self.received = b""
        self.peer = None
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self):
        try:
            conn, self.peer = self._server.accept()
        except OSError:
            return
        with conn:
            conn.settimeout(5)
            chunks = []
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
            self.received = b"".join(chunks)

    def join(self):
        self._thread.join(timeout=5)
        return self.received

    def close(self):
        self._server.close()


class UdpListener:
    """Loopback UDP socket that receives a single datagram."""

    def __init__(self):
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.settimeout(5)
        self.port = self._sock.getsockname()[1]

    def receive(self):
        data, sender = self._sock.recvfrom(65535)
        return data, sender

    def close(self):
        self._sock.close()


@pytest.fixture
def tcp_listener():
    listener = TcpListener()
    yield listener
    listener.close()


@pytest.fixture
def udp_listener():
    listener = UdpListener()
    yield listener
    listener.close()


@pytest.fixture
def closed_port():
    """A loopback port nothing is listening on."""
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port
