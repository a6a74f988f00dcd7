"""TCP/UDP canary sends. The local endpoint is read only after connect has assigned it."""

import logging
import socket
from typing import Any, Dict, Tuple

from canary.domain.exceptions import ConnectionFailedError, NetworkResolutionError
from canary.domain.models.action import ActionKind, NetProtocol

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def parse_port(host: str, port: str) -> int:
    """Numeric port in 0-65535. Anything else cannot be resolved to a socket address."""
    try:
        number = int(port)
    except ValueError:
        raise NetworkResolutionError(host, port, "port is not a number") from None
    if not 0 <= number <= MAX_PORT:
        raise NetworkResolutionError(host, port, f"port out of range 0-{MAX_PORT}")
    return number


def format_endpoint(address: Tuple[Any, ...]) -> str:
    """`ip:port` from a sockname tuple (IPv6 tuples carry extra flow/scope items)."""
    return f"{address[0]}:{address[1]}"


def _fields(protocol: NetProtocol, host: str, port: str, source: str, payload: bytes) -> Dict[str, Any]:
    return {
        "type": ActionKind.NET,
        "data_size": len(payload),
        "protocol": protocol,
        "destination": f"{host}:{port}",
        "source": source,
    }


def send_tcp(host: str, port: str, data: str) -> Dict[str, Any]:
    """
    Connect to host:port, record the local endpoint, send `data` when non-empty, close.
    No timeout is applied; a caller that needs one must impose it from outside.
    """
    number = parse_port(host, port)
    payload = data.encode("utf-8") if data else b""

    try:
        sock = socket.create_connection((host, number))
    except socket.gaierror as e:
        raise NetworkResolutionError(host, port, e.strerror or str(e)) from e
    except OSError as e:
        raise ConnectionFailedError(host, port, e.strerror or str(e)) from e

    with sock:
        source = format_endpoint(sock.getsockname())
        if payload:
            sock.sendall(payload)

    logger.info("tcp_sent", extra={"source": source, "data_size": len(payload)})
    return _fields(NetProtocol.TCP, host, port, source, payload)


def _udp_address(host: str, port: str, number: int):
    try:
        infos = socket.getaddrinfo(host, number, type=socket.SOCK_DGRAM)
    except socket.gaierror as e:
        raise NetworkResolutionError(host, port, e.strerror or str(e)) from e
    if not infos:
        raise NetworkResolutionError(host, port, "no addresses")
    # IPv4 first, as a plain datagram socket would pick.
    for info in infos:
        if info[0] == socket.AF_INET:
            return info
    return infos[0]


def send_udp(host: str, port: str, data: str) -> Dict[str, Any]:
    """
    Connect a datagram socket to host:port, record the local endpoint, send `data`
    as one datagram when non-empty, close. Connect performs no handshake, so an
    unreachable port is not reported here.
    """
    number = parse_port(host, port)
    payload = data.encode("utf-8") if data else b""
    family, socktype, proto, _, address = _udp_address(host, port, number)

    with socket.socket(family, socktype, proto) as sock:
        try:
            sock.connect(address)
        except OSError as e:
            raise ConnectionFailedError(host, port, e.strerror or str(e)) from e
        source = format_endpoint(sock.getsockname())
        if payload:
            sock.send(payload)

    logger.info("udp_sent", extra={"source": source, "data_size": len(payload)})
    return _fields(NetProtocol.UDP, host, port, source, payload)
