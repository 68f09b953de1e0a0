"""Thin helpers for sending and receiving UDP datagrams."""

import os
import socket
from typing import Tuple, Union

Address = Tuple[str, int]

_CLEARED_ADDRESS: Address = ("0.0.0.0", 0)


def udp_open(port: int) -> socket.socket:
    """Create a UDP socket bound to the given port on every local interface."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock


def fill_sock_addr(hostname: "str | None", port: int) -> Address:
    """Resolve a host name to an IPv4 address paired with the port.

    A hostname of None yields a cleared address.
    """
    if hostname is None:
        return _CLEARED_ADDRESS
    return socket.gethostbyname(hostname), port


def udp_write(sock: socket.socket, addr: Address,
              buffer: Union[bytes, bytearray, str], size: int) -> int:
    """Send exactly size bytes of buffer, zero-padded or truncated; return bytes sent."""
    data = buffer.encode() if isinstance(buffer, str) else bytes(buffer)
    payload = data[:size].ljust(size, b"\0")
    return sock.sendto(payload, addr)


def udp_read(sock: socket.socket, size: int) -> Tuple[bytes, Address]:
    """Receive one datagram of at most size bytes and its sender's address."""
    return sock.recvfrom(size)


def udp_close(sock: "socket.socket | int") -> None:
    """Close the socket."""
    if isinstance(sock, int):
        os.close(sock)
    else:
        sock.close()