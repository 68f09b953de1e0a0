"""A UDP client that sends one greeting and prints the reply."""

import sys
from typing import Optional, Sequence, TextIO

from .udp import fill_sock_addr, udp_close, udp_open, udp_read, udp_write

BUFFER_SIZE = 1000
SERVER_PORT = 10000
CLIENT_PORT = 20000
MESSAGE = "hello world"


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def run_client(host: str = "localhost", server_port: int = SERVER_PORT,
               client_port: int = CLIENT_PORT, out: Optional[TextIO] = None) -> str:
    """Send the greeting to the server and return its reply text."""
    out = out if out is not None else sys.stdout
    sock = udp_open(client_port)
    try:
        addr = fill_sock_addr(host, server_port)
        print(f"client:: send message [{MESSAGE}]", file=out)
        try:
            udp_write(sock, addr, MESSAGE, BUFFER_SIZE)
        except OSError:
            print("client:: failed to send", file=out)
            raise
        print("client:: wait for reply...", file=out)
        data, _ = udp_read(sock, BUFFER_SIZE)
        reply = _c_string(data)
        print(f"client:: got reply [size:{len(data)} contents:({reply})", file=out)
        return reply
    finally:
        udp_close(sock)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        run_client(out=sys.stdout)
    except OSError as exc:
        print(f"client:: {exc}", file=sys.stderr)
        return 1
    return 0