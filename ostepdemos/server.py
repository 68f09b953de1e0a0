"""A UDP server that answers every non-empty datagram with a farewell."""

import socket
import sys
from typing import Optional, Sequence, TextIO

from .udp import udp_close, udp_open, udp_read, udp_write

BUFFER_SIZE = 1000
SERVER_PORT = 10000
REPLY = "goodbye world"


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def serve(sock: socket.socket, out: Optional[TextIO] = None,
          max_messages: Optional[int] = None) -> int:
    """Answer datagrams until max_messages have arrived (forever if None).

    Returns the number of datagrams read.
    """
    out = out if out is not None else sys.stdout
    handled = 0
    while max_messages is None or handled < max_messages:
        print("server:: waiting...", file=out, flush=True)
        data, addr = udp_read(sock, BUFFER_SIZE)
        print(f"server:: read message [size:{len(data)} contents:({_c_string(data)})]",
              file=out, flush=True)
        if data:
            udp_write(sock, addr, REPLY, BUFFER_SIZE)
            print("server:: reply", file=out, flush=True)
        handled += 1
    return handled


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        sock = udp_open(SERVER_PORT)
    except OSError as exc:
        print(f"server:: {exc}", file=sys.stderr)
        return 1
    try:
        serve(sock, sys.stdout)
    except KeyboardInterrupt:
        pass
    finally:
        udp_close(sock)
    return 0