"""A ping session against one resolved target."""

from __future__ import annotations

import os
import socket
import sys
import threading
import time
from typing import TextIO

from .args import is_ipv4
from .icmp import (
    PACKET_SIZE,
    build_echo_request,
    format_icmp_error,
    format_reply,
    parse_reply,
)
from .network import Target
from .stats import PingStats, round_trip_ms


class PingSession:
    """Sends echo requests to one target and keeps its statistics."""

    def __init__(
        self,
        target: Target,
        sock,
        identifier: int | None = None,
        verbose: bool = False,
        out: TextIO | None = None,
    ):
        self.target = target
        self.sock = sock
        self.identifier = os.getpid() if identifier is None else identifier
        self.verbose = verbose
        self._out = out
        self.stats = PingStats()
        self._stopped = threading.Event()

    @property
    def running(self) -> bool:
        """False once the session has been stopped."""
        return not self._stopped.is_set()

    def _emit(self, line: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        print(line, file=out, flush=True)

    def header(self) -> str:
        """Return the line announcing the session."""
        line = f"PING {self.target.name} ({self.target.address}): {PACKET_SIZE} data bytes"
        if self.verbose:
            line += f", id 0x{self.identifier:04x} = {self.identifier}"
        return line

    def ping_once(self, seq: int) -> bool:
        """Send one echo request and wait for its reply; True if one arrived."""
        if not is_ipv4(self.target.address):
            return False
        packet = build_echo_request(self.identifier, seq)
        start = time.time()
        try:
            sent = self.sock.sendto(packet, self.target.sockaddr)
        except OSError:
            sent = 0
        self.stats.transmitted += 1
        if sent <= 0:
            self._emit(f"92 bytes from {self.target.address}: Destination Net Unreachable")
            return False

        try:
            data, _ = self.sock.recvfrom(PACKET_SIZE)
        except (socket.timeout, BlockingIOError):
            return False
        except OSError:
            print("recvfrom failed", file=sys.stderr)
            return False
        if not data:
            return False

        try:
            reply = parse_reply(data)
        except ValueError:
            return False
        if reply.is_error:
            self._emit(
                format_icmp_error(reply.original_source, seq, reply.icmp_type, reply.code)
            )
            return False

        rtt = round_trip_ms(start, time.time())
        self.stats.record(rtt)
        self._emit(format_reply(reply, seq, rtt))
        return True

    def run(self, continuous: bool = True, interval: float = 1.0) -> None:
        """Ping until stopped, or once when ``continuous`` is false."""
        seq = 0
        while self.running:
            self.ping_once(seq)
            seq += 1
            if not continuous:
                break
            self._stopped.wait(interval)

    def stop(self) -> None:
        """Stop the session and note when it ended."""
        self._stopped.set()
        self.stats.end_time = time.time()

    def summary(self) -> str:
        """Return the statistics block for this target."""
        return self.stats.summary(self.target.name)