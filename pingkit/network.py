"""Resolving ping targets and opening the raw ICMP socket."""

from __future__ import annotations

import socket
from dataclasses import dataclass

MAX_FQDN_LENGTH = 256


class ResolveError(Exception):
    """Raised when a target cannot be turned into an IPv4 address."""


@dataclass(frozen=True)
class Target:
    """A host operand together with the IPv4 address it resolved to."""

    name: str
    address: str

    @property
    def sockaddr(self) -> tuple[str, int]:
        """The address in the form socket calls expect."""
        return (self.address, 0)


def resolve_target(name: str) -> Target:
    """Resolve ``name`` to its first IPv4 address."""
    try:
        infos = socket.getaddrinfo(
            name, None, socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
        )
    except (OSError, UnicodeError) as exc:
        raise ResolveError(f"Error: No valid address found for target '{name}'.") from exc
    if not infos or not infos[0][4]:
        raise ResolveError(f"Error: No valid address found for target '{name}'.")
    if len(name) >= MAX_FQDN_LENGTH:
        raise ResolveError(
            "Error: Target hostname is too long "
            f"(max {MAX_FQDN_LENGTH - 1} characters)."
        )
    address = infos[0][4][0]
    return Target(name=name, address=address)


def open_socket(timeout: float = 1.0) -> socket.socket:
    """Open a raw ICMP socket whose receives give up after ``timeout`` seconds.

    Raises PermissionError when raw sockets are not allowed, and OSError on
    any other failure.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    try:
        sock.settimeout(timeout)
    except OSError:
        sock.close()
        raise
    return sock