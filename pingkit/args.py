"""Command-line argument handling for the pinger."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field

MAX_TARGETS = 10
_MAX_SIGNIFICANT_DIGITS = 10


class ArgumentError(Exception):
    """Raised when the command line cannot be used to start pinging."""

    def __init__(self, message: str, status: int = 0, show_usage: bool = False):
        super().__init__(message)
        self.message = message
        self.status = status
        self.show_usage = show_usage


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    targets: tuple[str, ...] = field(default_factory=tuple)
    verbose: bool = False
    show_help: bool = False


def is_valid_numeric(target: str) -> bool:
    """Reject purely numeric targets with more than ten significant digits."""
    seen_letter = False
    for count, char in enumerate(target.lstrip("0"), start=1):
        if not ("0" <= char <= "9"):
            seen_letter = True
        if count > _MAX_SIGNIFICANT_DIGITS and not seen_letter:
            return False
    return True


def is_ipv4(target: str) -> bool:
    """Return True if ``target`` is a dotted-quad IPv4 address."""
    try:
        socket.inet_pton(socket.AF_INET, target)
    except (OSError, ValueError):
        return False
    return True


def validate_target(target: str) -> bool:
    """Return True if ``target`` is acceptable as a host operand."""
    return is_valid_numeric(target) or is_ipv4(target)


def help_text() -> str:
    """Return the help list shown for ``-?``."""
    return (
        "Usage: ping [OPTION...] HOST ...\n"
        "Send ICMP ECHO_REQUEST packets to network hosts.\n\n"
        "-v, verbose output\n"
        "-?, give this help list"
    )


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def parse_arguments(argv: list[str]) -> Options:
    """Parse the arguments that follow the program name."""
    verbose = False
    for arg in argv:
        if arg == "-v":
            verbose = True
        elif arg == "-?":
            return Options(verbose=verbose, show_help=True)

    targets: list[str] = []
    for arg in argv:
        if arg in ("-v", "-?"):
            continue
        if not validate_target(arg):
            raise ArgumentError("ping: unknown host")
        if len(targets) >= MAX_TARGETS:
            raise ArgumentError("Error: Too many targets specified.")
        targets.append(arg)

    if not targets:
        raise ArgumentError("ping: missing host operand", show_usage=True)
    if not _is_root():
        raise ArgumentError("Error: This program must be run as root.", status=1)
    return Options(targets=tuple(targets), verbose=verbose)