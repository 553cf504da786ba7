"""Command-line entry point for the pinger."""

from __future__ import annotations

import os
import signal
import sys

from .args import ArgumentError, help_text, parse_arguments
from .network import ResolveError, open_socket, resolve_target
from .session import PingSession

USAGE_HINT = "Try 'ping -?' for more information."


class _InterruptHandler:
    """Stops the active session on SIGINT and prints its statistics."""

    def __init__(self):
        self.session: PingSession | None = None
        self.triggered = False

    def __call__(self, signum, frame):
        self.triggered = True
        if self.session is not None:
            self.session.stop()
            print("\n" + self.session.summary(), flush=True)


def _open_or_report():
    try:
        return open_socket(1.0)
    except PermissionError:
        print("ping: socket access error. Are you trying to ping broadcast ?")
        print("socket creation failed", file=sys.stderr)
    except OSError:
        print("socket creation failed", file=sys.stderr)
    return None


def main(argv: list[str] | None = None) -> int:
    """Run the pinger with ``argv`` (defaults to the process arguments)."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_arguments(list(argv))
    except ArgumentError as err:
        print(err.message, file=sys.stderr)
        if err.show_usage:
            print(USAGE_HINT)
        return err.status
    if options.show_help:
        print(help_text())
        return 0

    handler = _InterruptHandler()
    previous = signal.signal(signal.SIGINT, handler)
    identifier = os.getpid()
    try:
        for index, name in enumerate(options.targets):
            try:
                target = resolve_target(name)
            except ResolveError as err:
                print(err, file=sys.stderr)
                print("ping: unknown host", file=sys.stderr)
                continue
            sock = _open_or_report()
            if sock is None:
                continue
            with sock:
                session = PingSession(target, sock, identifier, options.verbose)
                handler.session = session
                if handler.triggered:
                    session.stop()
                print(session.header(), flush=True)
                if index == 0:
                    session.run(continuous=True, interval=1.0)
                else:
                    session.run(continuous=False)
                    print(f"--- {target.name} ping statistics ---")
                    print("1 packets transmitted, 0 packets received, 100% packet loss")
            handler.session = None
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())