"""Round-trip statistics for a ping session."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field


def round_trip_ms(start: float, end: float) -> float:
    """Return the time between two timestamps in seconds, in milliseconds."""
    return (end - start) * 1000.0


@dataclass
class PingStats:
    """Counters and round-trip figures for one target."""

    transmitted: int = 0
    received: int = 0
    total_rtt: float = 0.0
    sum_squares_rtt: float = 0.0
    min_rtt: float | None = None
    max_rtt: float = 0.0
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    def record(self, rtt: float) -> None:
        """Account for one received reply."""
        self.received += 1
        self.total_rtt += rtt
        self.sum_squares_rtt += rtt * rtt
        if self.min_rtt is None or rtt < self.min_rtt:
            self.min_rtt = rtt
        if rtt > self.max_rtt:
            self.max_rtt = rtt

    def reset(self) -> None:
        """Clear every counter and restart the clock."""
        self.transmitted = 0
        self.received = 0
        self.total_rtt = 0.0
        self.sum_squares_rtt = 0.0
        self.min_rtt = None
        self.max_rtt = 0.0
        self.start_time = time.time()
        self.end_time = None

    def loss_percent(self) -> int:
        """Return the packet loss as a whole, truncated percentage."""
        if self.transmitted == 0:
            return 0
        return int((self.transmitted - self.received) * 100.0 / self.transmitted)

    def summary(self, host: str) -> str:
        """Return the closing statistics block for ``host``."""
        lines = [
            f"--- {host} ping statistics ---",
            f"{self.transmitted} packets transmitted, {self.received} packets received, "
            f"{self.loss_percent()}% packet loss",
        ]
        if self.received > 0:
            avg = self.total_rtt / self.received
            variance = max(0.0, self.sum_squares_rtt / self.received - avg * avg)
            stddev = math.sqrt(variance)
            lines.append(
                "round-trip min/avg/max/stddev = "
                f"{self.min_rtt:.3f}/{avg:.3f}/{self.max_rtt:.3f}/{stddev:.3f} ms"
            )
        return "\n".join(lines)