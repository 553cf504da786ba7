"""Send ICMP echo requests to IPv4 hosts and report round-trip statistics."""

__version__ = "0.1.0"