"""ICMP echo packets: building requests, parsing replies, formatting results."""

from __future__ import annotations

import enum
import socket
import struct
from dataclasses import dataclass

IP_HDR_SIZE = 20
ICMP_HDR_SIZE = 8
ICMP_PAYLOAD_SIZE = 56
PACKET_SIZE = ICMP_PAYLOAD_SIZE

_ICMP_HEADER = struct.Struct("!BBHHH")


class IcmpType(enum.IntEnum):
    """ICMP message types understood by the pinger."""

    ECHO_REPLY = 0
    DEST_UNREACH = 3
    SOURCE_QUENCH = 4
    REDIRECT = 5
    ECHO = 8
    TIME_EXCEEDED = 11
    PARAMETER_PROBLEM = 12
    TIMESTAMP = 13
    TIMESTAMP_REPLY = 14
    INFO_REQUEST = 15
    INFO_REPLY = 16
    ADDRESS = 17
    ADDRESS_REPLY = 18


_UNREACH_CODES = {
    0: "Destination Net Unreachable",
    1: "Destination Host Unreachable",
    2: "Destination Protocol Unreachable",
    3: "Destination Port Unreachable",
}

_DESCRIPTIONS = {
    IcmpType.ECHO_REPLY: "Echo Reply",
    IcmpType.SOURCE_QUENCH: "Source Quench",
    IcmpType.REDIRECT: "Redirect (change route)",
    IcmpType.ECHO: "Echo Request",
    IcmpType.TIME_EXCEEDED: "Time to live exceeded",
    IcmpType.PARAMETER_PROBLEM: "Parameter Problem",
    IcmpType.TIMESTAMP: "Timestamp Request",
    IcmpType.TIMESTAMP_REPLY: "Timestamp Reply",
    IcmpType.INFO_REQUEST: "Information Request",
    IcmpType.INFO_REPLY: "Information Reply",
    IcmpType.ADDRESS: "Address Mask Request",
    IcmpType.ADDRESS_REPLY: "Address Mask Reply",
}


def checksum(data: bytes) -> int:
    """Return the Internet checksum of ``data`` as a 16-bit integer."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def build_echo_request(identifier: int, sequence: int) -> bytes:
    """Build an ICMP echo request header with a valid checksum."""
    identifier &= 0xFFFF
    sequence &= 0xFFFF
    blank = _ICMP_HEADER.pack(IcmpType.ECHO, 0, 0, identifier, sequence)
    return _ICMP_HEADER.pack(IcmpType.ECHO, 0, checksum(blank), identifier, sequence)


def describe_icmp(icmp_type: int, code: int) -> str:
    """Return a human-readable description of an ICMP type and code."""
    if icmp_type == IcmpType.DEST_UNREACH:
        return _UNREACH_CODES.get(code, f"Destination Unreachable (Code {code})")
    try:
        return _DESCRIPTIONS[IcmpType(icmp_type)]
    except (ValueError, KeyError):
        return f"Unknown ICMP type: {icmp_type}"


def format_icmp_error(source: str, seq: int, icmp_type: int, code: int) -> str:
    """Format the line reported for an ICMP error message."""
    return f"From {source} icmp_seq={seq} {describe_icmp(icmp_type, code)}"


@dataclass(frozen=True)
class Reply:
    """A received IP packet carrying an ICMP message."""

    source: str
    ttl: int
    icmp_type: int
    code: int
    original_source: str | None = None

    @property
    def is_error(self) -> bool:
        """True for destination-unreachable and time-exceeded messages."""
        return self.icmp_type in (IcmpType.DEST_UNREACH, IcmpType.TIME_EXCEEDED)


def _ipv4_source(packet: bytes, offset: int) -> str:
    return socket.inet_ntoa(packet[offset + 12 : offset + 16])


def parse_reply(packet: bytes) -> Reply:
    """Parse a raw IPv4 packet holding an ICMP message."""
    if len(packet) < IP_HDR_SIZE:
        raise ValueError("packet too short for an IP header")
    header_len = (packet[0] & 0x0F) * 4
    if header_len < IP_HDR_SIZE or len(packet) < header_len + 2:
        raise ValueError("packet too short for an ICMP header")
    icmp_type, code = packet[header_len], packet[header_len + 1]
    original = None
    if icmp_type in (IcmpType.DEST_UNREACH, IcmpType.TIME_EXCEEDED):
        inner = header_len + ICMP_HDR_SIZE
        if len(packet) < inner + IP_HDR_SIZE:
            raise ValueError("ICMP error message lacks the original IP header")
        original = _ipv4_source(packet, inner)
    return Reply(
        source=_ipv4_source(packet, 0),
        ttl=packet[8],
        icmp_type=icmp_type,
        code=code,
        original_source=original,
    )


def format_reply(reply: Reply, seq: int, rtt: float) -> str:
    """Format the line reported for a successful echo reply."""
    return f"64 bytes from {reply.source}: icmp_seq={seq} ttl={reply.ttl} time={rtt:.3f} ms"