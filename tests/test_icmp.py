import socket
import struct

import pytest

from pingkit.icmp import (
    IcmpType,
    Reply,
    build_echo_request,
    checksum,
    describe_icmp,
    format_icmp_error,
    format_reply,
    parse_reply,
)


def _ip_header(source: str, ttl: int = 64, dest: str = "10.0.0.2") -> bytes:
    return struct.pack(
        "!BBHHHBBH4s4s",
        0x45, 0, 84, 0, 0, ttl, socket.IPPROTO_ICMP, 0,
        socket.inet_aton(source), socket.inet_aton(dest),
    )


def _icmp(icmp_type: int, code: int) -> bytes:
    return struct.pack("!BBHHH", icmp_type, code, 0, 0, 0)


def test_checksum_of_empty_data():
    assert checksum(b"") == 0xFFFF


def test_checksum_odd_length_pads_with_zero():
    assert checksum(b"\x01") == checksum(b"\x01\x00")


def test_built_request_verifies():
    packet = build_echo_request(0x1234, 7)
    assert len(packet) == 8
    assert checksum(packet) == 0


def test_built_request_fields():
    packet = build_echo_request(4321, 17)
    icmp_type, code, _, ident, seq = struct.unpack("!BBHHH", packet)
    assert (icmp_type, code, ident, seq) == (IcmpType.ECHO, 0, 4321, 17)


def test_identifier_truncated_to_16_bits():
    packet = build_echo_request(0x12345, 0)
    assert struct.unpack("!H", packet[4:6])[0] == 0x2345


@pytest.mark.parametrize(
    "icmp_type, code, text",
    [
        (0, 0, "Echo Reply"),
        (3, 0, "Destination Net Unreachable"),
        (3, 1, "Destination Host Unreachable"),
        (3, 2, "Destination Protocol Unreachable"),
        (3, 3, "Destination Port Unreachable"),
        (4, 0, "Source Quench"),
        (5, 0, "Redirect (change route)"),
        (8, 0, "Echo Request"),
        (11, 0, "Time to live exceeded"),
        (12, 0, "Parameter Problem"),
        (13, 0, "Timestamp Request"),
        (14, 0, "Timestamp Reply"),
        (15, 0, "Information Request"),
        (16, 0, "Information Reply"),
        (17, 0, "Address Mask Request"),
        (18, 0, "Address Mask Reply"),
    ],
)
def test_describe_known(icmp_type, code, text):
    assert describe_icmp(icmp_type, code) == text


def test_describe_unknown_unreach_code():
    assert describe_icmp(3, 9) == "Destination Unreachable (Code 9)"


def test_describe_unknown_type():
    assert describe_icmp(42, 0) == "Unknown ICMP type: 42"


def test_format_icmp_error():
    line = format_icmp_error("10.0.0.1", 3, IcmpType.TIME_EXCEEDED, 0)
    assert line == "From 10.0.0.1 icmp_seq=3 Time to live exceeded"


def test_parse_echo_reply():
    packet = _ip_header("8.8.4.4", ttl=57) + _icmp(IcmpType.ECHO_REPLY, 0)
    reply = parse_reply(packet)
    assert reply.source == "8.8.4.4"
    assert reply.ttl == 57
    assert reply.icmp_type == IcmpType.ECHO_REPLY
    assert reply.original_source is None
    assert not reply.is_error


def test_parse_error_reads_embedded_header():
    packet = (
        _ip_header("192.168.1.1")
        + _icmp(IcmpType.DEST_UNREACH, 1)
        + _ip_header("10.1.2.3")
    )
    reply = parse_reply(packet)
    assert reply.is_error
    assert reply.code == 1
    assert reply.original_source == "10.1.2.3"


def test_parse_short_packet_raises():
    with pytest.raises(ValueError):
        parse_reply(b"\x45\x00\x00")


def test_parse_error_without_inner_header_raises():
    with pytest.raises(ValueError):
        parse_reply(_ip_header("192.168.1.1") + _icmp(IcmpType.TIME_EXCEEDED, 0))


def test_format_reply():
    reply = Reply(source="8.8.8.8", ttl=64, icmp_type=0, code=0)
    assert format_reply(reply, 0, 1.5) == "64 bytes from 8.8.8.8: icmp_seq=0 ttl=64 time=1.500 ms"