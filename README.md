# pingkit

A small ping tool for IPv4. It sends ICMP echo requests over a raw socket,
prints one line per reply, and prints a summary of packets transmitted,
packets received, packet loss and round-trip times when you stop it.

## Installation

```
pip install .
```

Raw ICMP sockets need root, and the command refuses to start otherwise
("Error: This program must be run as root.").

## Usage

```
sudo pingkit [-v] HOST ...
```

- `-v` turns on verbose output: the header line also shows the session
  identifier (the process id), as `id 0x<hex> = <decimal>`.
- `-?` prints the help text and exits.

Up to 10 hosts may be given. Each one can be a host name or an IPv4
address; a purely numeric operand with more than ten significant digits is
rejected as an unknown host. With no host at all, pingkit reports
"ping: missing host operand" and points to `-?`.

The first host is pinged once a second until you press Ctrl-C. Each request
waits up to one second for its reply. On Ctrl-C the statistics are printed:

```
PING example.com (192.0.2.10): 56 data bytes
64 bytes from 192.0.2.10: icmp_seq=0 ttl=56 time=11.204 ms
^C
--- example.com ping statistics ---
1 packets transmitted, 1 packets received, 0% packet loss
round-trip min/avg/max/stddev = 11.204/11.204/11.204/0.000 ms
```

Every further host is announced with its own header and then followed by a
fixed short summary line ("1 packets transmitted, 0 packets received, 100%
packet loss"). A host is sent one echo request only if no Ctrl-C has been
received yet; once the first host has been interrupted, later hosts are not
pinged.

When an ICMP error arrives instead of a reply, pingkit prints it, for example
`From 192.0.2.1 icmp_seq=3 Destination Host Unreachable` or
`... Time to live exceeded`. A request that gets no answer within the timeout
prints nothing and counts as lost. If a request cannot be sent,
`92 bytes from <address>: Destination Net Unreachable` is printed.

Hosts that cannot be resolved are reported on standard error and skipped.

## Library use

The pieces behind the command can also be used on their own:

- `pingkit.icmp`: `build_echo_request(identifier, sequence)` builds an echo
  request header, `checksum(data)` computes the Internet checksum,
  `parse_reply(packet)` turns a raw IPv4 packet into a `Reply`,
  `describe_icmp(icmp_type, code)` and `format_icmp_error(...)` describe ICMP
  messages, and `IcmpType` names the message types.
- `pingkit.stats.PingStats` collects round-trip times (`record`, `reset`,
  `loss_percent`) and renders the closing block with `summary(host)`;
  `round_trip_ms(start, end)` converts two timestamps to milliseconds.
- `pingkit.args.parse_arguments(argv)` validates the command line and returns
  `Options`, raising `ArgumentError` otherwise.
- `pingkit.network.resolve_target(name)` resolves a host to a `Target`
  (raising `ResolveError`), and `pingkit.network.open_socket(timeout)` opens
  the raw ICMP socket.
- `pingkit.session.PingSession` runs the send and receive loop against one
  target: `header()`, `ping_once(seq)`, `run(continuous, interval)`, `stop()`
  and `summary()`.
- `pingkit.cli.main(argv=None)` is the command itself.

## What it does not do

pingkit handles IPv4 only. It has no options for packet count, interval,
packet size or TTL; the interval is fixed at one second and the timeout at
one second.

## Tests

```
pip install .[test]
pytest
```