"""A TCP connect port scanner with a short per-port timeout."""

import errno
import ipaddress
import select
import socket
import sys

TIMEOUT = 0.2
_DIGITS = frozenset("0123456789")
_PENDING = (errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EAGAIN)


def _is_number(text):
    return bool(text) and all(char in _DIGITS for char in text)


def parse_ipv4(text):
    """Parse dotted ``a.b.c.d`` into a 32-bit integer; raise ValueError."""
    parts = text.split(".")
    if len(parts) != 4 or not all(_is_number(part) for part in parts):
        raise ValueError(f"invalid IP address: {text!r}")
    octets = [int(part) for part in parts]
    if any(octet > 255 for octet in octets):
        raise ValueError(f"invalid IP address: {text!r}")
    return int.from_bytes(bytes(octets), "big")


def parse_port(text):
    """Parse a decimal port number up to 65535; raise ValueError."""
    if not _is_number(text) or int(text) > 65535:
        raise ValueError(f"invalid port: {text!r}")
    return int(text)


def scan_port(ip, port, timeout=TIMEOUT):
    """Return True when a TCP connection to ``ip``:``port`` succeeds in time."""
    address = str(ipaddress.IPv4Address(ip))
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError:
        return False
    with sock:
        sock.setblocking(False)
        result = sock.connect_ex((address, port))
        if result == 0:
            return True
        if result not in _PENDING:
            return False
        try:
            _, writable, _ = select.select([], [sock], [], timeout)
        except (OSError, ValueError):
            return False
        if not writable:
            return False
        return sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR) == 0


def scan(ip, start, end, out=None, timeout=TIMEOUT):
    """Scan ports ``start`` to ``end`` inclusive and report the open ones.

    Returns the list of open ports.
    """
    out = sys.stdout if out is None else out
    label = ip if isinstance(ip, str) else str(ipaddress.IPv4Address(ip))
    out.write(
        f"Scanning {label} ports {start}-{end} "
        f"(timeout {round(timeout * 1000)}ms)\n"
    )
    out.flush()
    found = []
    for port in range(start, end + 1):
        if scan_port(ip, port, timeout):
            out.write(f"  OPEN  {port}\n")
            out.flush()
            found.append(port)
    out.write(f"Scan complete: {len(found)} open port(s)\n")
    out.flush()
    return found


def main(argv=None):
    """Scan ``<ip> <start-port> <end-port>``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        sys.stderr.write("Usage: portscan <ip> <start-port> <end-port>\n")
        sys.stderr.write("Example: portscan 127.0.0.1 9990 10000\n")
        return 1
    ip_text, start_text, end_text = args[:3]
    try:
        parse_ipv4(ip_text)
    except ValueError:
        sys.stderr.write("portscan: invalid IP address\n")
        return 1
    try:
        start = parse_port(start_text)
    except ValueError:
        sys.stderr.write("portscan: invalid start port\n")
        return 1
    try:
        end = parse_port(end_text)
    except ValueError:
        sys.stderr.write("portscan: invalid end port\n")
        return 1
    scan(ip_text, start, end, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())