"""Base64 encoding and decoding of standard input."""

import binascii
import sys

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PAD = ord("=")
_WHITESPACE = frozenset(b"\n\r \t")
_CHUNK = 4096


def _build_decode_table():
    table = [0xFF] * 256
    for value, symbol in enumerate(_ALPHABET):
        table[symbol] = value
    table[_PAD] = 0
    return bytes(table)


_DECODE = _build_decode_table()


def encode(data):
    """Return the base64 encoding of ``data`` with ``=`` padding."""
    return binascii.b2a_base64(bytes(data), newline=False)


def _symbols(data):
    return bytes(byte for byte in data if byte not in _WHITESPACE)


def decode(data):
    """Decode base64 ``data`` leniently.

    Whitespace is skipped, an incomplete trailing group is ignored and
    characters outside the alphabet are not rejected.
    """
    symbols = _symbols(data)
    out = bytearray()
    for start in range(0, len(symbols) - 3, 4):
        quad = symbols[start:start + 4]
        a, b, c, d = (_DECODE[symbol] for symbol in quad)
        triple = (a << 18) | (b << 12) | (c << 6) | d
        out.append((triple >> 16) & 0xFF)
        if quad[2] != _PAD:
            out.append((triple >> 8) & 0xFF)
        if quad[3] != _PAD:
            out.append(triple & 0xFF)
    return bytes(out)


def encode_stream(source, sink):
    """Encode everything read from ``source`` to ``sink``, ending with a newline."""
    pending = b""
    for chunk in iter(lambda: source.read(_CHUNK), b""):
        pending += chunk
        cut = len(pending) - len(pending) % 3
        if cut:
            sink.write(encode(pending[:cut]))
            pending = pending[cut:]
    if pending:
        sink.write(encode(pending))
    sink.write(b"\n")


def decode_stream(source, sink):
    """Decode base64 read from ``source`` and write the bytes to ``sink``."""
    pending = b""
    for chunk in iter(lambda: source.read(_CHUNK), b""):
        pending += _symbols(chunk)
        cut = len(pending) - len(pending) % 4
        if cut:
            sink.write(decode(pending[:cut]))
            pending = pending[cut:]


def main(argv=None):
    """Encode standard input, or decode it when ``-d`` is given."""
    args = sys.argv[1:] if argv is None else argv
    convert = decode_stream if "-d" in args else encode_stream
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        convert(sys.stdin.buffer, out)
        out.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())