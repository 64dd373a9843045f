"""Xorshift64 pseudo-random numbers as decimal lines or raw bytes."""

import os
import sys
from collections.abc import Iterator

_MASK64 = 0xFFFFFFFFFFFFFFFF
_FALLBACK_SEED = 0xDEADBEEFCAFE1234
_CHUNK = 4096
_MAX_ARGS = 8


class XorShift64(Iterator):
    """Marsaglia's xorshift64 generator yielding 64-bit integers."""

    def __init__(self, seed):
        self.state = seed & _MASK64

    def __iter__(self):
        return self

    def __next__(self):
        x = self.state
        x ^= (x << 13) & _MASK64
        x ^= x >> 7
        x ^= (x << 17) & _MASK64
        self.state = x
        return x

    def random_bytes(self, count):
        """Return ``count`` bytes built from little-endian output words."""
        if count < 0:
            raise ValueError("count must not be negative")
        words = -(-count // 8)
        data = b"".join(next(self).to_bytes(8, "little") for _ in range(words))
        return data[:count]


def seed_from_urandom():
    """Read a non-zero 64-bit seed from the system's random source."""
    seed = int.from_bytes(os.urandom(8), "little")
    return seed or _FALLBACK_SEED


def _parse_u64(text):
    if not all(c in "0123456789" for c in text):
        raise ValueError(f"not a number: {text!r}")
    return int(text or "0") & _MASK64


def parse_args(args):
    """Return ``(count, raw)`` from ``-n N`` / ``-b N`` options.

    Empty arguments are ignored and only the first eight are considered.
    Raises ValueError when a count is not a decimal number.
    """
    present = [arg for arg in args if arg][:_MAX_ARGS]
    count, raw = 1, False
    items = iter(present)
    for arg in items:
        if arg in ("-n", "-b"):
            value = next(items, None)
            if value is None:
                break
            count = _parse_u64(value)
            if arg == "-b":
                raw = True
    return count, raw


def main(argv=None):
    """Print random numbers (``-n N``) or raw random bytes (``-b N``)."""
    args = sys.argv[1:] if argv is None else argv
    rng = XorShift64(seed_from_urandom())
    try:
        count, raw = parse_args(args)
    except ValueError as exc:
        sys.stderr.write(f"rng: {exc}\n")
        return 1

    if raw:
        sys.stdout.flush()
        out = sys.stdout.buffer
        remaining = count
        while remaining > 0:
            size = min(remaining, _CHUNK)
            out.write(rng.random_bytes(size))
            remaining -= size
        out.flush()
    else:
        for _ in range(count):
            sys.stdout.write(f"{next(rng)}\n")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())