"""64-bit FNV-1a hashing of standard input."""

import sys

FNV_OFFSET = 0xCBF29CE484222325
FNV_PRIME = 0x00000100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF
_CHUNK = 4096


def fnv1a(data, state=FNV_OFFSET):
    """Fold ``data`` into the FNV-1a ``state`` and return the new state."""
    for byte in data:
        state = ((state ^ byte) * FNV_PRIME) & _MASK64
    return state


def hash_stream(source):
    """Hash everything readable from the binary stream ``source``."""
    state = FNV_OFFSET
    for chunk in iter(lambda: source.read(_CHUNK), b""):
        state = fnv1a(chunk, state)
    return state


def main(argv=None):
    """Print the FNV-1a hash of standard input as 16 hex digits."""
    try:
        digest = hash_stream(sys.stdin.buffer)
    except OSError:
        return 1
    sys.stdout.write(f"{digest:016x}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())