"""Tiny arithmetic helpers working in 32-bit signed integers."""

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _wrap_i32(value):
    value &= _MASK
    return value - 0x100000000 if value & _SIGN else value


def add(a, b):
    """Add two 32-bit signed integers with wrap-around."""
    return _wrap_i32(a + b)


def fib(n):
    """Return the n-th Fibonacci number as a wrapping 32-bit integer.

    Non-positive ``n`` yields 0.
    """
    a, b = 0, 1
    for _ in range(max(n, 0)):
        a, b = b, _wrap_i32(a + b)
    return a