"""SHA-256 of standard input, computed in pure Python."""

import struct
import sys

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK = 64
_CHUNK = 4096

# First 32 bits of the fractional parts of the cube roots of the first
# 64 primes.
_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

# First 32 bits of the fractional parts of the square roots of the first
# 8 primes.
_H_INIT = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(x, n):
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _compress(state, block):
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x, y = w[i - 15], w[i - 2]
        s0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        s1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + s1 + ch + k + wi) & _MASK32
        s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (s0 + maj) & _MASK32
        h, g, f, e = g, f, e, (d + temp1) & _MASK32
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK32

    return [(s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e, f, g, h))]


class Sha256:
    """Incremental SHA-256 hasher."""

    def __init__(self):
        self._state = list(_H_INIT)
        self._buffer = bytearray()
        self._length = 0

    def update(self, data):
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % _BLOCK
        for start in range(0, full, _BLOCK):
            self._state = _compress(self._state,
                                    bytes(self._buffer[start:start + _BLOCK]))
        del self._buffer[:full]

    def digest(self):
        """Return the 32-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & _MASK64
        tail = (
            bytes(self._buffer)
            + b"\x80"
            + b"\0" * ((55 - len(self._buffer)) % _BLOCK)
            + struct.pack(">Q", bit_length)
        )
        state = self._state
        for start in range(0, len(tail), _BLOCK):
            state = _compress(state, tail[start:start + _BLOCK])
        return struct.pack(">8I", *state)

    def hexdigest(self):
        """Return the digest as 64 lower-case hex digits."""
        return self.digest().hex()


def main(argv=None):
    """Print the SHA-256 of standard input followed by `` -``."""
    hasher = Sha256()
    source = sys.stdin.buffer
    while True:
        try:
            chunk = source.read(_CHUNK)
        except OSError:
            break
        if not chunk:
            break
        hasher.update(chunk)
    sys.stdout.write(f"{hasher.hexdigest()} -\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())