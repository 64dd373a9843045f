"""A bump allocator over a fixed byte arena, with a small demo."""

import sys

_DEFAULT_CAPACITY = 4096


class BumpAllocator:
    """Hand out aligned slices of a fixed arena; free them all at once."""

    def __init__(self, capacity=_DEFAULT_CAPACITY, base=None):
        self._heap = bytearray(capacity)
        self.offset = 0
        self.base = id(self._heap) if base is None else base

    @property
    def capacity(self):
        return len(self._heap)

    @property
    def used(self):
        return self.offset

    def alloc(self, size, align=1):
        """Reserve ``size`` bytes aligned to ``align`` and return the offset.

        Raises MemoryError when the arena has no room left.
        """
        if align <= 0 or align & (align - 1):
            raise ValueError("alignment must be a power of two")
        if size < 0:
            raise ValueError("size must not be negative")
        aligned = (self.offset + align - 1) & ~(align - 1)
        if aligned + size > self.capacity:
            raise MemoryError(f"cannot allocate {size} bytes")
        self.offset = aligned + size
        return aligned

    def _check(self, offset, size):
        if offset < 0 or size < 0 or offset + size > self.capacity:
            raise IndexError("access outside the arena")

    def write(self, offset, data):
        """Store ``data`` at ``offset`` in the arena."""
        self._check(offset, len(data))
        self._heap[offset:offset + len(data)] = data

    def read(self, offset, size):
        """Return ``size`` bytes starting at ``offset``."""
        self._check(offset, size)
        return bytes(self._heap[offset:offset + size])

    def address(self, offset):
        """Return the address of ``offset`` relative to the arena base."""
        return self.base + offset

    def reset(self):
        """Release every allocation at once."""
        self.offset = 0


def demo(out):
    """Allocate a few values and a string, print them and the arena usage."""
    heap = BumpAllocator()
    out.write("=== Tiny Bump Allocator Demo ===\n\n")

    values = [("u32", 4, 42), ("u32", 4, 100), ("u64", 8, 123456789)]
    slots = []
    for label, size, value in values:
        offset = heap.alloc(size, size)
        heap.write(offset, value.to_bytes(size, "little"))
        slots.append((label, offset, size))

    out.write("Allocated 3 values:\n")
    for label, offset, size in slots:
        stored = int.from_bytes(heap.read(offset, size), "little")
        out.write(f"  {label} @ 0x{heap.address(offset):x} = {stored}\n")

    message = b"Hello from the bump allocator!"
    text_at = heap.alloc(len(message), 1)
    heap.write(text_at, message)
    text = heap.read(text_at, len(message)).decode("ascii")
    out.write(f'  str @ 0x{heap.address(text_at):x} = "{text}"\n\n')

    out.write(f"Heap used: {heap.used} / {heap.capacity} bytes\n")
    heap.reset()
    out.write(f"After reset: {heap.used} / {heap.capacity} bytes\n")


def main(argv=None):
    """Run the allocator demo on standard output."""
    try:
        demo(sys.stdout)
    except MemoryError:
        sys.stderr.write("allocation failed\n")
        return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())