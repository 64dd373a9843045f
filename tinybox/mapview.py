"""Print a file's name, size and contents, reading it through a memory map."""

import mmap
import os
import sys

_MAX_PATH = 256


def dump_file(path, out):
    """Write a header and the memory-mapped contents of ``path`` to ``out``.

    An empty file produces no output. Returns the file size; raises OSError
    when the file cannot be opened or mapped.
    """
    with open(path, "rb") as source:
        size = source.seek(0, os.SEEK_END)
        if size == 0:
            return 0
        with mmap.mmap(source.fileno(), size, access=mmap.ACCESS_READ) as view:
            out.write(b"File: " + os.fsencode(path))
            out.write(b"\nSize: %d bytes (memory-mapped)\n\n" % size)
            out.write(view)
    return size


def main(argv=None):
    """Dump the file named by the first argument."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else ""
    if not path or len(os.fsencode(path)) >= _MAX_PATH:
        sys.stderr.write("Usage: mapview <file>\n")
        return 1
    sys.stdout.flush()
    try:
        dump_file(path, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except BrokenPipeError:
        return 0
    except OSError as exc:
        reason = "cannot open file" if exc.filename is not None else "mmap failed"
        sys.stderr.write(f"mapview: {reason}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())