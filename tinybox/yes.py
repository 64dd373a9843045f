"""Repeat a line on standard output until the reader goes away."""

import os
import sys


def write_forever(stream, message=b"y\n"):
    """Write ``message`` to ``stream`` repeatedly until a write fails."""
    try:
        while True:
            stream.write(message)
    except OSError:
        return


def main(argv=None):
    """Print ``y`` lines until standard output is closed."""
    write_forever(sys.stdout.buffer)
    # The reader is gone; point stdout at the null device so the final
    # flush at interpreter shutdown does not complain.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)
    return 0


if __name__ == "__main__":
    sys.exit(main())