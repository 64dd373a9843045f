"""The smallest possible program: print a greeting and exit."""

import sys

_MESSAGE = "Hello, tiny world!"


def greeting():
    """Return the greeting line, newline included."""
    return _MESSAGE + "\n"


def main(argv=None):
    """Write the greeting to standard output."""
    sys.stdout.write(greeting())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())