"""A multi-call program choosing its applet from the name it runs under."""

import os
import sys

from tinybox.yes import write_forever

_HELP = (
    b"tiny-multicall: BusyBox-style multi-call binary\n"
    b"Available applets: yes, true, false, echo\n"
    b"Create symlinks to invoke: ln -s tiny-multicall yes\n"
)


def applet_name(argv0):
    """Return the part of ``argv0`` after the last slash."""
    return argv0.rpartition("/")[2]


def echo(args, stdout):
    """Write the non-empty ``args`` separated by spaces, then a newline."""
    words = [os.fsencode(arg) for arg in args if arg]
    stdout.write(b" ".join(words) + b"\n")
    return 0


def run_applet(name, args, stdout):
    """Run the applet called ``name`` and return its exit status."""
    if name == "yes":
        write_forever(stdout)
        return 0
    if name == "true":
        return 0
    if name == "false":
        return 1
    if name == "echo":
        return echo(args, stdout)
    stdout.write(_HELP)
    return 0


def main(argv=None):
    """Dispatch on the basename of the program name."""
    argv = sys.argv if argv is None else argv
    name = applet_name(argv[0]) if argv else ""
    sys.stdout.flush()
    status = run_applet(name, argv[1:], sys.stdout.buffer)
    try:
        sys.stdout.buffer.flush()
    except OSError:
        pass
    return status


if __name__ == "__main__":
    sys.exit(main())