"""Concatenate files, or standard input, to standard output."""

import sys

_CHUNK = 4096
_MAX_PATH = 256


def copy_stream(source, sink):
    """Copy everything from ``source`` to ``sink``; return the byte count."""
    total = 0
    for chunk in iter(lambda: source.read(_CHUNK), b""):
        sink.write(chunk)
        total += len(chunk)
    return total


def cat(paths, stdin, stdout):
    """Copy each path in order to ``stdout``.

    With no paths at all, standard input is copied. A path of ``-`` stands
    for standard input and empty paths are skipped. Raises OSError when a
    file cannot be opened or read, after the earlier files were written.
    """
    if not paths:
        copy_stream(stdin, stdout)
        return
    for path in paths:
        if not path:
            continue
        if path == "-":
            copy_stream(stdin, stdout)
            continue
        if len(path.encode("utf-8", "surrogateescape")) >= _MAX_PATH:
            raise ValueError(f"path too long: {path!r}")
        with open(path, "rb") as source:
            copy_stream(source, stdout)


def main(argv=None):
    """Concatenate the named files (or standard input) to standard output."""
    args = sys.argv[1:] if argv is None else argv
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        cat(args, sys.stdin.buffer, out)
        out.flush()
    except BrokenPipeError:
        return 0
    except ValueError:
        return 1
    except OSError as exc:
        out.flush()
        if exc.filename is not None:
            sys.stderr.write(f"cat: {exc.filename}: No such file or directory\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())