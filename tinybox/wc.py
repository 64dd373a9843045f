"""Count lines, words and bytes of standard input."""

import sys
from dataclasses import dataclass

_WHITESPACE = frozenset(b" \n\t\r")
_CHUNK = 4096


@dataclass
class WordCounter:
    """Running line, word and byte counts over data fed in pieces."""

    lines: int = 0
    words: int = 0
    bytes: int = 0
    in_word: bool = False

    def feed(self, data):
        """Add ``data`` to the counts; words may span successive pieces."""
        self.bytes += len(data)
        self.lines += data.count(b"\n")
        for byte in data:
            if byte in _WHITESPACE:
                self.in_word = False
            elif not self.in_word:
                self.in_word = True
                self.words += 1
        return self

    def render(self):
        """Return the counts right-aligned in 8-character columns."""
        return f"{self.lines:>8}{self.words:>8}{self.bytes:>8}\n"


def count_stream(source):
    """Count everything readable from the binary stream ``source``."""
    counter = WordCounter()
    for chunk in iter(lambda: source.read(_CHUNK), b""):
        counter.feed(chunk)
    return counter


def main(argv=None):
    """Print the line, word and byte counts of standard input."""
    try:
        counter = count_stream(sys.stdin.buffer)
    except OSError:
        return 1
    try:
        sys.stdout.write(counter.render())
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())