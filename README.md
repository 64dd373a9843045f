# tinybox

A collection of small, self-contained command-line tools in the Unix tradition.
Each one does a single job, reads standard input or its arguments, and writes
plain text to standard output. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Text and data tools

| Command | What it does |
| --- | --- |
| `tiny-hello` | Prints `Hello, tiny world!` |
| `tiny-yes` | Prints `y` forever, until the output is closed |
| `tiny-cat [FILE ...]` | Copies files (or standard input, or `-`) to standard output |
| `tiny-wc` | Counts lines, words and bytes on standard input, in 8-wide columns |
| `tiny-base64 [-d]` | Base64-encodes standard input; `-d` decodes, skipping whitespace |
| `tiny-hash` | 64-bit FNV-1a hash of standard input as 16 hex digits |
| `tiny-sha256` | SHA-256 of standard input, printed as `<hex> -` |
| `tiny-random [-n COUNT] [-b BYTES]` | xorshift64 random numbers seeded from the system; `-b` writes raw bytes |
| `tiny-mmap FILE` | Prints a file's name and size, then its contents through a memory map; an empty file prints nothing |

Examples:

```
printf 'hello' | tiny-base64
printf 'aGVsbG8=' | tiny-base64 -d
printf 'abc' | tiny-sha256
tiny-random -n 5
tiny-cat notes.txt - more.txt < extra.txt
```

## Process tools

| Command | What it does |
| --- | --- |
| `tiny-multicall` | A multi-call program: run under the name `yes`, `true`, `false` or `echo` (for example through a symlink) it acts as that applet; otherwise it lists them |
| `tiny-alloc` | Demonstrates a bump allocator over a fixed 4096-byte heap |
| `tiny-signal` | Prints its PID, counts `SIGUSR1` and exits cleanly on `SIGINT` |

## Network tools

| Command | Default behaviour |
| --- | --- |
| `tiny-server` | HTTP server on port 9999 answering every request with a small HTML page |
| `tiny-udp-echo` | UDP echo server on port 9998; type `stats` or `quit` on standard input |
| `tiny-portscan IP START END` | TCP connect scan of a port range with a 200 ms timeout per port |
| `tiny-x11` | Opens a 400x300 window on X display `:0` using the raw X11 protocol; exits on a key press or the close button |

Example:

```
tiny-portscan 127.0.0.1 9990 10000
```

## Using the modules

The building blocks are importable as well:

```python
from tinybox.arith import add, fib
from tinybox.sha256 import Sha256
from tinybox.rng import XorShift64

add(2, 3)      # 5
fib(10)        # 55

h = Sha256()
h.update(b"abc")
print(h.hexdigest())

rng = XorShift64(42)
print(next(rng))
```

Other modules include `tinybox.b64` (`encode`, `decode`, `encode_stream`,
`decode_stream`), `tinybox.fnv` (`fnv1a`, `hash_stream`), `tinybox.wc`
(`WordCounter`, `count_stream`), `tinybox.bump` (`BumpAllocator`),
`tinybox.cat` (`cat`, `copy_stream`), `tinybox.portscan` (`parse_ipv4`,
`parse_port`, `scan_port`, `scan`), `tinybox.udpecho` (`EchoServer`),
`tinybox.server` (`build_response`, `serve`) and `tinybox.x11` (request
builders such as `intern_atom_request` and `create_window_request`, and
`parse_setup`).

## What tinybox does not do

The network tools stop at serving, echoing and scanning. tinybox has no TCP
forwarding proxy, no HTTP reverse proxy and no load balancer, and it has no
tool that forks a child process and talks to it through a pipe.