"""A UDP echo server with stats and quit commands on standard input."""

import os
import selectors
import socket
import sys

PORT = 9998
_DATAGRAM_SIZE = 1500
_COMMAND_SIZE = 64


class EchoServer:
    """Echo every datagram back to its sender and keep simple statistics."""

    def __init__(self, port=PORT, out=None):
        self.out = sys.stdout if out is None else out
        self.echo_count = 0
        self.total_bytes = 0
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.sock.bind(("", port))
        except OSError:
            self.sock.close()
            raise

    @property
    def port(self):
        return self.sock.getsockname()[1]

    def handle_datagram(self):
        """Receive one datagram, echo it back and return its size."""
        try:
            data, sender = self.sock.recvfrom(_DATAGRAM_SIZE)
        except OSError:
            return 0
        if not data:
            return 0
        try:
            self.sock.sendto(data, sender)
        except OSError:
            pass
        self.echo_count += 1
        self.total_bytes += len(data)
        self.out.write(f"[echo] {len(data)} bytes\n")
        self.out.flush()
        return len(data)

    def handle_command(self, line):
        """Act on a command line; return False when the server should stop."""
        if isinstance(line, bytes):
            line = line.decode("utf-8", "replace")
        command = line.rstrip("\n\r ")
        if command == "quit":
            self.out.write("Shutting down.\n")
            self.out.flush()
            return False
        if command == "stats":
            self.out.write(
                f"Echoed {self.echo_count} datagrams, "
                f"{self.total_bytes} bytes total\n"
            )
        else:
            self.out.write("Unknown command. Try: stats, quit\n")
        self.out.flush()
        return True

    def serve_forever(self, commands=None):
        """Echo datagrams and read commands from ``commands`` until ``quit``."""
        self.out.write(f"UDP echo server listening on port {self.port}\n")
        self.out.write("Commands on stdin: stats, quit\n")
        self.out.flush()
        with selectors.DefaultSelector() as selector:
            selector.register(self.sock, selectors.EVENT_READ)
            if commands is not None:
                selector.register(commands, selectors.EVENT_READ)
            while True:
                for key, _ in selector.select():
                    if key.fileobj is self.sock:
                        self.handle_datagram()
                        continue
                    try:
                        data = os.read(key.fd, _COMMAND_SIZE)
                    except OSError:
                        data = b""
                    if not data:
                        selector.unregister(key.fileobj)
                    elif not self.handle_command(data):
                        return

    def close(self):
        """Release the socket."""
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def main(argv=None):
    """Run the echo server on the default port."""
    try:
        server = EchoServer(PORT, sys.stdout)
    except OSError:
        sys.stderr.write("udpecho: bind() failed\n")
        return 1
    with server:
        try:
            server.serve_forever(sys.stdin)
        except KeyboardInterrupt:
            return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())