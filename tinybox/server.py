"""A minimal HTTP server answering every request with the same page."""

import socket
import sys

PORT = 9999
RESPONSE_BODY = (
    b"<html><body><h1>Hello from tiny-server!</h1>"
    b"<p>A ~14KB HTTP server with no standard library.</p></body></html>"
)
_BACKLOG = 16
_REQUEST_SIZE = 1024


def build_response():
    """Return the complete HTTP response sent to every client."""
    head = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/html\r\n"
        b"Connection: close\r\n"
        b"Content-Length: %d\r\n\r\n" % len(RESPONSE_BODY)
    )
    return head + RESPONSE_BODY


def serve(port=PORT, out=None, max_requests=None):
    """Serve on ``port`` until ``max_requests`` clients were answered.

    With ``max_requests`` of None it serves forever. Returns the number of
    requests answered; raises OSError when the socket cannot be set up.
    """
    out = sys.stdout if out is None else out
    response = build_response()
    count = 0
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        listener.listen(_BACKLOG)
        out.write(f"Listening on port {listener.getsockname()[1]}\n")
        out.flush()

        while max_requests is None or count < max_requests:
            try:
                client, _ = listener.accept()
            except OSError:
                continue
            count += 1
            with client:
                try:
                    client.recv(_REQUEST_SIZE)
                    client.sendall(response)
                except OSError:
                    pass
            out.write(f"[{count}] 200 OK\n")
            out.flush()
    return count


def main(argv=None):
    """Serve the fixed page on the default port."""
    try:
        serve(PORT, sys.stdout)
    except KeyboardInterrupt:
        return 130
    except OSError as exc:
        sys.stderr.write(f"server: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())