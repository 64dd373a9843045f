"""Open a window on a local X server by speaking the core protocol directly."""

import socket
import struct
import sys
from dataclasses import dataclass

X11_SOCKET = "/tmp/.X11-unix/X0"
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 300
WINDOW_TITLE = b"tiny-x11"

_OP_CREATE_WINDOW = 1
_OP_MAP_WINDOW = 8
_OP_INTERN_ATOM = 16
_OP_CHANGE_PROPERTY = 18

ATOM_ATOM = 4
ATOM_STRING = 31
ATOM_WM_NAME = 39

_EVENT_KEY_PRESS = 2
_EVENT_EXPOSE = 12
_EVENT_CLIENT_MESSAGE = 33

_CW_BACK_PIXEL = 0x00000002
_CW_EVENT_MASK = 0x00000800
# KeyPress | Exposure | StructureNotify
_EVENT_MASK = 0x00028001

_WINDOW_X = 100
_WINDOW_Y = 100
_CLASS_INPUT_OUTPUT = 1
_REPLY_SIZE = 32
_EVENT_SIZE = 32
_SCREEN_SIZE = 40


@dataclass(frozen=True)
class SetupInfo:
    """The parts of the server's setup reply that window creation needs."""

    resource_id_base: int
    root_window: int
    white_pixel: int
    root_visual: int
    root_depth: int


def pad4(n):
    """Round ``n`` up to a multiple of four."""
    return (n + 3) & ~3


def setup_request():
    """Return the connection setup: little-endian, protocol 11.0, no auth."""
    return struct.pack("<BxHHHHxx", ord("l"), 11, 0, 0, 0)


def parse_setup(data):
    """Parse the additional data of a successful setup reply.

    Raises ValueError when ``data`` is too short to hold the first screen.
    """
    data = bytes(data)
    if len(data) < 32:
        raise ValueError("setup data too short")
    (resource_id_base,) = struct.unpack_from("<I", data, 4)
    (vendor_length,) = struct.unpack_from("<H", data, 16)
    pixmap_formats = data[21]
    screen = 32 + pad4(vendor_length) + pixmap_formats * 8
    if len(data) < screen + _SCREEN_SIZE:
        raise ValueError("setup data too short")
    (root_window,) = struct.unpack_from("<I", data, screen)
    (white_pixel,) = struct.unpack_from("<I", data, screen + 8)
    (root_visual,) = struct.unpack_from("<I", data, screen + 32)
    root_depth = data[screen + 38]
    return SetupInfo(resource_id_base, root_window, white_pixel,
                     root_visual, root_depth)


def _as_bytes(value):
    return value.encode("ascii") if isinstance(value, str) else bytes(value)


def intern_atom_request(name):
    """Return an InternAtom request for ``name`` (only_if_exists false)."""
    name = _as_bytes(name)
    padded = name.ljust(pad4(len(name)), b"\0")
    return struct.pack(
        "<BBHHxx", _OP_INTERN_ATOM, 0, (8 + len(padded)) // 4, len(name)
    ) + padded


def create_window_request(wid, info, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
    """Return a CreateWindow request for a white top-level window."""
    return struct.pack(
        "<BBHIIHHHHHHIIII",
        _OP_CREATE_WINDOW,
        info.root_depth,
        10,
        wid,
        info.root_window,
        _WINDOW_X,
        _WINDOW_Y,
        width,
        height,
        0,
        _CLASS_INPUT_OUTPUT,
        info.root_visual,
        _CW_BACK_PIXEL | _CW_EVENT_MASK,
        info.white_pixel,
        _EVENT_MASK,
    )


def change_property_request(wid, prop, type_atom, fmt, data, count=None):
    """Return a ChangeProperty (Replace) request.

    ``count`` is the number of ``fmt``-bit units in ``data``; by default it
    is derived from the length of ``data``.
    """
    if fmt not in (8, 16, 32):
        raise ValueError("format must be 8, 16 or 32")
    data = _as_bytes(data)
    if count is None:
        count = len(data) * 8 // fmt
    padded = data.ljust(pad4(len(data)), b"\0")
    return struct.pack(
        "<BBHIIIBxxxI",
        _OP_CHANGE_PROPERTY,
        0,
        (24 + len(padded)) // 4,
        wid,
        prop,
        type_atom,
        fmt,
        count,
    ) + padded


def map_window_request(wid):
    """Return a MapWindow request."""
    return struct.pack("<BxHI", _OP_MAP_WINDOW, 2, wid)


def classify_event(event, delete_atom):
    """Name the event: ``"expose"``, ``"keypress"``, ``"close"`` or None."""
    code = event[0] & 0x7F
    if code == _EVENT_EXPOSE:
        return "expose"
    if code == _EVENT_KEY_PRESS:
        return "keypress"
    if code == _EVENT_CLIENT_MESSAGE and len(event) >= 16:
        (data_atom,) = struct.unpack_from("<I", event, 12)
        if data_atom == delete_atom:
            return "close"
    return None


def _recv_exact(conn, size):
    data = bytearray()
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            raise EOFError("read failed")
        data += chunk
    return bytes(data)


def _read_atom(conn):
    reply = _recv_exact(conn, _REPLY_SIZE)
    return struct.unpack_from("<I", reply, 8)[0]


def run(path=X11_SOCKET, out=None):
    """Open a window and handle events until a key press or a close request.

    Returns ``"keypress"`` or ``"close"``. Raises ConnectionError when the
    server cannot be reached or refuses the connection, and EOFError when
    the server closes the connection.
    """
    out = sys.stdout if out is None else out
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as conn:
        try:
            conn.connect(path)
        except OSError as exc:
            raise ConnectionError("connect() failed -- is X11 running?") from exc

        conn.sendall(setup_request())
        header = _recv_exact(conn, 8)
        if header[0] != 1:
            raise ConnectionRefusedError("connection refused by X server")
        extra = struct.unpack_from("<H", header, 6)[0] * 4
        info = parse_setup(_recv_exact(conn, extra))

        out.write("Connected to X11 display :0\n")
        out.write(f"Root window: 0x{info.root_window:08x}\n")
        out.flush()

        conn.sendall(intern_atom_request(b"WM_PROTOCOLS"))
        conn.sendall(intern_atom_request(b"WM_DELETE_WINDOW"))
        protocols_atom = _read_atom(conn)
        delete_atom = _read_atom(conn)

        wid = info.resource_id_base
        conn.sendall(create_window_request(wid, info, WINDOW_WIDTH, WINDOW_HEIGHT))
        out.write(
            f"Window created: 0x{wid:08x} ({WINDOW_WIDTH}x{WINDOW_HEIGHT})\n"
        )
        conn.sendall(change_property_request(
            wid, ATOM_WM_NAME, ATOM_STRING, 8, WINDOW_TITLE))
        conn.sendall(change_property_request(
            wid, protocols_atom, ATOM_ATOM, 32,
            struct.pack("<I", delete_atom), 1))
        conn.sendall(map_window_request(wid))
        out.write("Window mapped\n")
        out.flush()

        while True:
            kind = classify_event(_recv_exact(conn, _EVENT_SIZE), delete_atom)
            if kind == "expose":
                out.write("[event] Expose\n")
            elif kind == "keypress":
                out.write("Key pressed, exiting\n")
            elif kind == "close":
                out.write("Close button pressed, exiting\n")
            out.flush()
            if kind in ("keypress", "close"):
                return kind


def main(argv=None):
    """Open a window on display :0."""
    try:
        run(X11_SOCKET, sys.stdout)
    except EOFError as exc:
        sys.stderr.write(f"x11: {exc}\n")
        return 1
    except ConnectionError as exc:
        sys.stderr.write(f"x11: {exc}\n")
        sys.stderr.write("  Try: xhost +local:\n")
        return 1
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"x11: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())