import io
import socket
import struct
import threading

import pytest

from tinybox.x11 import (
    SetupInfo,
    change_property_request,
    classify_event,
    create_window_request,
    intern_atom_request,
    map_window_request,
    pad4,
    parse_setup,
    run,
    setup_request,
)

BASE = 0x04000000
ROOT = 0x1E0
WHITE = 0xFFFFFF
VISUAL = 0x21
DEPTH = 24
PROTOCOLS_ATOM = 301
DELETE_ATOM = 302


def _setup_data(vendor=b"Fake", formats=1):
    fixed = bytearray(32)
    struct.pack_into("<I", fixed, 4, BASE)
    struct.pack_into("<H", fixed, 16, len(vendor))
    fixed[21] = formats
    vendor_part = vendor.ljust(pad4(len(vendor)), b"\0")
    format_part = b"\0" * (8 * formats)
    screen = bytearray(40)
    struct.pack_into("<I", screen, 0, ROOT)
    struct.pack_into("<I", screen, 8, WHITE)
    struct.pack_into("<I", screen, 32, VISUAL)
    screen[38] = DEPTH
    return bytes(fixed) + vendor_part + format_part + bytes(screen)


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _event(code, atom=0):
    return struct.pack("<B11xI", code, atom).ljust(32, b"\0")


def _atom_reply(atom):
    return struct.pack("<B7xI", 1, atom).ljust(32, b"\0")


def _start_server(path, script):
    listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    listener.bind(str(path))
    listener.listen(1)
    captured = {}

    def serve():
        try:
            conn, _ = listener.accept()
            with conn:
                script(conn, captured)
        finally:
            listener.close()

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    return thread, captured


def _full_session(events):
    def script(conn, captured):
        captured["setup"] = _recv_exact(conn, 12)
        data = _setup_data()
        conn.sendall(struct.pack("<BxHHH", 1, 11, 0, len(data) // 4) + data)
        captured["interns"] = _recv_exact(conn, 20 + 24)
        conn.sendall(_atom_reply(PROTOCOLS_ATOM) + _atom_reply(DELETE_ATOM))
        captured["rest"] = _recv_exact(conn, 40 + 32 + 28 + 8)
        conn.sendall(b"".join(events))
        captured["tail"] = _recv_exact(conn, 1)

    return script


def test_pad4_rounds_up_to_multiple_of_four():
    for n in range(40):
        padded = pad4(n)
        assert padded % 4 == 0
        assert n <= padded < n + 4


def test_setup_request_bytes():
    assert setup_request() == b"l\x00\x0b\x00\x00\x00\x00\x00\x00\x00\x00\x00"


def test_parse_setup_reads_first_screen():
    info = parse_setup(_setup_data())
    assert info == SetupInfo(BASE, ROOT, WHITE, VISUAL, DEPTH)


def test_parse_setup_skips_padded_vendor_and_formats():
    info = parse_setup(_setup_data(vendor=b"The X.Org Foundation", formats=3))
    assert info.root_window == ROOT
    assert info.root_depth == DEPTH


def test_parse_setup_rejects_short_data():
    with pytest.raises(ValueError):
        parse_setup(_setup_data()[:-1])
    with pytest.raises(ValueError):
        parse_setup(b"\0" * 10)


@pytest.mark.parametrize("name", [b"WM_PROTOCOLS", b"WM_DELETE_WINDOW", b"A"])
def test_intern_atom_request_layout(name):
    req = intern_atom_request(name)
    assert req[0] == 16
    assert req[1] == 0
    length, name_len = struct.unpack_from("<HH", req, 2)
    assert length * 4 == len(req)
    assert name_len == len(name)
    assert req[8:8 + len(name)] == name
    assert set(req[8 + len(name):]) <= {0}


def test_intern_atom_request_accepts_text():
    assert intern_atom_request("WM_PROTOCOLS") == intern_atom_request(b"WM_PROTOCOLS")


def test_create_window_request_layout():
    info = SetupInfo(BASE, ROOT, WHITE, VISUAL, DEPTH)
    req = create_window_request(BASE, info, 400, 300)
    assert len(req) == 40
    assert req[0] == 1
    assert req[1] == DEPTH
    fields = struct.unpack("<HIIHHHHHHIIII", req[2:])
    assert fields == (10, BASE, ROOT, 100, 100, 400, 300, 0, 1, VISUAL,
                      0x00000802, WHITE, 0x00028001)


def test_change_property_request_string():
    req = change_property_request(7, 39, 31, 8, b"tiny-x11")
    assert req[0] == 18
    assert struct.unpack_from("<H", req, 2)[0] * 4 == len(req)
    wid, prop, type_atom = struct.unpack_from("<III", req, 4)
    assert (wid, prop, type_atom) == (7, 39, 31)
    assert req[16] == 8
    assert struct.unpack_from("<I", req, 20)[0] == len(b"tiny-x11")
    assert req[24:] == b"tiny-x11"


def test_change_property_request_atom_list():
    req = change_property_request(7, PROTOCOLS_ATOM, 4, 32,
                                  struct.pack("<I", DELETE_ATOM), 1)
    assert len(req) == 28
    assert struct.unpack_from("<H", req, 2)[0] == 7
    assert req[16] == 32
    assert struct.unpack_from("<II", req, 20) == (1, DELETE_ATOM)


def test_change_property_rejects_bad_format():
    with pytest.raises(ValueError):
        change_property_request(1, 2, 3, 12, b"abc")


def test_map_window_request():
    req = map_window_request(BASE)
    assert len(req) == 8
    assert req[0] == 8
    assert struct.unpack_from("<HI", req, 2) == (2, BASE)


def test_classify_event():
    assert classify_event(_event(12), DELETE_ATOM) == "expose"
    assert classify_event(_event(2), DELETE_ATOM) == "keypress"
    assert classify_event(_event(2 | 0x80), DELETE_ATOM) == "keypress"
    assert classify_event(_event(33, DELETE_ATOM), DELETE_ATOM) == "close"
    assert classify_event(_event(33, DELETE_ATOM + 1), DELETE_ATOM) is None
    assert classify_event(_event(22), DELETE_ATOM) is None


def test_run_until_key_press(tmp_path):
    path = tmp_path / "X0"
    thread, captured = _start_server(
        path, _full_session([_event(22), _event(12), _event(2)]))
    out = io.StringIO()
    assert run(str(path), out) == "keypress"
    thread.join(5)

    assert captured["setup"] == setup_request()
    assert captured["interns"] == (intern_atom_request(b"WM_PROTOCOLS")
                                   + intern_atom_request(b"WM_DELETE_WINDOW"))
    rest = captured["rest"]
    info = SetupInfo(BASE, ROOT, WHITE, VISUAL, DEPTH)
    assert rest[:40] == create_window_request(BASE, info, 400, 300)
    assert rest[40:72] == change_property_request(BASE, 39, 31, 8, b"tiny-x11")
    assert struct.unpack_from("<I", rest, 76)[0] == BASE
    assert struct.unpack_from("<I", rest, 80)[0] == PROTOCOLS_ATOM
    assert struct.unpack_from("<I", rest, 96)[0] == DELETE_ATOM
    assert rest[-8:] == map_window_request(BASE)

    lines = out.getvalue().splitlines()
    assert lines[0] == "Connected to X11 display :0"
    assert lines[1] == "Root window: 0x000001e0"
    assert lines[2] == "Window created: 0x04000000 (400x300)"
    assert lines[3:] == ["Window mapped", "[event] Expose", "Key pressed, exiting"]


def test_run_until_close_request(tmp_path):
    path = tmp_path / "X0"
    thread, _ = _start_server(
        path, _full_session([_event(33, DELETE_ATOM)]))
    out = io.StringIO()
    assert run(str(path), out) == "close"
    thread.join(5)
    assert out.getvalue().endswith("Close button pressed, exiting\n")


def test_run_refused_by_server(tmp_path):
    path = tmp_path / "X0"

    def script(conn, captured):
        _recv_exact(conn, 12)
        conn.sendall(b"\0" * 8)

    thread, _ = _start_server(path, script)
    with pytest.raises(ConnectionRefusedError):
        run(str(path), io.StringIO())
    thread.join(5)


def test_run_server_hangs_up(tmp_path):
    path = tmp_path / "X0"

    def script(conn, captured):
        _recv_exact(conn, 12)

    thread, _ = _start_server(path, script)
    with pytest.raises(EOFError):
        run(str(path), io.StringIO())
    thread.join(5)


def test_run_without_server(tmp_path):
    with pytest.raises(ConnectionError):
        run(str(tmp_path / "missing"), io.StringIO())