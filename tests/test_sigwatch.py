import io
import os
import signal
import time

import pytest

from tinybox.sigwatch import SignalWatcher


@pytest.fixture
def restore_handlers():
    old_int = signal.getsignal(signal.SIGINT)
    old_usr1 = signal.getsignal(signal.SIGUSR1)
    yield
    signal.signal(signal.SIGINT, old_int)
    signal.signal(signal.SIGUSR1, old_usr1)


def test_process_without_signals_does_nothing():
    out = io.StringIO()
    watcher = SignalWatcher(out)
    assert watcher.process() is False
    assert out.getvalue() == ""


def test_usr1_is_counted_once_per_process():
    out = io.StringIO()
    watcher = SignalWatcher(out)
    watcher.on_usr1(signal.SIGUSR1, None)
    assert watcher.process() is False
    assert watcher.process() is False
    watcher.on_usr1(signal.SIGUSR1, None)
    assert watcher.process() is False
    assert watcher.usr1_count == 2
    assert out.getvalue() == "Caught SIGUSR1 (#1)\nCaught SIGUSR1 (#2)\n"


def test_sigint_reports_total_and_stops():
    out = io.StringIO()
    watcher = SignalWatcher(out)
    watcher.on_usr1(signal.SIGUSR1, None)
    watcher.on_int(signal.SIGINT, None)
    assert watcher.process() is True
    assert out.getvalue().endswith(
        "\nCaught SIGINT, exiting gracefully.\nTotal SIGUSR1 received: 1\n"
    )


def test_wait_returns_after_pending_sigint():
    out = io.StringIO()
    watcher = SignalWatcher(out)
    watcher.on_int(signal.SIGINT, None)
    watcher.wait()
    assert "Total SIGUSR1 received: 0" in out.getvalue()


def test_installed_handler_receives_real_signal(restore_handlers):
    out = io.StringIO()
    watcher = SignalWatcher(out)
    watcher.install()
    os.kill(os.getpid(), signal.SIGUSR1)
    time.sleep(0.05)
    assert watcher.process() is False
    assert watcher.usr1_count == 1
    assert signal.getsignal(signal.SIGINT) == watcher.on_int