"""Wait for SIGUSR1 pings and exit cleanly on SIGINT."""

import os
import signal
import sys


class SignalWatcher:
    """Count SIGUSR1 deliveries and stop when SIGINT arrives."""

    def __init__(self, out):
        self.out = out
        self.usr1_count = 0
        self._got_usr1 = False
        self._got_int = False

    def on_usr1(self, signum, frame):
        """Signal handler: remember that SIGUSR1 arrived."""
        self._got_usr1 = True

    def on_int(self, signum, frame):
        """Signal handler: remember that SIGINT arrived."""
        self._got_int = True

    def install(self):
        """Install the handlers for SIGINT and SIGUSR1."""
        signal.signal(signal.SIGINT, self.on_int)
        signal.signal(signal.SIGUSR1, self.on_usr1)

    def process(self):
        """Report pending signals; return True once SIGINT was seen."""
        if self._got_usr1:
            self._got_usr1 = False
            self.usr1_count += 1
            self.out.write(f"Caught SIGUSR1 (#{self.usr1_count})\n")
            self.out.flush()
        if self._got_int:
            self._got_int = False
            self.out.write("\nCaught SIGINT, exiting gracefully.\n")
            self.out.write(f"Total SIGUSR1 received: {self.usr1_count}\n")
            self.out.flush()
            return True
        return False

    def wait(self):
        """Sleep between signals until SIGINT has been handled."""
        while not self.process():
            signal.pause()


def main(argv=None):
    """Print the PID and react to signals until interrupted."""
    watcher = SignalWatcher(sys.stdout)
    try:
        watcher.install()
    except (OSError, ValueError):
        sys.stderr.write("Failed to install signal handlers\n")
        return 1
    sys.stdout.write(f"PID: {os.getpid()}\n")
    sys.stdout.write(
        "Waiting for signals... (Ctrl+C to quit, kill -USR1 <pid> to ping)\n"
    )
    sys.stdout.flush()
    watcher.wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())