"""Cancellable subprocess execution and signal routing."""

from __future__ import annotations

import logging
import signal
import subprocess
import threading
import time
from collections.abc import Sequence

logger = logging.getLogger("agentvibes.process")

TERMINATE_GRACE_SECONDS = 2.0
POLL_SECONDS = 0.1
HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CommandCancelled(Exception):
    def __init__(self, cmd: Sequence[str], signum: int | None):
        self.cmd = list(cmd)
        self.signum = signum
        super().__init__(f"command cancelled: {' '.join(self.cmd)}")


class CancellationToken:
    """Thread-safe cancellation flag carrying the triggering signal."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self.signum: int | None = None

    def cancel(self, signum: int | None = None) -> None:
        if not self._event.is_set():
            self.signum = signum
            self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)


def exit_status(signum: int | None) -> int:
    if signum is None:
        return 1
    return 128 + int(signum)


def install_signal_handlers(token: CancellationToken, signals=HANDLED_SIGNALS) -> dict:
    previous = {}

    def _handler(signum, _frame):
        logger.debug("received signal %s, cancelling", signum)
        token.cancel(signum)

    for signum in signals:
        previous[signum] = signal.signal(signum, _handler)
    return previous


def restore_signal_handlers(previous: dict) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def _stop(proc: subprocess.Popen) -> None:
    proc.terminate()
    try:
        proc.communicate(timeout=TERMINATE_GRACE_SECONDS)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.communicate()


def run_command(
    cmd: Sequence[str],
    token: CancellationToken | None = None,
    timeout: float | None = None,
) -> str:
    """Run ``cmd`` and return its stdout, forwarding cancellation to the child."""
    if token is not None and token.cancelled:
        raise CommandCancelled(cmd, token.signum)

    proc = subprocess.Popen(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    deadline = None if timeout is None else time.monotonic() + timeout

    while True:
        try:
            stdout, stderr = proc.communicate(timeout=POLL_SECONDS)
            break
        except subprocess.TimeoutExpired:
            pass
        if token is not None and token.cancelled:
            logger.debug("terminating %s (pid %s)", cmd[0], proc.pid)
            _stop(proc)
            raise CommandCancelled(cmd, token.signum)
        if deadline is not None and time.monotonic() >= deadline:
            _stop(proc)
            raise subprocess.TimeoutExpired(list(cmd), timeout)

    if proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, list(cmd), stdout, stderr)
    return stdout
