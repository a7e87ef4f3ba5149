from __future__ import annotations

import signal
import subprocess
import threading
import unittest
from pathlib import Path
from unittest import mock
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from vibes_core import process  # noqa: E402
from vibes_core.process import (  # noqa: E402
    CancellationToken,
    CommandCancelled,
    exit_status,
    install_signal_handlers,
    restore_signal_handlers,
    run_command,
)

SLEEPER = [sys.executable, "-c", "import time; time.sleep(30)"]


class RunCommandTests(unittest.TestCase):
    def test_returns_stdout(self):
        out = run_command([sys.executable, "-c", "print('Alex en_US')"])
        self.assertEqual(out.strip(), "Alex en_US")

    def test_non_zero_exit_raises(self):
        with self.assertRaises(subprocess.CalledProcessError):
            run_command([sys.executable, "-c", "raise SystemExit(3)"])

    def test_cancellation_terminates_child(self):
        token = CancellationToken()
        timer = threading.Timer(0.2, token.cancel, args=(signal.SIGTERM,))
        timer.start()
        try:
            with self.assertRaises(CommandCancelled) as ctx:
                run_command(SLEEPER, token=token)
        finally:
            timer.cancel()
        self.assertEqual(ctx.exception.signum, signal.SIGTERM)

    def test_pre_cancelled_token_never_spawns(self):
        token = CancellationToken()
        token.cancel(signal.SIGINT)
        with mock.patch.object(process.subprocess, "Popen") as popen:
            with self.assertRaises(CommandCancelled):
                run_command(["say", "-v", "?"], token=token)
            popen.assert_not_called()

    def test_timeout_stops_child(self):
        with self.assertRaises(subprocess.TimeoutExpired):
            run_command(SLEEPER, timeout=0.3)


class CancellationTests(unittest.TestCase):
    def test_first_signal_wins(self):
        token = CancellationToken()
        self.assertFalse(token.cancelled)
        token.cancel(signal.SIGINT)
        token.cancel(signal.SIGTERM)
        self.assertTrue(token.cancelled)
        self.assertEqual(token.signum, signal.SIGINT)

    def test_exit_status(self):
        self.assertEqual(exit_status(signal.SIGINT), 130)
        self.assertEqual(exit_status(signal.SIGTERM), 143)
        self.assertEqual(exit_status(None), 1)

    @unittest.skipUnless(hasattr(signal, "SIGUSR1"), "requires SIGUSR1")
    def test_signal_handler_cancels_token(self):
        token = CancellationToken()
        previous = install_signal_handlers(token, signals=(signal.SIGUSR1,))
        try:
            signal.raise_signal(signal.SIGUSR1)
        finally:
            restore_signal_handlers(previous)
        self.assertTrue(token.cancelled)
        self.assertEqual(token.signum, signal.SIGUSR1)


if __name__ == "__main__":
    unittest.main()
