from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rrun.runner.process import probe, render_command, run


class ProcessRunnerTests(unittest.TestCase):
    def test_zero_exit_is_success(self) -> None:
        self.assertTrue(run(sys.executable, ["-c", "pass"]))

    def test_nonzero_exit_is_failure_not_exception(self) -> None:
        self.assertFalse(run(sys.executable, ["-c", "import sys; sys.exit(3)"]))

    def test_args_are_passed_in_order(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "argv.txt"
            code = "import sys; open(sys.argv[1], 'w').write('|'.join(sys.argv[2:]))"
            self.assertTrue(run(sys.executable, ["-c", code, str(out), "b", "a", "--", "c d"]))
            self.assertEqual(out.read_text(), "b|a|--|c d")

    def test_unspawnable_program_raises_os_error(self) -> None:
        with self.assertRaises(OSError):
            run("rrun-test-no-such-program-7f3a")
        with self.assertRaises(OSError):
            probe("rrun-test-no-such-program-7f3a", ["x"])

    def test_probe_discards_output(self) -> None:
        self.assertTrue(probe(sys.executable, ["-c", "print('noise')"]))
        self.assertFalse(probe(sys.executable, ["-c", "import sys; sys.exit(128)"]))

    def test_render_command_quotes(self) -> None:
        self.assertEqual(render_command("cargo", ["run", "--", "a b"]), "cargo run -- 'a b'")
        self.assertEqual(render_command("/tmp/foo.rrun", None), "/tmp/foo.rrun")


class _InterruptedChild:
    """Popen stand-in whose wait() is interrupted by Ctrl-C a few times before the child exits."""

    def __init__(self, interrupts: int, returncode: int) -> None:
        self.interrupts = interrupts
        self.returncode = returncode
        self.wait_calls = 0
        self.killed = False
        self.terminated = False

    def wait(self, timeout=None) -> int:
        self.wait_calls += 1
        if self.wait_calls <= self.interrupts:
            raise KeyboardInterrupt
        return self.returncode

    def kill(self) -> None:
        self.killed = True

    def terminate(self) -> None:
        self.terminated = True


class InterruptedWaitTests(unittest.TestCase):
    def _run_with(self, child: _InterruptedChild, fn) -> bool:
        with mock.patch("rrun.runner.process.subprocess.Popen", return_value=child):
            return fn("cargo", ["run"])

    def test_ctrl_c_keeps_waiting_for_child(self) -> None:
        child = _InterruptedChild(interrupts=1, returncode=0)
        self.assertTrue(self._run_with(child, run))
        self.assertEqual(child.wait_calls, 2)
        self.assertFalse(child.killed)
        self.assertFalse(child.terminated)

    def test_repeated_ctrl_c_still_reports_child_status(self) -> None:
        child = _InterruptedChild(interrupts=3, returncode=130)
        self.assertFalse(self._run_with(child, run))
        self.assertEqual(child.wait_calls, 4)
        self.assertFalse(child.killed)
        self.assertFalse(child.terminated)

    def test_probe_also_waits_through_ctrl_c(self) -> None:
        child = _InterruptedChild(interrupts=2, returncode=0)
        self.assertTrue(self._run_with(child, probe))
        self.assertEqual(child.wait_calls, 3)
        self.assertFalse(child.killed)


if __name__ == "__main__":
    unittest.main()
