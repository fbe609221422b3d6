from __future__ import annotations

import shlex
import subprocess
from typing import Callable, Optional, Sequence

# (command, args) -> success; raises OSError when the program cannot be spawned.
CommandRunner = Callable[[str, Optional[Sequence[str]]], bool]


def _wait(proc: subprocess.Popen) -> int:
    # Ctrl-C reaches the whole foreground process group; let the child decide
    # how to exit and report its status instead of killing it.
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def run(command: str, args: Sequence[str] | None = None) -> bool:
    """Spawn `command` with inherited stdin/stdout/stderr and wait for it to finish."""
    argv = [command, *(args or [])]
    proc = subprocess.Popen(argv)
    return _wait(proc) == 0


def probe(command: str, args: Sequence[str] | None = None) -> bool:
    argv = [command, *(args or [])]
    proc = subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    return _wait(proc) == 0


def render_command(command: str, args: Sequence[str] | None = None) -> str:
    return " ".join(shlex.quote(x) for x in [command, *(args or [])])
