from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Sequence

from rrun.config.launcher_config import LauncherConfig
from rrun.core.errors import MissingInputError, ToolInvocationError
from rrun.core.paths import StagingPaths
from rrun.runner.process import CommandRunner, render_command, run
from rrun.selector.run_mode import ProjectRunDefault, ProjectRunNamed, RunMode, SingleFile


def exit_code_for(success: bool) -> int:
    return 0 if success else 1


def _describe_os_error(e: OSError) -> str:
    return e.strerror or str(e)


def stderr_echo(line: str) -> None:
    print(f"[rrun] $ {line}", file=sys.stderr, flush=True)


class Dispatcher:
    """
    Turn a selected run mode into at most one compile/build step and one run step.

    Returns the launched program's success flag; raises `LauncherError`
    subclasses when a step cannot be performed at all.
    """

    def __init__(
        self,
        cfg: LauncherConfig,
        *,
        runner: CommandRunner = run,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._cfg = cfg
        self._runner = runner
        self._echo = echo
        self._staging = StagingPaths.default(cfg.temp_dir)

    def dispatch(self, mode: RunMode, carried_args: Sequence[str] | None) -> bool:
        if isinstance(mode, SingleFile):
            return self.single_file_run(mode.path, carried_args)
        if isinstance(mode, ProjectRunNamed):
            return self.project_run(mode.name, carried_args)
        if isinstance(mode, ProjectRunDefault):
            return self.project_run(None, carried_args)
        raise TypeError(f"unknown run mode: {mode!r}")

    def staged_binary_path(self, source: Path) -> Path:
        return self._staging.binary_path(
            source,
            suffix=self._cfg.binary_suffix,
            unique=self._cfg.unique_binary_names,
        )

    def single_file_run(self, file: str, carried_args: Sequence[str] | None) -> bool:
        source = Path(file)
        if not source.is_file():
            raise MissingInputError(f"'{file}' is not a file")
        binary = str(self.staged_binary_path(source))

        compiler = self._cfg.compiler
        try:
            compiled = self._spawn(compiler, ["-o", binary, file])
        except OSError as e:
            raise ToolInvocationError(f"execute '{compiler}' failed: {_describe_os_error(e)}") from e
        if not compiled:
            return False

        try:
            return self._spawn(binary, list(carried_args) if carried_args else None)
        except OSError as e:
            raise ToolInvocationError(f"execute '{binary}' failed: {_describe_os_error(e)}") from e

    def project_run(self, bin_name: str | None, carried_args: Sequence[str] | None) -> bool:
        build_tool = self._cfg.build_tool
        args = ["run"]
        if bin_name:
            args.extend(["--bin", bin_name])
        if carried_args:
            args.append("--")
            args.extend(carried_args)
        try:
            return self._spawn(build_tool, args)
        except OSError as e:
            raise ToolInvocationError(f"execute '{build_tool} run' failed: {_describe_os_error(e)}") from e

    def _spawn(self, command: str, args: list[str] | None) -> bool:
        if self._echo is not None:
            self._echo(render_command(command, args))
        return bool(self._runner(command, args))
