from __future__ import annotations

import sys

from rrun.config.launcher_config import load_launcher_config
from rrun.core.errors import LauncherError, NothingToRunError
from rrun.core.invocation import parse_invocation
from rrun.dispatch.dispatcher import Dispatcher, exit_code_for, stderr_echo
from rrun.runner.process import probe, run
from rrun.selector.run_mode import probe_project_root, select_run_mode


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    inv, opts = parse_invocation(argv)

    try:
        cfg = load_launcher_config()
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    in_project = probe_project_root(probe, vcs_tool=cfg.vcs_tool)
    mode = select_run_mode(inv.input, in_project=in_project, source_suffix=cfg.source_suffix)

    dispatcher = Dispatcher(cfg, runner=run, echo=stderr_echo if opts.verbose else None)
    try:
        if mode is None:
            raise NothingToRunError("nothing to run")
        success = dispatcher.dispatch(mode, inv.carried_args)
    except LauncherError as e:
        print(str(e), file=sys.stderr)
        return 2
    return exit_code_for(success)


if __name__ == "__main__":
    raise SystemExit(main())
