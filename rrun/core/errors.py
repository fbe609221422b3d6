from __future__ import annotations


class LauncherError(RuntimeError):
    """Operational failure: the requested compile/build/run could not be performed."""


class MissingInputError(LauncherError):
    pass


class ToolInvocationError(LauncherError):
    pass


class NothingToRunError(LauncherError):
    pass
