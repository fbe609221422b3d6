from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rrun.runner.process import CommandRunner


@dataclass(frozen=True)
class SingleFile:
    path: str


@dataclass(frozen=True)
class ProjectRunDefault:
    pass


@dataclass(frozen=True)
class ProjectRunNamed:
    name: str


RunMode = Union[SingleFile, ProjectRunDefault, ProjectRunNamed]


def normalize_source_path(name: str, suffix: str) -> str:
    if name.endswith(suffix):
        return name
    return name + suffix


def probe_project_root(probe: CommandRunner, *, vcs_tool: str = "git") -> bool:
    """True when the working directory is inside a version-controlled tree."""
    try:
        return bool(probe(vcs_tool, ["rev-parse", "--show-toplevel"]))
    except OSError:
        # No VCS tool installed: nothing can be a project.
        return False


def select_run_mode(input: str | None, *, in_project: bool, source_suffix: str = ".rs") -> RunMode | None:
    if in_project:
        if input is not None:
            return ProjectRunNamed(name=input)
        return ProjectRunDefault()
    if input is None:
        return None
    return SingleFile(path=normalize_source_path(input, source_suffix))
