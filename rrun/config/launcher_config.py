from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Mapping


_KNOWN_KEYS = {
    "vcs_tool",
    "compiler",
    "build_tool",
    "source_suffix",
    "binary_suffix",
    "temp_dir",
    "unique_binary_names",
}

# Same override variables cargo itself honors.
_ENV_OVERRIDES = {"RUSTC": "compiler", "CARGO": "build_tool"}


@dataclass(frozen=True)
class LauncherConfig:
    vcs_tool: str
    compiler: str
    build_tool: str
    source_suffix: str
    binary_suffix: str
    temp_dir: str | None = None
    unique_binary_names: bool = True

    @staticmethod
    def default() -> "LauncherConfig":
        return LauncherConfig(
            vcs_tool="git",
            compiler="rustc",
            build_tool="cargo",
            source_suffix=".rs",
            binary_suffix=".rrun",
        )

    def to_json_obj(self) -> dict[str, Any]:
        return asdict(self)

    def merged(self, obj: Mapping[str, Any]) -> "LauncherConfig":
        problems = validate_config_obj(obj)
        if problems:
            raise ValueError("Invalid rrun config:\n" + "\n".join(problems))
        return replace(self, **dict(obj))


def validate_config_obj(obj: Any) -> list[str]:
    if not isinstance(obj, Mapping):
        return ["config must be a JSON object"]
    problems: list[str] = []
    for k in sorted(set(obj) - _KNOWN_KEYS):
        problems.append(f"unknown key: {k}")
    for k in ("vcs_tool", "compiler", "build_tool"):
        if k in obj and (not isinstance(obj[k], str) or not obj[k].strip()):
            problems.append(f"{k} must be a non-empty string")
    for k in ("source_suffix", "binary_suffix"):
        if k in obj:
            v = obj[k]
            if not isinstance(v, str) or len(v) < 2 or not v.startswith("."):
                problems.append(f"{k} must be a string like '.ext'")
    if "temp_dir" in obj and obj["temp_dir"] is not None and not isinstance(obj["temp_dir"], str):
        problems.append("temp_dir must be a string or null")
    if "unique_binary_names" in obj and not isinstance(obj["unique_binary_names"], bool):
        problems.append("unique_binary_names must be a boolean")
    return problems


def default_config_path(env: Mapping[str, str]) -> Path:
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path(env.get("HOME") or Path.home()) / ".config"
    return base / "rrun" / "config.json"


def load_launcher_config(env: Mapping[str, str] | None = None) -> LauncherConfig:
    """
    Resolve the effective config: defaults, then the JSON file, then env overrides.

    `$RRUN_CONFIG` names the file explicitly and must exist; the per-user default
    location is optional.
    """
    env = os.environ if env is None else env
    cfg = LauncherConfig.default()

    explicit = env.get("RRUN_CONFIG")
    path = Path(explicit) if explicit else default_config_path(env)
    if path.exists():
        try:
            obj = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ValueError(f"could not read rrun config {path}: {e}") from e
        cfg = cfg.merged(obj)
    elif explicit:
        raise ValueError(f"rrun config not found: {path}")

    overrides = {field: env[var] for var, field in _ENV_OVERRIDES.items() if env.get(var)}
    if overrides:
        cfg = cfg.merged(overrides)
    return cfg
