from __future__ import annotations

import hashlib
import tempfile
from dataclasses import dataclass
from pathlib import Path


def _source_digest(source: Path) -> str:
    return hashlib.sha256(str(source.resolve()).encode("utf-8")).hexdigest()[:12]


@dataclass(frozen=True)
class StagingPaths:
    temp_root: Path

    @staticmethod
    def default(temp_dir: str | None = None) -> "StagingPaths":
        # Resolved so the staged binary is never looked up on PATH.
        root = Path(temp_dir) if temp_dir else Path(tempfile.gettempdir())
        return StagingPaths(temp_root=root.resolve())

    def binary_path(self, source: Path, *, suffix: str, unique: bool = True) -> Path:
        """
        Where the compiled form of `source` is staged.

        With `unique`, the name carries a digest of the resolved source path so
        same-named files in different directories do not overwrite each other.
        """
        stem = source.stem
        if unique:
            return self.temp_root / f"{stem}-{_source_digest(source)}{suffix}"
        return self.temp_root / f"{stem}{suffix}"
