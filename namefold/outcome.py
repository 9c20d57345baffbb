from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

__all__ = [
    "DRY_RUN_REASON",
    "PathChange",
    "Unchanged",
    "Changed",
    "ErrorRename",
    "Error",
    "to_dict",
    "from_dict",
    "is_error",
]


DRY_RUN_REASON = "dry-run"


@dataclass(frozen=True)
class Unchanged:
    path: Path

    kind = "unchanged"


@dataclass(frozen=True)
class Changed:
    path: Path
    modified: Path

    kind = "changed"


@dataclass(frozen=True)
class ErrorRename:
    """A wanted rename that was not applied; ``error`` is ``dry-run`` for previews."""

    path: Path
    modified: Path
    error: str

    kind = "error_rename"

    @property
    def is_dry_run(self) -> bool:
        return self.error == DRY_RUN_REASON


@dataclass(frozen=True)
class Error:
    path: Path
    error: str

    kind = "error"


PathChange = Union[Unchanged, Changed, ErrorRename, Error]


def is_error(change: PathChange) -> bool:
    return isinstance(change, (Error, ErrorRename))


def _fspath(value: Optional[Path]) -> Optional[str]:
    return None if value is None else os.fspath(value)


def to_dict(change: PathChange) -> Dict[str, Optional[str]]:
    """Serialize to the flat ``path``/``modified``/``error`` layout."""
    return {
        "path": _fspath(change.path),
        "modified": _fspath(getattr(change, "modified", None)),
        "error": getattr(change, "error", None),
    }


def from_dict(data: Dict[str, Any]) -> PathChange:
    if "path" not in data or data["path"] is None:
        raise ValueError("outcome is missing 'path'")
    path = Path(data["path"])
    modified = data.get("modified")
    error = data.get("error")
    if modified is None and error is None:
        return Unchanged(path)
    if error is None:
        return Changed(path, Path(modified))
    if modified is None:
        return Error(path, str(error))
    return ErrorRename(path, Path(modified), str(error))
