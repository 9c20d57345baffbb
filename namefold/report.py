from __future__ import annotations

import json
import os
from enum import Enum
from typing import Iterable, List, Union

from .outcome import Changed, Error, ErrorRename, PathChange, is_error, to_dict

__all__ = ["OutputMode", "display_path", "only_errors", "render", "render_text", "render_json"]


class OutputMode(str, Enum):
    DEFAULT = "default"
    QUIET = "quiet"
    JSON = "json"
    JSON_ONLY_ERROR = "json-only-error"

    @property
    def is_verbose(self) -> bool:
        return self is OutputMode.DEFAULT

    @property
    def is_json(self) -> bool:
        return self in (OutputMode.JSON, OutputMode.JSON_ONLY_ERROR)


def display_path(path: Union[str, os.PathLike]) -> str:
    """Printable form of ``path``; undecodable name bytes become ``\\xNN`` escapes."""
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def only_errors(changes: Iterable[PathChange]) -> List[PathChange]:
    return [change for change in changes if is_error(change)]


def _line(change: PathChange):
    if isinstance(change, Changed):
        return f"{display_path(change.path)} -> {display_path(change.modified)}"
    if isinstance(change, ErrorRename):
        return f"{display_path(change.path)} -> {display_path(change.modified)} : {change.error}"
    if isinstance(change, Error):
        return f"{display_path(change.path)} : {change.error}"
    return None


def render_text(changes: List[PathChange]) -> str:
    lines = [line for line in (_line(change) for change in changes) if line is not None]
    count = len(changes)
    lines.append(f"{count} file checked" if count == 1 else f"{count} files checked")
    return "\n".join(lines)


def render_json(changes: Iterable[PathChange], *, pretty: bool = False) -> str:
    payload = [to_dict(change) for change in changes]
    if pretty:
        return json.dumps(payload, indent=2)
    return json.dumps(payload)


def render(changes: List[PathChange], mode: OutputMode, *, pretty: bool = False) -> str:
    """Render a run for ``mode``; quiet mode renders an empty string."""
    if mode is OutputMode.QUIET:
        return ""
    if mode is OutputMode.JSON:
        return render_json(changes, pretty=pretty)
    if mode is OutputMode.JSON_ONLY_ERROR:
        return render_json(only_errors(changes), pretty=pretty)
    return render_text(changes)
