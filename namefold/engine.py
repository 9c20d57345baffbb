from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Union

from .outcome import DRY_RUN_REASON, Changed, Error, ErrorRename, PathChange, Unchanged
from .sanitizer import sanitize

__all__ = ["clean_path", "os_error_text"]

logger = logging.getLogger(__name__)

_NO_COMPONENT = {b"", b".", b".."}


def _occupied(path: Path, target: Path) -> bool:
    if not os.path.lexists(target):
        return False
    try:
        return not os.path.samefile(path, target)
    except OSError:
        return True


def os_error_text(exc: OSError) -> str:
    return exc.strerror or str(exc)


def clean_path(path: Union[str, os.PathLike], dry_run: bool) -> PathChange:
    """Sanitize the final component of ``path`` and rename it in place.

    With ``dry_run`` the rename is only planned and reported as an
    ``ErrorRename`` carrying ``DRY_RUN_REASON``. Rename failures are returned,
    never raised.
    """
    path = Path(path)
    raw = os.fsencode(path.name)
    if raw in _NO_COMPONENT:
        return Unchanged(path)
    cleaned = sanitize(raw)
    if cleaned.encode("ascii") == raw:
        return Unchanged(path)
    if cleaned.encode("ascii") in _NO_COMPONENT:
        return Error(path, f"sanitized name {cleaned!r} is not a usable file name")
    target = path.with_name(cleaned)
    if dry_run:
        return ErrorRename(path, target, DRY_RUN_REASON)
    if _occupied(path, target):
        return ErrorRename(path, target, os.strerror(errno.EEXIST))
    try:
        os.rename(path, target)
    except OSError as exc:
        logger.warning("Rename failed %s -> %s: %s", path, target, exc)
        return ErrorRename(path, target, os_error_text(exc))
    logger.debug("Renamed %s -> %s", path, target)
    return Changed(path, target)
