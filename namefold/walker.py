"""Recursive rename of a directory tree.

A directory is renamed before its entries are listed, so everything below a
renamed directory is reported under the new name. Sequential walks are
depth-first in native listing order. Parallel walks schedule every
sub-directory as its own pool task; no task waits on another, and the
merged result is complete but unordered.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from .engine import clean_path, os_error_text
from .outcome import Changed, Error, PathChange

__all__ = ["walk", "walk_many", "scan_directory"]

logger = logging.getLogger(__name__)

PathArg = Union[str, os.PathLike]
Entry = Tuple[Path, bool]


def _is_real_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _is_root_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def scan_directory(path: Path) -> Tuple[Optional[List[Entry]], Optional[Error]]:
    """List ``path`` as ``(child, is_directory)`` pairs, or an ``Error`` outcome."""
    try:
        with os.scandir(path) as it:
            entries = [(Path(entry.path), _is_real_dir(entry)) for entry in it]
    except OSError as exc:
        logger.warning("Cannot read directory %s: %s", path, exc)
        return None, Error(path, f"Error while reading directory: {os_error_text(exc)}")
    return entries, None


def _rename_self(path: Path, dry_run: bool, out: List[PathChange]) -> Path:
    change = clean_path(path, dry_run)
    out.append(change)
    if isinstance(change, Changed):
        return change.modified
    return path


def _walk_serial(path: Path, dry_run: bool, out: List[PathChange]) -> None:
    current = _rename_self(path, dry_run, out)
    entries, error = scan_directory(current)
    if error is not None:
        out.append(error)
        return
    for child, is_dir in entries:
        if is_dir:
            _walk_serial(child, dry_run, out)
        else:
            out.append(clean_path(child, dry_run))


class _ParallelWalk:
    """Fan out one task per directory on a shared pool."""

    def __init__(self, dry_run: bool, executor: ThreadPoolExecutor) -> None:
        self.dry_run = dry_run
        self._executor = executor
        self._lock = threading.Lock()
        self._results: List[PathChange] = []

    def _collect(self, changes: List[PathChange]) -> None:
        with self._lock:
            self._results.extend(changes)

    def _visit_file(self, path: Path) -> List[Path]:
        self._collect([clean_path(path, self.dry_run)])
        return []

    def _visit_dir(self, path: Path) -> List[Path]:
        local: List[PathChange] = []
        current = _rename_self(path, self.dry_run, local)
        entries, error = scan_directory(current)
        subdirs: List[Path] = []
        if error is not None:
            local.append(error)
        else:
            for child, is_dir in entries:
                if is_dir:
                    subdirs.append(child)
                else:
                    local.append(clean_path(child, self.dry_run))
        self._collect(local)
        return subdirs

    def run(self, roots: Sequence[Entry]) -> List[PathChange]:
        pending: Set[Future] = set()
        for root, is_dir in roots:
            visit = self._visit_dir if is_dir else self._visit_file
            pending.add(self._executor.submit(visit, root))
        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                for subdir in future.result():
                    pending.add(self._executor.submit(self._visit_dir, subdir))
        with self._lock:
            return list(self._results)


def walk_many(
    roots: Iterable[PathArg],
    dry_run: bool,
    *,
    parallel: bool = False,
    workers: Optional[int] = None,
) -> List[PathChange]:
    """Clean every root: directories recursively, anything else by name only."""
    typed = [(Path(root), _is_root_dir(Path(root))) for root in roots]
    if not parallel:
        out: List[PathChange] = []
        for root, is_dir in typed:
            if is_dir:
                _walk_serial(root, dry_run, out)
            else:
                out.append(clean_path(root, dry_run))
        return out
    with ThreadPoolExecutor(max_workers=workers or None, thread_name_prefix="namefold") as executor:
        return _ParallelWalk(dry_run, executor).run(typed)


def walk(
    root: PathArg,
    dry_run: bool,
    *,
    parallel: bool = False,
    workers: Optional[int] = None,
) -> List[PathChange]:
    return walk_many([root], dry_run, parallel=parallel, workers=workers)
