from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .metrics import get_metrics_manager, log_event
from .outcome import PathChange, is_error, to_dict
from .report import OutputMode, display_path, render
from .walker import walk_many

__all__ = ["FoldOptions", "NameFolder", "dedupe_paths", "run"]

logger = logging.getLogger(__name__)

PathArg = Union[str, os.PathLike]


@dataclass
class FoldOptions:
    dry_run: bool = True
    output: OutputMode = OutputMode.DEFAULT
    pretty: bool = False
    parallel: bool = False
    workers: Optional[int] = None

    @property
    def is_verbose(self) -> bool:
        return self.output.is_verbose

    def __str__(self) -> str:
        # output settings are not interesting in the verbose banner
        return f"dry_run={self.dry_run}"


def dedupe_paths(paths: Iterable[PathArg]) -> List[Path]:
    seen = set()
    unique: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path in seen:
            continue
        seen.add(path)
        unique.append(path)
    return unique


class NameFolder:
    """Runs the sanitizer over a set of roots and reports the outcomes."""

    def __init__(self, options: FoldOptions) -> None:
        self.options = options
        self._metrics = get_metrics_manager()

    def run(self, paths: Iterable[PathArg]) -> List[PathChange]:
        roots = dedupe_paths(paths)
        if self.options.is_verbose:
            print(f"Running with options: {self.options}")
            for root in roots:
                print(f"Checking: {display_path(root)}")
        with self._metrics.timed_run():
            changes = walk_many(
                roots,
                self.options.dry_run,
                parallel=self.options.parallel,
                workers=self.options.workers,
            )
        for change in changes:
            self._metrics.record(change)
            log_event("NAMEFOLD_OUTCOME", {"kind": change.kind, **to_dict(change)})
        errors = sum(1 for change in changes if is_error(change))
        logger.info(
            "Checked %d paths under %d roots (%d flagged, dry_run=%s)",
            len(changes),
            len(roots),
            errors,
            self.options.dry_run,
        )
        return changes

    def run_and_print(self, paths: Iterable[PathArg]) -> int:
        changes = self.run(paths)
        try:
            text = render(changes, self.options.output, pretty=self.options.pretty)
        except (TypeError, ValueError) as exc:
            logger.error("Cannot serialize result: %s", exc)
            print('{"error": "Cannot serialize result"}')
            return 2
        if text:
            print(text)
        return 0


def run(
    paths: Iterable[PathArg],
    dry_run: bool = True,
    *,
    parallel: bool = False,
    workers: Optional[int] = None,
) -> List[PathChange]:
    """Library entry point: clean ``paths`` silently and return the outcomes."""
    options = FoldOptions(
        dry_run=dry_run,
        output=OutputMode.QUIET,
        parallel=parallel,
        workers=workers,
    )
    return NameFolder(options).run(paths)
