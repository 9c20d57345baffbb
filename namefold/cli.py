from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .report import OutputMode

logger = logging.getLogger("namefold")

_JSON = "json"
_JSON_PRETTY = "json-pretty"
_JSON_ERROR = "json-error"
_QUIET = "quiet"


def _configure_logging(level: str, log_file: str = "") -> None:
    if logger.handlers:
        return
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    logger.addHandler(stream)
    if log_file:
        try:
            fh = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot open log file %s: %s", log_file, exc)
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)


def resolve_output(flags: Optional[Sequence[str]]) -> Tuple[OutputMode, bool]:
    """Fold output flags in command line order into ``(mode, pretty)``."""
    mode = OutputMode.DEFAULT
    pretty = False
    for flag in flags or ():
        if flag == _QUIET:
            mode, pretty = OutputMode.QUIET, False
        elif flag == _JSON:
            mode = OutputMode.JSON
        elif flag == _JSON_ERROR:
            mode = OutputMode.JSON_ONLY_ERROR
        elif flag == _JSON_PRETTY:
            if not mode.is_json:
                mode = OutputMode.JSON
            pretty = True
    return mode, pretty


def _list_dir(path: Path) -> List[Path]:
    try:
        with os.scandir(path) as it:
            return [Path(entry.path) for entry in it]
    except OSError as exc:
        logger.warning("Cannot list %s: %s", path, exc)
        return []


def collect_paths(args: Sequence[str]) -> List[Path]:
    paths: List[Path] = []
    for arg in args:
        if arg == "*":
            # a literal star reaches us only when the shell did not glob it
            paths.extend(_list_dir(Path(".")))
        elif os.path.lexists(arg):
            paths.append(Path(arg))
        else:
            logger.warning("Cannot find path: %s", arg)
    if not paths:
        paths = _list_dir(Path("."))
    return paths


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="namefold",
        description="Rewrite file and directory names to a safe ASCII subset (dry-run by default)",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to clean (default: entries of .)")
    parser.add_argument("-d", "--do", dest="do_rename", action="store_true", help="Do the renaming")
    parser.add_argument("-v", "--version", action="version", version=f"namefold {__version__}")
    parser.add_argument(
        "-j", "--json", dest="output_flags", action="append_const", const=_JSON,
        help="Print the result in JSON format",
    )
    parser.add_argument(
        "-p", "--json-pretty", dest="output_flags", action="append_const", const=_JSON_PRETTY,
        help="Print the result in JSON format (pretty)",
    )
    parser.add_argument(
        "-e", "--json-error", dest="output_flags", action="append_const", const=_JSON_ERROR,
        help="Print only the errors in JSON format",
    )
    parser.add_argument(
        "-q", "--quiet", dest="output_flags", action="append_const", const=_QUIET,
        help="Do not print anything",
    )
    parser.add_argument("--serial", action="store_true", help="Walk directories on a single thread")
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size for parallel walks")
    parser.add_argument("--log-level", default=None, help="Logging level (default: NAMEFOLD_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="Also log to this rotating file")
    parser.add_argument("--metrics-file", default=None, help="Write Prometheus metrics to this file after the run")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        from . import config
    except (RuntimeError, ValueError) as exc:
        print(f"namefold: {exc}", file=sys.stderr)
        return 2

    _configure_logging(args.log_level or config.LOG_LEVEL, args.log_file or config.LOG_FILE)

    from .metrics import set_debug, write_metrics_file
    from .runner import FoldOptions, NameFolder

    if config.DEBUG:
        set_debug(True)
    mode, pretty = resolve_output(args.output_flags)
    workers = args.workers if args.workers is not None else (config.WORKERS or None)
    if workers is not None and workers < 1:
        print("namefold: --workers must be >= 1", file=sys.stderr)
        return 2
    options = FoldOptions(
        dry_run=not args.do_rename,
        output=mode,
        pretty=pretty,
        parallel=config.PARALLEL and not args.serial,
        workers=workers,
    )
    code = NameFolder(options).run_and_print(collect_paths(args.paths))

    metrics_file = args.metrics_file or config.METRICS_FILE
    if metrics_file:
        try:
            write_metrics_file(metrics_file)
        except OSError as exc:
            logger.warning("Cannot write metrics to %s: %s", metrics_file, exc)
    return code


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
