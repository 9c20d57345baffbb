from __future__ import annotations

import json
import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from prometheus_client import CollectorRegistry, Counter, Histogram, write_to_textfile

from .outcome import ErrorRename, PathChange

__all__ = [
    "REGISTRY",
    "MetricsManager",
    "get_metrics_manager",
    "write_metrics_file",
    "debug_enabled",
    "set_debug",
    "log_event",
]


_logger = logging.getLogger(__name__)
_DEBUG_VALUES = {"1", "true", "yes", "on"}

OUTCOME_KINDS = ("unchanged", "changed", "error_rename", "error")


_DEBUG_FORCED = False


def set_debug(enabled: bool) -> None:
    global _DEBUG_FORCED
    _DEBUG_FORCED = bool(enabled)


def debug_enabled() -> bool:
    if _DEBUG_FORCED:
        return True
    return os.getenv("NAMEFOLD_DEBUG", "").strip().lower() in _DEBUG_VALUES


def log_event(event: str, payload: Dict[str, Any]) -> None:
    if not debug_enabled():
        return
    try:
        _logger.info("%s %s", event, json.dumps(payload, sort_keys=True))
    except (TypeError, ValueError):
        _logger.info("%s %s", event, payload)


REGISTRY = CollectorRegistry()

_outcomes_total = Counter(
    "namefold_outcomes_total",
    "Path outcomes by kind",
    ["kind"],
    registry=REGISTRY,
)
_dry_run_planned_total = Counter(
    "namefold_dry_run_planned_total",
    "Renames planned but not applied (dry-run)",
    registry=REGISTRY,
)
_run_seconds = Histogram(
    "namefold_run_seconds",
    "Wall time of a whole run in seconds",
    buckets=(0.01, 0.05, 0.1, 0.5, 1, 5, 15, 60, 300),
    registry=REGISTRY,
)


class MetricsManager:
    """Feeds the Prometheus collectors and keeps a readable snapshot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state: Dict[str, Any] = {
            "outcomes": {kind: 0 for kind in OUTCOME_KINDS},
            "dry_run_planned": 0,
            "runs": 0,
            "last_run_seconds": None,
        }

    def record(self, change: PathChange) -> None:
        kind = change.kind
        _outcomes_total.labels(kind=kind).inc()
        planned = isinstance(change, ErrorRename) and change.is_dry_run
        if planned:
            _dry_run_planned_total.inc()
        with self._lock:
            outcomes = self._state["outcomes"]
            outcomes[kind] = outcomes.get(kind, 0) + 1
            if planned:
                self._state["dry_run_planned"] += 1

    def observe_run(self, seconds: float) -> None:
        _run_seconds.observe(seconds)
        with self._lock:
            self._state["runs"] += 1
            self._state["last_run_seconds"] = float(seconds)

    def timed_run(self) -> "_RunTimer":
        return _RunTimer(self)

    def get_snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "outcomes": dict(self._state["outcomes"]),
                "dry_run_planned": self._state["dry_run_planned"],
                "runs": self._state["runs"],
                "last_run_seconds": self._state["last_run_seconds"],
            }


class _RunTimer:
    def __init__(self, manager: MetricsManager) -> None:
        self._manager = manager
        self._start = 0.0

    def __enter__(self) -> "_RunTimer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        self._manager.observe_run(time.perf_counter() - self._start)


_MANAGER: Optional[MetricsManager] = None
_MANAGER_LOCK = threading.Lock()


def get_metrics_manager() -> MetricsManager:
    global _MANAGER
    with _MANAGER_LOCK:
        if _MANAGER is None:
            _MANAGER = MetricsManager()
        return _MANAGER


def write_metrics_file(path: Union[str, os.PathLike]) -> Path:
    """Export the registry in Prometheus text format (textfile collector)."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    write_to_textfile(str(target), REGISTRY)
    _logger.info("Metrics written to %s", target)
    return target
