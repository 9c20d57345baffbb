import os
import json
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_KNOWN_KEYS = {"parallel", "workers", "log_level", "log_file", "metrics_file", "debug"}


def _coerce_bool(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_workers(value):
    workers = int(value)
    if workers < 0:
        raise ValueError("workers must be >= 0")
    return workers


# Traversal
PARALLEL = _coerce_bool(os.getenv("NAMEFOLD_PARALLEL", "true"))
WORKERS = _coerce_workers(os.getenv("NAMEFOLD_WORKERS", "0"))  # 0 = executor default

# Logging
LOG_LEVEL = os.getenv("NAMEFOLD_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("NAMEFOLD_LOG_FILE", "")
DEBUG = _coerce_bool(os.getenv("NAMEFOLD_DEBUG", "false"))

# Prometheus textfile export (empty = off)
METRICS_FILE = os.getenv("NAMEFOLD_METRICS_FILE", "")

CONFIG_JSON_PATH = Path(os.getenv("NAMEFOLD_CONFIG_JSON", "namefold.json"))

if CONFIG_JSON_PATH.exists():
    try:
        _json_config = json.loads(CONFIG_JSON_PATH.read_text(encoding="utf-8"))
    except Exception as exc:
        raise RuntimeError(f"Failed to parse {CONFIG_JSON_PATH}: {exc}") from exc

    if not isinstance(_json_config, dict):
        raise RuntimeError(f"config validation failed: {CONFIG_JSON_PATH} must hold an object")
    _unknown = sorted(set(_json_config) - _KNOWN_KEYS)
    if _unknown:
        raise RuntimeError(f"config validation failed: unknown keys {', '.join(_unknown)}")

    try:
        if 'parallel' in _json_config:
            PARALLEL = _coerce_bool(_json_config['parallel'])
        if 'workers' in _json_config:
            WORKERS = _coerce_workers(_json_config['workers'])
        if 'log_level' in _json_config:
            LOG_LEVEL = str(_json_config['log_level']).upper()
        if 'log_file' in _json_config:
            LOG_FILE = str(_json_config['log_file'] or "")
        if 'metrics_file' in _json_config:
            METRICS_FILE = str(_json_config['metrics_file'] or "")
        if 'debug' in _json_config:
            DEBUG = _coerce_bool(_json_config['debug'])
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config validation failed: {exc}") from exc

    del _json_config
