import importlib
import json
from pathlib import Path

import pytest


def reload_config_with(monkeypatch, path: Path):
    monkeypatch.setenv("NAMEFOLD_CONFIG_JSON", str(path))
    import namefold.config as cfg

    return importlib.reload(cfg)


@pytest.fixture(autouse=True)
def restore_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    yield
    import namefold.config as cfg

    for key in ("NAMEFOLD_PARALLEL", "NAMEFOLD_WORKERS", "NAMEFOLD_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NAMEFOLD_CONFIG_JSON", str(tmp_path / "absent-namefold.json"))
    importlib.reload(cfg)


def test_defaults_without_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    cfg = reload_config_with(monkeypatch, tmp_path / "missing.json")
    assert cfg.PARALLEL is True
    assert cfg.WORKERS == 0
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.LOG_FILE == ""
    assert cfg.METRICS_FILE == ""
    assert cfg.DEBUG is False


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NAMEFOLD_PARALLEL", "no")
    monkeypatch.setenv("NAMEFOLD_WORKERS", "8")
    monkeypatch.setenv("NAMEFOLD_LOG_LEVEL", "debug")
    cfg = reload_config_with(monkeypatch, tmp_path / "missing.json")
    assert cfg.PARALLEL is False
    assert cfg.WORKERS == 8
    assert cfg.LOG_LEVEL == "DEBUG"


def test_config_json_valid_minimal(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    p = tmp_path / "namefold.json"
    p.write_text(json.dumps({"parallel": "false", "workers": 2, "debug": True}), encoding="utf-8")
    cfg = reload_config_with(monkeypatch, p)
    assert cfg.PARALLEL is False
    assert cfg.WORKERS == 2
    assert cfg.DEBUG is True


def test_config_json_rejects_unknown_key(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    p = tmp_path / "namefold.json"
    p.write_text(json.dumps({"unknown_key": 123}), encoding="utf-8")
    with pytest.raises(RuntimeError, match="validation"):
        reload_config_with(monkeypatch, p)


def test_config_json_rejects_bad_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    p = tmp_path / "namefold.json"
    p.write_text(json.dumps({"workers": -1}), encoding="utf-8")
    with pytest.raises(RuntimeError, match="validation"):
        reload_config_with(monkeypatch, p)


def test_config_json_parse_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    p = tmp_path / "namefold.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(RuntimeError, match="Failed to parse"):
        reload_config_with(monkeypatch, p)
