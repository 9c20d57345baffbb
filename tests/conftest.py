import logging
import os
from pathlib import Path
from typing import Dict

import pytest

from namefold import metrics
from tests.helpers import build_tree


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def isolate_namefold_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    # keep a developer's namefold.json / NAMEFOLD_* settings out of the tests
    for key in list(os.environ):
        if key.startswith("NAMEFOLD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NAMEFOLD_CONFIG_JSON", str(tmp_path / "absent-namefold.json"))

    logger = logging.getLogger("namefold")
    prev_level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(prev_level)
    metrics.set_debug(False)


@pytest.fixture
def make_tree(tmp_path: Path):
    def _make(layout: Dict[str, object], name: str = "root") -> Path:
        root = tmp_path / name
        build_tree(root, layout)
        return root

    return _make
