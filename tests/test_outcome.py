import json
from pathlib import Path

import pytest

from namefold.outcome import (
    DRY_RUN_REASON,
    Changed,
    Error,
    ErrorRename,
    Unchanged,
    from_dict,
    is_error,
    to_dict,
)


def test_serialized_layout_per_variant():
    assert to_dict(Unchanged(Path("a"))) == {"path": "a", "modified": None, "error": None}
    assert to_dict(Changed(Path("a b"), Path("a_b"))) == {"path": "a b", "modified": "a_b", "error": None}
    assert to_dict(ErrorRename(Path("a b"), Path("a_b"), DRY_RUN_REASON)) == {
        "path": "a b",
        "modified": "a_b",
        "error": "dry-run",
    }
    assert to_dict(Error(Path("d"), "Error while reading directory: Permission denied")) == {
        "path": "d",
        "modified": None,
        "error": "Error while reading directory: Permission denied",
    }


def test_json_payload_reads_back_into_same_variants():
    changes = [
        Unchanged(Path("x/keep.txt")),
        Changed(Path("x/é.txt"), Path("x/e.txt")),
        ErrorRename(Path("x/b c"), Path("x/b_c"), "Permission denied"),
        Error(Path("x/locked"), "Error while reading directory: Permission denied"),
    ]
    payload = json.loads(json.dumps([to_dict(c) for c in changes]))
    assert [from_dict(item) for item in payload] == changes


def test_from_dict_requires_path():
    with pytest.raises(ValueError):
        from_dict({"modified": "x", "error": None})


def test_error_classification():
    assert not is_error(Unchanged(Path("a")))
    assert not is_error(Changed(Path("a"), Path("b")))
    assert is_error(ErrorRename(Path("a"), Path("b"), DRY_RUN_REASON))
    assert is_error(Error(Path("a"), "boom"))
    assert ErrorRename(Path("a"), Path("b"), DRY_RUN_REASON).is_dry_run
    assert not ErrorRename(Path("a"), Path("b"), "File exists").is_dry_run


def test_kind_labels():
    assert [cls.kind for cls in (Unchanged, Changed, ErrorRename, Error)] == [
        "unchanged",
        "changed",
        "error_rename",
        "error",
    ]
