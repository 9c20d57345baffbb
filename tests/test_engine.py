import errno
import os
from pathlib import Path

import pytest

from namefold.engine import clean_path
from namefold.outcome import DRY_RUN_REASON, Changed, Error, ErrorRename, Unchanged
from tests.helpers import linux_only


def test_clean_name_is_unchanged(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")
    assert clean_path(target, dry_run=False) == Unchanged(target)
    assert target.exists()


def test_dry_run_plans_without_renaming(tmp_path: Path) -> None:
    target = tmp_path / "café.txt"
    target.write_text("x", encoding="utf-8")

    change = clean_path(target, dry_run=True)

    assert isinstance(change, ErrorRename)
    assert change.error == DRY_RUN_REASON
    assert change.is_dry_run
    assert change.modified == tmp_path / "cafe.txt"
    assert target.exists()
    assert not (tmp_path / "cafe.txt").exists()


def test_rename_applies_in_same_parent(tmp_path: Path) -> None:
    target = tmp_path / "Œuvre complète.md"
    target.write_text("x", encoding="utf-8")

    change = clean_path(str(target), dry_run=False)

    assert change == Changed(target, tmp_path / "OEuvre_complete.md")
    assert not target.exists()
    assert (tmp_path / "OEuvre_complete.md").read_text(encoding="utf-8") == "x"


def test_existing_target_is_not_overwritten(tmp_path: Path) -> None:
    source = tmp_path / "a b.txt"
    taken = tmp_path / "a_b.txt"
    source.write_text("source", encoding="utf-8")
    taken.write_text("taken", encoding="utf-8")

    change = clean_path(source, dry_run=False)

    assert isinstance(change, ErrorRename)
    assert change.error == os.strerror(errno.EEXIST)
    assert taken.read_text(encoding="utf-8") == "taken"
    assert source.exists()


def test_rename_failure_is_reported_not_raised(tmp_path: Path) -> None:
    ghost = tmp_path / "missing dir" / "ghost file"

    change = clean_path(ghost, dry_run=False)

    assert isinstance(change, ErrorRename)
    assert change.modified == tmp_path / "missing dir" / "ghost_file"
    assert change.error
    assert not change.is_dry_run


@pytest.mark.parametrize("raw", [".", "..", "/", ""])
def test_paths_without_final_component_are_unchanged(raw: str) -> None:
    assert isinstance(clean_path(raw, dry_run=False), Unchanged)


def test_name_folding_to_nothing_is_an_error(tmp_path: Path) -> None:
    target = tmp_path / "\u0301"
    change = clean_path(target, dry_run=True)
    assert isinstance(change, Error)
    assert "not a usable file name" in change.error


@linux_only
def test_non_utf8_name_is_renamed(tmp_path: Path) -> None:
    raw_dir = os.fsencode(tmp_path)
    raw_name = os.path.join(raw_dir, b"bad\xffname.txt")
    with open(raw_name, "wb") as fh:
        fh.write(b"x")

    change = clean_path(os.fsdecode(raw_name), dry_run=False)

    assert isinstance(change, Changed)
    assert change.modified.name == "bad_e.txt"
    assert (tmp_path / "bad_e.txt").exists()
