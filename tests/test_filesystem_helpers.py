from pathlib import Path

import pytest

from rnscaffold.util import filesystem, unsafe_name_reason, write_text_file


def test_cleanup_failure_keeps_original_write_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_replace(src, dst):
        raise PermissionError("replace failed")

    def failing_unlink(path):
        raise PermissionError("unlink failed")

    monkeypatch.setattr(filesystem.os, "replace", failing_replace)
    monkeypatch.setattr(filesystem.os, "unlink", failing_unlink)

    with pytest.raises(PermissionError, match="replace failed"):
        write_text_file(tmp_path / "x.tsx", "content")


def test_missing_parent_is_not_created(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write_text_file(tmp_path / "missing" / "x.tsx", "content")

    assert not (tmp_path / "missing").exists()


@pytest.mark.parametrize(
    ("name", "ok"),
    [("header", True), ("about-content", True), ("", False), (".", False), ("..", False), ("a/b", False), ("a\\b", False)],
)
def test_unsafe_name_reason(name: str, ok: bool) -> None:
    assert (unsafe_name_reason(name) is None) is ok
