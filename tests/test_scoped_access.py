from __future__ import annotations

from pathlib import Path

import pytest

from lce.domain.errors import AccessError
from lce.domain.interfaces import AccessMode
from lce.services.scoped_access import FilesystemAccessProvider, scoped_access


def test_read_grant_requires_existing_file(tmp_path: Path):
    p = tmp_path / "a.txt"
    prov = FilesystemAccessProvider()
    assert prov.start_access(p, AccessMode.READ) is False

    p.write_text("x", encoding="utf-8")
    assert prov.start_access(p, AccessMode.READ) is True
    assert prov.active == [p]
    prov.stop_access(p)
    assert prov.active == []


def test_read_grant_refused_for_directory(tmp_path: Path):
    assert FilesystemAccessProvider().start_access(tmp_path, AccessMode.READ) is False


def test_write_grant_for_new_file_checks_parent(tmp_path: Path):
    prov = FilesystemAccessProvider()
    assert prov.start_access(tmp_path / "new.txt", AccessMode.WRITE) is True
    assert prov.start_access(tmp_path / "nope" / "new.txt", AccessMode.WRITE) is False


def test_nested_grants_are_counted(tmp_path: Path):
    p = tmp_path / "a.txt"
    p.write_text("x", encoding="utf-8")
    prov = FilesystemAccessProvider()
    prov.start_access(p, AccessMode.READ)
    prov.start_access(p, AccessMode.READ)
    prov.stop_access(p)
    assert prov.active == [p]
    prov.stop_access(p)
    assert prov.active == []


def test_scoped_access_releases_on_success(tmp_path: Path, access):
    p = tmp_path / "a.txt"
    p.write_text("x", encoding="utf-8")
    with scoped_access(access, p) as granted:
        assert granted == p
        assert access.active == [p]
    assert access.active == []
    assert access.stopped == [p]


def test_scoped_access_releases_when_block_raises(tmp_path: Path, access):
    p = tmp_path / "a.txt"
    p.write_text("x", encoding="utf-8")
    with pytest.raises(RuntimeError):
        with scoped_access(access, p):
            raise RuntimeError("boom")
    assert access.active == []
    assert access.stopped == [p]


def test_scoped_access_refused_raises_without_release(tmp_path: Path, access):
    p = tmp_path / "a.txt"
    p.write_text("x", encoding="utf-8")
    access.refuse = True
    with pytest.raises(AccessError) as ei:
        with scoped_access(access, p, AccessMode.WRITE):
            pytest.fail("block must not run")
    assert ei.value.path == p
    assert access.started == [(p, AccessMode.WRITE)]
    assert access.stopped == []
