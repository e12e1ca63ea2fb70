"""Tests for routing module discovery and reading - real files only."""

from pathlib import Path

import pytest

from urlindex.discovery import find_urls_files, read_source, should_skip_dir
from urlindex.types.errors import ErrorCode, FileReadError, ResourceError


class TestFindUrlsFiles:
    """Walking a project tree."""

    def test_finds_routing_modules(self, django_project: Path):
        found = find_urls_files(django_project)
        relative = [str(Path(p).relative_to(django_project.resolve())) for p in found]
        assert sorted(relative) == sorted(
            [str(Path("blog/urls.py")), str(Path("mysite/urls.py")), str(Path("shop/urls.py"))]
        )

    def test_results_are_absolute_and_sorted(self, django_project: Path):
        found = find_urls_files(django_project)
        assert all(Path(p).is_absolute() for p in found)
        assert found == sorted(found)

    def test_ignored_directories_pruned(self, django_project: Path):
        assert not any("node_modules" in p for p in find_urls_files(django_project))

    def test_hidden_directories_pruned(self, django_project: Path):
        hidden = django_project / ".cache" / "urls.py"
        hidden.parent.mkdir()
        hidden.write_text("path('x/', v)")
        assert str(hidden.resolve()) not in find_urls_files(django_project)

    def test_custom_ignore_list(self, django_project: Path):
        found = find_urls_files(django_project, ignore_dirs=["blog"])
        assert not any(Path(p).parent.name == "blog" for p in found)
        assert any("node_modules" in p for p in found)

    def test_custom_file_name(self, django_project: Path):
        found = find_urls_files(django_project, file_name="views.py")
        assert [Path(p).parent.name for p in found] == ["blog"]

    def test_exact_name_only(self, tmp_path: Path):
        (tmp_path / "old_urls.py").write_text("path('a/', v)")
        (tmp_path / "urls.pyc").write_bytes(b"\x00")
        assert find_urls_files(tmp_path) == []

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(ResourceError) as exc_info:
            find_urls_files(tmp_path / "missing")
        assert exc_info.value.code == ErrorCode.DIRECTORY_NOT_FOUND


class TestShouldSkipDir:
    """Directory pruning rule."""

    def test_default_ignored(self):
        assert should_skip_dir("__pycache__")
        assert should_skip_dir(".git")

    def test_hidden(self):
        assert should_skip_dir(".idea")

    def test_regular(self):
        assert not should_skip_dir("blog")


class TestReadSource:
    """Reading a routing module."""

    def test_reads_utf8(self, tmp_path: Path):
        target = tmp_path / "urls.py"
        target.write_text("path('café/', v, name='café')", encoding="utf-8")
        assert "café" in read_source(str(target))

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_source(str(tmp_path / "urls.py"))

    def test_invalid_utf8(self, tmp_path: Path):
        target = tmp_path / "urls.py"
        target.write_bytes(b"path('\xff/', v)")
        with pytest.raises(UnicodeDecodeError):
            read_source(str(target))

    def test_oversized_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr("urlindex.discovery.MAX_FILE_SIZE", 10)
        target = tmp_path / "urls.py"
        target.write_text("path('a/', view, name='a')")
        with pytest.raises(FileReadError) as exc_info:
            read_source(str(target))
        assert exc_info.value.code == ErrorCode.FILE_TOO_LARGE
        assert exc_info.value.file_path == str(target)
