"""Tests for single-writer access to project data documents."""

import os
from pathlib import Path

import pytest

from kumi.core.errors import ProjectLockedError
from kumi.core.project_data import ProjectData


class TestDocuments:
    """Test reading and writing the data documents."""

    def test_save_section_merges(self, tmp_path: Path, read_json) -> None:
        """Test saving a section keeps the others and replaces its own entry."""
        data = ProjectData(tmp_path)
        data.save_section("faq-base", {"faq_html": "old"})
        data.save_section("hero-standard", {"hero": {"title": "Hi"}})

        sections = data.save_section("faq-base", {"faq_html": "new"})

        assert sections == {
            "faq-base": {"faq_html": "new"},
            "hero-standard": {"hero": {"title": "Hi"}},
        }
        assert read_json(data.sections_path) == sections

    def test_corrupt_sections_recovered(self, tmp_path: Path, read_json) -> None:
        """Test a corrupt sections.json is backed up and replaced."""
        data = ProjectData(tmp_path)
        data.data_dir.mkdir()
        data.sections_path.write_text("{ broken", encoding="utf-8")

        data.save_section("contact-base", {"title": "Hi"})

        assert read_json(data.sections_path) == {"contact-base": {"title": "Hi"}}
        assert len(list(data.data_dir.glob("sections.json.corrupt.*"))) == 1

    def test_non_object_sections_start_empty(self, tmp_path: Path, read_json) -> None:
        """Test a valid non-object document is backed up once and reset."""
        data = ProjectData(tmp_path)
        data.data_dir.mkdir()
        data.sections_path.write_text("[1, 2]", encoding="utf-8")

        assert data.load_sections() == {}

        backups = list(data.data_dir.glob("sections.json.corrupt.*"))
        assert len(backups) == 1
        assert backups[0].read_text(encoding="utf-8") == "[1, 2]"
        assert read_json(data.sections_path) == {}

    def test_save_section_over_non_object_keeps_backup(self, tmp_path: Path, read_json) -> None:
        """Test saving over a non-object document preserves the old content."""
        data = ProjectData(tmp_path)
        data.data_dir.mkdir()
        data.sections_path.write_text('["user", "content"]', encoding="utf-8")

        data.save_section("faq-base", {"faq_html": "x"})

        backups = list(data.data_dir.glob("sections.json.corrupt.*"))
        assert len(backups) == 1
        assert read_json(backups[0]) == ["user", "content"]
        assert read_json(data.sections_path) == {"faq-base": {"faq_html": "x"}}

    def test_save_config(self, tmp_path: Path, read_json) -> None:
        data = ProjectData(tmp_path)

        data.save_config("Acme", "Acme site", "a@acme.test")

        assert read_json(data.config_path) == {
            "site": {"title": "Acme", "description": "Acme site", "contact_email": "a@acme.test"}
        }

    def test_save_layout_keeps_duplicates(self, tmp_path: Path, read_json) -> None:
        data = ProjectData(tmp_path)

        data.save_layout(["hero-standard", "faq-base", "hero-standard"])

        assert read_json(data.layout_path) == {
            "sections": ["hero-standard", "faq-base", "hero-standard"]
        }


class TestLocking:
    """Test the project lock."""

    def test_lock_created_and_released(self, tmp_path: Path) -> None:
        with ProjectData(tmp_path) as data:
            assert data.lock_path.read_text() == str(os.getpid())

        assert not data.lock_path.exists()

    def test_second_owner_is_rejected(self, tmp_path: Path) -> None:
        """Test a live lock holder blocks another wizard."""
        with ProjectData(tmp_path):
            with pytest.raises(ProjectLockedError):
                ProjectData(tmp_path).acquire()

    def test_stale_lock_is_taken_over(self, tmp_path: Path) -> None:
        """Test a lock without a valid owner pid is replaced."""
        data = ProjectData(tmp_path)
        data.data_dir.mkdir()
        data.lock_path.write_text("not-a-pid")

        with data:
            assert data.lock_path.read_text() == str(os.getpid())

    def test_lock_released_on_error(self, tmp_path: Path) -> None:
        data = ProjectData(tmp_path)

        with pytest.raises(RuntimeError):
            with data:
                raise RuntimeError("boom")

        assert not data.lock_path.exists()
