"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from content_adapters.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary directory with no app views folder."""
    return Settings(
        themes_dir=tmp_path / "themes",
        extensions_dir=tmp_path / "extensions",
        views_dir=None,
        xml_root=None,
    )


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Directory holding example templates."""
    directory = tmp_path / "examples"
    directory.mkdir()
    (directory / "example.html").write_text("<p>Hello {{ name }}</p>", encoding="utf-8")
    (directory / "error.html").write_text(
        "<h1>{{ pagedata.title }}</h1><p>{{ pagedata.error }}</p><span>{{ url }}</span>",
        encoding="utf-8",
    )
    (directory / "page.html").write_text('{% include "partial.html" %} for {{ name }}', encoding="utf-8")
    (directory / "partial.html").write_text("Included", encoding="utf-8")
    (directory / "example.tmpl").write_text("Hello $name", encoding="utf-8")
    return directory


@pytest.fixture
def other_views_dir(tmp_path: Path) -> Path:
    """A second template directory with lower priority."""
    directory = tmp_path / "adapters"
    directory.mkdir()
    (directory / "example.html").write_text("<p>Fallback {{ name }}</p>", encoding="utf-8")
    return directory


@pytest.fixture
def template_data() -> dict:
    """Data handed to templates."""
    return {"name": "OG Bobby Johnson"}
