"""Shared fixtures for pugview unit tests."""

from pathlib import Path

import pytest


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small site directory with templates and an asset."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.pug").write_text("h1= title\n")
    (root / "header.pug").write_text("h2 Header\n")
    (root / "page.pug").write_text("include header.pug\np Body\n")
    (root / "app.js").write_bytes(b"console.log('hi');\n")
    return root
