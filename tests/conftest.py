"""
Pytest configuration and fixtures for vault-weaver tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def temp_vault(tmp_path: Path):
    """Create a temporary vault with test notes.

    Scan order (name-sorted, depth-first):
    Concepts/JavaScript.md, Concepts/Python.md, Projects/Alpha.md,
    References/Docker.md, plain.md. broken.md and .obsidian/ are skipped.
    """
    vault_path = tmp_path / "vault"
    vault_path.mkdir()

    (vault_path / "Concepts").mkdir()
    (vault_path / "Projects").mkdir()
    (vault_path / "References").mkdir()
    (vault_path / ".obsidian").mkdir()

    # Note 1: frontmatter title, links back to JavaScript
    (vault_path / "Concepts" / "Python.md").write_text("""---
title: Python
tags:
  - programming
---
# Python

Python is a #programming language. See also [[JavaScript]].
""", encoding="utf-8")

    # Note 2: no frontmatter, title comes from the filename
    (vault_path / "Concepts" / "JavaScript.md").write_text("""# JavaScript

JavaScript links to [[Python]] and [[Docker Reference]]. #programming #web
""", encoding="utf-8")

    # Note 3: aliased link and hierarchical tag
    (vault_path / "Projects" / "Alpha.md").write_text("""---
status: active
---
Alpha uses [[Python|the Python language]] daily. #project/alpha
""", encoding="utf-8")

    # Note 4: title differs from filename, link by path and to a missing note
    (vault_path / "References" / "Docker.md").write_text("""---
title: Docker Reference
---
Docker relates to [[Kubernetes]] and [[Concepts/JavaScript]].
""", encoding="utf-8")

    # Note 5: plain markdown
    (vault_path / "plain.md").write_text("Just plain text without links.\n", encoding="utf-8")

    # Malformed frontmatter, skipped by the scanner
    (vault_path / "broken.md").write_text("""---
title: [broken yaml
---
Links to [[Python]].
""", encoding="utf-8")

    # Hidden folder, never scanned
    (vault_path / ".obsidian" / "workspace.md").write_text("[[Python]] #hidden\n", encoding="utf-8")

    # Non-markdown file, ignored
    (vault_path / "attachment.txt").write_text("[[Python]]\n", encoding="utf-8")

    yield vault_path


@pytest.fixture
def configured_vault(temp_vault, monkeypatch):
    """Point the settings at the temp vault for tool-level tests."""
    from vault_weaver.config import get_settings

    monkeypatch.setenv("OBSIDIAN_VAULT_PATH", str(temp_vault))
    get_settings.cache_clear()
    yield temp_vault
    get_settings.cache_clear()
