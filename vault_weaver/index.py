"""
Vault scanner module for Vault Weaver MCP Server.

Builds the note index from scratch for every request. Nothing is cached
between tool calls.
"""

import asyncio
import os
import time
from pathlib import Path

import aiofiles
import structlog

from .config import NOTE_EXTENSION
from .models import NoteRecord
from .utils import extract_links, extract_tags, parse_frontmatter, strip_extension

logger = structlog.get_logger(__name__)


class NoteIndex:
    """Ordered snapshot of every note found in the vault.

    Iteration order is the scan order, which decides "first match" wherever a
    link or path could resolve to more than one note.
    """

    def __init__(self, notes: list[NoteRecord]):
        self.notes = notes

    def __iter__(self):
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def get(self, path: str) -> NoteRecord | None:
        """Find a note by its exact vault-relative path."""
        for note in self.notes:
            if note.path == path:
                return note
        return None

    def resolve(self, link: str) -> NoteRecord | None:
        """Resolve a wiki-link target to a note.

        A note matches when its title equals the link, its path equals the
        link, or its path equals the link plus the markdown extension.
        """
        with_extension = f"{link}{NOTE_EXTENSION}"
        for note in self.notes:
            if note.title == link or note.path == link or note.path == with_extension:
                return note
        return None


def collect_note_files(root: Path) -> list[Path]:
    """Walk the vault depth-first and return markdown files in walk order.

    Directories whose name starts with '.' are not entered. Entries of each
    directory are visited sorted by name.
    """
    note_files: list[Path] = []

    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.warning("directory_read_failed", path=str(root), error=str(e))
        return note_files

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if not entry.name.startswith("."):
                note_files.extend(collect_note_files(Path(entry.path)))
        elif entry.name.endswith(NOTE_EXTENSION):
            note_files.append(Path(entry.path))

    return note_files


async def load_note(note_file: Path, vault_path: Path) -> NoteRecord | None:
    """Load a single note from disk and return a NoteRecord or None on error."""
    try:
        async with aiofiles.open(note_file, encoding="utf-8") as f:
            content = await f.read()
        frontmatter, _ = parse_frontmatter(content)
        title = frontmatter.get("title")

        return NoteRecord(
            path=note_file.relative_to(vault_path).as_posix(),
            title=str(title) if title else strip_extension(note_file.name),
            frontmatter=frontmatter,
            # Extraction runs over the raw text, frontmatter included
            links=extract_links(content),
            tags=extract_tags(content),
        )
    except Exception as e:
        logger.warning("note_read_failed", path=str(note_file), error=str(e))
        return None


async def build_index(vault_path: Path) -> NoteIndex:
    """Scan the whole vault and build a fresh NoteIndex.

    Unreadable or malformed files are logged and skipped.
    """
    start_time = time.time()

    note_files = collect_note_files(vault_path)
    results = await asyncio.gather(*(load_note(note_file, vault_path) for note_file in note_files))
    notes = [note for note in results if note is not None]

    logger.debug(
        "vault_scanned",
        note_count=len(notes),
        skipped=len(note_files) - len(notes),
        duration_ms=round((time.time() - start_time) * 1000, 2),
    )
    return NoteIndex(notes)
