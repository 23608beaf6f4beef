"""
Note writing functions for Vault Weaver MCP Server.

Contains functions for writing notes with frontmatter, creating notes from a
title, and updating the frontmatter of an existing note.
"""

from pathlib import Path, PurePosixPath
from typing import Any

import aiofiles
import structlog

from .models import FrontmatterResult, WriteResult
from .utils import (
    parse_frontmatter,
    render_note,
    sanitize_filename,
    validate_path_within_vault,
)

logger = structlog.get_logger(__name__)


async def write_note(
    vault_path: Path,
    note_path: str,
    content: str,
    frontmatter: dict[str, Any] | None = None,
) -> Path:
    """Write a note, creating parent folders as needed.

    Any existing file at note_path is overwritten.

    Returns:
        The absolute path written
    """
    file_path = validate_path_within_vault(note_path, vault_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiofiles.open(file_path, mode="w", encoding="utf-8") as f:
        await f.write(render_note(content, frontmatter))

    logger.info("note_written", path=note_path, has_frontmatter=bool(frontmatter))
    return file_path


async def read_note(vault_path: Path, note_path: str) -> tuple[dict[str, Any], str]:
    """Read a note and split it into (frontmatter, body).

    Raises:
        FileNotFoundError: If the note does not exist
        FrontmatterError: If its frontmatter block is malformed
    """
    file_path = validate_path_within_vault(note_path, vault_path)

    async with aiofiles.open(file_path, encoding="utf-8") as f:
        content = await f.read()

    return parse_frontmatter(content)


async def create_note(
    vault_path: Path,
    title: str,
    content: str,
    folder: str | None = None,
    frontmatter: dict[str, Any] | None = None,
) -> WriteResult:
    """Create a note named after its title.

    Args:
        vault_path: The vault root path
        title: Note title, reduced to letters, digits, '-', '_' and spaces for the filename
        content: Note body (markdown)
        folder: Optional folder relative to the vault root
        frontmatter: Optional frontmatter mapping

    A note with the same filename is silently replaced.
    """
    filename = sanitize_filename(title)

    if folder:
        validate_path_within_vault(folder, vault_path)
        note_path = PurePosixPath(folder.replace("\\", "/"), filename).as_posix()
    else:
        note_path = filename

    await write_note(vault_path, note_path, content, frontmatter)
    logger.info("note_created", path=note_path, title=title)

    return WriteResult(success=True, path=note_path, title=title)


async def update_frontmatter(
    vault_path: Path,
    note_path: str,
    frontmatter: dict[str, Any],
    merge: bool = True,
) -> FrontmatterResult:
    """Update or replace the frontmatter of an existing note.

    With merge, the given fields are laid over the existing mapping (new
    values win on collision). Without it they replace the mapping entirely.
    The body is written back unchanged.
    """
    existing, body = await read_note(vault_path, note_path)

    updated = {**existing, **frontmatter} if merge else dict(frontmatter)
    result = FrontmatterResult(success=True, path=note_path, frontmatter=updated)

    await write_note(vault_path, note_path, body, updated)
    logger.info("frontmatter_updated", path=note_path, merge=merge, keys=list(frontmatter))

    return result
