"""
Search and query functions for Vault Weaver MCP Server.

Contains note search with tag/folder filters and backlink lookup.
"""

from pathlib import Path, PurePosixPath

import structlog

from .config import DEFAULT_SEARCH_LIMIT, SEARCH_LIMIT_RANGE
from .index import build_index
from .models import Backlink, BacklinkResult, SearchHit, SearchResult
from .utils import ArgumentError, strip_extension

logger = structlog.get_logger(__name__)


async def search_notes(
    vault_path: Path,
    query: str,
    tag: str | None = None,
    folder: str | None = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> SearchResult:
    """Search notes by title or path.

    Matching is a case-insensitive substring test on the title or the path.
    Results keep scan order; there is no scoring.

    Args:
        vault_path: The vault root path
        query: Substring to look for ("" matches every note)
        tag: Only keep notes carrying exactly this tag
        folder: Only keep notes whose path starts with this prefix
        limit: Maximum number of results (1-100)

    Raises:
        ArgumentError: If limit is out of range
    """
    low, high = SEARCH_LIMIT_RANGE
    if not low <= limit <= high:
        raise ArgumentError(f"limit must be between {low} and {high}, got {limit}")

    query_lower = query.lower()
    hits: list[SearchHit] = []

    for note in await build_index(vault_path):
        if query_lower not in note.title.lower() and query_lower not in note.path.lower():
            continue
        if tag and tag not in note.tags:
            continue
        if folder and not note.path.startswith(folder):
            continue

        hits.append(SearchHit(
            path=note.path,
            title=note.title,
            tags=note.tags,
            link_count=len(note.links),
        ))
        if len(hits) >= limit:
            break

    logger.debug("search_completed", query=query, tag=tag, folder=folder, results=len(hits))
    return SearchResult(count=len(hits), results=hits)


async def get_backlinks(vault_path: Path, note_path: str) -> BacklinkResult:
    """Find all notes that link to a specific note.

    A note counts as a backlink when one of its links equals the target's
    filename without extension, the target path, or the target path without
    extension.
    """
    candidates = {
        strip_extension(PurePosixPath(note_path).name),
        note_path,
        strip_extension(note_path),
    }

    backlinks = [
        Backlink(path=note.path, title=note.title)
        for note in await build_index(vault_path)
        if any(link in candidates for link in note.links)
    ]

    return BacklinkResult(
        note=note_path,
        backlink_count=len(backlinks),
        backlinks=backlinks,
    )
