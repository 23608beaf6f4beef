"""
Utility functions and compiled regex patterns for Vault Weaver MCP Server.

Contains frontmatter parsing, link/tag extraction, validation utilities, and
the exceptions raised by the tool operations.
"""

import re
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from .config import NOTE_EXTENSION

# Pre-compiled regex patterns for performance
WIKILINK_PATTERN = re.compile(r'\[\[([^\]]+)\]\]')
TAG_PATTERN = re.compile(r'#([\w/-]+)', re.ASCII)
FRONTMATTER_PATTERN = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
UNSAFE_FILENAME_PATTERN = re.compile(r'[^a-zA-Z0-9\-_ ]')


# ============== Exceptions ==============

class VaultError(Exception):
    """Base class for errors reported back to the tool caller."""


class PathValidationError(VaultError):
    """Raised when path validation fails."""


class TitleValidationError(VaultError):
    """Raised when title validation fails."""


class FrontmatterError(VaultError):
    """Raised when a frontmatter block cannot be parsed into a mapping."""


class ArgumentError(VaultError):
    """Raised when a tool argument is missing, mistyped or out of range."""


# ============== Frontmatter ==============

def _key_to_str(key: Any) -> str:
    """Render a YAML mapping key the way it reads in the source text."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Extract YAML frontmatter and body from note content.

    Returns ({}, content) when the note has no leading frontmatter block.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}, content

    try:
        frontmatter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter: {e}") from e

    if frontmatter is None:
        frontmatter = {}
    if not isinstance(frontmatter, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(frontmatter).__name__}"
        )

    return {_key_to_str(key): value for key, value in frontmatter.items()}, content[match.end():]


def render_note(content: str, frontmatter: dict[str, Any] | None = None) -> str:
    """Serialize frontmatter and body into note text.

    An empty or missing frontmatter mapping leaves the content untouched.
    """
    if not frontmatter:
        return content

    yaml_content = yaml.safe_dump(frontmatter, allow_unicode=True, default_flow_style=False, sort_keys=False)
    return f"---\n{yaml_content}---\n{content}"


# ============== Extraction ==============

def extract_links(content: str) -> list[str]:
    """Return wiki-link targets in order, without display text after a pipe."""
    return [raw.split("|", 1)[0].strip() for raw in WIKILINK_PATTERN.findall(content)]


def extract_tags(content: str) -> list[str]:
    """Return hash-tags in order, without the leading '#'."""
    return TAG_PATTERN.findall(content)


def strip_extension(path: str) -> str:
    """Remove a trailing markdown extension, if any."""
    if path.endswith(NOTE_EXTENSION):
        return path[:-len(NOTE_EXTENSION)]
    return path


# ============== Security Validation ==============

def validate_path_within_vault(path_str: str, vault_path: Path) -> Path:
    """Validate that a path is safely within the vault directory.

    Args:
        path_str: The path string to validate (relative to the vault)
        vault_path: The vault root path

    Returns:
        The validated absolute Path

    Raises:
        PathValidationError: If the path attempts to escape the vault
    """
    if not path_str or not path_str.strip():
        raise PathValidationError("Path cannot be empty")

    normalized = path_str.replace("\\", "/")

    if ".." in PurePosixPath(normalized).parts:
        raise PathValidationError("Path traversal detected: '..' is not allowed")

    if normalized.startswith("/") or (len(normalized) > 1 and normalized[1] == ":"):
        raise PathValidationError("Absolute paths are not allowed")

    full_path = (vault_path / normalized).resolve()
    vault_resolved = vault_path.resolve()

    try:
        full_path.relative_to(vault_resolved)
    except ValueError:
        raise PathValidationError(f"Path escapes vault directory: {path_str}")

    return full_path


def sanitize_filename(title: str) -> str:
    """Turn a note title into a markdown filename.

    Every character other than ASCII letters, digits, hyphen, underscore and
    space is dropped.

    Raises:
        TitleValidationError: If nothing usable remains
    """
    if not title or not title.strip():
        raise TitleValidationError("Title cannot be empty")

    safe_title = UNSAFE_FILENAME_PATTERN.sub('', title)
    if not safe_title.strip():
        raise TitleValidationError(f"Title has no usable filename characters: {title!r}")

    return f"{safe_title}{NOTE_EXTENSION}"
