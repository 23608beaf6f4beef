"""
MCP Tools module for Vault Weaver MCP Server.

Contains the MCP tool handlers (list_tools and call_tool). Every failure inside
a tool is turned into a JSON error result instead of reaching the transport.
"""

import json
from typing import Any

import structlog
from mcp.server import Server
from mcp.types import CallToolResult, TextContent, Tool

from .config import (
    DEFAULT_GRAPH_DEPTH,
    DEFAULT_SEARCH_LIMIT,
    GRAPH_DEPTH_RANGE,
    SEARCH_LIMIT_RANGE,
    get_settings,
)
from .graph import create_graph
from .search import get_backlinks, search_notes
from .utils import ArgumentError
from .writer import create_note, update_frontmatter

logger = structlog.get_logger(__name__)

# Initialize server
server = Server("vault-weaver")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="create_note",
            description="Create a new note in the Obsidian vault",
            inputSchema={
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Note title (will be used as filename)"
                    },
                    "content": {
                        "type": "string",
                        "description": "Note content (markdown)"
                    },
                    "folder": {
                        "type": "string",
                        "description": "Folder path relative to vault root (optional)"
                    },
                    "frontmatter": {
                        "type": "object",
                        "description": "YAML frontmatter metadata (optional)"
                    }
                },
                "required": ["title", "content"]
            }
        ),
        Tool(
            name="search_notes",
            description="Search notes by title or path, optionally filtered by tag and folder",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query (matched against note title and path)"
                    },
                    "tag": {
                        "type": "string",
                        "description": "Filter by tag (optional)"
                    },
                    "folder": {
                        "type": "string",
                        "description": "Filter by folder prefix (optional)"
                    },
                    "limit": {
                        "type": "number",
                        "description": f"Maximum number of results (default: {DEFAULT_SEARCH_LIMIT})",
                        "minimum": SEARCH_LIMIT_RANGE[0],
                        "maximum": SEARCH_LIMIT_RANGE[1]
                    }
                },
                "required": ["query"]
            }
        ),
        Tool(
            name="get_backlinks",
            description="Get all notes that link to a specific note",
            inputSchema={
                "type": "object",
                "properties": {
                    "notePath": {
                        "type": "string",
                        "description": "Path to the note (relative to vault root)"
                    }
                },
                "required": ["notePath"]
            }
        ),
        Tool(
            name="create_graph",
            description="Generate a graph of note connections",
            inputSchema={
                "type": "object",
                "properties": {
                    "rootNote": {
                        "type": "string",
                        "description": "Start from this note (optional, defaults to all notes)"
                    },
                    "depth": {
                        "type": "number",
                        "description": f"Maximum depth to traverse (default: {DEFAULT_GRAPH_DEPTH})",
                        "minimum": GRAPH_DEPTH_RANGE[0],
                        "maximum": GRAPH_DEPTH_RANGE[1]
                    }
                }
            }
        ),
        Tool(
            name="update_frontmatter",
            description="Update or add frontmatter to a note",
            inputSchema={
                "type": "object",
                "properties": {
                    "notePath": {
                        "type": "string",
                        "description": "Path to the note (relative to vault root)"
                    },
                    "frontmatter": {
                        "type": "object",
                        "description": "Frontmatter fields to update/add"
                    },
                    "merge": {
                        "type": "boolean",
                        "description": "Merge with existing frontmatter (default: true)"
                    }
                },
                "required": ["notePath", "frontmatter"]
            }
        ),
    ]


# ============== Argument helpers ==============

def _get_str(arguments: dict[str, Any], name: str, required: bool = False) -> str | None:
    value = arguments.get(name)
    if value is None:
        if required:
            raise ArgumentError(f"Missing required argument: {name}")
        return None
    if not isinstance(value, str):
        raise ArgumentError(f"Argument '{name}' must be a string")
    return value


def _get_int(arguments: dict[str, Any], name: str, default: int) -> int:
    value = arguments.get(name)
    if value is None:
        return default
    # JSON numbers may arrive as floats; booleans are ints in Python
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentError(f"Argument '{name}' must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ArgumentError(f"Argument '{name}' must be a whole number")
    return int(value)


def _get_mapping(arguments: dict[str, Any], name: str, required: bool = False) -> dict[str, Any] | None:
    value = arguments.get(name)
    if value is None:
        if required:
            raise ArgumentError(f"Missing required argument: {name}")
        return None
    if not isinstance(value, dict):
        raise ArgumentError(f"Argument '{name}' must be an object")
    return value


def _to_text(payload: dict[str, Any]) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2, default=str))]


def _error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps({"error": message}, indent=2))],
        isError=True,
    )


# ============== Dispatch ==============

# Arguments are checked by the helpers above so failures keep the JSON error shape
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent] | CallToolResult:
    """Handle tool calls."""
    arguments = arguments or {}

    try:
        settings = get_settings()
        vault_path = settings.vault_path

        if name == "create_note":
            result = await create_note(
                vault_path,
                title=_get_str(arguments, "title", required=True),
                content=_get_str(arguments, "content", required=True),
                folder=_get_str(arguments, "folder"),
                frontmatter=_get_mapping(arguments, "frontmatter"),
            )

        elif name == "search_notes":
            result = await search_notes(
                vault_path,
                query=_get_str(arguments, "query", required=True),
                tag=_get_str(arguments, "tag"),
                folder=_get_str(arguments, "folder"),
                limit=_get_int(arguments, "limit", DEFAULT_SEARCH_LIMIT),
            )

        elif name == "get_backlinks":
            result = await get_backlinks(
                vault_path,
                note_path=_get_str(arguments, "notePath", required=True),
            )

        elif name == "create_graph":
            result = await create_graph(
                vault_path,
                root_note=_get_str(arguments, "rootNote"),
                depth=_get_int(arguments, "depth", DEFAULT_GRAPH_DEPTH),
                seed_limit=settings.graph_seed_limit,
            )

        elif name == "update_frontmatter":
            merge = arguments.get("merge")
            if merge is None:
                merge = True
            elif not isinstance(merge, bool):
                raise ArgumentError("Argument 'merge' must be a boolean")
            result = await update_frontmatter(
                vault_path,
                note_path=_get_str(arguments, "notePath", required=True),
                frontmatter=_get_mapping(arguments, "frontmatter", required=True),
                merge=merge,
            )

        else:
            return _error_result(f"Unknown tool: {name}")

        return _to_text(result.model_dump(by_alias=True))

    except Exception as e:
        logger.warning("tool_failed", tool=name, error=str(e), error_type=type(e).__name__)
        return _error_result(str(e))
