"""
Pydantic models for Vault Weaver MCP Server.

Contains the note record built by the scanner, graph nodes, and the result
models returned by each tool. Result fields use camelCase aliases on the wire.
"""

from typing import Any

from pydantic import BaseModel, Field


class NoteRecord(BaseModel):
    """Model for one parsed note in the vault index."""

    path: str
    title: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    links: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class SearchHit(BaseModel):
    """Model for a single search result."""

    path: str
    title: str
    tags: list[str]
    link_count: int = Field(serialization_alias="linkCount")


class SearchResult(BaseModel):
    """Model for the search_notes result."""

    count: int
    results: list[SearchHit]


class Backlink(BaseModel):
    """Model for a note linking to the target note."""

    path: str
    title: str


class BacklinkResult(BaseModel):
    """Model for the get_backlinks result."""

    note: str
    backlink_count: int = Field(serialization_alias="backlinkCount")
    backlinks: list[Backlink]


class GraphNode(BaseModel):
    """Model for a node in the connection graph."""

    id: str
    title: str
    links: list[str]


class GraphResult(BaseModel):
    """Model for the create_graph result."""

    node_count: int = Field(serialization_alias="nodeCount")
    nodes: list[GraphNode]


class WriteResult(BaseModel):
    """Model for the result of a note creation."""

    success: bool
    path: str
    title: str


class FrontmatterResult(BaseModel):
    """Model for the result of a frontmatter update."""

    success: bool
    path: str
    frontmatter: dict[str, Any]
