"""
Graph functions for Vault Weaver MCP Server.

Contains the depth-first connection graph traversal.
"""

from pathlib import Path

from .config import DEFAULT_GRAPH_DEPTH, GRAPH_DEPTH_RANGE
from .index import NoteIndex, build_index
from .models import GraphNode, GraphResult, NoteRecord
from .utils import ArgumentError


def traverse(index: NoteIndex, roots: list[NoteRecord], depth: int) -> list[GraphNode]:
    """Collect graph nodes reachable from roots within depth hops.

    Each root starts at depth 1. A note is recorded at most once per call,
    so link cycles terminate.
    """
    nodes: list[GraphNode] = []
    visited: set[str] = set()

    def visit(note: NoteRecord, current_depth: int) -> None:
        if current_depth > depth or note.path in visited:
            return

        visited.add(note.path)
        nodes.append(GraphNode(id=note.path, title=note.title, links=note.links))

        for link in note.links:
            linked_note = index.resolve(link)
            if linked_note:
                visit(linked_note, current_depth + 1)

    for root in roots:
        if root.path not in visited:
            visit(root, 1)

    return nodes


async def create_graph(
    vault_path: Path,
    root_note: str | None = None,
    depth: int = DEFAULT_GRAPH_DEPTH,
    seed_limit: int = 50,
) -> GraphResult:
    """Build a connection graph of notes and their outgoing links.

    Args:
        vault_path: The vault root path
        root_note: Title or path of the starting note; when omitted the first
            seed_limit notes in scan order are used as roots
        depth: Maximum number of hops, the root counting as 1 (1-5)
        seed_limit: Number of roots used when root_note is omitted

    Returns:
        GraphResult with nodes in visit order. An unknown root_note yields an
        empty graph.

    Raises:
        ArgumentError: If depth is out of range
    """
    low, high = GRAPH_DEPTH_RANGE
    if not low <= depth <= high:
        raise ArgumentError(f"depth must be between {low} and {high}, got {depth}")

    index = await build_index(vault_path)

    if root_note:
        root = index.resolve(root_note)
        roots = [root] if root else []
    else:
        roots = index.notes[:seed_limit]

    nodes = traverse(index, roots, depth)
    return GraphResult(node_count=len(nodes), nodes=nodes)
