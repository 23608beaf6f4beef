# Vault Weaver MCP Server
#
# Modular package structure:
# - config.py: Settings loaded from the environment and shared constants
# - logging.py: structlog configuration
# - models.py: Note records and tool result models
# - utils.py: Regex patterns, frontmatter parsing, validation and exceptions
# - index.py: Vault scanner building the per-request note index
# - search.py: Search and backlink queries
# - graph.py: Connection graph traversal
# - writer.py: Note writing, creation and frontmatter updates
# - tools.py: MCP tool handlers and server instance
# - main.py: Entry point and server initialization

__version__ = "1.0.0"
