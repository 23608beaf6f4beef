"""
Main entry point for Vault Weaver MCP Server.

This module provides the main() function and server initialization.
"""

import asyncio
import sys

import structlog
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from .config import get_settings
from .logging import configure_logging
from .tools import server

logger = structlog.get_logger(__name__)


def main():
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("configuration_invalid", hint="set OBSIDIAN_VAULT_PATH to the vault directory", error=str(e))
        sys.exit(1)

    configure_logging(settings.log_level)

    async def run():
        async with stdio_server() as (read_stream, write_stream):
            logger.info("server_starting", vault_path=str(settings.vault_path), transport="stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())

    asyncio.run(run())


if __name__ == "__main__":
    main()
