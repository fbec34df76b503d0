"""MCP Server for Facebook Messenger."""

import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from .config import MessengerConfig
from .graph import GraphAPIClient
from .tools import ALL_TOOLS, get_tool_handler

logger = logging.getLogger(__name__)


class MessengerMCPServer:
    """MCP Server exposing the Messenger Graph API as tools."""

    def __init__(self, config: MessengerConfig | None = None):
        """Initialize the Messenger MCP server.

        Args:
            config: Server configuration. Loaded from the environment if omitted.
        """
        self.config = config or MessengerConfig.from_env()
        self.server = Server("messenger-mcp")
        self.client: GraphAPIClient | None = None

        # Register handlers
        self._register_handlers()

    def _get_client(self) -> GraphAPIClient:
        """Get or create the Graph client."""
        if self.client is None:
            self.client = self.config.create_client()
        return self.client

    def _register_handlers(self) -> None:
        """Register MCP server handlers."""

        @self.server.list_tools()
        async def list_tools():
            """List all available Messenger tools."""
            return ALL_TOOLS

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            result = await self.handle_tool(name, arguments)
            return [TextContent(type="text", text=json.dumps(result, indent=2, default=str))]

    async def handle_tool(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Route a tool call to its handler.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result
        """
        logger.info(f"Tool call: {name}")

        handler = get_tool_handler(name)
        if handler is None:
            return {"error": f"Unknown tool: {name}"}

        if not self.config.is_configured:
            return {
                "error": "Messenger access token not configured",
                "message": "Set MESSENGER_ACCESS_TOKEN to a page access token",
            }

        try:
            return await handler(arguments or {}, self._get_client())
        except Exception as e:
            logger.exception(f"Error handling tool {name}")
            return {"error": str(e)}

    async def run(self) -> None:
        """Run the MCP server."""
        logger.info("Starting Messenger MCP server")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def main() -> None:
    """Main entry point."""
    config = MessengerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    server = MessengerMCPServer(config)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
