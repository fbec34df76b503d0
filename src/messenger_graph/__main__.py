"""Entry point for running the Messenger MCP server."""

from .server import main

if __name__ == "__main__":
    main()
