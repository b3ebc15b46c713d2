"""MCP server that scaffolds and builds Framer plugin projects."""

__version__ = "0.1.0"
