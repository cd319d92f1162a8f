"""layout-mcp: page-layout document tools served over stdio JSON-RPC."""

__version__ = "0.3.0"
