"""MCP server exposing the vector service as tools"""
from .tools import VectorMindTools, TOOL_DESCRIPTIONS
from .server import create_mcp_server, serve_mcp, run_mcp

__all__ = ["VectorMindTools", "TOOL_DESCRIPTIONS", "create_mcp_server", "serve_mcp", "run_mcp"]
