import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..core.vector_service import VectorService
from ..server.server import initialize_state, shutdown_state
from .tools import VectorMindTools, TOOL_DESCRIPTIONS

logger = logging.getLogger(__name__)

MCP_SERVER_NAME = "mcp-vectormind"
TRANSPORTS = ["streamable-http", "stdio"]


def create_mcp_server(service: VectorService, **settings) -> FastMCP:
    """
    Build the MCP server with one tool per vector service operation

    Args:
        service: Initialized vector service
        **settings: FastMCP settings (host, port, log_level, ...)

    Returns:
        FastMCP server with every tool registered
    """
    tools = VectorMindTools(service)
    server = FastMCP(MCP_SERVER_NAME, **settings)

    for name, description in TOOL_DESCRIPTIONS.items():
        server.add_tool(getattr(tools, name), name=name, description=description)

    logger.info(f"Registered {len(TOOL_DESCRIPTIONS)} MCP tools")
    return server


async def serve_mcp(config: Config, transport: str = "streamable-http", host=None, port=None):
    """Initialize the clients, then serve the MCP tools until the transport closes"""
    if transport not in TRANSPORTS:
        raise ValueError(f"transport must be one of {TRANSPORTS}, got '{transport}'")

    state = await initialize_state(config)
    try:
        server = create_mcp_server(
            state.vector_service,
            host=host or config.server.host,
            port=port or config.server.mcp_port,
            log_level=config.log_level,
        )
        if transport == "stdio":
            logger.info("Serving MCP tools over stdio")
            await server.run_stdio_async()
        else:
            logger.info(
                f"Serving MCP tools on http://{server.settings.host}:{server.settings.port}"
                f"{server.settings.streamable_http_path}"
            )
            await server.run_streamable_http_async()
    finally:
        await shutdown_state(state)


def run_mcp(config: Config, transport: str = "streamable-http", host=None, port=None):
    asyncio.run(serve_mcp(config, transport, host, port))
