"""
Logging setup for the vectormind server, MCP server and CLI
"""
import logging
import sys


def setup_logging(level: str = "INFO", stream=None):
    """
    Route every vectormind logger to a single console handler

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream, stdout by default; the MCP stdio transport
            owns stdout, so it logs to stderr instead
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=numeric_level,
        handlers=[console_handler],
        force=True
    )
