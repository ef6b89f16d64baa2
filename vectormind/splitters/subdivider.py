"""Oversize subdivision shared by the header-aware strategies"""
from typing import List
import logging

from ..exceptions import InvalidArgumentError
from .fixed_window import chunk_text

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = "\n\n"


def subdivide(piece: str, size_limit: int, header: str = "") -> List[str]:
    """
    Cut a piece that is longer than size_limit into zero-overlap windows
    
    When a header is given it is prepended to every window except the
    first, which already starts with it. Prepending can push those windows
    past size_limit again; that trade-off is accepted.
    
    Args:
        piece: Text produced by a splitting strategy
        size_limit: Maximum window length in characters
        header: Context header to carry into the later windows
        
    Returns:
        [piece] if it fits, otherwise the windows
    """
    if size_limit <= 0:
        raise InvalidArgumentError(f"size_limit must be greater than 0, got {size_limit}")
    
    if len(piece) <= size_limit:
        return [piece]
    
    windows = chunk_text(piece, size_limit, 0)
    logger.info(f"Chunk exceeded size limit {size_limit}, subdivided into {len(windows)} chunks")
    
    if header and len(windows) > 1:
        windows = [windows[0]] + [header + HEADER_SEPARATOR + w for w in windows[1:]]
        logger.debug(f"Prepended header to {len(windows) - 1} sub-chunks")
    
    return windows
