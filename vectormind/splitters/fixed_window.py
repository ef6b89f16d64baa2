"""Fixed-size sliding window chunker"""
from typing import List

from ..exceptions import InvalidArgumentError


def validate_window(chunk_size: int, overlap: int) -> None:
    """
    Check that a window configuration makes forward progress
    
    Raises:
        InvalidArgumentError: If chunk_size <= 0, overlap < 0 or overlap >= chunk_size
    """
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be greater than 0, got {chunk_size}")
    
    if overlap < 0:
        raise InvalidArgumentError(f"overlap cannot be negative, got {overlap}")
    
    if overlap >= chunk_size:
        raise InvalidArgumentError(
            f"overlap ({overlap}) must be less than chunk_size ({chunk_size})"
        )


def chunk_text(text: str, chunk_size: int, overlap: int = 0) -> List[str]:
    """
    Divide text into windows of chunk_size characters
    
    Consecutive windows start chunk_size - overlap characters apart; the
    last window holds whatever remains and may be shorter.
    
    Args:
        text: Text to chunk
        chunk_size: Window length in characters
        overlap: Characters shared by consecutive windows
        
    Returns:
        Ordered list of windows, empty for empty text
    """
    validate_window(chunk_size, overlap)
    
    stride = chunk_size - overlap
    return [text[start:start + chunk_size] for start in range(0, len(text), stride)]
