"""Literal delimiter splitting and context header extraction"""
from typing import List

from ..exceptions import InvalidArgumentError


def split_with_delimiter(text: str, delimiter: str) -> List[str]:
    """
    Split text on a literal delimiter
    
    Empty pieces between consecutive delimiters are kept, so joining the
    result with the delimiter gives back the original text.
    
    Args:
        text: Text to split
        delimiter: Literal (non-regex) separator
        
    Returns:
        Ordered list of pieces, empty for empty text
    """
    if not delimiter:
        raise InvalidArgumentError("delimiter must be a non-empty string")
    
    if not text:
        return []
    
    return text.split(delimiter)


def extract_first_non_empty_lines(text: str, line_count: int) -> str:
    """
    Extract the first non-blank lines of a piece
    
    Args:
        text: Piece of text
        line_count: Maximum number of lines to keep
        
    Returns:
        Trimmed lines joined by newlines, or "" when nothing qualifies
    """
    if not text or line_count <= 0:
        return ""
    
    lines = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if trimmed:
            lines.append(trimmed)
            if len(lines) >= line_count:
                break
    
    return "\n".join(lines)
