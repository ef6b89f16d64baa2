"""Strategy splitters that combine a splitting function with oversize subdivision"""
from typing import List
import logging

from ..exceptions import InvalidArgumentError
from .base_splitter import BaseDocumentSplitter
from .fixed_window import chunk_text, validate_window
from .delimiter import split_with_delimiter, extract_first_non_empty_lines
from .markdown_sections import split_markdown_by_sections, extract_section_header
from .markdown_hierarchy import MarkdownHierarchyParser
from .subdivider import subdivide

logger = logging.getLogger(__name__)


class FixedWindowDocumentSplitter(BaseDocumentSplitter):
    """Overlapping fixed-size windows; chunk_size may not exceed the size limit"""
    
    strategy = "fixed"
    
    def __init__(self, size_limit: int, chunk_size: int, overlap: int = 0):
        super().__init__(size_limit)
        validate_window(chunk_size, overlap)
        if chunk_size > size_limit:
            raise InvalidArgumentError(
                f"chunk_size ({chunk_size}) must be less than or equal to "
                f"embedding dimension ({size_limit})"
            )
        self.chunk_size = chunk_size
        self.overlap = overlap
    
    def split_document(self, content: str) -> List[str]:
        chunks = chunk_text(content, self.chunk_size, self.overlap)
        logger.info(f"Split document into {len(chunks)} fixed windows")
        return chunks


class DelimiterDocumentSplitter(BaseDocumentSplitter):
    """
    Split on a literal delimiter, carrying the first lines of each record
    into its sub-chunks when the record is too large.
    """
    
    strategy = "delimiter"
    
    def __init__(self, size_limit: int, delimiter: str, header_lines: int = 2):
        super().__init__(size_limit)
        if not delimiter:
            raise InvalidArgumentError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self.header_lines = header_lines
    
    def split_document(self, content: str) -> List[str]:
        chunks = []
        for piece in split_with_delimiter(content, self.delimiter):
            header = extract_first_non_empty_lines(piece, self.header_lines)
            chunks.extend(subdivide(piece, self.size_limit, header))
        
        logger.info(f"Split document into {len(chunks)} chunks on delimiter {self.delimiter!r}")
        return chunks


class MarkdownSectionsDocumentSplitter(BaseDocumentSplitter):
    """Split at markdown headings, repeating the heading line in sub-chunks"""
    
    strategy = "markdown_sections"
    
    def split_document(self, content: str) -> List[str]:
        chunks = []
        for section in split_markdown_by_sections(content):
            header = extract_section_header(section)
            chunks.extend(subdivide(section, self.size_limit, header))
        
        logger.info(f"Split document into {len(chunks)} section chunks")
        return chunks


class MarkdownHierarchyDocumentSplitter(BaseDocumentSplitter):
    """
    Render every heading as a TITLE / HIERARCHY / CONTENT block.
    
    Oversized blocks are subdivided without repeating the TITLE and
    HIERARCHY lines, unlike the delimiter and section strategies.
    """
    
    strategy = "markdown_hierarchy"
    
    def __init__(self, size_limit: int):
        super().__init__(size_limit)
        self.parser = MarkdownHierarchyParser()
    
    def split_document(self, content: str) -> List[str]:
        chunks = []
        for block in self.parser.chunk(content):
            chunks.extend(subdivide(block, self.size_limit))
        
        logger.info(f"Split document into {len(chunks)} hierarchy chunks")
        return chunks
