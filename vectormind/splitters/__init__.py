"""Document splitters package"""
from .fixed_window import chunk_text, validate_window
from .delimiter import split_with_delimiter, extract_first_non_empty_lines
from .markdown_sections import split_markdown_by_sections, extract_section_header
from .markdown_hierarchy import (
    MarkdownHierarchyParser,
    build_hierarchy,
    parse_markdown_hierarchy,
    chunk_with_markdown_hierarchy,
)
from .subdivider import subdivide
from .base_splitter import BaseDocumentSplitter
from .document_splitters import (
    FixedWindowDocumentSplitter,
    DelimiterDocumentSplitter,
    MarkdownSectionsDocumentSplitter,
    MarkdownHierarchyDocumentSplitter,
)
from .splitter_factory import SplitterFactory, SplitStrategy

__all__ = [
    'chunk_text',
    'validate_window',
    'split_with_delimiter',
    'extract_first_non_empty_lines',
    'split_markdown_by_sections',
    'extract_section_header',
    'MarkdownHierarchyParser',
    'build_hierarchy',
    'parse_markdown_hierarchy',
    'chunk_with_markdown_hierarchy',
    'subdivide',
    'BaseDocumentSplitter',
    'FixedWindowDocumentSplitter',
    'DelimiterDocumentSplitter',
    'MarkdownSectionsDocumentSplitter',
    'MarkdownHierarchyDocumentSplitter',
    'SplitterFactory',
    'SplitStrategy',
]
