"""Factory for creating strategy-specific document splitters"""
from typing import Literal, Optional
import logging

from ..exceptions import InvalidArgumentError
from .base_splitter import BaseDocumentSplitter
from .document_splitters import (
    FixedWindowDocumentSplitter,
    DelimiterDocumentSplitter,
    MarkdownSectionsDocumentSplitter,
    MarkdownHierarchyDocumentSplitter,
)

logger = logging.getLogger(__name__)

# Type alias for supported strategies
SplitStrategy = Literal['fixed', 'delimiter', 'markdown_sections', 'markdown_hierarchy']


class SplitterFactory:
    """Factory for creating document splitters based on strategy"""
    
    @staticmethod
    def create(
        strategy: SplitStrategy,
        size_limit: int,
        chunk_size: Optional[int] = None,
        overlap: int = 0,
        delimiter: Optional[str] = None,
        header_lines: int = 2,
    ) -> BaseDocumentSplitter:
        """
        Create a document splitter for the specified strategy
        
        Args:
            strategy: One of supported_strategies()
            size_limit: Maximum chunk length (the embedding dimension)
            chunk_size: Window length, 'fixed' only (defaults to size_limit)
            overlap: Window overlap, 'fixed' only
            delimiter: Literal separator, 'delimiter' only
            header_lines: Context header lines, 'delimiter' only
            
        Returns:
            Strategy-specific document splitter
            
        Raises:
            InvalidArgumentError: If the strategy is unknown or its options are invalid
        """
        if strategy == 'fixed':
            return FixedWindowDocumentSplitter(
                size_limit,
                chunk_size if chunk_size is not None else size_limit,
                overlap,
            )
        
        if strategy == 'delimiter':
            return DelimiterDocumentSplitter(size_limit, delimiter or "", header_lines)
        
        if strategy == 'markdown_sections':
            return MarkdownSectionsDocumentSplitter(size_limit)
        
        if strategy == 'markdown_hierarchy':
            return MarkdownHierarchyDocumentSplitter(size_limit)
        
        raise InvalidArgumentError(
            f"Unsupported split strategy: {strategy}. "
            f"Supported strategies: {', '.join(SplitterFactory.supported_strategies())}"
        )
    
    @staticmethod
    def supported_strategies() -> list[str]:
        """Return list of supported split strategies"""
        return ['fixed', 'delimiter', 'markdown_sections', 'markdown_hierarchy']
