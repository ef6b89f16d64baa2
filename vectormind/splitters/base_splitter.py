"""Base abstract class for document splitters"""
from abc import ABC, abstractmethod
from typing import List
import logging

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class BaseDocumentSplitter(ABC):
    """
    Abstract base class for document-level splitting.
    
    A splitter applies one strategy to a raw document and guarantees that
    the strategy output respects the size limit (the embedding dimension)
    before it reaches the embedder.
    """
    
    strategy: str = ""
    
    def __init__(self, size_limit: int):
        if size_limit <= 0:
            raise InvalidArgumentError(f"size_limit must be greater than 0, got {size_limit}")
        self.size_limit = size_limit
        logger.debug(f"{self.__class__.__name__} initialized (size_limit={size_limit})")
    
    @abstractmethod
    def split_document(self, content: str) -> List[str]:
        """
        Split document content into chunks ready for embedding
        
        Args:
            content: Raw document content
            
        Returns:
            Ordered list of chunk strings
        """
        pass
