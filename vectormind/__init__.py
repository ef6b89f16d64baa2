"""
vectormind - text RAG store on Redis

Splits documents with one of four strategies, embeds every chunk through an
OpenAI-compatible endpoint and serves similarity search over RediSearch.
"""

from .config import (
    Config,
    EmbeddingConfig,
    RedisConfig,
    ChunkingConfig,
    SearchConfig,
    ServerConfig,
    load_config,
)
from .exceptions import (
    VectorMindError,
    InvalidArgumentError,
    NoChunksError,
    ProviderError,
    StorageError,
)
from .logger import setup_logging
from .schema import MarkdownNode, StoredDocument, IngestResult, SearchResult

__version__ = "1.0.0"

__all__ = [
    "Config",
    "EmbeddingConfig",
    "RedisConfig",
    "ChunkingConfig",
    "SearchConfig",
    "ServerConfig",
    "load_config",
    "VectorMindError",
    "InvalidArgumentError",
    "NoChunksError",
    "ProviderError",
    "StorageError",
    "setup_logging",
    "MarkdownNode",
    "StoredDocument",
    "IngestResult",
    "SearchResult",
]
