import logging
import re
import time
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import numpy as np
from redis.asyncio import Redis, ConnectionPool
from redis.exceptions import RedisError, ResponseError
from redis.commands.search.field import TextField, TagField, NumericField, VectorField
from redis.commands.search.index_definition import IndexDefinition, IndexType
from redis.commands.search.query import Query

from ..config import RedisConfig
from ..exceptions import StorageError
from ..schema import SearchResult

logger = logging.getLogger(__name__)

RETURN_FIELDS = ["vector_distance", "content", "label", "metadata", "created_at"]

_TAG_SPECIAL_CHARS = re.compile(r'([,.<>{}\[\]"\':;!@#$%^&*()\-+=~|/\\ ])')


def vector_to_bytes(vector: Sequence[float]) -> bytes:
    """Serialize a vector as little-endian float32, the layout RediSearch expects"""
    return np.asarray(vector, dtype='<f4').tobytes()


def escape_tag_value(value: str) -> str:
    """Escape characters that RediSearch treats as syntax inside a tag query"""
    return _TAG_SPECIAL_CHARS.sub(r'\\\1', value)


class RedisVectorStore:
    """Low-level RediSearch operations for vector storage and KNN retrieval"""

    def __init__(self, config: RedisConfig, dimension: int, client: Optional[Redis] = None):
        """
        Initialize the vector store

        Args:
            config: Redis configuration
            dimension: Dimension of the stored embeddings
            client: Already connected client (skips pool creation)
        """
        self.config = config
        self.dimension = dimension
        self.pool: Optional[ConnectionPool] = None
        self.client: Optional[Redis] = client

    async def connect(self):
        """Connect to Redis"""
        if self.client is None:
            self.pool = ConnectionPool.from_url(
                self.config.url,
                max_connections=self.config.max_connections,
                decode_responses=True,
            )
            self.client = Redis(connection_pool=self.pool)
        try:
            await self.client.ping()
        except RedisError as e:
            raise StorageError(f"Failed to connect to Redis at {self.config.address}: {e}") from e
        logger.info(f"Connected to Redis at {self.config.address}")

    async def close(self):
        """Close Redis connection"""
        if self.client:
            await self.client.aclose()
            if self.pool:
                await self.pool.disconnect()
            logger.info("Redis connection closed")

    def _search(self):
        if not self.client:
            raise RuntimeError("Redis client not connected")
        return self.client.ft(self.config.index_name)

    async def index_exists(self) -> bool:
        """Check if the search index exists"""
        try:
            await self._search().info()
        except ResponseError as e:
            message = str(e).lower()
            if "unknown index name" in message or "no such index" in message:
                return False
            raise StorageError(f"Failed to inspect index {self.config.index_name}: {e}") from e
        except RedisError as e:
            raise StorageError(f"Failed to inspect index {self.config.index_name}: {e}") from e
        return True

    async def create_index(self):
        """Create the HNSW vector index over hashes under the key prefix"""
        fields = [
            TextField("content"),
            TagField("label"),
            TextField("metadata"),
            NumericField("created_at"),
            VectorField(
                "embedding",
                "HNSW",
                {
                    "TYPE": "FLOAT32",
                    "DIM": self.dimension,
                    "DISTANCE_METRIC": self.config.distance_metric,
                },
            ),
        ]
        definition = IndexDefinition(prefix=[self.config.key_prefix], index_type=IndexType.HASH)
        try:
            await self._search().create_index(fields, definition=definition)
        except RedisError as e:
            raise StorageError(f"Failed to create index {self.config.index_name}: {e}") from e
        logger.info(f"Index created with dimension {self.dimension}")

    async def initialize(self):
        """Create the search index if it doesn't exist"""
        if await self.index_exists():
            logger.info(f"Index '{self.config.index_name}' already exists")
            return

        logger.info(f"Index '{self.config.index_name}' does not exist, creating it...")
        await self.create_index()

    async def drop_index(self, delete_documents: bool = True):
        """Drop the search index, with its documents by default"""
        try:
            await self._search().dropindex(delete_documents=delete_documents)
        except RedisError as e:
            raise StorageError(f"Failed to drop index {self.config.index_name}: {e}") from e
        logger.info(f"Dropped index '{self.config.index_name}'")

    async def store_embedding(
        self,
        doc_id: str,
        content: str,
        embedding: Sequence[float],
        label: str = "",
        metadata: str = "",
    ):
        """
        Store a text and its embedding as a hash

        Args:
            doc_id: Hash key, must start with the index key prefix
            content: Text that was embedded
            embedding: Embedding vector
            label: Tag used for filtered search
            metadata: Free-form metadata string
        """
        if not self.client:
            raise RuntimeError("Redis client not connected")

        mapping = {
            "content": content,
            "label": label,
            "metadata": metadata,
            "created_at": int(time.time()),
            "embedding": vector_to_bytes(embedding),
        }
        try:
            await self.client.hset(doc_id, mapping=mapping)
        except RedisError as e:
            logger.error(f"Failed to store {doc_id}: {e}")
            raise StorageError(f"Failed to store embedding {doc_id}: {e}") from e
        logger.debug(f"Stored {doc_id} ({len(content)} chars)")

    async def similarity_search(
        self,
        query_vector: Sequence[float],
        max_count: int,
        label: Optional[str] = None,
    ) -> List[SearchResult]:
        """
        Perform a KNN search, optionally restricted to one label

        Args:
            query_vector: Embedding of the query text
            max_count: Number of nearest neighbors to return
            label: Only match documents carrying this label

        Returns:
            Search results in the order returned by Redis
        """
        prefilter = f"@label:{{{escape_tag_value(label)}}}" if label else "*"
        query = (
            Query(f"{prefilter}=>[KNN {max_count} @embedding $vec AS vector_distance]")
            .return_fields(*RETURN_FIELDS)
            .paging(0, max_count)
            .dialect(2)
        )

        try:
            response = await self._search().search(
                query,
                query_params={"vec": vector_to_bytes(query_vector)},
            )
        except RedisError as e:
            logger.error(f"Similarity search failed: {e}")
            raise StorageError(f"Failed to perform similarity search: {e}") from e

        results = []
        for doc in response.docs:
            try:
                distance = float(getattr(doc, "vector_distance"))
            except (AttributeError, TypeError, ValueError):
                logger.warning(f"Skipping {doc.id}: missing or invalid vector_distance")
                continue

            results.append(SearchResult(
                id=doc.id,
                content=getattr(doc, "content", ""),
                distance=distance,
                label=getattr(doc, "label", ""),
                metadata=getattr(doc, "metadata", ""),
                created_at=_format_timestamp(getattr(doc, "created_at", None)),
            ))

        logger.debug(f"Similarity search returned {len(results)} documents")
        return results


def _format_timestamp(value) -> str:
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return ""
    return datetime.fromtimestamp(seconds, tz=timezone.utc).isoformat()
