import logging
import uuid
from datetime import datetime
from typing import List, Optional, Dict, Any

from ..config import Config
from ..embedding.embedder import Embedder
from ..exceptions import InvalidArgumentError, NoChunksError
from ..schema import StoredDocument, IngestResult, SearchResult
from ..splitters import SplitterFactory, SplitStrategy
from ..storage.redis_client import RedisVectorStore

logger = logging.getLogger(__name__)


def split_document(
    strategy: SplitStrategy,
    document: str,
    size_limit: int,
    **options,
) -> List[str]:
    """
    Split a document with one strategy, without storing anything

    Blank pieces from the delimiter strategy are dropped; every other
    strategy keeps its chunks as produced.

    Args:
        strategy: Split strategy name
        document: Raw document
        size_limit: Maximum chunk length (the embedding dimension)
        **options: Strategy options (chunk_size, overlap, delimiter, header_lines)

    Returns:
        Chunks no longer than size_limit, except for sub-chunks that carry
        a repeated header

    Raises:
        InvalidArgumentError: If the document is empty or options are invalid
        NoChunksError: If nothing but blank chunks came out
    """
    if not document:
        raise InvalidArgumentError("Document is required")

    splitter = SplitterFactory.create(strategy, size_limit, **options)
    chunks = splitter.split_document(document)
    if strategy == "delimiter":
        chunks = [chunk for chunk in chunks if chunk.strip()]

    if not chunks:
        raise NoChunksError()
    return chunks


class VectorService:
    """
    Embed, store and search texts; split documents before storing them.

    Owns the embedding model id and dimension so every split receives its
    size limit explicitly.
    """

    def __init__(self, config: Config, embedder: Embedder, store: RedisVectorStore):
        self.config = config
        self.embedder = embedder
        self.store = store

    @property
    def embedding_dimension(self) -> int:
        return self.config.embedding.dimension

    def model_info(self) -> Dict[str, Any]:
        return {
            "model_id": self.config.embedding.model_id,
            "dimension": self.embedding_dimension,
        }

    def _new_document_id(self) -> str:
        return f"{self.config.redis.key_prefix}{uuid.uuid4()}"

    async def create_embedding(
        self,
        content: str,
        label: str = "",
        metadata: str = "",
    ) -> StoredDocument:
        """Embed one text and store it under a fresh document id"""
        if not content:
            raise InvalidArgumentError("Content is required")

        embedding = await self.embedder.embed(content)
        doc_id = self._new_document_id()
        await self.store.store_embedding(doc_id, content, embedding, label, metadata)

        logger.info(f"Stored document {doc_id}")
        return StoredDocument(
            id=doc_id,
            content=content,
            label=label,
            metadata=metadata,
            created_at=datetime.now().astimezone(),
        )

    async def store_chunks(
        self,
        chunks: List[str],
        label: str = "",
        metadata: str = "",
    ) -> IngestResult:
        """
        Embed and store chunks one after another

        The first embedding or storage failure aborts the run; chunks stored
        before it are kept.

        Args:
            chunks: Chunk texts in document order
            label: Label applied to every chunk
            metadata: Metadata applied to every chunk

        Returns:
            Ids of the stored chunks, in order
        """
        if not chunks:
            raise NoChunksError()

        result = IngestResult()
        for i, chunk in enumerate(chunks, 1):
            embedding = await self.embedder.embed(chunk)
            chunk_id = self._new_document_id()
            await self.store.store_embedding(chunk_id, chunk, embedding, label, metadata)
            result.chunk_ids.append(chunk_id)
            logger.debug(f"Stored chunk {i}/{len(chunks)} as {chunk_id}")

        logger.info(f"Stored {result.chunks_stored} chunks")
        return result

    def split_document(self, strategy: SplitStrategy, document: str, **options) -> List[str]:
        """Split with the embedding dimension as size limit"""
        if strategy == "delimiter":
            options.setdefault("header_lines", self.config.chunking.delimiter_header_lines)
        return split_document(strategy, document, self.embedding_dimension, **options)

    async def chunk_and_store(
        self,
        document: str,
        chunk_size: int,
        overlap: int = 0,
        label: str = "",
        metadata: str = "",
    ) -> IngestResult:
        chunks = self.split_document("fixed", document, chunk_size=chunk_size, overlap=overlap)
        return await self.store_chunks(chunks, label, metadata)

    async def split_and_store_markdown_sections(
        self,
        document: str,
        label: str = "",
        metadata: str = "",
    ) -> IngestResult:
        chunks = self.split_document("markdown_sections", document)
        return await self.store_chunks(chunks, label, metadata)

    async def split_and_store_with_delimiter(
        self,
        document: str,
        delimiter: str,
        label: str = "",
        metadata: str = "",
    ) -> IngestResult:
        if not delimiter:
            raise InvalidArgumentError("Delimiter is required")
        chunks = self.split_document("delimiter", document, delimiter=delimiter)
        return await self.store_chunks(chunks, label, metadata)

    async def split_and_store_markdown_with_hierarchy(
        self,
        document: str,
        label: str = "",
        metadata: str = "",
    ) -> IngestResult:
        chunks = self.split_document("markdown_hierarchy", document)
        return await self.store_chunks(chunks, label, metadata)

    async def similarity_search(
        self,
        text: str,
        max_count: Optional[int] = None,
        distance_threshold: Optional[float] = None,
        label: Optional[str] = None,
    ) -> List[SearchResult]:
        """
        Find the stored documents closest to a text

        Args:
            text: Query text
            max_count: Number of neighbors, non-positive means the default
            distance_threshold: Drop results farther than this
            label: Restrict the search to one label

        Returns:
            Results sorted by ascending distance
        """
        if not text:
            raise InvalidArgumentError("Text is required")

        if max_count is None or max_count <= 0:
            max_count = self.config.search.default_max_count

        query_vector = await self.embedder.embed(text)
        results = await self.store.similarity_search(query_vector, max_count, label=label)

        if distance_threshold is not None:
            results = [r for r in results if r.distance <= distance_threshold]

        results.sort(key=lambda r: r.distance)
        logger.info(f"Found {len(results)} results (max_count={max_count}, label={label!r})")
        return results
