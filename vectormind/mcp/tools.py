"""
MCP tools over the vector service.

Each tool delegates to VectorService. Service errors reach the client as
tool errors carrying the same messages the REST API returns.
"""
import logging
from typing import Annotated, Any, Dict, Optional

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.vector_service import VectorService
from ..exceptions import VectorMindError, ProviderError, StorageError
from ..schema import IngestResult

logger = logging.getLogger(__name__)

ABOUT_TEXT = "This MCP Server is a Text RAG System based on Redis"

# Tool name -> description shown to MCP clients
TOOL_DESCRIPTIONS = {
    "about_vectormind": "This tool provides information about the VectorMind MCP server.",
    "create_embedding": "Create and store an embedding from text content with optional label and metadata.",
    "get_embedding_model_info": (
        "Get information about the embedding model being used, including the model ID and dimension."
    ),
    "similarity_search": (
        "Search for similar documents based on text query. Returns documents ordered by "
        "similarity (closest first). Optionally filter by distance threshold."
    ),
    "similarity_search_with_label": (
        "Search for similar documents based on text query, filtered by label. Returns documents "
        "ordered by similarity (closest first). Optionally filter by distance threshold."
    ),
    "chunk_and_store": (
        "Chunk a document into smaller pieces with overlap and store all chunks with embeddings. "
        "All chunks will share the same label and metadata."
    ),
    "split_and_store_markdown_sections": (
        "Split a markdown document by sections (headers like #, ##, ###) and store all sections "
        "with embeddings. Sections larger than embedding dimension are automatically subdivided. "
        "All chunks will share the same label and metadata."
    ),
    "split_and_store_with_delimiter": (
        "Split a document by a custom delimiter and store all chunks with embeddings. Chunks larger "
        "than embedding dimension are automatically subdivided with the first 2 non-empty lines "
        "prepended to preserve context. All chunks will share the same label and metadata."
    ),
    "split_and_store_markdown_with_hierarchy": (
        "Split a markdown document by headers, preserving hierarchical context (parent headers) in "
        "each chunk. Each chunk includes TITLE, HIERARCHY, and CONTENT metadata. Chunks larger than "
        "embedding dimension are automatically subdivided. All chunks share the same label and metadata."
    ),
}

Document = Annotated[str, Field(description="The document to split and store")]
Label = Annotated[str, Field(description="Optional label/tag for the documents")]
Metadata = Annotated[str, Field(description="Optional metadata for the documents")]
QueryText = Annotated[str, Field(description="The text query to search for similar documents")]
MaxCount = Annotated[int, Field(description="Maximum number of results to return (default: 5)")]
DistanceThreshold = Annotated[
    Optional[float],
    Field(description="Optional distance threshold. Only returns documents with distance <= threshold"),
]


def tool_error(exc: VectorMindError) -> ToolError:
    """Translate a service error into the message the client sees"""
    if isinstance(exc, ProviderError):
        return ToolError(f"Failed to create embedding: {exc}")
    if isinstance(exc, StorageError):
        return ToolError(f"Storage failure: {exc}")
    return ToolError(str(exc))


def _stored(result: IngestResult) -> Dict[str, Any]:
    return {
        "success": True,
        "chunk_ids": result.chunk_ids,
        "chunks_stored": result.chunks_stored,
        "created_at": result.created_at.isoformat(),
    }


class VectorMindTools:
    """Tool handlers bound to one VectorService"""

    def __init__(self, service: VectorService):
        self.service = service

    async def _run(self, operation):
        try:
            return await operation
        except VectorMindError as e:
            logger.error(f"Tool call failed: {e}")
            raise tool_error(e) from e

    async def about_vectormind(self) -> str:
        return ABOUT_TEXT

    async def create_embedding(
        self,
        content: Annotated[str, Field(description="The text content to create an embedding from")],
        label: Label = "",
        metadata: Metadata = "",
    ) -> Dict[str, Any]:
        document = await self._run(self.service.create_embedding(content, label, metadata))
        return {"success": True, **document.to_dict()}

    async def get_embedding_model_info(self) -> Dict[str, Any]:
        return self.service.model_info()

    async def similarity_search(
        self,
        text: QueryText,
        max_count: MaxCount = 0,
        distance_threshold: DistanceThreshold = None,
    ) -> Dict[str, Any]:
        results = await self._run(self.service.similarity_search(
            text, max_count=max_count, distance_threshold=distance_threshold
        ))
        return {"success": True, "results": [r.to_dict() for r in results]}

    async def similarity_search_with_label(
        self,
        text: QueryText,
        label: Annotated[str, Field(description="The label to filter documents by")],
        max_count: MaxCount = 0,
        distance_threshold: DistanceThreshold = None,
    ) -> Dict[str, Any]:
        if not text:
            raise ToolError("Text is required")
        if not label:
            raise ToolError("Label is required")
        results = await self._run(self.service.similarity_search(
            text, max_count=max_count, distance_threshold=distance_threshold, label=label
        ))
        return {"success": True, "results": [r.to_dict() for r in results]}

    async def chunk_and_store(
        self,
        document: Document,
        chunk_size: Annotated[int, Field(description="Size of each chunk, at most the embedding dimension")],
        overlap: Annotated[int, Field(description="Characters shared by consecutive chunks")],
        label: Label = "",
        metadata: Metadata = "",
    ) -> Dict[str, Any]:
        result = await self._run(self.service.chunk_and_store(document, chunk_size, overlap, label, metadata))
        return _stored(result)

    async def split_and_store_markdown_sections(
        self,
        document: Document,
        label: Label = "",
        metadata: Metadata = "",
    ) -> Dict[str, Any]:
        result = await self._run(self.service.split_and_store_markdown_sections(document, label, metadata))
        return _stored(result)

    async def split_and_store_with_delimiter(
        self,
        document: Document,
        delimiter: Annotated[str, Field(description="The literal delimiter to split the document on")],
        label: Label = "",
        metadata: Metadata = "",
    ) -> Dict[str, Any]:
        result = await self._run(
            self.service.split_and_store_with_delimiter(document, delimiter, label, metadata)
        )
        return _stored(result)

    async def split_and_store_markdown_with_hierarchy(
        self,
        document: Document,
        label: Label = "",
        metadata: Metadata = "",
    ) -> Dict[str, Any]:
        result = await self._run(
            self.service.split_and_store_markdown_with_hierarchy(document, label, metadata)
        )
        return _stored(result)
