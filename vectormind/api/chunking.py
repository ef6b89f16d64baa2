"""
Split-and-store endpoints.

Each endpoint splits the document with one strategy, then embeds and
stores every chunk with the request's label and metadata.
"""

import logging
from fastapi import APIRouter, Depends

from ..core.vector_service import VectorService
from ..schema import IngestResult
from .dependencies import get_vector_service
from .models import (
    StoreDocumentRequest,
    ChunkAndStoreRequest,
    SplitWithDelimiterRequest,
    StoreChunksResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chunking"])


def _to_response(result: IngestResult) -> StoreChunksResponse:
    return StoreChunksResponse(
        chunk_ids=result.chunk_ids,
        chunks_stored=result.chunks_stored,
        created_at=result.created_at,
    )


@router.post("/chunk-and-store", status_code=201, response_model=StoreChunksResponse)
async def chunk_and_store(
    body: ChunkAndStoreRequest,
    service: VectorService = Depends(get_vector_service),
):
    """Split into fixed-size overlapping windows and store them"""
    result = await service.chunk_and_store(
        body.document, body.chunk_size, body.overlap, body.label, body.metadata
    )
    return _to_response(result)


@router.post("/split-and-store-markdown-sections", status_code=201, response_model=StoreChunksResponse)
async def split_and_store_markdown_sections(
    body: StoreDocumentRequest,
    service: VectorService = Depends(get_vector_service),
):
    """Split markdown at headings and store every section"""
    result = await service.split_and_store_markdown_sections(body.document, body.label, body.metadata)
    return _to_response(result)


@router.post("/split-and-store-with-delimiter", status_code=201, response_model=StoreChunksResponse)
async def split_and_store_with_delimiter(
    body: SplitWithDelimiterRequest,
    service: VectorService = Depends(get_vector_service),
):
    """Split on a literal delimiter and store every piece"""
    result = await service.split_and_store_with_delimiter(
        body.document, body.delimiter, body.label, body.metadata
    )
    return _to_response(result)


@router.post("/split-and-store-markdown-with-hierarchy", status_code=201, response_model=StoreChunksResponse)
async def split_and_store_markdown_with_hierarchy(
    body: StoreDocumentRequest,
    service: VectorService = Depends(get_vector_service),
):
    """Split markdown into TITLE / HIERARCHY / CONTENT chunks and store them"""
    result = await service.split_and_store_markdown_with_hierarchy(body.document, body.label, body.metadata)
    return _to_response(result)
