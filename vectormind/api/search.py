"""
Similarity search endpoints.

Results are ordered by ascending vector distance (closest first).
"""

import logging
from fastapi import APIRouter, Depends

from ..core.vector_service import VectorService
from ..exceptions import InvalidArgumentError
from .dependencies import get_vector_service
from .models import (
    SimilaritySearchRequest,
    SimilaritySearchWithLabelRequest,
    SimilaritySearchResponse,
    SimilaritySearchResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


def _to_response(results) -> SimilaritySearchResponse:
    return SimilaritySearchResponse(
        results=[SimilaritySearchResult(**r.to_dict()) for r in results]
    )


@router.post("/search", response_model=SimilaritySearchResponse)
async def similarity_search(
    body: SimilaritySearchRequest,
    service: VectorService = Depends(get_vector_service),
):
    logger.info(f"Processing search query: {body.text[:100]}")
    results = await service.similarity_search(
        body.text,
        max_count=body.max_count,
        distance_threshold=body.distance_threshold,
    )
    return _to_response(results)


@router.post("/search-with-label", response_model=SimilaritySearchResponse)
async def similarity_search_with_label(
    body: SimilaritySearchWithLabelRequest,
    service: VectorService = Depends(get_vector_service),
):
    if not body.text:
        raise InvalidArgumentError("Text is required")
    if not body.label:
        raise InvalidArgumentError("Label is required")

    logger.info(f"Processing search query with label {body.label!r}: {body.text[:100]}")
    results = await service.similarity_search(
        body.text,
        max_count=body.max_count,
        distance_threshold=body.distance_threshold,
        label=body.label,
    )
    return _to_response(results)
