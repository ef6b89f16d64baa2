"""
Embedding endpoints: store a single text and describe the embedding model.
"""

import logging
from fastapi import APIRouter, Depends

from ..core.vector_service import VectorService
from .dependencies import get_vector_service
from .models import CreateEmbeddingRequest, CreateEmbeddingResponse, EmbeddingModelInfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["embeddings"])


@router.post("/embeddings", status_code=201, response_model=CreateEmbeddingResponse)
async def create_embedding(
    body: CreateEmbeddingRequest,
    service: VectorService = Depends(get_vector_service),
):
    """Embed the content and store it with its label and metadata"""
    document = await service.create_embedding(body.content, body.label, body.metadata)
    return CreateEmbeddingResponse(
        id=document.id,
        content=document.content,
        label=document.label,
        metadata=document.metadata,
        created_at=document.created_at,
    )


@router.get("/embedding-model-info", response_model=EmbeddingModelInfoResponse)
async def embedding_model_info(service: VectorService = Depends(get_vector_service)):
    """Return the embedding model id and vector dimension"""
    return EmbeddingModelInfoResponse(**service.model_info())
