"""Request and response models for the REST API"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class CreateEmbeddingRequest(BaseModel):
    content: str = ""
    label: str = ""
    metadata: str = ""


class CreateEmbeddingResponse(BaseModel):
    id: str
    content: str
    label: str
    metadata: str
    created_at: datetime
    success: bool = True


class SimilaritySearchRequest(BaseModel):
    text: str = ""
    max_count: int = 0  # <= 0 uses the configured default
    distance_threshold: Optional[float] = None


class SimilaritySearchWithLabelRequest(SimilaritySearchRequest):
    label: str = ""


class SimilaritySearchResult(BaseModel):
    id: str
    content: str
    label: str
    metadata: str
    distance: float
    created_at: str


class SimilaritySearchResponse(BaseModel):
    results: List[SimilaritySearchResult]
    success: bool = True


class StoreDocumentRequest(BaseModel):
    """Fields shared by every split-and-store request"""
    document: str = ""
    label: str = ""
    metadata: str = ""


class ChunkAndStoreRequest(StoreDocumentRequest):
    chunk_size: int = 0
    overlap: int = 0


class SplitWithDelimiterRequest(StoreDocumentRequest):
    delimiter: str = ""


class StoreChunksResponse(BaseModel):
    chunk_ids: List[str]
    chunks_stored: int
    created_at: datetime
    success: bool = True


class EmbeddingModelInfoResponse(BaseModel):
    model_id: str
    dimension: int
    success: bool = True

    model_config = {"protected_namespaces": ()}
