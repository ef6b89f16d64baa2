from .vector_service import VectorService, split_document

__all__ = ["VectorService", "split_document"]
