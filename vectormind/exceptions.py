"""
Custom exceptions for the vectormind service.

Splitters raise InvalidArgumentError on contract violations; the embedding
provider and the vector store wrap their client failures so callers can map
them to user-facing errors.
"""


class VectorMindError(Exception):
    """Base exception for all vectormind errors"""
    pass


class InvalidArgumentError(VectorMindError, ValueError):
    """Raised when a caller passes arguments that violate an input contract"""
    pass


class NoChunksError(VectorMindError):
    """Raised when splitting a document produced nothing to store"""
    def __init__(self, message: str = "No chunks generated from the document"):
        super().__init__(message)


class ProviderError(VectorMindError):
    """Raised when the embedding backend fails or returns an unusable vector"""
    pass


class StorageError(VectorMindError):
    """Raised when the vector store rejects a command or is unreachable"""
    pass
