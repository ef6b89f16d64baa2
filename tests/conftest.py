import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from vectormind.config import Config, EmbeddingConfig, ChunkingConfig  # noqa: E402
from vectormind.exceptions import ProviderError, StorageError  # noqa: E402


class FakeEmbedder:
    """Deterministic embedder: the vector encodes the text length"""

    def __init__(self, dimension: int, fail_on_call: int = 0):
        self.dimension = dimension
        self.model_id = "test-model"
        self.fail_on_call = fail_on_call
        self.calls = []

    async def embed(self, text):
        self.calls.append(text)
        if self.fail_on_call and len(self.calls) == self.fail_on_call:
            raise ProviderError("backend unavailable")
        return np.full(self.dimension, float(len(text)), dtype=np.float32)

    async def close(self):
        pass


class FakeStore:
    """In-memory stand-in for RedisVectorStore"""

    def __init__(self, results=None, fail_on_call: int = 0):
        self.stored = []
        self.results = list(results or [])
        self.fail_on_call = fail_on_call
        self.searches = []

    async def store_embedding(self, doc_id, content, embedding, label="", metadata=""):
        if self.fail_on_call and len(self.stored) + 1 == self.fail_on_call:
            raise StorageError("redis down")
        self.stored.append((doc_id, content, embedding, label, metadata))

    async def similarity_search(self, query_vector, max_count, label=None):
        self.searches.append((query_vector, max_count, label))
        return list(self.results)

    async def close(self):
        pass


@pytest.fixture
def config():
    return Config(
        embedding=EmbeddingConfig(model_id="test-model", dimension=8),
        chunking=ChunkingConfig(chunk_size=8, overlap=2),
    )


@pytest.fixture
def fake_embedder(config):
    return FakeEmbedder(config.embedding.dimension)


@pytest.fixture
def fake_store():
    return FakeStore()
