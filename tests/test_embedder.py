import asyncio
from types import SimpleNamespace

import numpy as np
import pytest
from openai import OpenAIError

from vectormind.config import EmbeddingConfig
from vectormind.embedding import Embedder
from vectormind.exceptions import ProviderError


class FakeEmbeddings:

    def __init__(self, vector=None, error=None):
        self.vector = vector
        self.error = error
        self.requests = []

    async def create(self, model, input):
        self.requests.append((model, input))
        if self.error:
            raise self.error
        data = [] if self.vector is None else [SimpleNamespace(embedding=self.vector)]
        return SimpleNamespace(data=data)


class FakeClient:

    def __init__(self, embeddings):
        self.embeddings = embeddings
        self.closed = False

    async def close(self):
        self.closed = True


def _embedder(embeddings, dimension=4):
    config = EmbeddingConfig(model_id="ai/test-embed", dimension=dimension)
    return Embedder(config, client=FakeClient(embeddings))


def test_embed_returns_float32_vector():
    embeddings = FakeEmbeddings(vector=[0.1, 0.2, 0.3, 0.4])
    embedder = _embedder(embeddings)

    vector = asyncio.run(embedder.embed("hello"))

    assert vector.dtype == np.float32
    assert vector.shape == (4,)
    assert embeddings.requests == [("ai/test-embed", "hello")]


def test_dimension_mismatch_raises_provider_error():
    embedder = _embedder(FakeEmbeddings(vector=[0.1, 0.2]))

    with pytest.raises(ProviderError, match="Unexpected embedding size"):
        asyncio.run(embedder.embed("hello"))


def test_empty_response_raises_provider_error():
    embedder = _embedder(FakeEmbeddings(vector=None))

    with pytest.raises(ProviderError):
        asyncio.run(embedder.embed("hello"))


def test_client_failure_is_wrapped():
    embedder = _embedder(FakeEmbeddings(error=OpenAIError("connection refused")))

    with pytest.raises(ProviderError, match="connection refused"):
        asyncio.run(embedder.embed("hello"))


def test_properties_and_close():
    embedder = _embedder(FakeEmbeddings(vector=[0.0] * 4))

    assert embedder.model_id == "ai/test-embed"
    assert embedder.dimension == 4

    asyncio.run(embedder.close())
    assert embedder.client.closed
