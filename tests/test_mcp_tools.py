import asyncio

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from vectormind.core import VectorService
from vectormind.mcp import VectorMindTools, TOOL_DESCRIPTIONS, create_mcp_server
from vectormind.schema import SearchResult

from conftest import FakeEmbedder, FakeStore


def _tools(config, embedder=None, store=None):
    embedder = embedder or FakeEmbedder(config.embedding.dimension)
    store = store or FakeStore()
    return VectorMindTools(VectorService(config, embedder, store)), store


def test_server_registers_every_tool(config):
    service = VectorService(config, FakeEmbedder(8), FakeStore())
    server = create_mcp_server(service)

    tools = asyncio.run(server.list_tools())

    assert sorted(tool.name for tool in tools) == sorted(TOOL_DESCRIPTIONS)
    assert len(tools) == 9
    assert server.name == "mcp-vectormind"


def test_about(config):
    tools, _ = _tools(config)

    assert asyncio.run(tools.about_vectormind()) == "This MCP Server is a Text RAG System based on Redis"


def test_create_embedding(config):
    tools, store = _tools(config)

    result = asyncio.run(tools.create_embedding("Orc", label="monsters"))

    assert result["success"] is True
    assert result["id"].startswith("doc:")
    assert result["label"] == "monsters"
    assert store.stored[0][1] == "Orc"


def test_create_embedding_requires_content(config):
    tools, _ = _tools(config)

    with pytest.raises(ToolError, match="Content is required"):
        asyncio.run(tools.create_embedding(""))


def test_model_info(config):
    tools, _ = _tools(config)

    assert asyncio.run(tools.get_embedding_model_info()) == {"model_id": "test-model", "dimension": 8}


def test_similarity_search_sorted_and_filtered(config):
    store = FakeStore(results=[
        SearchResult(id="doc:b", content="b", distance=0.6),
        SearchResult(id="doc:a", content="a", distance=0.1),
        SearchResult(id="doc:c", content="c", distance=0.9),
    ])
    tools, _ = _tools(config, store=store)

    result = asyncio.run(tools.similarity_search("query", distance_threshold=0.6))

    assert [r["id"] for r in result["results"]] == ["doc:a", "doc:b"]
    assert store.searches[0][1] == 5


def test_similarity_search_with_label(config):
    tools, store = _tools(config)

    asyncio.run(tools.similarity_search_with_label("query", "monsters", max_count=2))

    assert store.searches[0][1:] == (2, "monsters")


def test_similarity_search_with_label_requires_label(config):
    tools, _ = _tools(config)

    with pytest.raises(ToolError, match="Label is required"):
        asyncio.run(tools.similarity_search_with_label("query", ""))


def test_chunk_and_store(config):
    tools, store = _tools(config)

    result = asyncio.run(tools.chunk_and_store("abcdefghijklmnop", 8, 2, label="letters"))

    assert result["chunks_stored"] == 3
    assert len(result["chunk_ids"]) == 3
    assert [entry[1] for entry in store.stored] == ["abcdefgh", "ghijklmn", "mnop"]


def test_chunk_size_above_dimension(config):
    tools, _ = _tools(config)

    with pytest.raises(ToolError, match="embedding dimension"):
        asyncio.run(tools.chunk_and_store("abc", 64, 0))


def test_split_tools(config):
    tools, store = _tools(config)

    sections = asyncio.run(tools.split_and_store_markdown_sections("# A\nx\n# B\ny"))
    pieces = asyncio.run(tools.split_and_store_with_delimiter("a|b||c", "|"))

    assert sections["chunks_stored"] == 2
    assert pieces["chunks_stored"] == 3


def test_hierarchy_without_headings(config):
    tools, _ = _tools(config)

    with pytest.raises(ToolError, match="No chunks generated"):
        asyncio.run(tools.split_and_store_markdown_with_hierarchy("plain text"))


def test_provider_failure_message(config):
    tools, _ = _tools(config, embedder=FakeEmbedder(8, fail_on_call=1))

    with pytest.raises(ToolError, match="Failed to create embedding: backend unavailable"):
        asyncio.run(tools.create_embedding("Orc"))


def test_storage_failure_message(config):
    tools, _ = _tools(config, store=FakeStore(fail_on_call=1))

    with pytest.raises(ToolError, match="Storage failure: redis down"):
        asyncio.run(tools.split_and_store_markdown_sections("# A\nx"))
