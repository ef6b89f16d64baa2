import pytest

from vectormind.schema import MarkdownNode
from vectormind.splitters import (
    MarkdownHierarchyParser,
    build_hierarchy,
    parse_markdown_hierarchy,
    chunk_with_markdown_hierarchy,
)


def test_simple_two_level_hierarchy():
    markdown = "# Main Title\nContent under main title.\n\n## Subsection\nContent under subsection."

    nodes = parse_markdown_hierarchy(markdown)

    assert len(nodes) == 2
    assert nodes[0].heading_text == "Main Title"
    assert nodes[0].level == 1
    assert nodes[0].marker == "#"
    assert nodes[0].content == "Content under main title."
    assert nodes[0].parent_heading_text == ""
    assert nodes[0].parent_level == 0
    assert nodes[1].heading_text == "Subsection"
    assert nodes[1].level == 2
    assert nodes[1].parent_heading_text == "Main Title"
    assert nodes[1].parent_level == 1
    assert nodes[1].parent_marker == "#"


def test_three_level_hierarchy_path():
    markdown = (
        "# Chapter 1\nChapter content.\n\n"
        "## Section 1.1\nSection content.\n\n"
        "### Subsection 1.1.1\nSubsection content."
    )

    nodes = parse_markdown_hierarchy(markdown)

    assert len(nodes) == 3
    assert nodes[2].level == 3
    assert nodes[2].parent_heading_text == "Section 1.1"
    assert nodes[2].hierarchy_path == "Chapter 1 > Section 1.1 > Subsection 1.1.1"


def test_skipped_level_attaches_to_nearest_shallower_heading():
    markdown = "# Top Level\nContent.\n\n### Deep Level\nSkipped level 2."

    nodes = parse_markdown_hierarchy(markdown)

    assert nodes[1].level == 3
    assert nodes[1].parent_heading_text == "Top Level"
    assert nodes[1].hierarchy_path == "Top Level > Deep Level"


def test_sibling_sections_share_parent():
    markdown = (
        "# Chapter 1\nContent 1.\n\n"
        "## Section 1.1\nSection 1.1 content.\n\n"
        "## Section 1.2\nSection 1.2 content.\n\n"
        "# Chapter 2\nContent 2."
    )

    nodes = parse_markdown_hierarchy(markdown)

    assert len(nodes) == 4
    assert nodes[1].parent_heading_text == "Chapter 1"
    assert nodes[2].parent_heading_text == "Chapter 1"
    assert nodes[2].hierarchy_path == "Chapter 1 > Section 1.2"
    assert nodes[3].parent_heading_text == ""
    assert nodes[3].hierarchy_path == "Chapter 2"


def test_headings_without_content():
    nodes = parse_markdown_hierarchy("# Header 1\n## Header 2\n### Header 3")

    assert len(nodes) == 3
    assert all(node.content == "" for node in nodes)


@pytest.mark.parametrize("markdown", ["", "plain text\nwithout any heading", "#tag only"])
def test_no_headings_yield_no_nodes(markdown):
    assert parse_markdown_hierarchy(markdown) == []
    assert chunk_with_markdown_hierarchy(markdown) == []


def test_text_before_first_heading_is_ignored():
    nodes = parse_markdown_hierarchy("intro text\n# Only\nbody")

    assert len(nodes) == 1
    assert nodes[0].content == "body"


@pytest.mark.parametrize("ancestors,heading,expected", [
    ([], "Top", "Top"),
    (["Chapter"], "Section", "Chapter > Section"),
    (["Chapter", "Section"], "Subsection", "Chapter > Section > Subsection"),
])
def test_build_hierarchy(ancestors, heading, expected):
    stack = [MarkdownNode(heading_text=h, level=i + 1, marker="#" * (i + 1)) for i, h in enumerate(ancestors)]

    assert build_hierarchy(stack, heading) == expected


def test_rendered_chunk_format():
    markdown = "# Chapter 1\nThis is the introduction.\n\n## Section 1.1\nThis is a section."

    chunks = chunk_with_markdown_hierarchy(markdown)

    assert chunks[0] == (
        "TITLE: # Chapter 1\n"
        "HIERARCHY: Chapter 1\n"
        "CONTENT: This is the introduction."
    )
    assert chunks[1] == (
        "TITLE: ## Section 1.1\n"
        "HIERARCHY: Chapter 1 > Section 1.1\n"
        "CONTENT: This is a section."
    )


def test_deep_hierarchy_in_rendered_chunk():
    markdown = (
        "# Book\nBook intro.\n\n## Chapter\nChapter intro.\n\n"
        "### Section\nSection content.\n\n#### Subsection\nSubsection content."
    )

    chunks = chunk_with_markdown_hierarchy(markdown)

    assert len(chunks) == 4
    assert "HIERARCHY: Book > Chapter > Section > Subsection" in chunks[3]


def test_special_characters_survive_rendering():
    markdown = "# API: `/v1/items` & <Tags>\nUse **bold** and [links](http://x.y)."

    chunk = MarkdownHierarchyParser().chunk(markdown)[0]

    assert "TITLE: # API: `/v1/items` & <Tags>" in chunk
    assert "CONTENT: Use **bold** and [links](http://x.y)." in chunk


def test_multiline_content_is_kept_between_headings():
    markdown = "## Notes\nline one\n\nline two\n## Next\n"

    nodes = parse_markdown_hierarchy(markdown)

    assert nodes[0].content == "line one\n\nline two"
    assert nodes[1].content == ""
