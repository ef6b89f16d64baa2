"""Markdown heading tree parser with hierarchy-aware rendering"""
from typing import List
import logging

from ..schema import MarkdownNode
from .markdown_sections import HEADING_PATTERN

logger = logging.getLogger(__name__)

HIERARCHY_SEPARATOR = " > "


def build_hierarchy(ancestors: List[MarkdownNode], heading_text: str) -> str:
    """
    Join ancestor headings and the current heading into a path

    Args:
        ancestors: Ancestor nodes, root first
        heading_text: Title of the current heading

    Returns:
        Path such as "Chapter 1 > Section 1.1 > Subsection 1.1.1"
    """
    return HIERARCHY_SEPARATOR.join(
        [node.heading_text for node in ancestors] + [heading_text]
    )


class MarkdownHierarchyParser:
    """
    Parse markdown headings into a flat list of nodes that know their ancestry.

    A single pass over the heading lines keeps a stack of open ancestors:
    every heading first pops the entries at the same or a deeper level, so
    whatever remains on top is its parent. Skipped levels (a ### right under
    a #) therefore attach to the nearest shallower heading.
    """

    def parse(self, markdown: str) -> List[MarkdownNode]:
        """
        Parse markdown into hierarchy nodes

        Args:
            markdown: Markdown document

        Returns:
            Nodes in document order, empty if there are no headings
        """
        if not markdown:
            return []

        matches = list(HEADING_PATTERN.finditer(markdown))
        if not matches:
            return []

        nodes = []
        stack: List[MarkdownNode] = []

        for i, match in enumerate(matches):
            marker = match.group(1)
            level = len(marker)
            heading_text = match.group(2).strip()

            content_end = matches[i + 1].start() if i + 1 < len(matches) else len(markdown)
            content = markdown[match.end():content_end].strip()

            while stack and stack[-1].level >= level:
                stack.pop()

            parent = stack[-1] if stack else None

            node = MarkdownNode(
                heading_text=heading_text,
                level=level,
                marker=marker,
                content=content,
                parent_heading_text=parent.heading_text if parent else "",
                parent_level=parent.level if parent else 0,
                parent_marker=parent.marker if parent else "",
                hierarchy_path=build_hierarchy(stack, heading_text),
            )

            stack.append(node)
            nodes.append(node)

        logger.debug(f"Parsed {len(nodes)} markdown headings")
        return nodes

    def render(self, node: MarkdownNode) -> str:
        """Render one node as a TITLE / HIERARCHY / CONTENT block"""
        return "\n".join([
            f"TITLE: {node.marker} {node.heading_text}",
            f"HIERARCHY: {node.hierarchy_path}",
            f"CONTENT: {node.content}",
        ])

    def chunk(self, markdown: str) -> List[str]:
        """Parse markdown and render every node"""
        return [self.render(node) for node in self.parse(markdown)]


def parse_markdown_hierarchy(markdown: str) -> List[MarkdownNode]:
    """Parse markdown headings into nodes with parent and hierarchy fields"""
    return MarkdownHierarchyParser().parse(markdown)


def chunk_with_markdown_hierarchy(markdown: str) -> List[str]:
    """Split markdown into rendered TITLE / HIERARCHY / CONTENT chunks"""
    return MarkdownHierarchyParser().chunk(markdown)
