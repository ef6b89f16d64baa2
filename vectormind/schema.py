from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import List, Dict, Any


@dataclass
class MarkdownNode:
    """One heading-delimited section of a markdown document"""
    heading_text: str
    level: int
    marker: str

    # Raw text between this heading line and the next one, outer whitespace trimmed
    content: str = ""

    # Nearest ancestor heading, empty/zero for top-level nodes
    parent_heading_text: str = ""
    parent_level: int = 0
    parent_marker: str = ""

    # Chapter 1 > Section 1.1 > Subsection 1.1.1
    hierarchy_path: str = ""


@dataclass
class StoredDocument:
    """A single text stored with its embedding"""
    id: str
    content: str
    label: str
    metadata: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data


@dataclass
class IngestResult:
    """Outcome of storing every chunk of one document"""
    chunk_ids: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @property
    def chunks_stored(self) -> int:
        return len(self.chunk_ids)


@dataclass
class SearchResult:
    """A nearest-neighbor hit returned by the vector store"""
    id: str
    content: str
    distance: float
    label: str = ""
    metadata: str = ""
    created_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
