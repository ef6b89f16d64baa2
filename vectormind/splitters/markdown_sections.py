"""Split markdown into heading-delimited sections"""
import re
from typing import List

# Optional indentation, one or more '#', at least one space, then the title
HEADING_PATTERN = re.compile(r'^[ \t]*(#+)[ \t]+(.*)$', re.MULTILINE)


def split_markdown_by_sections(markdown: str) -> List[str]:
    """
    Split markdown at every heading line
    
    Each section starts with its heading line and runs until the next
    heading. Text before the first heading becomes its own section.
    Sections are trimmed and blank sections are dropped.
    
    Args:
        markdown: Markdown document
        
    Returns:
        Ordered list of sections
    """
    if not markdown:
        return []
    
    starts = [match.start() for match in HEADING_PATTERN.finditer(markdown)]
    
    if not starts:
        whole = markdown.strip()
        return [whole] if whole else []
    
    sections = []
    
    pre_heading = markdown[:starts[0]].strip()
    if pre_heading:
        sections.append(pre_heading)
    
    ends = starts[1:] + [len(markdown)]
    for start, end in zip(starts, ends):
        section = markdown[start:end].strip()
        if section:
            sections.append(section)
    
    return sections


def extract_section_header(section: str) -> str:
    """Return the first heading line of a section (e.g. "## Title"), or "" if none"""
    if not section:
        return ""
    
    match = HEADING_PATTERN.search(section)
    if match is None:
        return ""
    return match.group(0).strip()
