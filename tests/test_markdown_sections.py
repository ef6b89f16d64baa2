from vectormind.splitters import split_markdown_by_sections, extract_section_header


def test_splits_at_every_heading_level():
    markdown = "# Title\nIntro\n\n## Part A\nText A\n### Detail\nMore"

    sections = split_markdown_by_sections(markdown)

    assert sections == ["# Title\nIntro", "## Part A\nText A", "### Detail\nMore"]


def test_text_before_first_heading_is_its_own_section():
    markdown = "Preamble paragraph.\n\n# First\nBody"

    assert split_markdown_by_sections(markdown) == ["Preamble paragraph.", "# First\nBody"]


def test_markdown_without_headings_returns_trimmed_text():
    assert split_markdown_by_sections("\n  just some text \n") == ["just some text"]


def test_blank_and_empty_markdown():
    assert split_markdown_by_sections("") == []
    assert split_markdown_by_sections("   \n\n\t") == []


def test_hash_without_space_is_not_a_heading():
    markdown = "#hashtag\nstill text"

    assert split_markdown_by_sections(markdown) == ["#hashtag\nstill text"]


def test_indented_heading_is_recognized():
    markdown = "  ## Indented\nbody\n# Next\nmore"

    assert split_markdown_by_sections(markdown) == ["## Indented\nbody", "# Next\nmore"]


def test_extract_section_header():
    assert extract_section_header("## Section Two\nbody text") == "## Section Two"
    assert extract_section_header("no heading here") == ""
    assert extract_section_header("") == ""
