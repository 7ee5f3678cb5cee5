from docx import Document

from blogwriter.converters.export import (
    Block,
    build_document,
    export_blocks,
    export_filename,
    write_docx,
)


def test_blocks_are_not_merged():
    blocks = export_blocks("# Title\n\nBody line one\nBody line two")
    assert blocks == [(1, "Title"), (0, "Body line one"), (0, "Body line two")]


def test_longest_marker_wins():
    assert export_blocks("### Q1\n## H2\n# H1") == [
        Block(3, "Q1"),
        Block(2, "H2"),
        Block(1, "H1"),
    ]


def test_no_empty_blocks():
    blocks = export_blocks("\n\n  \nA\r\n\r\n\t\nB\n\n")
    assert [b.text for b in blocks] == ["A", "B"]
    assert export_blocks("") == []
    assert export_blocks("\n \n") == []


def test_marker_needs_space_and_line_start():
    assert export_blocks("#tag\n  # indented\n####  deep") == [
        Block(0, "#tag"),
        Block(0, "  # indented"),
        Block(0, "####  deep"),
    ]


def test_stripped_output_is_all_body_text():
    text = "# Title\n## Section\nbody\n### FAQ\n* item"
    once = export_blocks(text)
    again = export_blocks("\n".join(b.text for b in once))
    assert [b.level for b in again] == [0] * len(once)
    assert [b.text for b in again] == [b.text for b in once]


def test_export_filename_truncates_topic():
    topic = "10 Essential Digital Marketing Strategies for 2025"
    assert export_filename(topic) == f"{topic[:30]}-blog.docx"
    assert export_filename("a/b\\c") == "a-b-c-blog.docx"


def test_build_document_styles():
    doc = build_document(export_blocks("# Title\n## Part\n### FAQ\nplain"))
    styles = [(p.style.name, p.text) for p in doc.paragraphs]
    assert styles == [
        ("Heading 1", "Title"),
        ("Heading 2", "Part"),
        ("Heading 3", "FAQ"),
        ("Normal", "plain"),
    ]


def test_write_docx_roundtrips_paragraphs(tmp_path):
    out = write_docx("# Hello\n\nWorld", tmp_path / "nested" / "post.docx")
    assert out.exists()
    texts = [p.text for p in Document(str(out)).paragraphs]
    assert texts == ["Hello", "World"]
