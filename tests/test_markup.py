from blogwriter.converters.markup import (
    Blank,
    Heading,
    ListItem,
    ORDERED,
    Paragraph,
    UNORDERED,
    classify_line,
    render_html,
    render_inline,
)


def test_empty_input_renders_nothing():
    assert render_html("") == ""
    assert render_html("\n\n   \n") == ""


def test_heading_then_paragraph_with_bold():
    out = render_html("## Intro\nHello **world**")
    lines = out.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("<h2 ") and lines[0].endswith(">Intro</h2>")
    assert lines[1] == '<p class="mb-4">Hello <strong>world</strong></p>'


def test_three_hash_heading_is_level_three():
    assert classify_line("### FAQ") == Heading(3, "FAQ")
    out = render_html("### FAQ")
    assert out.startswith("<h3 ") and "<h1" not in out
    assert ">FAQ</h3>" in out


def test_heading_levels_and_non_headings():
    assert classify_line("# Title") == Heading(1, "Title")
    assert classify_line("## Sub") == Heading(2, "Sub")
    assert classify_line("#### Too deep") == Paragraph("#### Too deep")
    assert classify_line("#NoSpace") == Paragraph("#NoSpace")
    assert classify_line("   ") == Blank()


def test_list_item_kinds():
    assert classify_line("* apples") == ListItem(UNORDERED, "apples")
    assert classify_line("  * indented") == ListItem(UNORDERED, "indented")
    assert classify_line("12. twelfth") == ListItem(ORDERED, "twelfth")
    assert classify_line("**Bold** start") == Paragraph("**Bold** start")


def test_bold_before_italic():
    assert render_inline("**bold** and *italic*") == "<strong>bold</strong> and <em>italic</em>"
    assert render_inline("a **b** c **d**") == "a <strong>b</strong> c <strong>d</strong>"


def test_italic_inside_bullet_is_not_confused_with_marker():
    out = render_html("* a *b* c")
    assert '<li class="ml-4">a <em>b</em> c</li>' in out


def test_unordered_run_wrapped_once():
    out = render_html("* one\n* two\n\nAfter")
    assert out.count("<ul") == 1 and out.count("</ul>") == 1
    assert "<ol" not in out
    assert out.index("</ul>") < out.index("<p")


def test_ordered_run_wrapped_as_ol():
    out = render_html("1. first\n2. second\n# Next")
    assert out.count('<ol class="list-decimal ml-6 mb-4">') == 1
    assert out.count('<li class="ml-4">') == 2
    assert out.index("</ol>") < out.index("<h1")


def test_interleaved_kinds_get_separate_lists():
    out = render_html("* bullet\n1. number\n* bullet again")
    assert out.split("\n") == [
        '<ul class="list-disc ml-6 mb-4">',
        '<li class="ml-4">bullet</li>',
        "</ul>",
        '<ol class="list-decimal ml-6 mb-4">',
        '<li class="ml-4">number</li>',
        "</ol>",
        '<ul class="list-disc ml-6 mb-4">',
        '<li class="ml-4">bullet again</li>',
        "</ul>",
    ]


def test_blank_line_does_not_split_a_list():
    out = render_html("1. a\n\n2. b")
    assert out.count("<ol") == 1


def test_html_in_text_is_escaped():
    out = render_html("<script>alert(1)</script>")
    assert "<script>" not in out
    assert out == '<p class="mb-4">&lt;script&gt;alert(1)&lt;/script&gt;</p>'


def test_malformed_markup_degrades_to_paragraph():
    out = render_html("**unclosed bold\n*")
    assert out.split("\n") == [
        '<p class="mb-4">**unclosed bold</p>',
        '<p class="mb-4">*</p>',
    ]


def test_triple_asterisks_do_not_produce_crossed_tags():
    out = render_inline("***x***")
    assert "<strong>" in out
    assert "<em>" not in out


def test_italic_span_may_wrap_bold():
    assert render_inline("*see **this** now*") == "<em>see <strong>this</strong> now</em>"
    assert render_inline("*a* and **b**") == "<em>a</em> and <strong>b</strong>"
