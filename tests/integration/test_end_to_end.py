#  Copyright (c) 2025 Tom Villani, Ph.D.

"""End-to-end tests: Markdown text to HTML, checked with BeautifulSoup."""

import pytest
from bs4 import BeautifulSoup

from md2markup import markdown_to_html, render_markdown
from md2markup.markup import find_all
from md2markup.options import RenderOptions
from md2markup.styles import MarkdownClasses


def soup_for(markdown, **kwargs):
    return BeautifulSoup(markdown_to_html(markdown, **kwargs), "html.parser")


@pytest.mark.integration
class TestSampleDocument:
    """Render the shared sample document and inspect the result."""

    def test_container(self, sample_markdown):
        soup = soup_for(sample_markdown, class_name="docs")
        container = soup.find("div")
        assert "md2markup-content" in container["class"]
        assert container["class"][-1] == "docs"

    def test_headings(self, sample_markdown):
        soup = soup_for(sample_markdown)
        assert [h.get_text() for h in soup.find_all(["h1", "h2", "h3", "h4"])] == [
            "Sample Document",
            "Section 2",
            "Code Block",
            "Table Example",
        ]

    def test_inline_formatting(self, sample_markdown):
        soup = soup_for(sample_markdown)
        assert soup.find("strong").get_text() == "sample document"
        assert soup.find("em").get_text() == "italic text"
        assert soup.find("code", class_="inline-code").get_text() == "inline code"

    def test_lists(self, sample_markdown):
        soup = soup_for(sample_markdown)
        bullet_list = soup.find("ul")
        assert [li.get_text() for li in bullet_list.find_all("li")] == ["Item 1", "Item 2", "Item 3"]

        ordered = soup.find("ol")
        assert ordered["start"] == "3"
        assert len(ordered.find_all("li")) == 2

    def test_code_block(self, sample_markdown):
        soup = soup_for(sample_markdown)
        pre = soup.find("pre")
        assert "markdown-code-block" in pre["class"]
        assert "language-python" in pre["class"]
        assert MarkdownClasses.THEME_DEFAULT.split()[0] in pre["class"]
        assert "language-python" in pre.code["class"]
        assert pre.code.get_text() == 'def hello_world():\n    print("Hello, World!")\n'

    def test_table(self, sample_markdown):
        table = soup_for(sample_markdown).find("table")
        assert "markdown-table" in table["class"]
        assert [cell.get_text() for cell in table.thead.find_all("td")] == ["Header 1", "Header 2"]
        rows = table.find_all("tr")
        assert [[cell.get_text() for cell in row.find_all("td")] for row in rows] == [
            ["Row 1", "Data 1"],
            ["Row 2", "Data 2"],
        ]

    def test_task_list(self, sample_markdown):
        boxes = soup_for(sample_markdown).find_all("input", attrs={"type": "checkbox"})
        assert len(boxes) == 2
        assert boxes[0].has_attr("checked")
        assert not boxes[1].has_attr("checked")
        assert all(box.has_attr("disabled") for box in boxes)

    def test_link(self, sample_markdown):
        link = soup_for(sample_markdown).find("a", href="https://example.com")
        assert link.get_text() == "the site"
        assert link["title"] == "Example"
        assert link["target"] == "_blank"
        assert link["rel"] == ["noopener", "noreferrer"]

    def test_footnote(self, sample_markdown):
        soup = soup_for(sample_markdown)
        reference = soup.find("sup", class_="footnote-ref")
        assert reference.a["href"] == "#1"
        definition = soup.find("div", id="1")
        assert "footnote-definition" in definition["class"]
        assert definition.get_text().strip() == "A footnote."


@pytest.mark.integration
class TestOptionCombinations:
    """Options change the rendered attributes as documented."""

    def test_explicit_styling_marks_every_paragraph(self, sample_markdown, explicit_options):
        fragment = render_markdown(sample_markdown, explicit_options)
        paragraphs = find_all(fragment, "p")
        assert paragraphs
        assert all(p.get("class") == MarkdownClasses.PARAGRAPH for p in paragraphs)

    def test_external_highlighter_setup(self, sample_markdown):
        options = RenderOptions(code_theme=None, emit_language_classes=True)
        pre = find_all(render_markdown(sample_markdown, options), "pre")[0]
        assert pre.classes == ["markdown-code-block", "language-python"]

    def test_no_language_classes(self, sample_markdown):
        options = RenderOptions(code_theme=None, emit_language_classes=False)
        pre = find_all(render_markdown(sample_markdown, options), "pre")[0]
        assert pre.classes == ["markdown-code-block"]

    def test_raw_html_injected_or_escaped(self):
        markdown = "<section>raw</section>\n\nText with <kbd>k</kbd>."
        allowed = soup_for(markdown, fragment_only=True)
        assert allowed.find("section").get_text() == "raw"
        assert '<span class="raw-html"><kbd></span>' in markdown_to_html(markdown, fragment_only=True)

        escaped = soup_for(markdown, fragment_only=True, allow_raw_html=False)
        assert escaped.find("section") is None
        assert escaped.find("kbd") is None
        assert "<section>raw</section>" in escaped.find("pre").get_text()

    def test_front_matter_not_rendered(self):
        soup = soup_for("---\ntitle: Secret\n---\n# Visible", fragment_only=True)
        assert "Secret" not in soup.get_text()
        assert soup.find("h1").get_text() == "Visible"

    def test_leading_prose_between_rules_is_rendered(self):
        soup = soup_for("---\nSome text\n---\n\nmore", fragment_only=True)
        assert "Some text" in soup.get_text()
        assert "more" in soup.get_text()

    def test_character_references_escaped_once(self):
        assert markdown_to_html("AT&amp;T &copy; 2025", fragment_only=True) == "<p>AT&amp;T © 2025</p>"

    def test_footnote_reference_uses_written_label(self):
        soup = soup_for("Text[^note]\n\n[^note]: The note.", fragment_only=True)
        assert soup.find("a", href="#note").get_text() == "note"
        assert "NOTE" not in soup.get_text()

    def test_math(self):
        soup = soup_for("Inline $a+b$ and\n\n$$\nx^2\n$$", fragment_only=True)
        assert soup.find("span", class_="math-inline").get_text() == "a+b"
        assert soup.find("div", class_="math-display").get_text() == "x^2"
