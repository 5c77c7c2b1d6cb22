import unittest

from visitreport.services.reports.rendering.blocks import (
    BoldParagraph,
    Heading1,
    Heading2,
    Heading3,
    LineBreak,
    ListItem,
    MixedParagraph,
    PlainParagraph,
    Rule,
    TextRun,
)
from visitreport.services.reports.rendering.debug_tools import map_lines, rule_counts
from visitreport.services.reports.rendering.renderer import (
    LINE_RULES,
    MarkupRenderer,
    classify_line,
    match_rule,
    render_blocks_html,
    render_markup,
    render_report_page,
)


class LineRuleTest(unittest.TestCase):
    """One case per rule, in precedence order."""

    def test_rule_order(self):
        self.assertEqual(
            [r.name for r in LINE_RULES],
            [
                "heading1",
                "heading2",
                "heading3",
                "bold_paragraph",
                "mixed_paragraph",
                "list_item",
                "rule",
                "line_break",
                "plain_paragraph",
            ],
        )

    def test_headings(self):
        self.assertEqual(classify_line("# Title"), Heading1("Title"))
        self.assertEqual(classify_line("## Section"), Heading2("Section"))
        self.assertEqual(classify_line("### Sub"), Heading3("Sub"))

    def test_heading_marker_needs_space(self):
        self.assertEqual(classify_line("#Title"), PlainParagraph("#Title"))
        self.assertEqual(classify_line("#### Deep"), PlainParagraph("#### Deep"))

    def test_bold_paragraph_wins_over_mixed(self):
        self.assertEqual(classify_line("**bold**"), BoldParagraph("bold"))

    def test_bold_paragraph_with_inner_delimiters(self):
        self.assertEqual(
            classify_line("**a** and **b**"), BoldParagraph("a** and **b")
        )

    def test_mixed_paragraph_runs(self):
        self.assertEqual(
            classify_line("a **b** c"),
            MixedParagraph(
                (TextRun("a "), TextRun("b", bold=True), TextRun(" c"))
            ),
        )

    def test_mixed_paragraph_keeps_empty_leading_run(self):
        block = classify_line("**Visit Date:** March 14, 2025")
        self.assertEqual(
            block,
            MixedParagraph(
                (
                    TextRun(""),
                    TextRun("Visit Date:", bold=True),
                    TextRun(" March 14, 2025"),
                )
            ),
        )
        self.assertEqual(block.text, "Visit Date: March 14, 2025")

    def test_unbalanced_delimiter_leaves_trailing_bold_run(self):
        self.assertEqual(
            classify_line("a **b"),
            MixedParagraph((TextRun("a "), TextRun("b", bold=True))),
        )

    def test_bare_delimiters_do_not_form_bold_paragraph(self):
        self.assertEqual(
            classify_line("**"),
            MixedParagraph((TextRun(""), TextRun("", bold=True))),
        )
        self.assertEqual(
            classify_line("***"),
            MixedParagraph((TextRun(""), TextRun("*", bold=True))),
        )

    def test_mixed_wins_over_list_item(self):
        self.assertEqual(
            classify_line("- **x**"),
            MixedParagraph((TextRun("- "), TextRun("x", bold=True), TextRun(""))),
        )

    def test_list_item(self):
        self.assertEqual(classify_line("- item"), ListItem("item"))
        self.assertEqual(classify_line("-item"), PlainParagraph("-item"))

    def test_rule(self):
        self.assertEqual(classify_line("---"), Rule())
        self.assertEqual(classify_line("--- "), PlainParagraph("--- "))
        self.assertEqual(classify_line("----"), PlainParagraph("----"))

    def test_line_break(self):
        self.assertEqual(classify_line(""), LineBreak())
        self.assertEqual(classify_line("   \t"), LineBreak())

    def test_plain_paragraph_is_verbatim(self):
        self.assertEqual(
            classify_line("  indented *italic* text"),
            PlainParagraph("  indented *italic* text"),
        )

    def test_match_rule_names(self):
        self.assertEqual(match_rule("*Report generated on May 1, 2025*").name, "plain_paragraph")
        self.assertEqual(match_rule("## Next Steps").name, "heading2")


class RenderMarkupTest(unittest.TestCase):
    TEXT = "# Report\n\n**Visit Date:** May 1, 2025\n---\n- one\n- two\nplain"

    def test_one_element_per_line(self):
        blocks = render_markup(self.TEXT)
        self.assertEqual(len(blocks), len(self.TEXT.split("\n")))
        self.assertEqual(
            [type(b) for b in blocks],
            [
                Heading1,
                LineBreak,
                MixedParagraph,
                Rule,
                ListItem,
                ListItem,
                PlainParagraph,
            ],
        )

    def test_idempotent(self):
        self.assertEqual(render_markup(self.TEXT), render_markup(self.TEXT))

    def test_empty_text(self):
        self.assertEqual(render_markup(""), [LineBreak()])

    def test_trailing_newline_yields_line_break(self):
        self.assertEqual(render_markup("plain\n"), [PlainParagraph("plain"), LineBreak()])

    def test_crlf_line_endings(self):
        self.assertEqual(
            render_markup("# A\r\n---\r\n"),
            [Heading1("A"), Rule(), LineBreak()],
        )

    def test_carriage_return_only_stripped_at_line_end(self):
        self.assertEqual(render_markup("a\rb\r"), [PlainParagraph("a\rb")])


class HtmlRenderingTest(unittest.TestCase):
    def test_fragment_escapes_text(self):
        html = render_blocks_html([Heading3("Academic Programs & Quality")])
        self.assertIn("Academic Programs &amp; Quality", html)
        self.assertIn("<h3>", html)

    def test_mixed_runs(self):
        html = MarkupRenderer().render_html("a **b** <c>")
        self.assertIn("<strong>b</strong>", html)
        self.assertIn("&lt;c&gt;", html)

    def test_all_block_kinds(self):
        html = MarkupRenderer().render_html("# T\n## S\n**B**\n- i\n---\n\np")
        for fragment in ("<h1>", "<h2>", "<strong>B</strong>", "<li>", "<hr", "<br", "<p>p</p>"):
            self.assertIn(fragment, html)

    def test_page_wraps_fragment(self):
        page = render_report_page("A & B", "<p>x</p>")
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>A &amp; B</title>", page)
        self.assertIn('<div class="report-content"><p>x</p></div>', page)


class DebugToolsTest(unittest.TestCase):
    def test_map_lines(self):
        rows = map_lines("# A\n- b")
        self.assertEqual([r["rule"] for r in rows], ["heading1", "list_item"])
        self.assertEqual(rows[1]["element"], ListItem("b"))
        self.assertEqual(rows[1]["index"], 1)

    def test_rule_counts(self):
        self.assertEqual(
            rule_counts("- a\n- b\n\n---"),
            {"list_item": 2, "line_break": 1, "rule": 1},
        )


if __name__ == "__main__":
    unittest.main()
