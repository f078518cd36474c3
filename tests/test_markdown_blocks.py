"""
Block structure tests - headers and lists

Tests underline and ATX headers, list-item recognition and list wrapping.
"""

import pytest

from pagedown.lib.markdown import MarkdownTransformer


@pytest.fixture
def md():
    return MarkdownTransformer()


class TestAtxHeaders:
    """Test # / ## / ### headers"""

    def test_h1(self, md):
        """Single hash header, no residual marker"""
        html = md.transform("# Title\n")
        assert html.count("<h1>Title</h1>") == 1
        assert "#" not in html

    def test_h2(self, md):
        assert md.transform("## Section") == "<h2>Section</h2>"

    def test_h3_not_captured_by_h1(self, md):
        """### must become h3, not an h1 of '## Title'"""
        html = md.transform("### Title")
        assert html == "<h3>Title</h3>"
        assert "<h1>" not in html

    def test_hash_without_space_is_paragraph(self, md):
        assert md.transform("#hashtag") == "<p>#hashtag</p>"

    def test_four_hashes_not_a_header(self, md):
        """Only one to three hashes are headers"""
        assert md.transform("#### deep") == "<p>#### deep</p>"

    def test_hash_mid_line_ignored(self, md):
        assert md.transform("issue # 4") == "<p>issue # 4</p>"


class TestSetextHeaders:
    """Test underline-style headers"""

    def test_equals_underline(self, md):
        html = md.transform("Title\n=====\n")
        assert "<h1>Title</h1>" in html
        assert "=" not in html

    def test_dash_underline(self, md):
        html = md.transform("Subtitle\n--------\n")
        assert "<h2>Subtitle</h2>" in html
        assert "-" not in html

    def test_underline_with_trailing_spaces(self, md):
        assert md.transform("Title\n===   ") == "<h1>Title</h1>"

    def test_blank_line_before_underline_not_header(self, md):
        """A blank line cannot be underlined into a header"""
        html = md.transform("\n===")
        assert "<h1>" not in html

    def test_setext_followed_by_paragraph(self, md):
        html = md.transform("Title\n=====\n\nBody text")
        assert html == "<h1>Title</h1>\n<p>Body text</p>"


class TestListItems:
    """Test * list items and their containers"""

    def test_two_items_one_container(self, md):
        """Adjacent items share exactly one <ul>, in order"""
        html = md.transform("* a\n* b\n")
        assert html.count("<ul>") == 1
        assert html.count("</ul>") == 1
        assert html.count("<li>") == 2
        assert html.index("<li>a</li>") < html.index("<li>b</li>")
        assert html.index("<ul>") < html.index("<li>a</li>")
        assert html.index("<li>b</li>") < html.index("</ul>")

    def test_exact_list_output(self, md):
        assert md.transform("* a\n* b") == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"

    def test_single_item_wrapped(self, md):
        assert md.transform("* only") == "<ul>\n<li>only</li>\n</ul>"

    def test_runs_separated_by_paragraph_wrapped_independently(self, md):
        """A wrapper never spans intervening content"""
        html = md.transform("* a\n* b\n\nmiddle\n\n* c\n")
        assert html == (
            "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"
            "<p>middle</p>\n"
            "<ul>\n<li>c</li>\n</ul>\n"
        )

    def test_runs_separated_by_blank_line_not_merged(self, md):
        html = md.transform("* a\n\n* b")
        assert html.count("<ul>") == 2
        assert html.count("</ul>") == 2

    def test_dash_bullet_not_a_list(self, md):
        """Only '* ' starts a list item"""
        html = md.transform("- item")
        assert "<li>" not in html

    def test_asterisk_without_space_not_a_list(self, md):
        html = md.transform("*item")
        assert "<li>" not in html

    def test_header_line_not_reprocessed_as_list(self, md):
        html = md.transform("# * starred")
        assert html == "<h1>* starred</h1>"
        assert "<li>" not in html


class TestStageFunctions:
    """Stages are usable on their own"""

    def test_blocks_recognize_leaves_plain_lines(self, md):
        assert md.blocks_recognize("plain\n# head") == "plain\n<h1>head</h1>"

    def test_lists_wrap_only_wraps_li_lines(self, md):
        text = "<h1>x</h1>\n<li>a</li>\n<li>b</li>\nafter"
        assert md.lists_wrap(text) == (
            "<h1>x</h1>\n<ul>\n<li>a</li>\n<li>b</li>\n</ul>\nafter"
        )
