"""
Page shell tests

Tests document assembly, navigation, scripts, style hook output and the
fragment builders.
"""

from datetime import date

import pytest

from pagedown.lib import __version__
from pagedown.lib.errors import PageError, ThemeError
from pagedown.lib.page import Page


@pytest.fixture
def page():
    return Page(page_title="My Site", file_title="About")


class TestDocumentShell:
    """Test header/footer assembly"""

    def test_title_and_site_header(self, page):
        html = page.html_render()
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>My Site - About</title>" in html
        assert "<h1>My Site</h1>" in html
        assert html.rstrip().endswith("</html>")

    def test_theme_colors_injected(self, page):
        page.theme_set("green")
        html = page.header_build()
        assert "--theme-start: #2ecc71;" in html
        assert "--theme-end: #27ae60;" in html

    def test_default_theme_is_blue(self, page):
        assert "--theme-start: #4a90e2;" in page.header_build()

    def test_unknown_theme_raises(self, page):
        with pytest.raises(ThemeError, match="Invalid theme"):
            page.theme_set("plaid")

    def test_content_between_header_and_footer(self, page):
        page.content_add("<p>first</p>")
        page.content_add("<p>second</p>")
        html = page.html_render()
        assert html.index('<div id="content">') < html.index("<p>first</p>")
        assert html.index("<p>first</p>") < html.index("<p>second</p>")
        assert html.index("<p>second</p>") < html.index('<div id="footer">')

    def test_footer_copyright_and_version(self, page):
        footer = page.footer_build("ACME")
        assert f"&copy; {date.today().year} ACME" in footer
        assert f"pagedown v{__version__}" in footer

    def test_copyright_escaped(self, page):
        assert "&lt;b&gt;" in page.footer_build("<b>")


class TestNavigation:
    """Test the navigation menu"""

    def test_nav_items_in_order(self, page):
        page.navItem_add("/", "Home")
        page.navItem_add("/about", "About")
        html = page.header_build()
        assert html.index('<a href="/">Home</a>') < html.index('<a href="/about">About</a>')

    def test_nav_items_escaped(self, page):
        page.navItem_add('/x"y', "<b>bold</b>")
        assert page.nav_items[0].url == "/x&quot;y"
        assert page.nav_items[0].title == "&lt;b&gt;bold&lt;/b&gt;"


class TestScriptsAndStyles:
    """Test footer payload: custom scripts and markdown styles"""

    def test_no_script_block_by_default(self, page):
        assert "<script>" not in page.footer_build()

    def test_custom_script_emitted(self, page):
        page.javascript_add("console.log('hi');")
        footer = page.footer_build()
        assert "<script>\nconsole.log('hi');\n</script>" in footer

    def test_closing_script_tag_neutralized(self, page):
        page.javascript_add("var s = '</script><b>';")
        assert "<\\/script><b>" in page.scripts[0]

    def test_markdown_styles_only_when_registered(self, page):
        assert ".markdown-content h1" not in page.footer_build()
        page.markdownStyles_register()
        assert ".markdown-content h1" in page.footer_build()

    def test_markdown_styles_emitted_once(self, page):
        page.markdownStyles_register()
        page.markdownStyles_register()
        assert page.footer_build().count(".markdown-content h1 {") == 1


class TestFragmentBuilders:
    """Test button, center, image and table builders"""

    def test_button(self, page):
        button = page.button_create("Go <now>", "/next?a=1&b=2", "big", {"id": "7"})
        assert button == (
            '<a href="/next?a=1&amp;b=2" class="pd-button big" data-id="7">Go &lt;now&gt;</a>'
        )
        assert page.content == [button]

    def test_button_defaults(self, page):
        assert page.button_create("Top") == '<a href="#" class="pd-button">Top</a>'

    def test_center(self, page):
        assert page.center("start") == '<div class="pd-center">'
        assert page.center("stop") == "</div>"
        assert page.content == ['<div class="pd-center">', "</div>"]

    def test_center_invalid_action(self, page):
        with pytest.raises(PageError, match="Invalid center action"):
            page.center("middle")
        assert page.content == []

    def test_image_with_size(self, page):
        image = page.image_add("cat.png", 'a "cat"', 200, 100)
        assert image == '<img src="cat.png" alt="a &quot;cat&quot;" width="200" height="100" />'

    def test_image_without_size(self, page):
        assert page.image_add("cat.png") == '<img src="cat.png" alt="" />'

    def test_table(self, page):
        table = page.table_add(["Name", "Qty"], [["<apple>", 3], ["pear", 5]])
        assert table == (
            "<table><thead><tr><th>Name</th><th>Qty</th></tr></thead>"
            "<tbody><tr><td>&lt;apple&gt;</td><td>3</td></tr>"
            "<tr><td>pear</td><td>5</td></tr></tbody></table>"
        )
