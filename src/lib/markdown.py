"""
Markdown to HTML fragment transformer

Converts a restricted markdown dialect into an HTML fragment suitable for
embedding into a page body.

The transformer runs five ordered stages, each over the complete text:
1. html_escape: Neutralize HTML metacharacters in the raw input
2. blocks_recognize: Rewrite header and list-item lines to tags
3. lists_wrap: Group adjacent list items into <ul> containers
4. inline_format: Bold, italic and link substitutions
5. paragraphs_wrap: Wrap remaining lines in <p>, drop empty paragraphs,
   collapse blank lines

Supported syntax:
- Headers: "Title" underlined with === or ---, and "# ", "## ", "### "
- Unordered lists: "* item"
- **bold**, *italic*, [text](url)
- Paragraphs (any other non-empty line)

Stage order matters: headers are recognized before paragraph wrapping (or
the header line itself would end up in a <p>), and bold runs before italic
(or the single-asterisk pattern would eat half of each "**").

Known limitation: a literal asterisk used in prose (e.g. "2 * 3 * 4") is
taken as an emphasis delimiter. Escape sequences are not supported.

Example:
    >>> MarkdownTransformer().transform("# Hello\\n\\nSome *text*")
    '<h1>Hello</h1>\\n<p>Some <em>text</em></p>'
"""

import html
import re
from typing import Callable, Optional

from .log import LOG


# Block structure (multiline, line-anchored); applied in this order
SETEXT_H1 = re.compile(r'^(.*\S.*)\n=+[ \t]*$', re.MULTILINE)
SETEXT_H2 = re.compile(r'^(.*\S.*)\n-+[ \t]*$', re.MULTILINE)
ATX_H3 = re.compile(r'^### (.+)$', re.MULTILINE)
ATX_H2 = re.compile(r'^## (.+)$', re.MULTILINE)
ATX_H1 = re.compile(r'^# (.+)$', re.MULTILINE)
LIST_ITEM = re.compile(r'^\* (.+)$', re.MULTILINE)

# One or more adjacent <li> lines
LIST_RUN = re.compile(r'^<li>.*</li>(?:\n<li>.*</li>)*$', re.MULTILINE)

# Inline formatting (whole text, may span lines)
BOLD = re.compile(r'\*\*(.+?)\*\*', re.DOTALL)
ITALIC = re.compile(r'\*(.+?)\*', re.DOTALL)
LINK = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')

# Paragraphs: any non-empty line not already opening a block element
PARAGRAPH = re.compile(r'^(?!<(?:h[1-6]|ul|/ul|li)>)(.+)$', re.MULTILINE)
EMPTY_PARAGRAPH = re.compile(r'<p>\s*</p>')
NEWLINES = re.compile(r'\n+')


class MarkdownTransformer:
    """
    Stateless markdown to HTML fragment transformer

    Each call to transform() is independent. The only side effect is the
    optional style hook, invoked once after every completed transform so the
    owning page can register markdown-specific CSS.
    """

    def __init__(self, style_hook: Optional[Callable[[], None]] = None) -> None:
        """
        Initialize transformer

        Args:
            style_hook: Zero-argument callable invoked when a transform
                        completes (e.g. Page.markdownStyles_register)
        """
        self.style_hook = style_hook

    def transform(self, text: str) -> str:
        """
        Transform markdown text into an HTML fragment

        Never raises: malformed delimiter nesting degrades to visually wrong
        but valid markup.

        Args:
            text: Markdown source (the whole document)

        Returns:
            HTML fragment string
        """
        LOG(f"Transforming {len(text)} characters of markdown", level=2)

        html_text = self.html_escape(text)
        html_text = self.blocks_recognize(html_text)
        html_text = self.lists_wrap(html_text)
        html_text = self.inline_format(html_text)
        html_text = self.paragraphs_wrap(html_text)

        if self.style_hook is not None:
            self.style_hook()

        LOG(f"Produced {len(html_text)} characters of HTML", level=3)
        return html_text

    def html_escape(self, text: str) -> str:
        """Replace &, <, >, " and ' with HTML entities; nothing else changes"""
        return html.escape(text, quote=True)

    def blocks_recognize(self, text: str) -> str:
        """
        Rewrite header and list-item lines to their tags

        Underline headers are matched first (the underline line is consumed),
        then ATX headers from three hashes down to one, then "* " items.
        """
        text = SETEXT_H1.sub(r'<h1>\1</h1>', text)
        text = SETEXT_H2.sub(r'<h2>\1</h2>', text)
        text = ATX_H3.sub(r'<h3>\1</h3>', text)
        text = ATX_H2.sub(r'<h2>\1</h2>', text)
        text = ATX_H1.sub(r'<h1>\1</h1>', text)
        return LIST_ITEM.sub(r'<li>\1</li>', text)

    def lists_wrap(self, text: str) -> str:
        """
        Wrap each maximal run of adjacent <li> lines in its own <ul>

        Runs separated by any other line (blank lines included) get separate
        containers.

        Example:
            "<li>a</li>\\n<li>b</li>" -> "<ul>\\n<li>a</li>\\n<li>b</li>\\n</ul>"
        """
        return LIST_RUN.sub(lambda match: f'<ul>\n{match.group(0)}\n</ul>', text)

    def inline_format(self, text: str) -> str:
        """Apply bold, then italic, then link substitutions across the text"""
        text = BOLD.sub(r'<strong>\1</strong>', text)
        text = ITALIC.sub(r'<em>\1</em>', text)
        # Link text and url were escaped in stage 1
        return LINK.sub(r'<a href="\2">\1</a>', text)

    def paragraphs_wrap(self, text: str) -> str:
        """
        Wrap plain lines in <p>, drop empty paragraphs, collapse blank lines

        Lines starting with <h1>-<h6>, <ul>, </ul> or <li> are left alone.
        """
        text = PARAGRAPH.sub(r'<p>\1</p>', text)
        text = EMPTY_PARAGRAPH.sub('', text)
        return NEWLINES.sub('\n', text)
