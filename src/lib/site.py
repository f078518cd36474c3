"""
One-call site page builder

site_build() assembles a complete page (theme, navigation, scripts,
content, footer) and returns a RenderResult. Any pagedown error raised
while building is routed through a per-call ErrorReporter, so the caller
gets either the requested page (200) or the generic error page (500),
never an empty page.

Usage:
    result = site_build(
        page_title="Docs",
        theme="teal",
        nav_items=[("/", "Home"), ("/about", "About")],
        markdown_path="content/about.md",
        copyright="ACME",
    )
    response = Response(result.html, status=result.status)
"""

from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union

from ..models.page import RenderResult
from .errors import ErrorContext, ErrorReporter, PagedownError
from .loader import DocumentLoader
from .log import LOG
from .page import Page


def site_build(
    page_title: Optional[str] = None,
    file_title: str = 'Home',
    theme: Optional[str] = None,
    nav_items: Iterable[Tuple[str, str]] = (),
    scripts: Sequence[str] = (),
    content: str = '',
    markdown_path: Optional[Union[str, Path]] = None,
    content_callback: Optional[Callable[[Page], None]] = None,
    copyright: str = '',
) -> RenderResult:
    """
    Build a complete page

    Content source precedence: content_callback, then markdown_path, then
    the raw content string.

    Args:
        page_title: Site title (default: settings site_title)
        file_title: Page title; replaced by the file stem for markdown pages
        theme: Theme name (default: settings default_theme)
        nav_items: (url, title) pairs for the navigation menu
        scripts: Custom JavaScript snippets
        content: Raw HTML content
        markdown_path: Markdown file rendered as the content
        content_callback: Called with the Page to emit content
        copyright: Footer copyright text

    Returns:
        RenderResult (200 with the page, or 500 with the error page)
    """
    reporter = ErrorReporter(ErrorContext())

    try:
        page = Page(page_title, file_title)
        if theme:
            page.theme_set(theme)

        for url, title in nav_items:
            page.navItem_add(url, title)

        for script in scripts:
            page.javascript_add(script)

        if content_callback is not None:
            content_callback(page)
        elif markdown_path:
            DocumentLoader(page).page_load(markdown_path)
        else:
            page.content_add(content)

        document = page.html_render(copyright)
    except PagedownError as e:
        LOG(f"Page build failed: {e}", level=1)
        return reporter.handle(e)

    return RenderResult(status=200, html=document)
