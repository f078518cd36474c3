"""
Page-building data models

Type-safe structures passed between the loader, the page shell and callers.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class LoadedDocument:
    """
    Result of loading a markdown file onto a page

    Returned by DocumentLoader.page_load() after the file has been read,
    validated and transformed.

    Attributes:
        title: Display title derived from the file name (extension stripped)
        fragment: HTML fragment produced by the markdown transformer
        source_path: Path the document was read from

    Example:
        For "docs/getting-started.md":
        LoadedDocument(title="getting-started", fragment="<h1>...", ...)
    """
    title: str
    fragment: str
    source_path: Path


@dataclass
class RenderResult:
    """
    Outcome of a complete page render

    Attributes:
        status: HTTP-style status code (200 on success, 500 on error page)
        html: Complete HTML document (requested page or error page)
    """
    status: int
    html: str

    @property
    def ok(self) -> bool:
        return self.status == 200


@dataclass
class NavItem:
    """Navigation menu entry; both fields are stored HTML-escaped"""
    url: str
    title: str


@dataclass
class ThemeColors:
    """Gradient colour pair of a theme (CSS colour values)"""
    start: str
    end: str
