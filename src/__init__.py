"""
pagedown - Markdown to themed HTML page compiler

Turns a restricted markdown dialect into an HTML fragment and wraps it in a
themed, self-contained page.
"""

from .lib import (
    __version__,
    MarkdownTransformer,
    DocumentLoader,
    Page,
    ThemeManager,
    site_build,
    SourceNotFound,
    InvalidEncoding,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "MarkdownTransformer",
    "DocumentLoader",
    "Page",
    "ThemeManager",
    "site_build",
    "SourceNotFound",
    "InvalidEncoding",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
