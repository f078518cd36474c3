"""
pagedown - Markdown to themed HTML page compiler
"""

__version__ = "1.0.0"  # read by pyproject.toml

from .markdown import MarkdownTransformer
from .loader import DocumentLoader
from .page import Page
from .theme import ThemeManager
from .site import site_build
from .errors import (
    PagedownError,
    SourceNotFound,
    InvalidEncoding,
    ThemeError,
    PageError,
    ErrorContext,
    ErrorReporter,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "MarkdownTransformer",
    "DocumentLoader",
    "Page",
    "ThemeManager",
    "site_build",
    "PagedownError",
    "SourceNotFound",
    "InvalidEncoding",
    "ThemeError",
    "PageError",
    "ErrorContext",
    "ErrorReporter",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
