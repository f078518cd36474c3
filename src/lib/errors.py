"""
Error taxonomy and the generic error-page reporter.

Loader failures (SourceNotFound, InvalidEncoding) and page-building
failures (ThemeError, PageError) all derive from PagedownError so callers
can route them through a single ErrorReporter, which replaces the requested
page with a generic 500 page.

Re-entrancy is tracked on an explicit ErrorContext owned by the caller
(one per render) instead of module-level state. A reporter asked to handle
an error while already handling one escalates to SystemExit.
"""

import html
from dataclasses import dataclass

from loguru import logger

from ..models.page import RenderResult
from .log import LOG


class PagedownError(Exception):
    """Base class for all pagedown errors"""
    pass


class LoadError(PagedownError):
    """Raised when a markdown source cannot be loaded"""
    pass


class SourceNotFound(LoadError):
    """Requested path does not resolve to a readable file"""
    pass


class InvalidEncoding(LoadError):
    """File content is not valid UTF-8"""
    pass


class ThemeError(PagedownError):
    """Raised when theme loading or selection fails"""
    pass


class PageError(PagedownError):
    """Raised on invalid page-builder arguments"""
    pass


FATAL_MESSAGE = "Critical error occurred. Please check error logs."


@dataclass
class ErrorContext:
    """
    Per-render error handling state.

    Attributes:
        handling: True while an ErrorReporter is rendering an error page
    """
    handling: bool = False


class ErrorReporter:
    """
    Renders the generic error page for a failed render.

    Example:
        >>> reporter = ErrorReporter(ErrorContext())
        >>> result = reporter.handle(SourceNotFound("missing.md"))
        >>> result.status
        500
    """

    def __init__(self, context: ErrorContext) -> None:
        self.context = context

    def handle(self, exc: BaseException) -> RenderResult:
        """
        Convert an exception into a 500 RenderResult.

        Args:
            exc: The exception that aborted the render

        Returns:
            RenderResult with status 500 and the error page HTML

        Raises:
            SystemExit: If called while already handling an error
        """
        if self.context.handling:
            logger.critical(f"Nested exception occurred: {exc}")
            raise SystemExit(FATAL_MESSAGE)

        self.context.handling = True
        try:
            LOG(f"Rendering error page: {exc}", level=1)
            page = self.errorPage_build(str(exc))
        finally:
            self.context.handling = False

        return RenderResult(status=500, html=page)

    def errorPage_build(self, message: str) -> str:
        """Build the standalone error document for an escaped message"""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <title>An Error Occurred</title>
    <meta charset="utf-8">
    <style>
        body {{ font-family: sans-serif; margin: 40px; }}
        .error {{ color: #721c24; background: #f8d7da; padding: 20px; border-radius: 5px; }}
    </style>
</head>
<body>
    <div class="error">
        <h1>An Error Occurred</h1>
        <p>{html.escape(message, quote=True)}</p>
    </div>
</body>
</html>"""
