"""
Markdown document loader

Reads a markdown file, validates it, runs it through the transformer and
places the resulting fragment in a page's content region.

Failure conditions (both raised before the page is touched, so a failed
load never leaves partial content behind):
- SourceNotFound: path does not resolve to a readable regular file
- InvalidEncoding: content is not valid UTF-8
"""

from pathlib import Path
from typing import Union

from ..models.page import LoadedDocument
from .errors import SourceNotFound, InvalidEncoding
from .log import LOG
from .markdown import MarkdownTransformer
from .page import Page


class DocumentLoader:
    """Loads markdown files onto a Page"""

    def __init__(self, page: Page) -> None:
        self.page = page

    def source_read(self, filepath: Union[str, Path]) -> str:
        """
        Read and decode a markdown file, normalizing line endings to \\n

        Raises:
            SourceNotFound: If the file does not exist, is not a file or
                            cannot be read
            InvalidEncoding: If the content is not valid UTF-8
        """
        path = Path(filepath)
        if not path.is_file():
            raise SourceNotFound(f"Markdown file not found: {path}")

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise SourceNotFound(f"Markdown file not readable: {path}") from e

        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"Invalid UTF-8 encoding in file: {path.name}") from e

        LOG(f"Read {len(text)} characters from {path.name}", level=2)
        # Line-anchored patterns expect \n line endings
        return text.replace('\r\n', '\n').replace('\r', '\n')

    def page_load(self, filepath: Union[str, Path]) -> LoadedDocument:
        """
        Load a markdown file and emit it as the page content

        The display title is the file name with its extension stripped.

        Args:
            filepath: Path to the markdown file

        Returns:
            LoadedDocument with title and HTML fragment

        Raises:
            SourceNotFound, InvalidEncoding: See source_read()
        """
        path = Path(filepath)
        text = self.source_read(path)

        transformer = MarkdownTransformer(style_hook=self.page.markdownStyles_register)
        fragment = transformer.transform(text)

        self.page.file_title = path.stem
        self.page.content_add(f'<div class="markdown-content">\n{fragment}\n</div>')
        LOG(f"Loaded markdown page '{path.stem}'", level=1)

        return LoadedDocument(title=path.stem, fragment=fragment, source_path=path)
