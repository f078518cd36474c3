"""
Page shell for pagedown

Assembles a complete, themed HTML document around a content region:
head with theme colours and stylesheet, site header, navigation menu,
content, and a footer carrying custom scripts and (when markdown was
rendered) the markdown stylesheet.

Fragment builders (button, table, image, centering) escape every
user-supplied value and append their output to the content region.

A Page is per-render state: construct one for every request.
"""

import html
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from . import __version__
from ..config import appsettings
from ..models.page import NavItem
from .errors import PageError
from .log import LOG
from .theme import ThemeManager


ASSETS_DIR = Path(__file__).parent.parent / "assets"


def asset_load(relative_path: str) -> str:
    """Load a packaged asset file (e.g. 'css/page.css')"""
    asset_path = ASSETS_DIR / relative_path
    if asset_path.exists():
        return asset_path.read_text(encoding='utf-8')
    LOG(f"Warning: Asset {relative_path} not found", level=2)
    return ""


def sanitize(text: object) -> str:
    """HTML-escape any value, quotes included"""
    return html.escape(str(text), quote=True)


class Page:
    """
    Builds one HTML page

    Responsibilities:
    - Theme selection and colour injection
    - Navigation menu
    - Content region (raw HTML, fragment builders, markdown)
    - Custom scripts and markdown styles in the footer
    """

    def __init__(
        self,
        page_title: Optional[str] = None,
        file_title: str = "Home",
        themes: Optional[ThemeManager] = None,
    ) -> None:
        """
        Initialize page

        Args:
            page_title: Site title (default: settings site_title)
            file_title: Title of the current page
            themes: Theme registry (default: a fresh ThemeManager)
        """
        self.page_title = page_title or appsettings.site_title
        self.file_title = file_title
        self.themes = themes or ThemeManager()
        self.nav_items: List[NavItem] = []
        self.scripts: List[str] = []
        self.content: List[str] = []
        self.markdownStyles = False

    def theme_set(self, theme_name: str) -> None:
        """Select a theme; raises ThemeError for unknown names"""
        self.themes.theme_set(theme_name)

    def navItem_add(self, url: str, title: str) -> None:
        """Add an entry to the navigation menu"""
        self.nav_items.append(NavItem(url=sanitize(url), title=sanitize(title)))

    def javascript_add(self, code: str) -> None:
        """
        Add custom JavaScript emitted in the footer

        Scripts are trusted author input; only a closing script tag inside
        the code is neutralized so it cannot terminate the <script> block.
        """
        self.scripts.append(code.replace('</script', '<\\/script'))

    def markdownStyles_register(self) -> None:
        """Style hook: request the markdown stylesheet in the footer"""
        self.markdownStyles = True

    def content_add(self, content: str) -> None:
        """Append raw HTML to the content region"""
        self.content.append(content)

    def button_create(
        self,
        text: str,
        url: str = '#',
        additional_classes: str = '',
        data_attributes: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        Create a theme-styled link button

        Args:
            text: Button text
            url: Button destination URL
            additional_classes: Extra CSS classes
            data_attributes: data-* attributes (key without 'data-' prefix)

        Returns:
            The button HTML (also appended to the content region)
        """
        data_attr = ''
        for key, value in (data_attributes or {}).items():
            data_attr += f' data-{sanitize(key)}="{sanitize(value)}"'

        classes = f"pd-button {sanitize(additional_classes)}".strip()
        button = f'<a href="{sanitize(url)}" class="{classes}"{data_attr}>{sanitize(text)}</a>'
        self.content_add(button)
        return button

    def center(self, action: str) -> str:
        """
        Open or close a centered block

        Args:
            action: 'start' or 'stop'

        Raises:
            PageError: For any other action
        """
        if action == 'start':
            fragment = '<div class="pd-center">'
        elif action == 'stop':
            fragment = '</div>'
        else:
            raise PageError("Invalid center action. Use 'start' or 'stop'.")
        self.content_add(fragment)
        return fragment

    def image_add(self, src: str, alt: str = '', width: int = 0, height: int = 0) -> str:
        """Add an image; width/height attributes only when positive"""
        width_attr = f' width="{width}"' if width > 0 else ''
        height_attr = f' height="{height}"' if height > 0 else ''
        image = f'<img src="{sanitize(src)}" alt="{sanitize(alt)}"{width_attr}{height_attr} />'
        self.content_add(image)
        return image

    def table_add(self, headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
        """Add a table with one header row and any number of body rows"""
        parts = ['<table>', '<thead><tr>']
        parts.extend(f'<th>{sanitize(header)}</th>' for header in headers)
        parts.append('</tr></thead>')
        parts.append('<tbody>')
        for row in rows:
            parts.append('<tr>')
            parts.extend(f'<td>{sanitize(cell)}</td>' for cell in row)
            parts.append('</tr>')
        parts.append('</tbody></table>')

        table = ''.join(parts)
        self.content_add(table)
        return table

    def navigation_build(self) -> str:
        """Navigation menu links, one per line"""
        return ''.join(
            f'<a href="{item.url}">{item.title}</a>\n' for item in self.nav_items
        )

    def header_build(self) -> str:
        """
        Build the document head, site header and navigation

        Opens the #container and #content elements closed by footer_build().
        """
        colors = self.themes.colors_get()
        title = sanitize(appsettings.pageTitle_make(self.file_title, self.page_title))
        page_css = asset_load('css/page.css')

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <title>{title}</title>
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        :root {{
            --theme-start: {colors.start};
            --theme-end: {colors.end};
            --button-text-color: #fff;
        }}
{page_css}
    </style>
</head>
<body>
    <div id="container">
        <div id="header">
            <h1>{sanitize(self.page_title)}</h1>
        </div>
        <div id="navigation">
            {self.navigation_build()}
        </div>
        <div id="content">
"""

    def footer_build(self, copyright: str = '') -> str:
        """
        Close the content region and emit footer, scripts and styles

        Args:
            copyright: Copyright holder text shown after the year
        """
        year = date.today().year

        styles = ''
        if self.markdownStyles:
            styles = f"<style>\n{asset_load('css/markdown.css')}</style>"

        scripts = ''
        if self.scripts:
            scripts = "<script>\n" + "\n".join(self.scripts) + "\n</script>"

        return f"""
        </div>
        <div id="footer">
            <div>&copy; {year} {sanitize(copyright)} - Built with <a href="{sanitize(appsettings.project_url)}">pagedown v{__version__}</a></div>
            <a href="#top" class="pd-button" style="margin-top: 1rem;">{sanitize(appsettings.back_to_top_label)}</a>
        </div>
    </div>
    {styles}
    {scripts}
</body>
</html>"""

    def html_render(self, copyright: str = '') -> str:
        """Complete HTML document: header, content region, footer"""
        LOG(f"Rendering page '{self.file_title}' with theme {self.themes.current}", level=2)
        return self.header_build() + '\n'.join(self.content) + self.footer_build(copyright)
