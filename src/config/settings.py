"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PAGEDOWN_ prefix (e.g., PAGEDOWN_DEFAULT_THEME=teal).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PAGEDOWN_ prefix.

    Examples:
        PAGEDOWN_SITE_TITLE="Team Handbook"
        PAGEDOWN_DEFAULT_THEME=indigo
        PAGEDOWN_THEMES_FILE=/etc/pagedown/themes.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGEDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Page configuration
    site_title: str = Field(
        default="My Website",
        description="Site title shown in the page header and <title>",
    )

    default_theme: str = Field(
        default="blue",
        description="Theme applied when none is requested explicitly",
    )

    themes_file: Optional[str] = Field(
        default=None,
        description="Optional YAML file with extra themes merged over the built-in registry",
    )

    # Output configuration
    output_filename: str = Field(
        default="index.html",
        description="Filename of the compiled page within the output directory",
    )

    # Footer configuration
    project_url: str = Field(
        default="https://github.com/pagedown/pagedown",
        description="Link target for the 'Built with' footer credit",
    )

    back_to_top_label: str = Field(
        default="↑ Back to Top",
        description="Label of the footer back-to-top button",
    )

    def pageTitle_make(self, file_title: str, page_title: Optional[str] = None) -> str:
        """
        Build the document <title> text for a page.

        Args:
            file_title: Title of the current page (e.g. markdown file stem)
            page_title: Site title, defaults to ``site_title``

        Returns:
            Title string in the form "<site> - <page>"

        Example:
            >>> settings = AppSettings()
            >>> settings.pageTitle_make('About')
            'My Website - About'
        """
        return f"{page_title or self.site_title} - {file_title}"


# Singleton instance - import this in your code
appsettings = AppSettings()
