"""
Theme registry for pagedown pages.

A theme is a named gradient colour pair injected into the page head as the
--theme-start / --theme-end CSS custom properties. Themes are read from
YAML registries:

  themes:
    blue: {start: "#4a90e2", end: "#357abd"}

The built-in registry ships as assets/themes.yaml; an optional extra
registry (PAGEDOWN_THEMES_FILE) is merged over it.
"""

import html
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..config import appsettings
from ..models.page import ThemeColors
from .errors import ThemeError
from .log import LOG


BUILTIN_THEMES_FILE = Path(__file__).parent.parent / "assets" / "themes.yaml"


def registry_load(path: Path) -> Dict[str, ThemeColors]:
    """
    Load and validate a theme registry YAML file.

    Args:
        path: Registry file with a top-level 'themes' mapping

    Returns:
        Dict mapping theme names to ThemeColors, in file order

    Raises:
        ThemeError: If the file is missing, unparsable or malformed
    """
    if not path.is_file():
        raise ThemeError(f"Theme registry not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ThemeError(f"Failed to parse {path.name}: {e}")
    except OSError as e:
        raise ThemeError(f"Failed to load {path.name}: {e}")

    if config is None:
        config = {}
    themes = config.get('themes', {}) if isinstance(config, dict) else None
    if not isinstance(themes, dict):
        raise ThemeError(f"{path.name}: 'themes' must be a mapping")

    registry: Dict[str, ThemeColors] = {}
    for name, colors in themes.items():
        if not isinstance(colors, dict) or 'start' not in colors or 'end' not in colors:
            raise ThemeError(f"{path.name}: theme '{name}' needs 'start' and 'end' colours")
        registry[str(name)] = ThemeColors(start=str(colors['start']), end=str(colors['end']))

    return registry


class ThemeManager:
    """
    Holds the available themes and the currently selected one.

    Example:
        >>> themes = ThemeManager()
        >>> themes.theme_set('teal')
        >>> themes.colors_get().start
        '#1abc9c'
    """

    def __init__(self, themes_file: Optional[str] = None, default_theme: Optional[str] = None):
        """
        Load the built-in registry plus an optional extra registry.

        Args:
            themes_file: Extra YAML registry (default: settings themes_file)
            default_theme: Initially selected theme (default: settings default_theme)

        Raises:
            ThemeError: If a registry is malformed or the default is unknown
        """
        self.themes: Dict[str, ThemeColors] = registry_load(BUILTIN_THEMES_FILE)

        extra = themes_file or appsettings.themes_file
        if extra:
            self.themes.update(registry_load(Path(extra)))
            LOG(f"Merged theme registry: {extra}", level=2)

        self.current = ''
        self.theme_set(default_theme or appsettings.default_theme)

    def theme_set(self, theme_name: str) -> None:
        """
        Select a theme by name.

        Raises:
            ThemeError: If the theme doesn't exist
        """
        if theme_name not in self.themes:
            raise ThemeError(f"Invalid theme: {html.escape(theme_name, quote=True)}")
        self.current = theme_name
        LOG(f"Theme set: {theme_name}", level=3)

    def colors_get(self) -> ThemeColors:
        """Colours of the currently selected theme"""
        return self.themes[self.current]

    def themes_listAvailable(self) -> list[str]:
        """Names of all registered themes, in registry order"""
        return list(self.themes.keys())

    def __repr__(self) -> str:
        return f"ThemeManager(current='{self.current}', themes={len(self.themes)})"
