"""
Models package for pagedown

Contains data structures and type definitions for the page pipeline.
"""

from .state import ProgramState, pipeline
from .page import LoadedDocument, RenderResult, NavItem, ThemeColors

__all__ = [
    "ProgramState",
    "pipeline",
    "LoadedDocument",
    "RenderResult",
    "NavItem",
    "ThemeColors",
]
