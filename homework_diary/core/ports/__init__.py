# homework_diary/core/ports/__init__.py
"""
Ports (interfaces) the Core depends on. Adapters provide the implementations.
"""

from .font_catalog import IFontCatalog

__all__ = ["IFontCatalog"]
