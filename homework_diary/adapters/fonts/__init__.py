# homework_diary/adapters/fonts/__init__.py
"""
Font Catalog Adapters (implementations of `IFontCatalog`).
"""

from .filesystem_catalog import FileSystemFontCatalog

__all__ = ["FileSystemFontCatalog"]
