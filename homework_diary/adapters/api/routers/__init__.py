# homework_diary/adapters/api/routers/__init__.py
"""
API Route Definitions.

Route handlers (controllers) organized by area.
- `formatting`: homework sentence formatting (Core Value).
- `catalog`: languages and activity types for data entry and renderers.
- `health`: System health checks.
"""

from .formatting import router as formatting_router
from .catalog import router as catalog_router
from .health import router as health_router

__all__ = [
    "formatting_router",
    "catalog_router",
    "health_router",
]
