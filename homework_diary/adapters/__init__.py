# homework_diary/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Core Ports plus the delivery mechanisms:
- `fonts`: font availability from the filesystem.
- `api`: the FastAPI application used by the image renderer.
"""
