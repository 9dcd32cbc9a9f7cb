# homework_diary/core/__init__.py
"""
Core Domain Layer.

Pure business logic of the homework diary, following the Hexagonal
Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks (FastAPI) or infrastructure (filesystem).
- Defines Interfaces (Ports) that the Adapters implement.
"""
