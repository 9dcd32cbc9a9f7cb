# homework_diary/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the Core Domain and the Adapters:
- Configuration management
- Structured logging
- Distributed tracing
- Dependency Injection wiring
"""
