# homework_diary/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

The "Interactors" of the system. They orchestrate the flow of data between
the Domain (the sentence formatter) and the Ports (font availability).
"""

from .format_homework import FormatHomework

__all__ = [
    "FormatHomework",
]
