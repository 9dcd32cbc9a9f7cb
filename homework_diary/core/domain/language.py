# homework_diary/core/domain/language.py
"""
Subject and activity classifiers.

All checks are substring matches on the case-folded name, so subjects such
as "Hindi II", "Telugu (2nd Lang)" or "Mathematics" are recognised.
"""

from __future__ import annotations

from typing import Optional

from homework_diary.core.domain.models import Language

TELUGU_MARKERS = ("telugu", "తెలుగు")
HINDI_MARKERS = ("hindi", "हिंदी", "हिन्दी")
MATHS_MARKER = "math"
TEST_MARKER = "test"


def _fold(value: Optional[str]) -> str:
    return (value or "").casefold()


def is_telugu(subject_name: Optional[str]) -> bool:
    name = _fold(subject_name)
    return any(marker in name for marker in TELUGU_MARKERS)


def is_hindi(subject_name: Optional[str]) -> bool:
    name = _fold(subject_name)
    return any(marker in name for marker in HINDI_MARKERS)


def detect_language(subject_name: Optional[str]) -> Language:
    """
    Pick the sentence language for a subject.

    Telugu is checked first; anything unrecognised, including an empty
    name, is English.
    """
    if is_telugu(subject_name):
        return Language.TELUGU
    if is_hindi(subject_name):
        return Language.HINDI
    return Language.ENGLISH


def is_maths_subject(subject_name: Optional[str]) -> bool:
    """Maths subjects say "Chapter"; every other subject says "Lesson"."""
    return MATHS_MARKER in _fold(subject_name)


def is_test_activity(activity_type: Optional[str]) -> bool:
    return TEST_MARKER in _fold(activity_type)


def normalize_activity(activity_type: Optional[str]) -> str:
    """Template lookup key: trimmed, inner whitespace collapsed, case-folded."""
    return " ".join(_fold(activity_type).split())
