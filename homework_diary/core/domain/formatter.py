# homework_diary/core/domain/formatter.py
"""
Entry points of the homework sentence formatter.

These are the only functions renderers call. They are pure: no I/O, no
clock, no locale, no shared mutable state. Calling them twice with
value-equal input gives the same string.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from homework_diary.core.domain.language import detect_language, is_test_activity
from homework_diary.core.domain.models import ActivityInput, FormattedActivity, Language, Script
from homework_diary.core.domain.packs import get_pack
from homework_diary.core.domain.sentence_builder import build_sentence


def format_homework_activity(activity: ActivityInput) -> str:
    """
    Format a homework row in the language of its subject.

    Example:
        >>> format_homework_activity(ActivityInput(
        ...     activity_type="Reading", subject_name="English",
        ...     source="Textbook", chapter="5", page="42-43", description="1,2,3"))
        'Complete the reading from Textbook, Lesson 5, Page 42-43. Question numbers: 1,2,3.'
    """
    return build_sentence(activity, get_pack(detect_language(activity.subject_name)))


def format_english(activity: ActivityInput) -> str:
    """
    Format a homework row with the English pack whatever the subject.

    Used by renderers that cannot draw the subject's script.
    """
    return build_sentence(activity, get_pack(Language.ENGLISH))


def render_activity(
    activity: ActivityInput,
    available_scripts: Optional[AbstractSet] = None,
) -> FormattedActivity:
    """
    Format a row for a renderer that can only draw ``available_scripts``.

    The localized sentence is used when the subject's script is drawable
    (``None`` means every script is); otherwise the English sentence is
    returned and ``localized`` is False.
    """
    language = detect_language(activity.subject_name)
    pack = get_pack(language)
    drawable = (
        available_scripts is None
        or pack.script is Script.LATIN
        or pack.script in available_scripts
    )

    if drawable:
        text = build_sentence(activity, pack)
    else:
        language = Language.ENGLISH
        text = format_english(activity)

    return FormattedActivity(
        text=text,
        language=language,
        localized=drawable,
        is_test=is_test_activity(activity.activity_type),
    )
