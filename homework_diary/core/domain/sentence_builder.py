# homework_diary/core/domain/sentence_builder.py
"""
Generic homework sentence builder.

One algorithm for every language; the wording comes from the LanguagePack.
A sentence is made of up to two clauses, each closed by the pack
terminator and joined by a space:

    <body>.  <lead><description>.

where the body is the activity template (or the generic rendering of an
unknown activity) and the second clause only exists when a description was
given. With neither clause the pack placeholder ("—") is returned.
"""

from __future__ import annotations

import re
from typing import Optional

from homework_diary.core.domain.language import normalize_activity
from homework_diary.core.domain.models import ActivityInput
from homework_diary.core.domain.packs.base import DescriptionLead, LanguagePack

_REPEATED_PERIODS = re.compile(r"\.{2,}")


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def build_location(activity: ActivityInput, pack: LanguagePack) -> str:
    """
    Join source, "<lesson label> <chapter>" and "<page word> <page>", in that
    order, skipping the absent ones.
    """
    parts = []

    source = _clean(activity.source)
    if source:
        parts.append(source)

    chapter = _clean(activity.chapter)
    if chapter:
        parts.append(f"{pack.lesson_label_for(activity.subject_name)} {chapter}")

    page = _clean(activity.page)
    if page:
        parts.append(f"{pack.page_word} {page}")

    return pack.list_separator.join(parts)


def _generic_body(display: str, loc: str, pack: LanguagePack) -> str:
    if display and loc:
        return pack.generic_located.format(activity=display, loc=loc)
    if display:
        return display
    if loc:
        return pack.anonymous_located.format(loc=loc)
    return ""


def build_sentence(activity: ActivityInput, pack: LanguagePack) -> str:
    """
    Render ``activity`` with ``pack``. Never raises and never returns "".
    """
    display = _clean(activity.activity_type)
    loc = build_location(activity, pack)
    description = _clean(activity.description)

    template = pack.template_for(normalize_activity(display))
    if template is not None:
        body = template.body(loc)
        if template.marked:
            body = f"{pack.test_marker} {body}"
        lead = pack.question_label if template.lead is DescriptionLead.QUESTIONS else ""
    else:
        body = _generic_body(display, loc, pack)
        lead = ""

    clauses = []
    if body:
        clauses.append(f"{body}{pack.terminator}")
    if description:
        clauses.append(f"{lead}{description}{pack.terminator}")

    if not clauses:
        return pack.placeholder

    # Descriptions often end with their own period ("1, 2, 3.")
    return _REPEATED_PERIODS.sub(".", " ".join(clauses))
