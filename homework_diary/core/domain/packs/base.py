# homework_diary/core/domain/packs/base.py
"""
packs/base.py

Shared abstractions for language packs.

A language pack is pure data: the vocabulary, activity templates and
punctuation the sentence builder needs for one language. Adding a language
or an activity type means editing a pack, not the builder.

This module defines:
- DescriptionLead: how a description clause is introduced.
- ActivityTemplate: the sentence skeleton for one activity type.
- LanguagePack: everything the builder needs for one language.
- A registry so packs can be looked up by Language.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from homework_diary.core.domain.exceptions import (
    DuplicateLanguagePackError,
    LanguagePackNotFoundError,
)
from homework_diary.core.domain.language import is_maths_subject
from homework_diary.core.domain.models import Language, Script


# ---------------------------------------------------------------------------
# Basic types
# ---------------------------------------------------------------------------


class DescriptionLead(str, Enum):
    """How the description clause is introduced after the main sentence."""

    #: Prefixed with the pack's question label ("Question numbers: ").
    QUESTIONS = "questions"
    #: Appended as written.
    NOTE = "note"


@dataclass(frozen=True)
class ActivityTemplate:
    """
    Sentence skeleton for one activity type.

    Attributes:
        located:
            Body used when a location phrase exists. Must contain ``{loc}``.
        bare:
            Body used when there is no location phrase.
        lead:
            How a description is introduced.
        marked:
            Prefix the body with the pack's bracketed test marker.
    """

    located: str
    bare: str
    lead: DescriptionLead = DescriptionLead.NOTE
    marked: bool = False

    def body(self, loc: str) -> str:
        return self.located.format(loc=loc) if loc else self.bare


@dataclass(frozen=True)
class LanguagePack:
    """
    Vocabulary and templates for one language.

    Attributes:
        language / script:
            The language rendered and the writing system it needs.
        chapter_label / lesson_label:
            Word placed before the chapter number for maths / other subjects.
        page_word:
            Word placed before the page reference.
        question_label:
            Lead-in for descriptions of QUESTIONS-style templates.
        test_marker:
            Bracketed marker prefixed to the test template.
        templates:
            Normalised activity key -> ActivityTemplate.
        generic_located:
            Body for an unknown activity with a location
            (``{activity}`` and ``{loc}`` placeholders).
        anonymous_located:
            Body when there is no activity but a location exists (``{loc}``).
    """

    language: Language
    script: Script
    chapter_label: str
    lesson_label: str
    page_word: str
    question_label: str
    test_marker: str
    templates: Mapping[str, ActivityTemplate] = field(default_factory=dict)
    generic_located: str = "{activity} {loc}"
    anonymous_located: str = "{loc}"
    list_separator: str = ", "
    terminator: str = "."
    placeholder: str = "—"

    def lesson_label_for(self, subject_name: Optional[str]) -> str:
        return self.chapter_label if is_maths_subject(subject_name) else self.lesson_label

    def template_for(self, activity_key: str) -> Optional[ActivityTemplate]:
        return self.templates.get(activity_key)


# ---------------------------------------------------------------------------
# Pack registry
# ---------------------------------------------------------------------------

PACK_REGISTRY: Dict[Language, LanguagePack] = {}
"""Global registry mapping Language -> LanguagePack."""


def register_pack(pack: LanguagePack) -> LanguagePack:
    """
    Register a pack under its language.

    Raises:
        DuplicateLanguagePackError: if the language already has a pack.
    """
    if pack.language in PACK_REGISTRY:
        raise DuplicateLanguagePackError(pack.language.value)
    PACK_REGISTRY[pack.language] = pack
    return pack


def get_pack(language: Language) -> LanguagePack:
    """
    Return the registered pack for ``language``.

    Raises:
        LanguagePackNotFoundError: if nothing is registered for it.
    """
    try:
        return PACK_REGISTRY[language]
    except KeyError:
        raise LanguagePackNotFoundError(getattr(language, "value", str(language))) from None


def list_packs() -> List[LanguagePack]:
    """Snapshot of the registered packs, in registration order."""
    return list(PACK_REGISTRY.values())
