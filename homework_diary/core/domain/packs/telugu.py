# homework_diary/core/domain/packs/telugu.py
"""
Telugu language pack (subjects named "Telugu" or "తెలుగు").

Telugu puts the verb last, so most located bodies lead with the location.
"""

from types import MappingProxyType

from homework_diary.core.domain.models import Language, Script
from homework_diary.core.domain.packs.base import (
    ActivityTemplate,
    DescriptionLead,
    LanguagePack,
    register_pack,
)

Q = DescriptionLead.QUESTIONS

TELUGU = register_pack(LanguagePack(
    language=Language.TELUGU,
    script=Script.TELUGU,
    chapter_label="అధ్యాయం",
    lesson_label="పాఠం",
    page_word="పేజీ",
    question_label="ప్రశ్నలు: ",
    test_marker="[పరీక్ష]",
    templates=MappingProxyType({
        "reading": ActivityTemplate("పాఠ్యపుస్తకంలో {loc} చదవండి", "చదవండి", Q),
        "writing": ActivityTemplate("{loc} రాయడం పూర్తి చేయండి", "రాయడం పూర్తి చేయండి", Q),
        "read and write": ActivityTemplate("{loc} చదివి రాయండి", "చదివి రాయండి", Q),
        "learning": ActivityTemplate("{loc} నేర్చుకోండి", "నేర్చుకోండి"),
        "test": ActivityTemplate(
            "{loc} పరీక్షకు సిద్ధం అవండి", "పరీక్షకు సిద్ధం అవండి", marked=True
        ),
        "activity": ActivityTemplate("కృత్యం పూర్తి చేయండి: {loc}", "కృత్యం పూర్తి చేయండి"),
        "project": ActivityTemplate("ప్రాజెక్ట్ పని: {loc}", "ప్రాజెక్ట్ పూర్తి చేయండి"),
        "revise": ActivityTemplate("{loc} రివైజ్ చేయండి", "రివైజ్ చేయండి"),
        "complete": ActivityTemplate("పని పూర్తి చేయండి: {loc}", "పూర్తి చేయండి"),
    }),
    generic_located="{activity}: {loc}",
    anonymous_located="{loc}",
))
