# homework_diary/core/domain/packs/hindi.py
"""
Hindi language pack (subjects named "Hindi", "हिंदी" or "हिन्दी").

Sentences end with "." rather than the danda so the same period
normalisation applies to every language.
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

HINDI = register_pack(LanguagePack(
    language=Language.HINDI,
    script=Script.DEVANAGARI,
    chapter_label="अध्याय",
    lesson_label="पाठ",
    page_word="पृष्ठ",
    question_label="प्रश्न: ",
    test_marker="[परीक्षा]",
    templates=MappingProxyType({
        "reading": ActivityTemplate("पाठ्यपुस्तक में {loc} पढ़ें", "पढ़ें", Q),
        "writing": ActivityTemplate("{loc} लिखने का कार्य पूरा करें", "लिखने का कार्य पूरा करें", Q),
        "read and write": ActivityTemplate("{loc} पढ़कर लिखें", "पढ़कर लिखें", Q),
        "learning": ActivityTemplate("{loc} सीखें", "सीखें"),
        "test": ActivityTemplate(
            "{loc} परीक्षा की तैयारी करें", "परीक्षा की तैयारी करें", marked=True
        ),
        "activity": ActivityTemplate("गतिविधि पूरी करें: {loc}", "गतिविधि पूरी करें"),
        "project": ActivityTemplate("परियोजना कार्य: {loc}", "परियोजना पूरी करें"),
        "revise": ActivityTemplate("{loc} दोहराएं", "दोहराएं"),
        "complete": ActivityTemplate("दिया गया कार्य पूरा करें: {loc}", "पूरा करें"),
    }),
    generic_located="{activity}: {loc}",
    anonymous_located="{loc}",
))
