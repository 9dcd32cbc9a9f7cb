# homework_diary/core/domain/packs/english.py
"""
English language pack.

Also the fallback for every subject that is neither Telugu nor Hindi, and
the pack used when a renderer cannot draw a non-Latin script.
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

ENGLISH = register_pack(LanguagePack(
    language=Language.ENGLISH,
    script=Script.LATIN,
    chapter_label="Chapter",
    lesson_label="Lesson",
    page_word="Page",
    question_label="Question numbers: ",
    test_marker="[TEST]",
    templates=MappingProxyType({
        "reading": ActivityTemplate("Complete the reading from {loc}", "Complete the reading", Q),
        "writing": ActivityTemplate("Complete the writing task from {loc}", "Complete the writing task", Q),
        "read and write": ActivityTemplate("Read and write from {loc}", "Read and write", Q),
        "learning": ActivityTemplate("Learn the content from {loc}", "Learn the content"),
        "test": ActivityTemplate(
            "Prepare for the test from {loc}", "Prepare for the test", marked=True
        ),
        "activity": ActivityTemplate("Complete the activity from {loc}", "Complete the activity"),
        "project": ActivityTemplate("Complete the project work from {loc}", "Complete the project work"),
        "revise": ActivityTemplate("Revise from {loc}", "Revise"),
        "complete": ActivityTemplate("Complete the given task from {loc}", "Complete the given task"),
    }),
    generic_located="{activity} from {loc}",
    anonymous_located="From {loc}",
))
