# tests/core/test_language_packs.py
import pytest

from homework_diary.core.domain.exceptions import (
    DomainError,
    DuplicateLanguagePackError,
    LanguagePackNotFoundError,
)
from homework_diary.core.domain.models import Language, Script
from homework_diary.core.domain.packs import (
    ENGLISH,
    HINDI,
    PACK_REGISTRY,
    TELUGU,
    ActivityTemplate,
    get_pack,
    list_packs,
    register_pack,
)

ACTIVITY_KEYS = {
    "reading",
    "writing",
    "read and write",
    "learning",
    "test",
    "activity",
    "project",
    "revise",
    "complete",
}


class TestRegistry:
    def test_all_three_languages_registered(self):
        assert [p.language for p in list_packs()] == [
            Language.ENGLISH,
            Language.TELUGU,
            Language.HINDI,
        ]

    def test_get_pack(self):
        assert get_pack(Language.TELUGU) is TELUGU

    def test_duplicate_registration_rejected(self):
        with pytest.raises(DuplicateLanguagePackError):
            register_pack(ENGLISH)

    def test_missing_pack(self, monkeypatch):
        monkeypatch.delitem(PACK_REGISTRY, Language.HINDI)
        with pytest.raises(LanguagePackNotFoundError) as excinfo:
            get_pack(Language.HINDI)
        assert isinstance(excinfo.value, DomainError)
        assert "hindi" in excinfo.value.message


class TestPackContents:
    @pytest.mark.parametrize("pack", [ENGLISH, TELUGU, HINDI])
    def test_every_pack_has_the_nine_templates(self, pack):
        assert set(pack.templates) == ACTIVITY_KEYS

    @pytest.mark.parametrize("pack", [ENGLISH, TELUGU, HINDI])
    def test_only_test_template_is_marked(self, pack):
        marked = {key for key, t in pack.templates.items() if t.marked}
        assert marked == {"test"}

    @pytest.mark.parametrize("pack", [ENGLISH, TELUGU, HINDI])
    def test_located_bodies_take_the_location(self, pack):
        for template in pack.templates.values():
            assert "{loc}" in template.located
            assert "{loc}" not in template.bare

    def test_scripts(self):
        assert ENGLISH.script is Script.LATIN
        assert TELUGU.script is Script.TELUGU
        assert HINDI.script is Script.DEVANAGARI

    def test_templates_are_read_only(self):
        with pytest.raises(TypeError):
            ENGLISH.templates["spelling"] = ActivityTemplate("Spell {loc}", "Spell")

    @pytest.mark.parametrize(
        "pack, subject, expected",
        [
            (ENGLISH, "Maths", "Chapter"),
            (ENGLISH, "English", "Lesson"),
            (TELUGU, "Maths", "అధ్యాయం"),
            (TELUGU, "English", "పాఠం"),
            (HINDI, "Mathematics", "अध्याय"),
            (HINDI, "Hindi", "पाठ"),
        ],
    )
    def test_lesson_label(self, pack, subject, expected):
        assert pack.lesson_label_for(subject) == expected
