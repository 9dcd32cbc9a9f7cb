# tests/core/test_language.py
import pytest

from homework_diary.core.domain.language import (
    detect_language,
    is_hindi,
    is_maths_subject,
    is_telugu,
    is_test_activity,
    normalize_activity,
)
from homework_diary.core.domain.models import Language


class TestDetectLanguage:
    @pytest.mark.parametrize("subject", ["Telugu", "తెలుగు", "TELUGU", "2nd Lang telugu"])
    def test_telugu_subjects(self, subject):
        assert detect_language(subject) is Language.TELUGU

    @pytest.mark.parametrize("subject", ["Hindi", "Hindi II", "हिंदी", "हिन्दी", "hindi"])
    def test_hindi_subjects(self, subject):
        assert detect_language(subject) is Language.HINDI

    @pytest.mark.parametrize("subject", ["English", "Maths", "", "Science", "EVS"])
    def test_everything_else_is_english(self, subject):
        assert detect_language(subject) is Language.ENGLISH

    def test_none_is_english(self):
        assert detect_language(None) is Language.ENGLISH

    def test_telugu_wins_over_hindi(self):
        assert is_telugu("Telugu / Hindi")
        assert is_hindi("Telugu / Hindi")
        assert detect_language("Telugu / Hindi") is Language.TELUGU


class TestClassifiers:
    @pytest.mark.parametrize("subject", ["Maths", "Mathematics", "MATHS", "Applied Math"])
    def test_maths_subjects(self, subject):
        assert is_maths_subject(subject)

    @pytest.mark.parametrize("subject", ["English", "Science", "", None])
    def test_non_maths_subjects(self, subject):
        assert not is_maths_subject(subject)

    @pytest.mark.parametrize("activity", ["Test", "unit test", "TEST"])
    def test_test_activities(self, activity):
        assert is_test_activity(activity)

    @pytest.mark.parametrize("activity", ["Reading", "", None])
    def test_non_test_activities(self, activity):
        assert not is_test_activity(activity)

    def test_normalize_activity(self):
        assert normalize_activity("  Read   and WRITE ") == "read and write"
        assert normalize_activity(None) == ""
