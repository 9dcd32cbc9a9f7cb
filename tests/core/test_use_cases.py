# tests/core/test_use_cases.py
import pytest

from homework_diary.core.domain.models import ActivityInput, Language, Script


@pytest.mark.asyncio
class TestFormatHomework:

    async def test_execute_localized(self, container, mock_font_catalog, telugu_row):
        """
        Scenario: The renderer has the Telugu font.
        Expected: The Telugu sentence is returned.
        """
        # Arrange
        use_case = container.format_homework_use_case()

        # Act
        result = await use_case.execute(telugu_row)

        # Assert
        assert result.language is Language.TELUGU
        assert result.localized is True
        assert result.text.startswith("పాఠ్యపుస్తకంలో")
        mock_font_catalog.available_scripts.assert_called_once_with()

    async def test_execute_missing_font_falls_back(self, container, mock_font_catalog, telugu_row):
        """
        Scenario: Only Latin fonts are installed.
        Expected: A readable English sentence instead of unrenderable glyphs.
        """
        # Arrange
        mock_font_catalog.available_scripts.return_value = frozenset({Script.LATIN})
        use_case = container.format_homework_use_case()

        # Act
        result = await use_case.execute(telugu_row)

        # Assert
        assert result.language is Language.ENGLISH
        assert result.localized is False
        assert result.text == (
            "Complete the reading from Textbook, Lesson 5, Page 12. Question numbers: 1,2."
        )

    async def test_execute_english_only_skips_font_lookup(self, container, mock_font_catalog, telugu_row):
        # Arrange
        use_case = container.format_homework_use_case()

        # Act
        result = await use_case.execute(telugu_row, english_only=True)

        # Assert
        assert result.language is Language.ENGLISH
        mock_font_catalog.available_scripts.assert_not_called()

    async def test_execute_font_catalog_failure(self, container, mock_font_catalog, telugu_row):
        """
        Scenario: The font source throws an unexpected exception.
        Expected: The row still renders, in English.
        """
        # Arrange
        mock_font_catalog.available_scripts.side_effect = OSError("fonts volume unmounted")
        use_case = container.format_homework_use_case()

        # Act
        result = await use_case.execute(telugu_row)

        # Assert
        assert result.language is Language.ENGLISH
        assert result.localized is False

    async def test_execute_test_row(self, container):
        use_case = container.format_homework_use_case()
        result = await use_case.execute(ActivityInput(activity_type="Test", subject_name="Science"))
        assert result.is_test is True
        assert result.text == "[TEST] Prepare for the test."


@pytest.mark.asyncio
class TestFormatHomeworkBatch:

    async def test_batch_keeps_order(self, container, mock_font_catalog, reading_row, telugu_row):
        """
        Scenario: A class table with mixed subjects.
        Expected: One result per row, in order, with a single font lookup.
        """
        # Arrange
        use_case = container.format_homework_use_case()
        rows = [reading_row, telugu_row, ActivityInput(subject_name="Hindi")]

        # Act
        results = await use_case.execute_batch(rows)

        # Assert
        assert [r.language for r in results] == [Language.ENGLISH, Language.TELUGU, Language.HINDI]
        assert results[2].text == "—"
        mock_font_catalog.available_scripts.assert_called_once_with()

    async def test_batch_english_only(self, container, reading_row, telugu_row):
        use_case = container.format_homework_use_case()

        results = await use_case.execute_batch([reading_row, telugu_row], english_only=True)

        assert all(r.language is Language.ENGLISH for r in results)
        assert [r.localized for r in results] == [True, False]

    async def test_empty_batch(self, container):
        use_case = container.format_homework_use_case()
        assert await use_case.execute_batch([]) == []
