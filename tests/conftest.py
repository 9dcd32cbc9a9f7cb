# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from homework_diary.core.domain.models import ActivityInput, Script
from homework_diary.core.ports.font_catalog import IFontCatalog
from homework_diary.shared.container import Container


@pytest.fixture(scope="function")
def mock_font_catalog():
    """Returns a mock Font Catalog that can draw every script."""
    fonts = MagicMock(spec=IFontCatalog)
    fonts.available_scripts.return_value = frozenset(Script)
    fonts.health_check.return_value = True
    return fonts


@pytest.fixture(scope="function")
def container(mock_font_catalog):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the filesystem font catalog with the mock defined above.
    """
    container = Container()
    container.font_catalog.override(mock_font_catalog)

    yield container

    # Clean up overrides after test
    container.reset_override()


@pytest.fixture
def reading_row():
    """The canonical fully-populated English row."""
    return ActivityInput(
        activity_type="Reading",
        subject_name="English",
        source="Textbook",
        chapter="5",
        page="42-43",
        description="1,2,3",
    )


@pytest.fixture
def telugu_row():
    """A Telugu-subject row with every location field set."""
    return ActivityInput(
        activity_type="Reading",
        subject_name="Telugu",
        source="Textbook",
        chapter="5",
        page="12",
        description="1,2",
    )
