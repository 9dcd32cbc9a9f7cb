# homework_diary/core/domain/models.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# --- Enums ---


class Language(str, Enum):
    """Languages a homework sentence can be rendered in."""
    ENGLISH = "english"
    TELUGU = "telugu"
    HINDI = "hindi"


class Script(str, Enum):
    """Writing system a renderer needs a font for."""
    LATIN = "latin"
    TELUGU = "telugu"
    DEVANAGARI = "devanagari"


# --- Reference data ---

# Order matches the data-entry dropdown.
ACTIVITY_TYPES = (
    "Reading",
    "Writing",
    "Read and Write",
    "Learning",
    "Project",
    "Activity",
    "Test",
    "Revise",
    "Complete",
)

DEFAULT_SOURCE = "Textbook"

# --- Value Objects ---


class ActivityInput(BaseModel):
    """
    The homework fields a sentence is built from.

    Collaborators (the persistence layer, the image renderer) send camelCase
    JSON; snake_case names are accepted as well. Nulls in the required
    string fields are read as empty strings so a half-filled row never
    fails validation.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    activity_type: str = Field(default="", description="e.g. 'Reading', 'Test'")
    subject_name: str = Field(default="", description="Drives language selection")
    source: Optional[str] = Field(default=None, description="e.g. 'Textbook'")
    chapter: Optional[str] = None
    page: Optional[str] = None
    description: str = Field(default="", description="Usually question numbers")

    @field_validator("activity_type", "subject_name", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class FormattedActivity(BaseModel):
    """
    A rendered homework sentence plus the hints renderers style it with.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    language: Language
    # False when a Telugu/Hindi subject fell back to the English sentence
    localized: bool = True
    # Test rows are drawn emphasised (red, bold) by both renderers
    is_test: bool = False
