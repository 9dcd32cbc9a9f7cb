# homework_diary/adapters/api/schemas.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from homework_diary.core.domain.models import ActivityInput, FormattedActivity, Language, Script

# --- Pydantic Schemas (DTOs) ---


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BatchFormatRequest(_CamelModel):
    """Rows of one export (a class/day table), formatted together."""
    rows: List[ActivityInput] = Field(default_factory=list)
    english_only: bool = False


class BatchFormatResponse(_CamelModel):
    results: List[FormattedActivity]


class LanguageInfo(_CamelModel):
    language: Language
    script: Script
    test_marker: str
    # Whether the server's fonts can draw this language
    available: bool


class ActivityTypesResponse(_CamelModel):
    activity_types: List[str]
    default_source: str
