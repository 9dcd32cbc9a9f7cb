# homework_diary/adapters/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, Depends

from homework_diary.adapters.api.dependencies import get_font_catalog
from homework_diary.adapters.api.schemas import ActivityTypesResponse, LanguageInfo
from homework_diary.core.domain.models import ACTIVITY_TYPES, DEFAULT_SOURCE
from homework_diary.core.domain.packs import list_packs
from homework_diary.core.ports.font_catalog import IFontCatalog

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/languages", response_model=List[LanguageInfo])
async def list_languages(fonts: IFontCatalog = Depends(get_font_catalog)):
    """Registered language packs and whether this server can draw them."""
    scripts = fonts.available_scripts()
    return [
        LanguageInfo(
            language=pack.language,
            script=pack.script,
            test_marker=pack.test_marker,
            available=pack.script in scripts,
        )
        for pack in list_packs()
    ]


@router.get("/activity-types", response_model=ActivityTypesResponse)
async def list_activity_types():
    """Activity types offered to data entry, in dropdown order."""
    return ActivityTypesResponse(
        activity_types=list(ACTIVITY_TYPES),
        default_source=DEFAULT_SOURCE,
    )
