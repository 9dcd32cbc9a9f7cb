# homework_diary/core/domain/packs/__init__.py
"""
Language packs.

Importing this package registers the English, Telugu and Hindi packs.
"""

from .base import (
    PACK_REGISTRY,
    ActivityTemplate,
    DescriptionLead,
    LanguagePack,
    get_pack,
    list_packs,
    register_pack,
)
from .english import ENGLISH
from .telugu import TELUGU
from .hindi import HINDI

__all__ = [
    "PACK_REGISTRY",
    "ActivityTemplate",
    "DescriptionLead",
    "LanguagePack",
    "get_pack",
    "list_packs",
    "register_pack",
    "ENGLISH",
    "TELUGU",
    "HINDI",
]
