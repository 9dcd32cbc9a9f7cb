# homework_diary/core/ports/font_catalog.py
from typing import FrozenSet, Protocol

from homework_diary.core.domain.models import Script


class IFontCatalog(Protocol):
    """
    Port for the fonts available to a renderer.
    Implementations:
    - FileSystemFontCatalog (static TTF files in a fonts directory)
    """

    def available_scripts(self) -> FrozenSet[Script]:
        """
        Returns the scripts the renderer can draw.
        Latin is always included.
        """
        ...

    def health_check(self) -> bool:
        """Returns True if the font source is reachable."""
        ...
