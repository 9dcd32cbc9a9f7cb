# homework_diary/adapters/fonts/filesystem_catalog.py
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Optional

import structlog

from homework_diary.core.domain.models import Script
from homework_diary.core.ports.font_catalog import IFontCatalog
from homework_diary.shared.config import settings

logger = structlog.get_logger()


def default_font_files() -> Dict[Script, str]:
    return {
        Script.TELUGU: settings.TELUGU_FONT_FILE,
        Script.DEVANAGARI: settings.DEVANAGARI_FONT_FILE,
    }


class FileSystemFontCatalog(IFontCatalog):
    """
    Font availability backed by a directory of static TTF files.

    Latin is always drawable (renderers ship a built-in Latin font). A
    non-Latin script is drawable when its font file exists in ``fonts_dir``.
    """

    def __init__(self, fonts_dir: str, font_files: Optional[Mapping[Script, str]] = None):
        self.fonts_dir = Path(fonts_dir)
        self.font_files: Mapping[Script, str] = dict(font_files or default_font_files())

    def font_path(self, script: Script) -> Optional[Path]:
        """Path of the font file for ``script``, or None if none is configured."""
        filename = self.font_files.get(script)
        if not filename:
            return None
        return self.fonts_dir / filename

    # --- Interface Implementation ---

    def available_scripts(self) -> FrozenSet[Script]:
        scripts = {Script.LATIN}
        if not self.fonts_dir.is_dir():
            logger.info("fonts_dir_missing", path=str(self.fonts_dir))
            return frozenset(scripts)

        for script in self.font_files:
            path = self.font_path(script)
            if path is not None and path.is_file():
                scripts.add(script)
            else:
                logger.debug("font_missing", script=script.value, path=str(path))
        return frozenset(scripts)

    def health_check(self) -> bool:
        return self.fonts_dir.is_dir()
