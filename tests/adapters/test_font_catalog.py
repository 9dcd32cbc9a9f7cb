# tests/adapters/test_font_catalog.py
from homework_diary.adapters.fonts.filesystem_catalog import FileSystemFontCatalog
from homework_diary.core.domain.models import Script


def _install(fonts_dir, *filenames):
    fonts_dir.mkdir(exist_ok=True)
    for name in filenames:
        (fonts_dir / name).write_bytes(b"\x00\x01\x00\x00")


class TestFileSystemFontCatalog:
    def test_missing_directory_is_latin_only(self, tmp_path):
        catalog = FileSystemFontCatalog(str(tmp_path / "nope"))
        assert catalog.available_scripts() == frozenset({Script.LATIN})
        assert catalog.health_check() is False

    def test_empty_directory_is_latin_only(self, tmp_path):
        catalog = FileSystemFontCatalog(str(tmp_path))
        assert catalog.available_scripts() == frozenset({Script.LATIN})
        assert catalog.health_check() is True

    def test_detects_installed_fonts(self, tmp_path):
        _install(tmp_path, "NotoSansTelugu-Regular.ttf")
        catalog = FileSystemFontCatalog(str(tmp_path))
        assert catalog.available_scripts() == frozenset({Script.LATIN, Script.TELUGU})

        _install(tmp_path, "NotoSansDevanagari-Regular.ttf")
        assert Script.DEVANAGARI in catalog.available_scripts()

    def test_custom_font_files(self, tmp_path):
        _install(tmp_path, "Gautami.ttf")
        catalog = FileSystemFontCatalog(str(tmp_path), {Script.TELUGU: "Gautami.ttf"})
        assert catalog.available_scripts() == frozenset({Script.LATIN, Script.TELUGU})
        assert catalog.font_path(Script.TELUGU) == tmp_path / "Gautami.ttf"
        assert catalog.font_path(Script.DEVANAGARI) is None

    def test_directory_named_like_a_font_is_ignored(self, tmp_path):
        (tmp_path / "NotoSansTelugu-Regular.ttf").mkdir()
        catalog = FileSystemFontCatalog(str(tmp_path))
        assert Script.TELUGU not in catalog.available_scripts()
