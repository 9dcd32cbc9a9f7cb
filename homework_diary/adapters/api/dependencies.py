# homework_diary/adapters/api/dependencies.py
from homework_diary.core.ports.font_catalog import IFontCatalog
from homework_diary.core.use_cases.format_homework import FormatHomework
from homework_diary.shared.container import container


def get_font_catalog() -> IFontCatalog:
    """Returns the process-wide font catalog (container-managed)."""
    return container.font_catalog()


def get_format_homework_use_case() -> FormatHomework:
    """Dependency to construct the FormatHomework interactor."""
    return container.format_homework_use_case()
