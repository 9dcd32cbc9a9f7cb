# homework_diary/shared/container.py
from dependency_injector import containers, providers

from homework_diary.adapters.fonts.filesystem_catalog import FileSystemFontCatalog
from homework_diary.core.use_cases.format_homework import FormatHomework
from homework_diary.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Gateways (Infrastructure Adapters)

    # Font Catalog (Singleton: one view of the fonts directory)
    font_catalog = providers.Singleton(
        FileSystemFontCatalog,
        fonts_dir=settings.FONTS_DIR,
    )

    # 2. Use Cases (Application Logic)

    # Factory: new instance per request (stateless logic),
    # with the Singleton catalog injected.
    format_homework_use_case = providers.Factory(
        FormatHomework,
        fonts=font_catalog,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
