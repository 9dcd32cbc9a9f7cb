# homework_diary/core/use_cases/format_homework.py
from typing import FrozenSet, List, Sequence

import structlog

from homework_diary.core.domain.formatter import render_activity
from homework_diary.core.domain.models import ActivityInput, FormattedActivity, Script
from homework_diary.core.ports.font_catalog import IFontCatalog
from homework_diary.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

LATIN_ONLY: FrozenSet[Script] = frozenset({Script.LATIN})


class FormatHomework:
    """
    Use Case: Turns homework rows into the sentences a renderer draws.

    Responsibilities:
    1. Asks the Font Catalog (Port) which scripts the renderer can draw.
    2. Formats each row, falling back to English for undrawable scripts.
    3. Traces and logs the work.

    A failing font source never aborts a row or a batch: rendering degrades
    to Latin-only text.
    """

    def __init__(self, fonts: IFontCatalog):
        self.fonts = fonts

    async def execute(self, activity: ActivityInput, english_only: bool = False) -> FormattedActivity:
        """
        Formats a single homework row.

        Args:
            activity: The homework fields.
            english_only: Force the English sentence regardless of fonts.

        Returns:
            FormattedActivity: text plus rendering hints.
        """
        with tracer.start_as_current_span("use_case.format_homework") as span:
            scripts = self._scripts(english_only)
            result = render_activity(activity, scripts)

            span.set_attribute("app.language", result.language.value)
            span.set_attribute("app.localized", result.localized)
            logger.debug(
                "activity_formatted",
                subject=activity.subject_name,
                language=result.language.value,
                localized=result.localized,
            )
            return result

    async def execute_batch(
        self,
        activities: Sequence[ActivityInput],
        english_only: bool = False,
    ) -> List[FormattedActivity]:
        """
        Formats many rows with a single font lookup. Results keep input order.
        """
        with tracer.start_as_current_span("use_case.format_homework_batch") as span:
            span.set_attribute("app.batch_size", len(activities))
            scripts = self._scripts(english_only)
            results = [render_activity(activity, scripts) for activity in activities]

            fallbacks = sum(1 for r in results if not r.localized)
            span.set_attribute("app.fallbacks", fallbacks)
            logger.info("batch_formatted", rows=len(results), english_fallbacks=fallbacks)
            return results

    def _scripts(self, english_only: bool) -> FrozenSet[Script]:
        if english_only:
            return LATIN_ONLY
        try:
            return frozenset(self.fonts.available_scripts()) | LATIN_ONLY
        except Exception as e:
            # Unknown font source failure: render readable English instead
            logger.warning("font_catalog_failed", error=str(e), exc_info=True)
            return LATIN_ONLY
