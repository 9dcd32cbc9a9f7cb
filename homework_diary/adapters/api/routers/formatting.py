# homework_diary/adapters/api/routers/formatting.py
from fastapi import APIRouter, Body, Depends, Query, status

from homework_diary.adapters.api.dependencies import get_format_homework_use_case
from homework_diary.adapters.api.schemas import BatchFormatRequest, BatchFormatResponse
from homework_diary.core.domain.models import ActivityInput, FormattedActivity
from homework_diary.core.use_cases.format_homework import FormatHomework

# Domain errors are mapped to 400 by the application-level handler.
router = APIRouter(prefix="/format", tags=["Formatting"])


@router.post(
    "",
    response_model=FormattedActivity,
    status_code=status.HTTP_200_OK,
    summary="Format one homework row",
)
async def format_activity(
    activity: ActivityInput = Body(..., description="Homework fields of one row"),
    english_only: bool = Query(False, description="Force the English sentence"),
    use_case: FormatHomework = Depends(get_format_homework_use_case),
):
    """
    Converts one homework row into its display sentence.

    **Body:**
    * `activity`: `activityType`, `subjectName`, `source`, `chapter`, `page`, `description`.

    **Returns:**
    * A `FormattedActivity` with the sentence, the language used and the
      `isTest` styling hint.
    """
    return await use_case.execute(activity, english_only=english_only)


@router.post(
    "/batch",
    response_model=BatchFormatResponse,
    status_code=status.HTTP_200_OK,
    summary="Format every row of an export",
)
async def format_batch(
    request: BatchFormatRequest,
    use_case: FormatHomework = Depends(get_format_homework_use_case),
):
    """
    Formats a whole table of homework rows in one call. Results keep the
    order of `rows`.
    """
    results = await use_case.execute_batch(request.rows, english_only=request.english_only)
    return BatchFormatResponse(results=results)
