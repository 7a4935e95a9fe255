"""
범위 선택 배경 그리기용 그리드 좌표 계산
"""
from typing import Optional

from core.domain.models import (
    DAYS_IN_WEEK,
    CalendarDate,
    GridCoordinates,
    SelectedRangeInfo,
    Weekday,
)
from core.services.calendar_math import days_from_week_start_to_first_of_month


def calculate_range_info(
    displayed_month: CalendarDate,
    start_date: CalendarDate,
    end_date: CalendarDate,
    first_day_of_week: Weekday,
) -> Optional[SelectedRangeInfo]:
    """
    표시 중인 월의 7 x 6 그리드에서 선택 범위의 시작/끝 좌표 계산

    범위가 표시 월과 겹치지 않으면 None.
    범위가 월 경계를 넘으면 월의 첫날/말일로 잘라낸다.
    """
    month_start = displayed_month.first_of_month()
    month_end = displayed_month.last_of_month()
    number_of_days = displayed_month.length_of_month
    leading = days_from_week_start_to_first_of_month(displayed_month, first_day_of_week)

    if start_date > month_end or end_date < month_start:
        return None

    first_is_selection_start = start_date >= month_start
    last_is_selection_end = end_date <= month_end

    if first_is_selection_start:
        start_offset = leading + start_date.day - 1
    else:
        start_offset = leading

    if last_is_selection_end:
        end_offset = leading + end_date.day - 1
    else:
        end_offset = leading + number_of_days - 1

    return SelectedRangeInfo(
        grid_start=GridCoordinates(x=start_offset % DAYS_IN_WEEK, y=start_offset // DAYS_IN_WEEK),
        grid_end=GridCoordinates(x=end_offset % DAYS_IN_WEEK, y=end_offset // DAYS_IN_WEEK),
        first_is_selection_start=first_is_selection_start,
        last_is_selection_end=last_is_selection_end,
    )
