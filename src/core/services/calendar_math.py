"""
달력 계산 (페이지 인덱스 <-> 날짜, 월 그리드 배치)

UI 의존성이 없는 순수 함수 모음
"""
from typing import List, Optional

from core.domain.models import (
    DAYS_IN_WEEK,
    MAX_CALENDAR_ROWS,
    MONTHS_IN_YEAR,
    CalendarDate,
    Weekday,
    YearEntry,
    YearRange,
)
from core.ports.calendar_ports import SelectableDatesPort


def date_from_page(page: int, year_range: YearRange) -> CalendarDate:
    """
    페이지 인덱스 -> 해당 월의 1일

    범위 검사는 하지 않는다 (호출 측에서 clamp_page 로 보정).
    """
    year = year_range.first + page // MONTHS_IN_YEAR
    month = page % MONTHS_IN_YEAR + 1
    return CalendarDate(year, month, 1)


def page_from_date(date: CalendarDate, year_range: YearRange) -> int:
    """날짜 -> 페이지 인덱스 (date_from_page 의 역함수)"""
    return (date.year - year_range.first) * MONTHS_IN_YEAR + date.month - 1


def total_pages(year_range: YearRange) -> int:
    return year_range.count() * MONTHS_IN_YEAR


def clamp_page(page: int, year_range: YearRange) -> int:
    return max(0, min(page, total_pages(year_range) - 1))


def days_from_week_start_to_first_of_month(
    displayed_month: CalendarDate,
    first_day_of_week: Weekday,
) -> int:
    """월 1일 앞에 오는 빈 칸 수 (0~6)"""
    day_index = displayed_month.first_of_month().day_of_week
    start_index = first_day_of_week
    return (day_index - start_index + DAYS_IN_WEEK) % DAYS_IN_WEEK


def month_grid(
    displayed_month: CalendarDate,
    first_day_of_week: Weekday,
) -> List[List[Optional[int]]]:
    """
    6 x 7 월 그리드

    각 칸은 일(1~30) 또는 빈 칸(None). 달력 높이를 고정하기 위해 항상 6행.
    """
    leading = days_from_week_start_to_first_of_month(displayed_month, first_day_of_week)
    length = displayed_month.length_of_month

    cells: List[Optional[int]] = []
    for i in range(MAX_CALENDAR_ROWS * DAYS_IN_WEEK):
        if leading <= i < leading + length:
            cells.append(i - leading + 1)
        else:
            cells.append(None)

    return [cells[row * DAYS_IN_WEEK:(row + 1) * DAYS_IN_WEEK] for row in range(MAX_CALENDAR_ROWS)]


def weekday_order(first_day_of_week: Weekday) -> List[Weekday]:
    """요일 헤더 순서 (first_day_of_week 부터 회전)"""
    return [Weekday((first_day_of_week + i) % DAYS_IN_WEEK) for i in range(DAYS_IN_WEEK)]


def year_entries(
    year_range: YearRange,
    selectable_dates: SelectableDatesPort,
    current_year: int,
    selected_year: Optional[int] = None,
) -> List[YearEntry]:
    """연도 선택 목록"""
    return [
        YearEntry(
            year=year,
            is_current=year == current_year,
            selected=year == selected_year,
            enabled=selectable_dates.is_selectable_year(year),
        )
        for year in year_range
    ]
