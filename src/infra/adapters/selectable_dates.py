"""
제외 목록 기반 선택 가능 날짜 정책
"""
from typing import AbstractSet

from core.domain.models import CalendarDate, Weekday
from core.ports.calendar_ports import SelectableDatesPort


class ExclusionSelectableDates(SelectableDatesPort):
    """
    네 가지 제외 목록 중 하나라도 해당하면 선택 불가

    is_selectable_year 는 제외 연도만 본다.
    (12개월을 모두 제외해도 연도 자체는 선택 가능으로 남는다)
    """

    def __init__(
        self,
        disabled_dates: AbstractSet[CalendarDate] = frozenset(),
        disabled_days_of_week: AbstractSet[Weekday] = frozenset(),
        disabled_months: AbstractSet[int] = frozenset(),  # 히즈라력 월 1~12
        disabled_years: AbstractSet[int] = frozenset()
    ):
        self.disabled_dates = frozenset(disabled_dates)
        self.disabled_days_of_week = frozenset(disabled_days_of_week)
        self.disabled_months = frozenset(disabled_months)
        self.disabled_years = frozenset(disabled_years)

    def is_selectable_date(self, date: CalendarDate) -> bool:
        if date in self.disabled_dates:
            return False
        if date.day_of_week in self.disabled_days_of_week:
            return False
        if date.month in self.disabled_months:
            return False
        if date.year in self.disabled_years:
            return False
        return True

    def is_selectable_year(self, year: int) -> bool:
        return year not in self.disabled_years
