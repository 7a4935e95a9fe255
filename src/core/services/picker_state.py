"""
날짜 피커 상태 (단일 / 범위 / 다중 선택)

표시 레이어가 관찰하고 갱신하는 상태 객체.
모든 날짜 설정은 year_range 안에 있어야 한다.
"""
from typing import Callable, FrozenSet, Iterable, List, Optional, Union

from core.domain.exceptions import YearRangeError
from core.domain.models import (
    DAYS_IN_WEEK,
    MAX_CALENDAR_ROWS,
    CalendarDate,
    DayCell,
    DisplayMode,
    MultiSelection,
    NoSelection,
    RangeSelection,
    SelectedRangeInfo,
    SingleSelection,
    Weekday,
    YearRange,
)
from core.ports.calendar_ports import AllDates, SelectableDatesPort
from core.services.calendar_math import (
    clamp_page,
    date_from_page,
    days_from_week_start_to_first_of_month,
    page_from_date,
    total_pages,
)
from core.services.range_geometry import calculate_range_info


class _PickerState:
    """표시 월, 표시 모드, 연도 범위 공통 처리"""

    def __init__(
        self,
        year_range: YearRange,
        selectable_dates: SelectableDatesPort,
        initial_displayed_month: Optional[CalendarDate],
        initial_display_mode: DisplayMode
    ):
        self.year_range = year_range
        self.selectable_dates = selectable_dates
        self.display_mode = initial_display_mode
        if initial_displayed_month is None:
            initial_displayed_month = self._default_displayed_month()
        self.displayed_month = initial_displayed_month

    @property
    def displayed_month(self) -> CalendarDate:
        return self._displayed_month

    @displayed_month.setter
    def displayed_month(self, value: CalendarDate) -> None:
        self._require_in_range(value, "displayed month")
        self._displayed_month = value.first_of_month()

    @property
    def current_page(self) -> int:
        return page_from_date(self._displayed_month, self.year_range)

    @property
    def page_count(self) -> int:
        return total_pages(self.year_range)

    def show_page(self, page: int) -> CalendarDate:
        """페이지로 이동 (범위를 벗어나면 첫/마지막 페이지로 보정)"""
        self.displayed_month = date_from_page(clamp_page(page, self.year_range), self.year_range)
        return self._displayed_month

    def show_next_month(self) -> CalendarDate:
        return self.show_page(self.current_page + 1)

    def show_previous_month(self) -> CalendarDate:
        return self.show_page(self.current_page - 1)

    def is_enabled(self, date: CalendarDate) -> bool:
        # 연도가 선택 불가이거나 날짜 자체가 제외된 경우 비활성
        return (
            self.selectable_dates.is_selectable_year(date.year)
            and self.selectable_dates.is_selectable_date(date)
        )

    def _require_in_range(self, date: Optional[CalendarDate], what: str) -> None:
        if date is not None and date.year not in self.year_range:
            raise YearRangeError(f"The {what} {date} is outside the year range {self.year_range}")

    def _default_displayed_month(self) -> CalendarDate:
        today = CalendarDate.today()
        if today.year < self.year_range.first:
            return CalendarDate(self.year_range.first, 1, 1)
        if today.year > self.year_range.last:
            return CalendarDate(self.year_range.last, 12, 1)
        return today

    def _cells(
        self,
        first_day_of_week: Weekday,
        today: Optional[CalendarDate],
        is_selected: Callable[[CalendarDate], bool],
        is_in_range: Callable[[CalendarDate], bool]
    ) -> List[DayCell]:
        month = self._displayed_month
        leading = days_from_week_start_to_first_of_month(month, first_day_of_week)
        length = month.length_of_month
        if today is None:
            today = CalendarDate.today()

        cells = []
        for index in range(MAX_CALENDAR_ROWS * DAYS_IN_WEEK):
            if not leading <= index < leading + length:
                cells.append(DayCell(index=index))
                continue
            date = month.with_day(index - leading + 1)
            cells.append(DayCell(
                index=index,
                date=date,
                is_today=date == today,
                selected=is_selected(date),
                in_range=is_in_range(date),
                enabled=self.is_enabled(date),
            ))
        return cells


class DatePickerState(_PickerState):
    """단일 날짜 선택 상태"""

    def __init__(
        self,
        year_range: YearRange = YearRange.FULL,
        selectable_dates: SelectableDatesPort = AllDates(),
        initial_selected_date: Optional[CalendarDate] = None,
        initial_displayed_month: Optional[CalendarDate] = None,
        initial_display_mode: DisplayMode = DisplayMode.PICKER
    ):
        self._selected_date = None
        super().__init__(
            year_range,
            selectable_dates,
            initial_displayed_month or initial_selected_date,
            initial_display_mode
        )
        self.selected_date = initial_selected_date

    @property
    def selected_date(self) -> Optional[CalendarDate]:
        return self._selected_date

    @selected_date.setter
    def selected_date(self, value: Optional[CalendarDate]) -> None:
        self._require_in_range(value, "selected date")
        self._selected_date = value

    @property
    def selection(self) -> Union[NoSelection, SingleSelection]:
        if self._selected_date is None:
            return NoSelection()
        return SingleSelection(self._selected_date)

    def select(self, date: CalendarDate) -> bool:
        """날짜 클릭 처리 (비활성 날짜는 무시)"""
        if date.year not in self.year_range or not self.is_enabled(date):
            return False
        self.selected_date = date
        return True

    def month_cells(self, first_day_of_week: Weekday, today: Optional[CalendarDate] = None) -> List[DayCell]:
        return self._cells(
            first_day_of_week,
            today,
            is_selected=lambda d: d == self._selected_date,
            is_in_range=lambda d: False,
        )


class DateRangePickerState(_PickerState):
    """범위 선택 상태"""

    def __init__(
        self,
        year_range: YearRange = YearRange.FULL,
        selectable_dates: SelectableDatesPort = AllDates(),
        initial_selected_start_date: Optional[CalendarDate] = None,
        initial_selected_end_date: Optional[CalendarDate] = None,
        initial_displayed_month: Optional[CalendarDate] = None,
        initial_display_mode: DisplayMode = DisplayMode.PICKER
    ):
        self._start = None
        self._end = None
        super().__init__(
            year_range,
            selectable_dates,
            initial_displayed_month or initial_selected_start_date,
            initial_display_mode
        )
        self.set_selection(initial_selected_start_date, initial_selected_end_date)

    @property
    def selected_start_date(self) -> Optional[CalendarDate]:
        return self._start

    @property
    def selected_end_date(self) -> Optional[CalendarDate]:
        return self._end

    def set_selection(self, start: Optional[CalendarDate], end: Optional[CalendarDate]) -> None:
        """
        시작/끝 날짜를 한 번에 설정

        Raises:
            YearRangeError: 날짜가 연도 범위를 벗어남
            ValueError: 시작 없이 끝만 있거나 끝이 시작보다 앞섬
        """
        self._require_in_range(start, "start date")
        self._require_in_range(end, "end date")
        if end is not None:
            if start is None:
                raise ValueError("An end date requires a start date")
            if end < start:
                raise ValueError(f"The end date {end} is before the start date {start}")
        self._start = start
        self._end = end

    @property
    def selection(self) -> Union[NoSelection, RangeSelection]:
        if self._start is None:
            return NoSelection()
        return RangeSelection(self._start, self._end)

    def selected_range(self) -> Optional[RangeSelection]:
        """시작과 끝이 모두 있을 때만 범위 반환"""
        if self._start is None or self._end is None:
            return None
        return RangeSelection(self._start, self._end)

    def select(self, date: CalendarDate) -> bool:
        """
        날짜 클릭 처리

        - 선택 없음 또는 범위 완성 상태 -> 새 시작
        - 시작 이후(같은 날 포함) -> 끝
        - 시작보다 이전 -> 시작을 다시 설정
        """
        if date.year not in self.year_range or not self.is_enabled(date):
            return False

        start, end = self._start, self._end
        if (start is None) == (end is None):
            self.set_selection(date, None)
        elif start is not None and date >= start:
            self.set_selection(start, date)
        else:
            self.set_selection(date, None)
        return True

    def range_info(self, first_day_of_week: Weekday) -> Optional[SelectedRangeInfo]:
        if self._start is None or self._end is None:
            return None
        return calculate_range_info(self._displayed_month, self._start, self._end, first_day_of_week)

    def month_cells(self, first_day_of_week: Weekday, today: Optional[CalendarDate] = None) -> List[DayCell]:
        start, end = self._start, self._end
        has_range = self.range_info(first_day_of_week) is not None
        return self._cells(
            first_day_of_week,
            today,
            is_selected=lambda d: d == start or d == end,
            is_in_range=lambda d: has_range and start <= d <= end,
        )


class MultiDatePickerState(_PickerState):
    """다중 날짜 선택 상태 (중복 없음, 순서 없음)"""

    def __init__(
        self,
        year_range: YearRange = YearRange.FULL,
        selectable_dates: SelectableDatesPort = AllDates(),
        initial_selected_dates: Iterable[CalendarDate] = (),
        initial_displayed_month: Optional[CalendarDate] = None,
        initial_display_mode: DisplayMode = DisplayMode.PICKER
    ):
        self._selected: FrozenSet[CalendarDate] = frozenset()
        super().__init__(year_range, selectable_dates, initial_displayed_month, initial_display_mode)
        self.selected_dates = frozenset(initial_selected_dates)

    @property
    def selected_dates(self) -> FrozenSet[CalendarDate]:
        return self._selected

    @selected_dates.setter
    def selected_dates(self, value: Iterable[CalendarDate]) -> None:
        dates = frozenset(value)
        for date in dates:
            self._require_in_range(date, "selected date")
        self._selected = dates

    @property
    def selection(self) -> Union[NoSelection, MultiSelection]:
        if not self._selected:
            return NoSelection()
        return MultiSelection(self._selected)

    def toggle(self, date: CalendarDate) -> bool:
        """날짜 선택/해제 토글 (비활성 날짜는 무시)"""
        if date.year not in self.year_range or not self.is_enabled(date):
            return False
        if date in self._selected:
            self._selected = self._selected - {date}
        else:
            self._selected = self._selected | {date}
        return True

    def sorted_dates(self) -> List[CalendarDate]:
        return sorted(self._selected)

    def month_cells(self, first_day_of_week: Weekday, today: Optional[CalendarDate] = None) -> List[DayCell]:
        selected = self._selected
        return self._cells(
            first_day_of_week,
            today,
            is_selected=lambda d: d in selected,
            is_in_range=lambda d: False,
        )
