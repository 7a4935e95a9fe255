"""
피커 상태 (단일 / 범위 / 다중) 단위 테스트
"""
import pytest

from core.domain.exceptions import YearRangeError
from core.domain.models import (
    CalendarDate,
    DisplayMode,
    MultiSelection,
    NoSelection,
    RangeSelection,
    SingleSelection,
    Weekday,
    YearRange,
)
from core.services.picker_state import DatePickerState, DateRangePickerState, MultiDatePickerState
from infra.adapters.selectable_dates import ExclusionSelectableDates

YEAR_RANGE = YearRange(1440, 1450)


class TestDatePickerState:
    """단일 날짜 선택"""

    def test_displayed_month_follows_selected_date(self):
        # When
        state = DatePickerState(YEAR_RANGE, initial_selected_date=CalendarDate(1446, 9, 10))

        # Then
        assert state.displayed_month == CalendarDate(1446, 9, 1)
        assert state.selection == SingleSelection(CalendarDate(1446, 9, 10))
        assert state.display_mode is DisplayMode.PICKER

    def test_initial_displayed_month_wins(self):
        state = DatePickerState(
            YEAR_RANGE,
            initial_selected_date=CalendarDate(1446, 9, 10),
            initial_displayed_month=CalendarDate(1441, 2, 7)
        )
        assert state.displayed_month == CalendarDate(1441, 2, 1)

    def test_no_selection(self):
        state = DatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 1, 1))
        assert state.selected_date is None
        assert state.selection == NoSelection()

    def test_selected_date_out_of_range(self):
        with pytest.raises(YearRangeError):
            DatePickerState(YEAR_RANGE, initial_selected_date=CalendarDate(1451, 1, 1))

    def test_set_selected_date_out_of_range(self):
        # Given
        state = DatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 1, 1))

        # When/Then
        with pytest.raises(YearRangeError):
            state.selected_date = CalendarDate(1439, 12, 1)
        with pytest.raises(ValueError):
            state.displayed_month = CalendarDate(1451, 1, 1)

    def test_paging(self):
        # Given
        state = DatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 12, 1))

        # When
        state.show_next_month()

        # Then
        assert state.displayed_month == CalendarDate(1447, 1, 1)
        assert state.current_page == 7 * 12

        # When
        state.show_previous_month()
        state.show_previous_month()

        # Then
        assert state.displayed_month == CalendarDate(1446, 11, 1)

    def test_paging_is_clamped(self):
        # Given
        state = DatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1450, 12, 1))

        # When
        state.show_next_month()

        # Then
        assert state.displayed_month == CalendarDate(1450, 12, 1)
        assert state.current_page == state.page_count - 1
        assert state.show_page(-5) == CalendarDate(1440, 1, 1)

    def test_select_disabled_date_is_ignored(self):
        # Given
        selectable = ExclusionSelectableDates(disabled_days_of_week={Weekday.FRIDAY})
        state = DatePickerState(YEAR_RANGE, selectable, initial_displayed_month=CalendarDate(1446, 9, 1))
        friday = CalendarDate(1446, 9, 7)
        assert friday.day_of_week == Weekday.FRIDAY

        # When/Then
        assert not state.select(friday)
        assert state.selected_date is None
        assert state.select(CalendarDate(1446, 9, 8))
        assert state.selected_date == CalendarDate(1446, 9, 8)

    def test_select_outside_year_range_is_ignored(self):
        state = DatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 9, 1))
        assert not state.select(CalendarDate(1451, 1, 1))

    def test_month_cells(self):
        # Given
        selectable = ExclusionSelectableDates(disabled_days_of_week={Weekday.FRIDAY})
        state = DatePickerState(
            YEAR_RANGE,
            selectable,
            initial_selected_date=CalendarDate(1446, 9, 10)
        )

        # When
        cells = state.month_cells(Weekday.SATURDAY, today=CalendarDate(1446, 9, 3))

        # Then
        assert len(cells) == 42
        assert cells[0].date == CalendarDate(1446, 9, 1)
        assert cells[2].is_today
        assert cells[9].selected
        assert not cells[6].enabled
        assert cells[41].date is None
        assert cells[41].day_number is None
        assert sum(1 for cell in cells if cell.date is not None) == CalendarDate(1446, 9, 1).length_of_month


class TestDateRangePickerState:
    """범위 선택"""

    @pytest.fixture
    def state(self):
        return DateRangePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 9, 1))

    def test_select_start_then_end(self, state):
        # When
        state.select(CalendarDate(1446, 9, 10))

        # Then
        assert state.selection == RangeSelection(CalendarDate(1446, 9, 10))
        assert state.selected_range() is None

        # When
        state.select(CalendarDate(1446, 9, 20))

        # Then
        assert state.selected_range() == RangeSelection(CalendarDate(1446, 9, 10), CalendarDate(1446, 9, 20))

    def test_earlier_date_restarts(self, state):
        state.select(CalendarDate(1446, 9, 10))
        state.select(CalendarDate(1446, 9, 5))
        assert state.selected_start_date == CalendarDate(1446, 9, 5)
        assert state.selected_end_date is None

    def test_complete_range_restarts(self, state):
        state.select(CalendarDate(1446, 9, 10))
        state.select(CalendarDate(1446, 9, 20))
        state.select(CalendarDate(1446, 9, 25))
        assert state.selected_start_date == CalendarDate(1446, 9, 25)
        assert state.selected_end_date is None

    def test_same_day_range(self, state):
        state.select(CalendarDate(1446, 9, 10))
        state.select(CalendarDate(1446, 9, 10))
        assert state.selected_end_date == CalendarDate(1446, 9, 10)

    def test_set_selection_validation(self, state):
        with pytest.raises(ValueError):
            state.set_selection(None, CalendarDate(1446, 9, 10))
        with pytest.raises(ValueError):
            state.set_selection(CalendarDate(1446, 9, 10), CalendarDate(1446, 9, 1))
        with pytest.raises(YearRangeError):
            state.set_selection(CalendarDate(1446, 9, 10), CalendarDate(1451, 1, 1))

    def test_range_info_and_cells(self, state):
        # Given
        state.set_selection(CalendarDate(1446, 9, 10), CalendarDate(1446, 9, 20))

        # When
        info = state.range_info(Weekday.SATURDAY)
        cells = state.month_cells(Weekday.SATURDAY, today=CalendarDate(1446, 9, 1))

        # Then
        assert (info.grid_start.x, info.grid_start.y) == (2, 1)
        assert (info.grid_end.x, info.grid_end.y) == (5, 2)
        assert [cell.day_number for cell in cells if cell.in_range] == list(range(10, 21))
        assert [cell.day_number for cell in cells if cell.selected] == [10, 20]

    def test_range_outside_displayed_month(self, state):
        state.set_selection(CalendarDate(1446, 7, 1), CalendarDate(1446, 7, 5))
        assert state.range_info(Weekday.SATURDAY) is None
        assert not any(cell.in_range for cell in state.month_cells(Weekday.SATURDAY))


class TestMultiDatePickerState:
    """다중 선택"""

    def test_toggle(self):
        # Given
        state = MultiDatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 9, 1))
        a, b = CalendarDate(1446, 9, 12), CalendarDate(1446, 9, 3)

        # When
        state.toggle(a)
        state.toggle(b)

        # Then
        assert state.sorted_dates() == [b, a]
        assert state.selection == MultiSelection(frozenset({a, b}))

        # When
        state.toggle(a)

        # Then
        assert state.selected_dates == frozenset({b})

    def test_empty_selection(self):
        state = MultiDatePickerState(YEAR_RANGE, initial_displayed_month=CalendarDate(1446, 9, 1))
        assert state.selection == NoSelection()

    def test_initial_dates_out_of_range(self):
        with pytest.raises(YearRangeError):
            MultiDatePickerState(
                YEAR_RANGE,
                initial_selected_dates=[CalendarDate(1451, 1, 1)],
                initial_displayed_month=CalendarDate(1446, 9, 1)
            )

    def test_month_cells(self):
        state = MultiDatePickerState(
            YEAR_RANGE,
            initial_selected_dates=[CalendarDate(1446, 9, 3), CalendarDate(1446, 9, 12)],
            initial_displayed_month=CalendarDate(1446, 9, 1)
        )
        cells = state.month_cells(Weekday.SATURDAY, today=CalendarDate(1446, 9, 1))
        assert [cell.day_number for cell in cells if cell.selected] == [3, 12]
