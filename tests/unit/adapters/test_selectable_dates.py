"""
ExclusionSelectableDates 단위 테스트
"""
from core.domain.models import CalendarDate, Weekday
from core.ports.calendar_ports import AllDates
from infra.adapters.selectable_dates import ExclusionSelectableDates


class TestExclusionSelectableDates:

    def test_defaults_allow_everything(self):
        selectable = ExclusionSelectableDates()
        assert selectable.is_selectable_date(CalendarDate(1446, 9, 1))
        assert selectable.is_selectable_year(1446)

    def test_disabled_date(self):
        # Given
        selectable = ExclusionSelectableDates(disabled_dates={CalendarDate(1446, 10, 1)})

        # Then
        assert not selectable.is_selectable_date(CalendarDate(1446, 10, 1))
        assert selectable.is_selectable_date(CalendarDate(1446, 10, 2))

    def test_disabled_day_of_week(self):
        selectable = ExclusionSelectableDates(disabled_days_of_week={Weekday.FRIDAY})
        assert not selectable.is_selectable_date(CalendarDate(1446, 9, 7))
        assert selectable.is_selectable_date(CalendarDate(1446, 9, 8))

    def test_disabled_month(self):
        selectable = ExclusionSelectableDates(disabled_months={9})
        assert not selectable.is_selectable_date(CalendarDate(1446, 9, 15))
        assert selectable.is_selectable_year(1446)

    def test_disabled_year(self):
        selectable = ExclusionSelectableDates(disabled_years={1447})
        assert not selectable.is_selectable_year(1447)
        assert not selectable.is_selectable_date(CalendarDate(1447, 1, 1))
        assert selectable.is_selectable_year(1446)


class TestAllDates:

    def test_all_selectable(self):
        assert AllDates().is_selectable_date(CalendarDate.MAX)
        assert AllDates().is_selectable_year(1343)
