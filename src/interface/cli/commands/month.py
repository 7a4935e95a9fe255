from typing import List, Optional

import typer
from rich.table import Table

from config import config
from core.domain.exceptions import CalendarError
from core.domain.models import DAYS_IN_WEEK, MAX_CALENDAR_ROWS, CalendarDate, DayCell, NumberingStyle
from core.services.calendar_math import weekday_order
from core.services.picker_state import DatePickerState
from interface.cli.commands.common import console, parse_hijri_date, parse_weekday
from interface.cli.dependencies import build_dependencies


def show_month(
    year: Optional[int] = typer.Option(None, "--year", "-y", help="히즈라력 연도"),
    month: int = typer.Option(1, "--month", "-m", help="월 (1-12)"),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="페이지 인덱스 (연도 범위 기준)"),
    selected: Optional[str] = typer.Option(None, "--selected", "-s", help="선택 날짜 (YYYY-MM-DD)"),
    locale: str = typer.Option(config.LOCALE, "--locale", "-l", help="로케일"),
    native_digits: bool = typer.Option(config.NATIVE_DIGITS, "--native-digits/--ascii-digits", help="로케일 숫자 사용"),
    first_day: str = typer.Option(config.FIRST_DAY_OF_WEEK, "--first-day", help="주 시작 요일"),
    disable_day: List[str] = typer.Option([], "--disable-day", help="선택 불가 요일 (반복 지정 가능)"),
):
    """
    월 달력 출력

    --year/--month 또는 --page 로 표시할 월을 지정합니다. 지정하지 않으면 이번 달입니다.
    """
    first_day_of_week = parse_weekday(first_day)
    selected_date = parse_hijri_date(selected)
    disabled_days = [parse_weekday(day) for day in disable_day]

    try:
        deps = build_dependencies(
            locale=locale,
            native_digits=native_digits,
            disabled_days_of_week=disabled_days,
        )
        state = DatePickerState(
            year_range=deps['year_range'],
            selectable_dates=deps['selectable_dates'],
            initial_selected_date=selected_date,
        )
        if page is not None:
            state.show_page(page)
        elif year is not None:
            state.displayed_month = CalendarDate(year, month, 1)

        formatter = deps['formatter']
        numbering: NumberingStyle = deps['numbering_style']
        names = deps['locale_data'].weekday_names(locale, "abbreviated")

        table = Table(
            title=formatter.format_month_year(state.displayed_month, locale, numbering),
            caption=f"page {state.current_page + 1} / {state.page_count}",
        )
        for weekday in weekday_order(first_day_of_week):
            table.add_column(names[weekday], justify="right")

        cells = state.month_cells(first_day_of_week)
        for row in range(MAX_CALENDAR_ROWS):
            row_cells = cells[row * DAYS_IN_WEEK:(row + 1) * DAYS_IN_WEEK]
            table.add_row(*[_render_cell(cell, numbering) for cell in row_cells])

        console.print(table)

    except CalendarError as e:
        console.print(f"[error]❌ {e}[/error]")
        raise typer.Exit(code=1)


def _render_cell(cell: DayCell, numbering: NumberingStyle) -> str:
    if cell.date is None:
        return ""
    text = numbering.localize(str(cell.day_number))
    if cell.selected:
        return f"[reverse]{text}[/reverse]"
    if cell.is_today:
        return f"[bold underline]{text}[/bold underline]"
    if not cell.enabled:
        return f"[dim]{text}[/dim]"
    return text
