from typing import Optional

import typer

from config import config
from core.domain.exceptions import CalendarError
from core.services.range_geometry import calculate_range_info
from interface.cli.commands.common import console, parse_hijri_date, parse_weekday


def range_info(
    start: str = typer.Argument(..., help="범위 시작 (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="범위 끝 (YYYY-MM-DD)"),
    month: Optional[str] = typer.Option(None, "--month", "-m", help="표시 월의 아무 날짜 (YYYY-MM-DD), 기본값: 시작 월"),
    first_day: str = typer.Option(config.FIRST_DAY_OF_WEEK, "--first-day", help="주 시작 요일"),
):
    """
    범위 선택의 그리드 좌표 계산

    표시 월의 7 x 6 그리드에서 범위 배경의 시작/끝 칸을 출력합니다.
    """
    start_date = parse_hijri_date(start)
    end_date = parse_hijri_date(end)
    displayed_month = parse_hijri_date(month) or start_date
    first_day_of_week = parse_weekday(first_day)

    if end_date < start_date:
        console.print("[error]❌ 끝 날짜가 시작 날짜보다 앞섭니다[/error]")
        raise typer.Exit(code=1)

    try:
        info = calculate_range_info(displayed_month, start_date, end_date, first_day_of_week)
    except CalendarError as e:
        console.print(f"[error]❌ {e}[/error]")
        raise typer.Exit(code=1)

    if info is None:
        console.print("[warning]표시 월과 겹치지 않습니다[/warning]")
        return

    console.print(f"[info]start[/info] x={info.grid_start.x} y={info.grid_start.y} "
                  f"(selection start: {info.first_is_selection_start})")
    console.print(f"[info]end[/info]   x={info.grid_end.x} y={info.grid_end.y} "
                  f"(selection end: {info.last_is_selection_end})")
