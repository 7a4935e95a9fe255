from typing import Optional

import typer

from config import config
from core.domain.exceptions import CalendarError
from core.domain.models import YearRange
from core.services.calendar_math import date_from_page, page_from_date, total_pages
from interface.cli.commands.common import console, parse_hijri_date


def page_index(
    date: Optional[str] = typer.Option(None, "--date", "-d", help="날짜 -> 페이지 (YYYY-MM-DD)"),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="페이지 -> 월"),
    year_start: int = typer.Option(config.YEAR_RANGE_START, "--year-start", help="연도 범위 시작"),
    year_end: int = typer.Option(config.YEAR_RANGE_END, "--year-end", help="연도 범위 끝"),
):
    """
    페이지 인덱스 <-> 월 변환
    """
    try:
        year_range = YearRange(year_start, year_end)
    except CalendarError as e:
        console.print(f"[error]❌ {e}[/error]")
        raise typer.Exit(code=1)
    pages = total_pages(year_range)

    if date is not None:
        value = parse_hijri_date(date)
        if value.year not in year_range:
            console.print(f"[error]❌ {value} 은(는) 연도 범위 {year_range} 밖입니다[/error]")
            raise typer.Exit(code=1)
        console.print(f"{value} -> page {page_from_date(value, year_range)} / {pages}")
    elif page is not None:
        if not 0 <= page < pages:
            console.print(f"[error]❌ 페이지는 0 ~ {pages - 1} 범위여야 합니다[/error]")
            raise typer.Exit(code=1)
        console.print(f"page {page} -> {date_from_page(page, year_range)}")
    else:
        console.print(f"[info]연도 범위 {year_range}: 총 {pages} 페이지[/info]")
