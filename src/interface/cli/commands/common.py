"""
CLI 공용 콘솔 / 옵션 파싱
"""
import re
from typing import Optional

import typer
from rich.console import Console
from rich.theme import Theme

from core.domain.exceptions import CalendarError
from core.domain.models import CalendarDate, Weekday

# 커스텀 테마 정의
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
})

console = Console(theme=custom_theme)

_ISO_DATE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


def parse_hijri_date(value: Optional[str]) -> Optional[CalendarDate]:
    """YYYY-MM-DD 형식의 히즈라력 날짜 옵션 파싱"""
    if value is None:
        return None
    match = _ISO_DATE.fullmatch(value.strip())
    if not match:
        raise typer.BadParameter(f"날짜 형식이 잘못되었습니다 (YYYY-MM-DD): {value}")
    try:
        return CalendarDate(*map(int, match.groups()))
    except CalendarError as e:
        raise typer.BadParameter(str(e))


def parse_weekday(value: str) -> Weekday:
    try:
        return Weekday[value.strip().upper()]
    except KeyError:
        names = ", ".join(day.name for day in Weekday)
        raise typer.BadParameter(f"요일 이름이 잘못되었습니다: {value} ({names})")
