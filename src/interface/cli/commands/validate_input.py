from typing import List, Optional

import typer
from rich.markup import escape

from config import config
from core.domain.exceptions import CalendarError
from core.domain.models import InputIdentifier, YearRange
from core.services.date_input_field import DateInputField
from interface.cli.commands.common import console, parse_hijri_date
from interface.cli.dependencies import build_dependencies


def validate_input(
    digits: str = typer.Argument(..., help="구분자 없이 입력한 날짜 (예: 14461229)"),
    mode: str = typer.Option("single", "--mode", help="입력 구분: single | start | end"),
    start: Optional[str] = typer.Option(None, "--start", help="범위 입력의 현재 시작 날짜 (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", help="범위 입력의 현재 끝 날짜 (YYYY-MM-DD)"),
    year_start: int = typer.Option(config.YEAR_RANGE_START, "--year-start", help="연도 범위 시작"),
    year_end: int = typer.Option(config.YEAR_RANGE_END, "--year-end", help="연도 범위 끝"),
    locale: str = typer.Option(config.LOCALE, "--locale", "-l", help="로케일"),
    native_digits: bool = typer.Option(config.NATIVE_DIGITS, "--native-digits/--ascii-digits", help="로케일 숫자 사용"),
    disable_year: List[int] = typer.Option([], "--disable-year", help="선택 불가 연도 (반복 지정 가능)"),
):
    """
    날짜 입력 검증

    입력 필드와 같은 순서(숫자 검사 -> 파싱 -> 검증)로 처리하고 결과를 출력합니다.
    """
    try:
        input_identifier = InputIdentifier(mode.strip().lower())
    except ValueError:
        raise typer.BadParameter(f"입력 구분이 잘못되었습니다: {mode}")

    counterpart_start = parse_hijri_date(start)
    counterpart_end = parse_hijri_date(end)

    try:
        deps = build_dependencies(
            locale=locale,
            native_digits=native_digits,
            year_range=YearRange(year_start, year_end),
            disabled_years=disable_year,
        )
    except CalendarError as e:
        console.print(f"[error]❌ {escape(str(e))}[/error]")
        raise typer.Exit(code=1)
    logger = deps['logger']
    field = DateInputField(
        date_input_format=deps['input_format'],
        date_formatter=deps['formatter'],
        validator=deps['validator'],
        locale=locale,
        numbering_style=deps['numbering_style'],
        logger=logger,
        input_identifier=input_identifier,
    )

    logger.debug("=" * 60)
    logger.debug(f"입력: {digits} ({input_identifier.value}), 패턴: {deps['input_format'].pattern_with_delimiters}")

    state = field.on_value_change(digits, counterpart_start=counterpart_start, counterpart_end=counterpart_end)
    if state is None:
        console.print(f"[error]❌ 입력 거부: 최대 {field.max_length}자리 숫자만 입력할 수 있습니다[/error]")
        raise typer.Exit(code=1)

    if state.is_error:
        console.print(f"[error]❌ {escape(state.error)}[/error]")
        raise typer.Exit(code=1)

    if state.date is None:
        console.print(f"[warning]입력 중: {escape(field.display(state))}[/warning]")
        return

    headline = deps['formatter'].format_headline(state.date, locale, deps['numbering_style'])
    console.print(f"[success]✅ {escape(headline)}[/success] ({state.date})")
