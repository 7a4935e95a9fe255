"""
날짜 입력 검증 서비스
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.models import (
    CalendarDate,
    DateInputFormat,
    InputIdentifier,
    NumberingStyle,
    ParseResult,
    YearRange,
)
from core.ports.calendar_ports import SelectableDatesPort
from core.services.date_formatter import DateFormatter


@dataclass(frozen=True)
class ValidationMessages:
    """
    검증 오류 메시지 템플릿 (%s 치환)

    - date_pattern: 입력 패턴 1개
    - date_out_of_year_range: 시작/끝 연도 2개
    - date_not_allowed: 날짜 1개
    - invalid_range_input: 인자 없음
    """

    date_pattern: str = "Does not match the expected pattern: %s"
    date_out_of_year_range: str = "Date is out of year range: %s - %s"
    date_not_allowed: str = "Date is not allowed: %s"
    invalid_range_input: str = "Invalid range input"


class DateInputValidator:
    """
    파싱된(또는 파싱 실패한) 입력 날짜를 검증

    검사 순서:
    1. 파싱 실패 -> 연도 범위 초과 / 패턴 불일치 메시지
    2. 연도 범위
    3. 선택 가능 여부 (연도, 날짜)
    4. 범위 입력 순서 (시작 < 끝)

    빈 문자열은 유효함을 의미한다.
    """

    def __init__(
        self,
        year_range: YearRange,
        selectable_dates: SelectableDatesPort,
        date_input_format: DateInputFormat,
        date_formatter: DateFormatter,
        messages: ValidationMessages = ValidationMessages()
    ):
        self.year_range = year_range
        self.selectable_dates = selectable_dates
        self.date_input_format = date_input_format
        self.date_formatter = date_formatter
        self.messages = messages

    def validate(
        self,
        date_to_validate: ParseResult,
        input_identifier: InputIdentifier,
        locale: str,
        numbering_style: NumberingStyle,
        counterpart_start: Optional[CalendarDate] = None,
        counterpart_end: Optional[CalendarDate] = None
    ) -> str:
        """
        입력 날짜 검증

        Args:
            date_to_validate: 파싱 결과
            input_identifier: 단일/시작/끝 입력 구분
            counterpart_start: 범위 입력 시 현재 시작 날짜 (END 입력 검사용)
            counterpart_end: 범위 입력 시 현재 끝 날짜 (START 입력 검사용)

        Returns:
            str: 오류 메시지, 유효하면 빈 문자열
        """
        if not date_to_validate.is_success:
            error = date_to_validate.error
            if error.is_year_out_of_range:
                return self._out_of_year_range(locale, numbering_style)
            return self.messages.date_pattern % self.date_input_format.pattern_with_delimiters.upper()

        date = date_to_validate.date

        # 1. 연도 범위
        if date.year not in self.year_range:
            return self._out_of_year_range(locale, numbering_style)

        # 2. 선택 가능 여부
        if (
            not self.selectable_dates.is_selectable_year(date.year)
            or not self.selectable_dates.is_selectable_date(date)
        ):
            formatted = self.date_formatter.format_date(date, locale, NumberingStyle.STANDARD)
            return self.messages.date_not_allowed % formatted

        # 3. 범위 순서 (상대 날짜가 없으면 달력의 최소/최대 날짜를 경계로 사용)
        end_bound = counterpart_end if counterpart_end is not None else CalendarDate.MAX
        start_bound = counterpart_start if counterpart_start is not None else CalendarDate.MIN
        if (
            (input_identifier is InputIdentifier.START and date >= end_bound)
            or (input_identifier is InputIdentifier.END and date < start_bound)
        ):
            return self.messages.invalid_range_input

        return ""

    def _out_of_year_range(self, locale: str, numbering_style: NumberingStyle) -> str:
        return self.messages.date_out_of_year_range % (
            self.date_formatter.format_year(self.year_range.first, locale, numbering_style),
            self.date_formatter.format_year(self.year_range.last, locale, numbering_style),
        )
