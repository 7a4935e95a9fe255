"""
날짜 입력 필드 처리 서비스

키 입력 -> 숫자열 검사 -> 파싱 -> 검증 -> (오류 메시지, 날짜)
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.models import (
    CalendarDate,
    DateInputFormat,
    InputIdentifier,
    NumberingStyle,
)
from core.ports.utility_ports import LoggerPort
from core.services.date_formatter import DateFormatter
from core.services.date_input_validator import DateInputValidator


@dataclass(frozen=True)
class DateInputState:
    """
    입력 필드 상태

    date 는 검증을 통과한 경우에만 채워진다.
    """
    text: str
    error: str = ""
    date: Optional[CalendarDate] = None

    @property
    def is_error(self) -> bool:
        return bool(self.error.strip())


class DateInputField:
    """
    날짜 입력 필드 하나를 담당

    범위 입력에서는 상대 필드의 현재 날짜를 on_value_change 호출 시 함께 넘긴다.
    """

    def __init__(
        self,
        date_input_format: DateInputFormat,
        date_formatter: DateFormatter,
        validator: DateInputValidator,
        locale: str,
        numbering_style: NumberingStyle,
        logger: LoggerPort,
        input_identifier: InputIdentifier = InputIdentifier.SINGLE
    ):
        self.date_input_format = date_input_format
        self.date_formatter = date_formatter
        self.validator = validator
        self.locale = locale
        self.numbering_style = numbering_style
        self.logger = logger
        self.input_identifier = input_identifier

    @property
    def max_length(self) -> int:
        return len(self.date_input_format.pattern_without_delimiters)

    def initial_state(self, initial_date: Optional[CalendarDate]) -> DateInputState:
        """초기 날짜를 구분자 없는 입력 텍스트로 변환"""
        text = self.date_formatter.format_input_without_delimiters(
            initial_date, self.locale, self.numbering_style
        ) or ""
        return DateInputState(text=text, date=initial_date)

    def display(self, state: DateInputState) -> str:
        """화면 표시용 텍스트 (구분자 삽입)"""
        return self.date_input_format.with_delimiters(state.text)

    def on_value_change(
        self,
        text: str,
        counterpart_start: Optional[CalendarDate] = None,
        counterpart_end: Optional[CalendarDate] = None
    ) -> Optional[DateInputState]:
        """
        입력 변경 처리

        Returns:
            DateInputState: 새 상태
            None: 입력 거부 (패턴보다 길거나 숫자가 아닌 문자 포함) -> 이전 텍스트 유지
        """
        if len(text) > self.max_length or not all(ch.isdigit() for ch in text):
            self.logger.debug(f"입력 거부: {text!r}")
            return None

        trimmed = text.strip()
        if not trimmed or len(trimmed) < self.max_length:
            # 입력 중: 오류 없음, 날짜 없음
            return DateInputState(text=text)

        parsed = self.date_formatter.parse_without_delimiters(trimmed, self.locale, self.numbering_style)
        error = self.validator.validate(
            parsed,
            self.input_identifier,
            self.locale,
            self.numbering_style,
            counterpart_start=counterpart_start,
            counterpart_end=counterpart_end
        )

        if error:
            self.logger.debug(f"[{self.input_identifier.value}] 검증 실패: {trimmed} -> {error}")
            return DateInputState(text=text, error=error)

        self.logger.debug(f"[{self.input_identifier.value}] 검증 통과: {parsed.date}")
        return DateInputState(text=text, date=parsed.get_or_none())
