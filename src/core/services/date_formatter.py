"""
히즈라력 날짜 포맷터

스켈레톤 -> 로케일 패턴 변환은 LocaleDataPort 에 위임하고,
패턴 해석/렌더링/파싱은 히즈라력 필드 기준으로 직접 수행한다.
"""
import re
import threading
from typing import Dict, List, NamedTuple, Optional, Tuple

from babel.dates import tokenize_pattern

from core.domain.exceptions import ConstructionError, ParseError, ParseErrorKind
from core.domain.models import (
    HIJRI_MAX_YEAR,
    HIJRI_MIN_YEAR,
    MONTHS_IN_YEAR,
    CalendarDate,
    DateInputFormat,
    NumberingStyle,
    ParseResult,
)
from core.ports.calendar_ports import LocaleDataPort

_TEXT_WIDTHS = {1: "abbreviated", 2: "abbreviated", 3: "abbreviated", 4: "wide", 5: "narrow", 6: "short"}
_MONTH_WIDTHS = {3: "abbreviated", 4: "wide", 5: "narrow"}
_NUMERIC_FIELDS = {"y": "year", "M": "month", "L": "month", "d": "day"}


class FormatterKey(NamedTuple):
    pattern: str
    locale: str
    numbering_style: NumberingStyle


class HijriPatternFormatter:
    """
    구체 패턴 하나에 묶인 포맷터

    지원 필드: G(연호) y(연) M/L(월) d(일) E/c/e(요일, 3자 이상)
    """

    def __init__(
        self,
        pattern: str,
        locale: str,
        numbering_style: NumberingStyle,
        locale_data: LocaleDataPort
    ):
        self.pattern = pattern
        self.locale = locale
        self.numbering_style = numbering_style
        self.locale_data = locale_data
        self._tokens = tokenize_pattern(pattern)
        self._parse_plan: Optional[Tuple[re.Pattern, List[str]]] = None

        for kind, value in self._tokens:
            if kind != "field":
                continue
            char, count = value
            if char in "GyMLdE" or (char in "ce" and count >= 3):
                continue
            raise ConstructionError(f"Unsupported pattern field {char * count!r} in {pattern!r}")

    def format(self, value: CalendarDate) -> str:
        parts = []
        for kind, token in self._tokens:
            if kind == "chars":
                parts.append(token)
            else:
                parts.append(self._format_field(token[0], token[1], value))
        return "".join(parts)

    def parse(self, text: str) -> CalendarDate:
        """
        숫자 필드만으로 이루어진 패턴에 대해 텍스트를 파싱

        Raises:
            ParseError: 형식 불일치, 필드 범위 초과, 연도 범위 초과
        """
        regex, fields = self._build_parse_plan()
        match = regex.fullmatch(text)
        if match is None:
            raise ParseError(ParseErrorKind.MALFORMED, text, f"expected pattern {self.pattern}")

        values: Dict[str, int] = {}
        for name, group in zip(fields, match.groups()):
            values[name] = int(group)

        missing = {"year", "month", "day"} - values.keys()
        if missing:
            raise ParseError(ParseErrorKind.MALFORMED, text, f"missing fields {sorted(missing)}")

        year, month, day = values["year"], values["month"], values["day"]
        if not HIJRI_MIN_YEAR <= year <= HIJRI_MAX_YEAR:
            raise ParseError(
                ParseErrorKind.YEAR_OUT_OF_RANGE,
                text,
                f"year {year} (valid values {HIJRI_MIN_YEAR} - {HIJRI_MAX_YEAR})"
            )
        if not 1 <= month <= MONTHS_IN_YEAR:
            raise ParseError(ParseErrorKind.FIELD_OUT_OF_RANGE, text, f"month {month} (valid values 1 - 12)")

        month_length = CalendarDate(year, month, 1).length_of_month
        if not 1 <= day <= month_length:
            raise ParseError(
                ParseErrorKind.FIELD_OUT_OF_RANGE,
                text,
                f"day {day} (valid values 1 - {month_length})"
            )
        return CalendarDate(year, month, day)

    def _format_field(self, char: str, count: int, value: CalendarDate) -> str:
        if char == "G":
            return self.locale_data.era_name(self.locale)
        if char in "Ece":
            names = self.locale_data.weekday_names(self.locale, _TEXT_WIDTHS.get(count, "abbreviated"))
            return names[value.day_of_week]
        if char in "ML" and count >= 3:
            return self.locale_data.month_name(value.month, self.locale, _MONTH_WIDTHS.get(count, "wide"))

        if char == "y":
            text = f"{value.year % 100:02d}" if count == 2 else str(value.year).zfill(count)
        elif char in "ML":
            text = str(value.month).zfill(count)
        else:
            text = str(value.day).zfill(count)
        return self.numbering_style.localize(text)

    def _build_parse_plan(self) -> Tuple[re.Pattern, List[str]]:
        if self._parse_plan is not None:
            return self._parse_plan

        regex_parts = []
        fields = []
        for kind, token in self._tokens:
            if kind == "chars":
                regex_parts.append(re.escape(token))
                continue
            char, count = token
            if char not in _NUMERIC_FIELDS or count > 4 or (char in "ML" and count > 2):
                raise ParseError(ParseErrorKind.MALFORMED, self.pattern, "pattern is not numeric")
            regex_parts.append(rf"(\d{{{count}}})" if count > 1 else r"(\d+)")
            fields.append(_NUMERIC_FIELDS[char])

        self._parse_plan = (re.compile("".join(regex_parts)), fields)
        return self._parse_plan


class DateFormatter:
    """
    히즈라력 날짜 포맷/파싱 서비스

    (패턴, 로케일, 숫자 체계) 조합별로 포맷터를 캐시한다.
    캐시는 인스턴스 전용이며 만료되지 않는다.
    """

    def __init__(
        self,
        year_month_skeleton: str,
        selected_date_skeleton: str,
        selected_date_description_skeleton: str,
        input_date_skeleton: str,
        input_date_delimiter: str,
        locale_data: LocaleDataPort
    ):
        self.year_month_skeleton = year_month_skeleton
        self.selected_date_skeleton = selected_date_skeleton
        self.selected_date_description_skeleton = selected_date_description_skeleton
        self.input_date_skeleton = input_date_skeleton
        self.input_date_delimiter = input_date_delimiter
        self.locale_data = locale_data
        self.input_format = DateInputFormat(input_date_skeleton, input_date_delimiter)

        self._formatters: Dict[FormatterKey, HijriPatternFormatter] = {}
        self._lock = threading.Lock()

    @property
    def cached_formatter_count(self) -> int:
        return len(self._formatters)

    def format_headline(
        self,
        date: Optional[CalendarDate],
        locale: str,
        numbering_style: Optional[NumberingStyle] = None
    ) -> Optional[str]:
        """헤드라인 표시용 포맷 (선택 날짜 스켈레톤)"""
        if date is None:
            return None
        return self._get_or_create_formatter(self.selected_date_skeleton, locale, numbering_style).format(date)

    def format_date(
        self,
        date: Optional[CalendarDate],
        locale: str,
        numbering_style: Optional[NumberingStyle] = None,
        for_description: bool = False
    ) -> Optional[str]:
        """
        선택 날짜 포맷

        Args:
            for_description: True 이면 스크린 리더용 설명 스켈레톤 사용
        """
        if date is None:
            return None
        skeleton = self.selected_date_description_skeleton if for_description else self.selected_date_skeleton
        return self._get_or_create_formatter(skeleton, locale, numbering_style).format(date)

    def format_input_without_delimiters(
        self,
        date: Optional[CalendarDate],
        locale: str,
        numbering_style: Optional[NumberingStyle] = None
    ) -> Optional[str]:
        """입력 필드 초기값 (구분자 제거, 최적 패턴 변환 없음)"""
        if date is None:
            return None
        return self._get_or_create_formatter(
            self.input_format.pattern_without_delimiters,
            locale,
            numbering_style,
            apply_best_pattern=False
        ).format(date)

    def format_month_year(
        self,
        date: Optional[CalendarDate],
        locale: str,
        numbering_style: Optional[NumberingStyle] = None
    ) -> Optional[str]:
        if date is None:
            return None
        return self._get_or_create_formatter(self.year_month_skeleton, locale, numbering_style).format(date)

    def format_year(self, year: int, locale: str, numbering_style: Optional[NumberingStyle] = None) -> str:
        """연도 숫자를 숫자 체계에 맞춰 표시"""
        style = numbering_style if numbering_style is not None else self.locale_data.numbering_style(locale)
        return style.localize(str(year))

    def parse_without_delimiters(
        self,
        text: str,
        locale: str,
        numbering_style: Optional[NumberingStyle] = None
    ) -> ParseResult:
        """
        구분자 없이 입력된 숫자열 파싱

        입력 스켈레톤의 구분자 위치에 구분자를 다시 넣은 뒤
        원본 입력 스켈레톤(최적 패턴 변환 없음)으로 파싱한다.
        """
        formatter = self._get_or_create_formatter(
            self.input_date_skeleton,
            locale,
            numbering_style,
            apply_best_pattern=False
        )
        try:
            return ParseResult.success(formatter.parse(self.input_format.insert_delimiters(text)))
        except ParseError as e:
            return ParseResult.failure(e)

    def _get_or_create_formatter(
        self,
        skeleton: str,
        locale: str,
        numbering_style: Optional[NumberingStyle],
        apply_best_pattern: bool = True
    ) -> HijriPatternFormatter:
        locale = str(locale)
        if numbering_style is None:
            numbering_style = self.locale_data.numbering_style(locale)
        pattern = self.locale_data.best_pattern(skeleton, locale) if apply_best_pattern else skeleton
        key = FormatterKey(pattern, locale, numbering_style)

        with self._lock:
            formatter = self._formatters.get(key)
            if formatter is None:
                formatter = HijriPatternFormatter(pattern, locale, numbering_style, self.locale_data)
                self._formatters[key] = formatter
        return formatter
