# src/core/domain/models.py
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from functools import total_ordering
from typing import ClassVar, FrozenSet, NamedTuple, Optional, Tuple

from hijridate import Gregorian, Hijri

from core.domain.exceptions import ConstructionError, InvalidDateError, ParseError

# Umm al-Qura 테이블이 지원하는 히즈라력 연도 (1343-01-01 ~ 1500-12-30)
HIJRI_MIN_YEAR = 1343
HIJRI_MAX_YEAR = 1500

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7
MAX_CALENDAR_ROWS = 6


class Weekday(IntEnum):
    """요일 (월요일=0 ... 일요일=6)"""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class InputIdentifier(Enum):
    """입력 필드 구분 (단일 / 범위 시작 / 범위 끝)"""
    SINGLE = "single"
    START = "start"
    END = "end"


class DisplayMode(Enum):
    PICKER = "picker"
    INPUT = "input"


@total_ordering
@dataclass(frozen=True, eq=False)
class CalendarDate:
    """
    히즈라력(Umm al-Qura) 하루를 나타내는 불변 값

    비교/동등성/해시는 (year, month, day) 튜플이 아니라
    절대 일수(ordinal) 기준으로 한다.
    """

    year: int
    month: int
    day: int

    MIN: ClassVar["CalendarDate"]
    MAX: ClassVar["CalendarDate"]

    def __post_init__(self):
        try:
            hijri = Hijri(self.year, self.month, self.day)
        except (OverflowError, ValueError) as e:
            raise InvalidDateError(
                f"Invalid Hijri date {self.year:04d}-{self.month:02d}-{self.day:02d}: {e}"
            ) from e
        object.__setattr__(self, "_hijri", hijri)
        object.__setattr__(self, "_ordinal", hijri.to_gregorian().toordinal())

    # ------------------------------------------------------------------
    # 생성
    # ------------------------------------------------------------------
    @classmethod
    def of(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year, month, day)

    @classmethod
    def from_gregorian(cls, value: date) -> "CalendarDate":
        """그레고리력 날짜를 변환"""
        try:
            hijri = Gregorian.fromdate(value).to_hijri()
        except (OverflowError, ValueError) as e:
            raise InvalidDateError(f"Date {value} is outside the Umm al-Qura range: {e}") from e
        return cls(hijri.year, hijri.month, hijri.day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "CalendarDate":
        try:
            gregorian = date.fromordinal(ordinal)
        except (OverflowError, ValueError) as e:
            raise InvalidDateError(f"Day count {ordinal} is not representable: {e}") from e
        return cls.from_gregorian(gregorian)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_gregorian(date.today())

    # ------------------------------------------------------------------
    # 파생 값
    # ------------------------------------------------------------------
    @property
    def ordinal(self) -> int:
        """절대 일수 (그레고리력 proleptic ordinal 과 동일)"""
        return self._ordinal

    @property
    def day_of_week(self) -> Weekday:
        return Weekday(self._hijri.weekday())

    @property
    def length_of_month(self) -> int:
        return self._hijri.month_length()

    def to_gregorian(self) -> date:
        return date.fromordinal(self._ordinal)

    # ------------------------------------------------------------------
    # 날짜 연산
    # ------------------------------------------------------------------
    def with_day(self, day: int) -> "CalendarDate":
        return CalendarDate(self.year, self.month, day)

    def first_of_month(self) -> "CalendarDate":
        return self.with_day(1)

    def last_of_month(self) -> "CalendarDate":
        return self.with_day(self.length_of_month)

    def plus_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_ordinal(self._ordinal + days)

    def plus_months(self, months: int) -> "CalendarDate":
        """월 단위 이동 (대상 월이 짧으면 말일로 맞춤)"""
        total = self.year * MONTHS_IN_YEAR + (self.month - 1) + months
        year, month_index = divmod(total, MONTHS_IN_YEAR)
        first = CalendarDate(year, month_index + 1, 1)
        return first.with_day(min(self.day, first.length_of_month))

    # ------------------------------------------------------------------
    # 비교
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


CalendarDate.MIN = CalendarDate(HIJRI_MIN_YEAR, 1, 1)
CalendarDate.MAX = CalendarDate(HIJRI_MAX_YEAR, 12, 30)


@dataclass(frozen=True)
class YearRange:
    """선택 가능한 연도의 닫힌 구간 [first, last]"""

    first: int
    last: int

    FULL: ClassVar["YearRange"]

    def __post_init__(self):
        if self.first > self.last:
            raise ConstructionError(
                f"Invalid year range: first ({self.first}) is after last ({self.last})"
            )

    def count(self) -> int:
        return self.last - self.first + 1

    def __contains__(self, year: int) -> bool:
        return self.first <= year <= self.last

    def __iter__(self):
        return iter(range(self.first, self.last + 1))

    def __str__(self):
        return f"{self.first}..{self.last}"


YearRange.FULL = YearRange(HIJRI_MIN_YEAR, HIJRI_MAX_YEAR)


@dataclass(frozen=True)
class NumberingStyle:
    """
    숫자 표기 체계 (zero_digit 로 식별)

    STANDARD 는 ASCII 0-9, 그 외는 로케일 고유 숫자 (예: 아랍-인도 숫자 '٠')
    """

    zero_digit: str = "0"

    STANDARD: ClassVar["NumberingStyle"]

    @property
    def is_standard(self) -> bool:
        return self.zero_digit == "0"

    def localize(self, text: str) -> str:
        """ASCII 숫자를 이 체계의 숫자로 치환"""
        if self.is_standard:
            return text
        offset = ord(self.zero_digit) - ord("0")
        return "".join(chr(ord(ch) + offset) if "0" <= ch <= "9" else ch for ch in text)


NumberingStyle.STANDARD = NumberingStyle()


@dataclass(frozen=True)
class DateInputFormat:
    """
    날짜 입력 패턴 정보

    pattern_with_delimiters 는 사용자가 보는 형태 (예: "dd/MM/yyyy"),
    pattern_without_delimiters 는 입력 버퍼 길이 계산용 (예: "ddMMyyyy").
    """

    pattern_with_delimiters: str
    delimiter: str

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ConstructionError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if self.delimiter not in self.pattern_with_delimiters:
            raise ConstructionError(
                f"Delimiter {self.delimiter!r} does not occur in pattern {self.pattern_with_delimiters!r}"
            )

    @property
    def pattern_without_delimiters(self) -> str:
        return self.pattern_with_delimiters.replace(self.delimiter, "")

    @property
    def delimiter_positions(self) -> Tuple[int, ...]:
        return tuple(i for i, ch in enumerate(self.pattern_with_delimiters) if ch == self.delimiter)

    @property
    def first_delimiter_index(self) -> int:
        return self.delimiter_positions[0]

    @property
    def last_delimiter_index(self) -> int:
        return self.delimiter_positions[-1]

    def insert_delimiters(self, digits: str) -> str:
        """구분자 없는 숫자열에 원래 위치대로 구분자를 다시 삽입 (파싱용)"""
        chars = list(digits)
        for position in self.delimiter_positions:
            chars.insert(position, self.delimiter)
        return "".join(chars)

    def with_delimiters(self, digits: str) -> str:
        """
        입력 중인 숫자열 표시용 변환

        구분자는 뒤따르는 숫자가 있을 때만 표시된다 ("291" -> "29/1", "29" -> "29").
        """
        before = self._raw_delimiter_counts()
        parts = []
        for i, ch in enumerate(digits[:len(self.pattern_without_delimiters)]):
            parts.append(self.delimiter * before.get(i, 0))
            parts.append(ch)
        return "".join(parts)

    def original_to_transformed(self, offset: int) -> int:
        """원본 커서 위치 -> 표시 문자열 커서 위치"""
        before = self._raw_delimiter_counts()
        return offset + sum(count for index, count in before.items() if index < offset)

    def transformed_to_original(self, offset: int) -> int:
        """표시 문자열 커서 위치 -> 원본 커서 위치"""
        return offset - sum(1 for position in self.delimiter_positions if position < offset)

    def _raw_delimiter_counts(self) -> Counter:
        # 각 구분자 앞에 오는 숫자 개수 -> 해당 위치 앞에 붙는 구분자 수
        return Counter(position - k for k, position in enumerate(self.delimiter_positions))


@dataclass(frozen=True)
class ParseResult:
    """파싱 성공(date) 또는 실패(error)"""

    date: Optional[CalendarDate] = None
    error: Optional[ParseError] = None

    @classmethod
    def success(cls, value: CalendarDate) -> "ParseResult":
        return cls(date=value)

    @classmethod
    def failure(cls, error: ParseError) -> "ParseResult":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def get_or_none(self) -> Optional[CalendarDate]:
        return self.date


class GridCoordinates(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class SelectedRangeInfo:
    """
    7 x 6 월 그리드 안에서 선택 범위의 시작/끝 좌표

    first_is_selection_start / last_is_selection_end 가 False 이면
    해당 끝이 월 경계에서 잘린 것이다.
    """

    grid_start: GridCoordinates
    grid_end: GridCoordinates
    first_is_selection_start: bool
    last_is_selection_end: bool


# ----------------------------------------------------------------------
# 선택 상태
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class SingleSelection:
    date: CalendarDate


@dataclass(frozen=True)
class RangeSelection:
    """범위 선택 (end 가 None 이면 아직 끝을 고르는 중)"""

    start: CalendarDate
    end: Optional[CalendarDate] = None

    def __post_init__(self):
        if self.end is not None and self.end < self.start:
            raise ConstructionError(f"Range end {self.end} is before start {self.start}")

    @property
    def is_complete(self) -> bool:
        return self.end is not None

    def __contains__(self, value: CalendarDate) -> bool:
        if self.end is None:
            return value == self.start
        return self.start <= value <= self.end


@dataclass(frozen=True)
class MultiSelection:
    dates: FrozenSet[CalendarDate] = field(default_factory=frozenset)


# ----------------------------------------------------------------------
# 화면 표시용 파생 값
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class DayCell:
    """월 그리드의 한 칸 (date 가 None 이면 빈 칸)"""

    index: int
    date: Optional[CalendarDate] = None
    is_today: bool = False
    selected: bool = False
    in_range: bool = False
    enabled: bool = True

    @property
    def day_number(self) -> Optional[int]:
        return self.date.day if self.date is not None else None


@dataclass(frozen=True)
class YearEntry:
    """연도 선택 목록의 한 항목"""

    year: int
    is_current: bool
    selected: bool
    enabled: bool
