"""
도메인 예외 정의
"""
from enum import Enum


class CalendarError(Exception):
    """달력 엔진의 모든 예외의 기반 클래스"""


class ConstructionError(CalendarError):
    """
    잘못된 설정으로 객체를 생성하려 할 때 발생

    예: first > last 인 YearRange, 구분자가 없는 입력 패턴, 알 수 없는 로케일
    """


class InvalidDateError(CalendarError, ValueError):
    """존재하지 않거나 지원 범위를 벗어난 히즈라력 날짜"""


class YearRangeError(CalendarError, ValueError):
    """피커 상태에 연도 범위를 벗어난 날짜가 설정됨"""


class ParseErrorKind(Enum):
    MALFORMED = "malformed"
    FIELD_OUT_OF_RANGE = "field_out_of_range"
    YEAR_OUT_OF_RANGE = "year_out_of_range"


class ParseError(CalendarError):
    """
    입력 텍스트 파싱 실패

    검증기는 kind 로 "연도 범위 초과"와 "형식 불일치"를 구분해 메시지를 고른다.
    """

    def __init__(self, kind: ParseErrorKind, text: str, detail: str = ""):
        self.kind = kind
        self.text = text
        self.detail = detail
        message = f"Text '{text}' could not be parsed ({kind.value})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def is_year_out_of_range(self) -> bool:
        return self.kind is ParseErrorKind.YEAR_OUT_OF_RANGE
