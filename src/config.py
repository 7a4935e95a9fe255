"""
설정 모듈

기본값은 클래스 속성, 환경 변수로 덮어쓸 수 있다.
"""
import os

from core.domain.models import HIJRI_MAX_YEAR, HIJRI_MIN_YEAR, YearRange


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """달력 엔진 설정"""

    # 로케일 / 숫자 체계
    LOCALE: str = os.getenv("HIJRI_PICKER_LOCALE", "en_US")
    NATIVE_DIGITS: bool = _env_bool("HIJRI_PICKER_NATIVE_DIGITS", False)

    # 주 시작 요일
    FIRST_DAY_OF_WEEK: str = os.getenv("HIJRI_PICKER_FIRST_DAY_OF_WEEK", "SATURDAY")

    # 연도 범위
    YEAR_RANGE_START: int = int(os.getenv("HIJRI_PICKER_YEAR_START", HIJRI_MIN_YEAR))
    YEAR_RANGE_END: int = int(os.getenv("HIJRI_PICKER_YEAR_END", HIJRI_MAX_YEAR))

    # 포맷 스켈레톤
    YEAR_MONTH_SKELETON: str = "yMMMM"                  # 예: "Ramadan 1446"
    YEAR_MONTH_WEEKDAY_DAY_SKELETON: str = "yMMMEEEd"   # 헤드라인
    YEAR_ABBR_MONTH_DAY_SKELETON: str = "yMMMMd"        # 스크린 리더 설명
    INPUT_DATE_SKELETON: str = "yyyy/MM/dd"
    INPUT_DATE_DELIMITER: str = "/"

    # 검증 메시지
    ERROR_DATE_PATTERN: str = "Does not match the expected pattern: %s"
    ERROR_DATE_OUT_OF_YEAR_RANGE: str = "Date is out of year range: %s - %s"
    ERROR_DATE_NOT_ALLOWED: str = "Date is not allowed: %s"
    ERROR_INVALID_RANGE_INPUT: str = "Invalid range input"

    VERBOSE: bool = _env_bool("HIJRI_PICKER_VERBOSE", False)

    def get_year_range(self) -> YearRange:
        return YearRange(self.YEAR_RANGE_START, self.YEAR_RANGE_END)


config = Config()
