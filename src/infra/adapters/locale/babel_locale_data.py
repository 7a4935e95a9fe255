"""
Babel(CLDR) 기반 로케일 데이터 어댑터

- 스켈레톤 -> 로케일 최적 패턴: babel.dates.match_skeleton
- 요일 이름, 기본 숫자 체계: babel Locale
- 히즈라력 월 이름, 연호 표기: hijridate (Babel 은 그레고리력 이름만 제공)
"""
from functools import lru_cache
from typing import Dict, List, Tuple

from babel import Locale, UnknownLocaleError
from babel.dates import match_skeleton, tokenize_pattern, untokenize_pattern
from hijridate import Hijri

from core.domain.exceptions import ConstructionError
from core.domain.models import NumberingStyle
from core.ports.calendar_ports import LocaleDataPort

# CLDR 숫자 체계 ID -> 0 에 해당하는 문자
_ZERO_DIGITS = {
    "latn": "0",
    "arab": "٠",
    "arabext": "۰",
    "beng": "০",
    "deva": "०",
    "mymr": "၀",
    "thai": "๐",
}

# hijridate 가 월 이름을 제공하는 언어
_HIJRI_LANGUAGES = ("en", "ar", "bn")

# 패턴 문자 -> 필드 종류 (M/L, E/c/e 는 같은 필드)
_FIELD_TYPES = {
    "G": "era",
    "y": "year", "Y": "year", "u": "year",
    "M": "month", "L": "month",
    "d": "day",
    "E": "weekday", "c": "weekday", "e": "weekday",
}


@lru_cache(maxsize=None)
def _parse_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ConstructionError(f"Unknown locale: {identifier}") from e


def _is_numeric(char: str, count: int) -> bool:
    if char in "GE":
        return False
    if char in "MLce":
        return count <= 2
    return True


def _fields(pattern: str) -> Dict[str, Tuple[str, int]]:
    fields = {}
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, count = value
            fields[_FIELD_TYPES.get(char, char)] = (char, count)
    return fields


def _adjust_field_widths(pattern: str, matched_skeleton: str, requested_skeleton: str) -> str:
    """
    가장 가까운 스켈레톤의 패턴을 요청한 필드 폭에 맞춤

    예: 요청 yMMMMd, 매칭 yMMMd ("MMM d, y") -> "MMMM d, y"
    숫자 필드와 텍스트 필드(M/L 3자 이상, E)는 서로 바뀌지 않는다.
    """
    requested = _fields(requested_skeleton)
    matched = _fields(matched_skeleton)

    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, count = value
            field_type = _FIELD_TYPES.get(char, char)
            if field_type in requested and field_type in matched:
                requested_count = requested[field_type][1]
                matched_char, matched_count = matched[field_type]
                numeric = _is_numeric(char, count)
                if (
                    matched_count != requested_count
                    and numeric == _is_numeric(matched_char, matched_count)
                    and numeric == _is_numeric(char, requested_count)
                ):
                    value = (char, requested_count)
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


class BabelLocaleData(LocaleDataPort):
    """CLDR 로케일 데이터 구현"""

    def best_pattern(self, skeleton: str, locale: str) -> str:
        skeletons = _parse_locale(locale).datetime_skeletons
        key = skeleton if skeleton in skeletons else match_skeleton(skeleton, skeletons)
        if key is None:
            return skeleton
        return _adjust_field_widths(str(skeletons[key]), key, skeleton)

    def weekday_names(self, locale: str, width: str = "wide") -> List[str]:
        names = _parse_locale(locale).days["format"][width]
        return [names[i] for i in range(7)]

    def month_name(self, month: int, locale: str, width: str = "wide") -> str:
        """
        히즈라력 월 이름

        hijridate 는 전체 이름만 제공하므로 width 와 관계없이 전체 이름을 반환한다.
        """
        return Hijri(1446, month, 1).month_name(self._hijri_language(locale))

    def era_name(self, locale: str) -> str:
        return Hijri(1446, 1, 1).notation(self._hijri_language(locale))

    def numbering_style(self, locale: str) -> NumberingStyle:
        system = _parse_locale(locale).default_numbering_system
        return NumberingStyle(_ZERO_DIGITS.get(system, "0"))

    def _hijri_language(self, locale: str) -> str:
        language = _parse_locale(locale).language
        return language if language in _HIJRI_LANGUAGES else "en"
