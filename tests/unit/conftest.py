"""
단위 테스트 공용 픽스처
"""
from typing import Dict, List

import pytest

from core.domain.models import NumberingStyle
from core.ports.calendar_ports import LocaleDataPort


class FakeLocaleData(LocaleDataPort):
    """
    고정 패턴을 돌려주는 로케일 데이터

    등록되지 않은 스켈레톤은 모두 fallback_pattern 으로 변환한다.
    """

    WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def __init__(self, patterns: Dict[str, str] = None, fallback_pattern: str = "dd/MM/yyyy",
                 numbering: NumberingStyle = NumberingStyle.STANDARD):
        self.patterns = patterns or {}
        self.fallback_pattern = fallback_pattern
        self.numbering = numbering
        self.best_pattern_calls = 0

    def best_pattern(self, skeleton: str, locale: str) -> str:
        self.best_pattern_calls += 1
        return self.patterns.get(skeleton, self.fallback_pattern)

    def weekday_names(self, locale: str, width: str = "wide") -> List[str]:
        return list(self.WEEKDAYS)

    def month_name(self, month: int, locale: str, width: str = "wide") -> str:
        return f"M{month}"

    def era_name(self, locale: str) -> str:
        return "AH"

    def numbering_style(self, locale: str) -> NumberingStyle:
        return self.numbering


@pytest.fixture
def fake_locale_data():
    """dd/MM/yyyy 패턴을 돌려주는 로케일 데이터"""
    return FakeLocaleData(patterns={
        "yMMMM": "MMMM y",
        "yMMMEEEd": "EEE, d MMM y",
        "yMMMMd": "d MMMM y",
    })
