"""
달력 엔진이 의존하는 외부 협력자 포트
"""
from abc import ABC, abstractmethod
from typing import List

from core.domain.models import CalendarDate, NumberingStyle


class SelectableDatesPort(ABC):
    """
    날짜/연도 선택 가능 여부 판단

    제약이 없으면 모두 True. 다른 정책(예: 공휴일 서비스 기반)은
    이 클래스를 상속해 새 구현으로 추가한다.
    """

    def is_selectable_date(self, date: CalendarDate) -> bool:
        return True

    def is_selectable_year(self, year: int) -> bool:
        return True


class AllDates(SelectableDatesPort):
    """모든 날짜 허용 (기본값)"""


class LocaleDataPort(ABC):
    """
    로케일 데이터 제공자

    스켈레톤 -> 로케일 최적 패턴 변환, 요일/월 이름, 고유 숫자 체계
    """

    @abstractmethod
    def best_pattern(self, skeleton: str, locale: str) -> str:
        """스켈레톤에 가장 잘 맞는 로케일 관례 패턴 반환"""
        ...

    @abstractmethod
    def weekday_names(self, locale: str, width: str = "wide") -> List[str]:
        """월요일부터 시작하는 요일 이름 7개 (width: wide/abbreviated/short/narrow)"""
        ...

    @abstractmethod
    def month_name(self, month: int, locale: str, width: str = "wide") -> str:
        """히즈라력 월 이름"""
        ...

    @abstractmethod
    def era_name(self, locale: str) -> str:
        ...

    @abstractmethod
    def numbering_style(self, locale: str) -> NumberingStyle:
        """로케일 고유 숫자 체계"""
        ...
