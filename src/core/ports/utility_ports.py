"""
유틸리티 포트 정의
"""
from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """로그 출력 포트"""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        ...
