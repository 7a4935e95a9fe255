"""
콘솔 로거 어댑터
"""
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from core.ports.utility_ports import LoggerPort

# 레벨별 테마
LOG_THEME = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "debug": "dim",
})


class ConsoleLogger(LoggerPort):
    """
    rich 콘솔 출력 로거 구현

    "[LEVEL] message" 한 줄씩 출력. debug 는 verbose 일 때만 출력한다.
    """

    def __init__(self, verbose: bool = False, console: Optional[Console] = None):
        self.verbose = verbose
        self._console = console

    @property
    def console(self) -> Console:
        # 출력 시점의 sys.stdout 을 따르도록 지연 생성
        if self._console is not None:
            return self._console
        return Console(theme=LOG_THEME, soft_wrap=True, highlight=False)

    def info(self, message: str) -> None:
        """정보 로그"""
        self._write("INFO", "info", message)

    def warning(self, message: str) -> None:
        """경고 로그"""
        self._write("WARNING", "warning", message)

    def error(self, message: str) -> None:
        """에러 로그"""
        self._write("ERROR", "error", message)

    def debug(self, message: str) -> None:
        """디버그 로그 (verbose 모드 전용)"""
        if self.verbose:
            self._write("DEBUG", "debug", message)

    def _write(self, level: str, style: str, message: str) -> None:
        self.console.print(f"[{level}] {message}", style=style, markup=False)
