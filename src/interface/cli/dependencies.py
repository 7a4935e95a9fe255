"""
CLI 의존성 주입 모듈
"""
from typing import Any, Dict, Iterable, Optional

from config import config
from core.domain.models import NumberingStyle, Weekday, YearRange
from core.services.date_formatter import DateFormatter
from core.services.date_input_validator import DateInputValidator, ValidationMessages
from infra.adapters.locale.babel_locale_data import BabelLocaleData
from infra.adapters.selectable_dates import ExclusionSelectableDates
from infra.adapters.utils.console_logger import ConsoleLogger


def build_dependencies(
    locale: str = config.LOCALE,
    native_digits: bool = config.NATIVE_DIGITS,
    year_range: Optional[YearRange] = None,
    disabled_days_of_week: Iterable[Weekday] = (),
    disabled_years: Iterable[int] = (),
    verbose: bool = config.VERBOSE,
) -> Dict[str, Any]:
    """
    의존성 주입 컨테이너 역할

    Args:
        locale: 로케일 ID (예: en_US, ar_SA)
        native_digits: 로케일 기본 숫자 체계 사용 여부 (False 면 ASCII)
        year_range: 연도 범위, 기본값은 설정값

    Returns:
        Dict: 구성된 서비스 및 어댑터 모음
    """
    # 1. 어댑터 생성
    logger = ConsoleLogger(verbose=verbose)
    locale_data = BabelLocaleData()
    selectable_dates = ExclusionSelectableDates(
        disabled_days_of_week=frozenset(disabled_days_of_week),
        disabled_years=frozenset(disabled_years),
    )

    # 2. 범위 / 숫자 체계
    if year_range is None:
        year_range = config.get_year_range()
    numbering_style = locale_data.numbering_style(locale) if native_digits else NumberingStyle.STANDARD

    # 3. 서비스
    formatter = DateFormatter(
        year_month_skeleton=config.YEAR_MONTH_SKELETON,
        selected_date_skeleton=config.YEAR_MONTH_WEEKDAY_DAY_SKELETON,
        selected_date_description_skeleton=config.YEAR_ABBR_MONTH_DAY_SKELETON,
        input_date_skeleton=config.INPUT_DATE_SKELETON,
        input_date_delimiter=config.INPUT_DATE_DELIMITER,
        locale_data=locale_data
    )
    validator = DateInputValidator(
        year_range=year_range,
        selectable_dates=selectable_dates,
        date_input_format=formatter.input_format,
        date_formatter=formatter,
        messages=ValidationMessages(
            date_pattern=config.ERROR_DATE_PATTERN,
            date_out_of_year_range=config.ERROR_DATE_OUT_OF_YEAR_RANGE,
            date_not_allowed=config.ERROR_DATE_NOT_ALLOWED,
            invalid_range_input=config.ERROR_INVALID_RANGE_INPUT,
        )
    )

    return {
        'logger': logger,
        'locale': locale,
        'locale_data': locale_data,
        'numbering_style': numbering_style,
        'year_range': year_range,
        'selectable_dates': selectable_dates,
        'formatter': formatter,
        'input_format': formatter.input_format,
        'validator': validator,
    }
