"""
DateFormatter 단위 테스트
"""
import threading

import pytest

from core.domain.exceptions import ConstructionError, ParseErrorKind
from core.domain.models import CalendarDate, NumberingStyle
from core.services.date_formatter import DateFormatter, HijriPatternFormatter


class TestDateFormatter:
    """포맷 / 파싱 / 캐시"""

    @pytest.fixture
    def formatter(self, fake_locale_data):
        return DateFormatter(
            year_month_skeleton="yMMMM",
            selected_date_skeleton="yMMMEEEd",
            selected_date_description_skeleton="yMMMMd",
            input_date_skeleton="yyyy/MM/dd",
            input_date_delimiter="/",
            locale_data=fake_locale_data
        )

    def test_format_headline(self, formatter):
        # Given
        date = CalendarDate(1446, 9, 1)

        # When
        result = formatter.format_headline(date, "en_US", NumberingStyle.STANDARD)

        # Then
        assert result == "Sat, 1 M9 1446"

    def test_format_date_for_description(self, formatter):
        result = formatter.format_date(CalendarDate(1446, 9, 1), "en_US", for_description=True)
        assert result == "1 M9 1446"

    def test_format_month_year(self, formatter):
        assert formatter.format_month_year(CalendarDate(1446, 12, 29), "en_US") == "M12 1446"

    def test_none_date(self, formatter):
        assert formatter.format_headline(None, "en_US") is None
        assert formatter.format_date(None, "en_US") is None
        assert formatter.format_month_year(None, "en_US") is None
        assert formatter.format_input_without_delimiters(None, "en_US") is None

    def test_format_input_without_delimiters(self, formatter, fake_locale_data):
        """입력 패턴은 최적 패턴 변환을 거치지 않음"""
        # When
        result = formatter.format_input_without_delimiters(CalendarDate(1446, 9, 1), "en_US")

        # Then
        assert result == "14460901"
        assert fake_locale_data.best_pattern_calls == 0

    def test_format_year_native_digits(self, formatter):
        assert formatter.format_year(1446, "ar_EG", NumberingStyle("٠")) == "١٤٤٦"
        assert formatter.format_year(1446, "en_US") == "1446"

    def test_format_is_idempotent(self, formatter):
        date = CalendarDate(1446, 9, 1)
        assert formatter.format_headline(date, "en_US") == formatter.format_headline(date, "en_US")

    def test_formatter_cache(self, formatter):
        """(패턴, 로케일, 숫자 체계) 조합별로 한 번만 생성"""
        # Given
        date = CalendarDate(1446, 9, 1)

        # When
        formatter.format_headline(date, "en_US")
        formatter.format_headline(date, "en_US")
        formatter.format_date(date, "en_US")

        # Then
        assert formatter.cached_formatter_count == 1

        # When
        formatter.format_month_year(date, "en_US")
        formatter.format_headline(date, "en_US", NumberingStyle("٠"))
        formatter.format_headline(date, "ar_SA")

        # Then
        assert formatter.cached_formatter_count == 4

    def test_cache_is_safe_under_threads(self, formatter):
        date = CalendarDate(1446, 9, 1)
        results = []

        def worker():
            results.append(formatter.format_headline(date, "en_US"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert set(results) == {"Sat, 1 M9 1446"}
        assert formatter.cached_formatter_count == 1

    def test_parse_success(self, formatter):
        # When
        result = formatter.parse_without_delimiters("14461229", "en_US")

        # Then
        assert result.is_success
        assert result.get_or_none() == CalendarDate(1446, 12, 29)

    @pytest.mark.parametrize("text, kind", [
        ("1446122", ParseErrorKind.MALFORMED),
        ("1446ab29", ParseErrorKind.MALFORMED),
        ("14461329", ParseErrorKind.FIELD_OUT_OF_RANGE),
        ("14460031", ParseErrorKind.FIELD_OUT_OF_RANGE),
        ("14460131", ParseErrorKind.FIELD_OUT_OF_RANGE),
        ("13421229", ParseErrorKind.YEAR_OUT_OF_RANGE),
        ("15010101", ParseErrorKind.YEAR_OUT_OF_RANGE),
    ])
    def test_parse_failure(self, formatter, text, kind):
        # When
        result = formatter.parse_without_delimiters(text, "en_US")

        # Then
        assert not result.is_success
        assert result.get_or_none() is None
        assert result.error.kind is kind
        assert result.error.is_year_out_of_range == (kind is ParseErrorKind.YEAR_OUT_OF_RANGE)

    def test_unknown_delimiter_in_input_skeleton(self, fake_locale_data):
        with pytest.raises(ConstructionError):
            DateFormatter("yMMMM", "yMMMEEEd", "yMMMMd", "yyyy/MM/dd", "-", fake_locale_data)


class TestHijriPatternFormatter:

    def test_unsupported_field(self, fake_locale_data):
        with pytest.raises(ConstructionError):
            HijriPatternFormatter("hh:mm", "en_US", NumberingStyle.STANDARD, fake_locale_data)

    def test_era_and_two_digit_year(self, fake_locale_data):
        # Given
        formatter = HijriPatternFormatter("d/M/yy G", "en_US", NumberingStyle.STANDARD, fake_locale_data)

        # When
        result = formatter.format(CalendarDate(1446, 9, 5))

        # Then
        assert result == "5/9/46 AH"

    def test_native_digits(self, fake_locale_data):
        formatter = HijriPatternFormatter("dd/MM/yyyy", "ar_EG", NumberingStyle("٠"), fake_locale_data)
        assert formatter.format(CalendarDate(1446, 9, 5)) == "٠٥/٠٩/١٤٤٦"
