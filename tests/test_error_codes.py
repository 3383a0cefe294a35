"""Tests for srtstudio.error_codes module."""

from srtstudio.error_codes import ErrorCode, ErrorCategory


class TestErrorCode:
    def test_values_are_integers(self):
        for code in ErrorCode:
            assert isinstance(code.value, int)

    def test_get_description(self):
        desc = ErrorCode.get_description(ErrorCode.INSUFFICIENT_GAP)
        assert desc == "Not enough time between lines"

    def test_get_category(self):
        assert ErrorCode.get_category(ErrorCode.INSUFFICIENT_GAP) == ErrorCategory.DOCUMENT
        assert ErrorCode.get_category(ErrorCode.INVALID_FILE_FORMAT) == ErrorCategory.FILE
        assert ErrorCode.get_category(5001) == ErrorCategory.STORAGE
        assert ErrorCode.get_category(42) == ErrorCategory.SYSTEM

    def test_every_code_described(self):
        for code in ErrorCode:
            assert ErrorCode.get_description(code) != "Unknown error"
