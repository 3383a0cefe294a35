"""Tests for srtstudio.input_handler module."""

import pytest
from pathlib import Path

from srtstudio.exceptions import InvalidInputFileError
from srtstudio.input_handler import InputHandler


class TestInputHandler:
    @pytest.fixture
    def handler(self):
        return InputHandler()

    def test_validate_name(self, handler):
        assert handler.validate_srt_name('movie.srt') is True

    @pytest.mark.parametrize('name', ['movie.SRT', 'movie.vtt', 'movie.srt.txt', ''])
    def test_validate_name_rejected(self, handler, name):
        with pytest.raises(InvalidInputFileError) as exc:
            handler.validate_srt_name(name)
        assert exc.value.error_code == '2003'

    def test_validate_file_not_found(self, handler):
        with pytest.raises(InvalidInputFileError):
            handler.validate_srt_file(Path('/nonexistent.srt'))

    def test_output_name(self, handler):
        assert handler.output_name('movie.srt') == 'movie_translated.srt'

    def test_output_name_replaces_first_occurrence(self, handler):
        assert handler.output_name('my.srt.backup.srt') == 'my_translated.srt.backup.srt'

    def test_read_text_keeps_carriage_returns(self, handler, tmp_path):
        path = tmp_path / 'crlf.srt'
        path.write_bytes(b'\xef\xbb\xbf1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n')
        assert handler.read_text(path) == '1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n'

    def test_read_text_rejects_extension_first(self, handler, tmp_path):
        path = tmp_path / 'notes.txt'
        path.write_text('1\n00:00:01,000 --> 00:00:02,000\nHi\n', encoding='utf-8')
        with pytest.raises(InvalidInputFileError):
            handler.read_text(path)
