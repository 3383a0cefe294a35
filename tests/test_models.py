"""Tests for srtstudio.models module."""

from srtstudio.models import EditorConfig, SearchState, SubtitleEntry


class TestSubtitleEntry:
    def test_timing(self):
        entry = SubtitleEntry(1, '00:00:01,000', '00:00:03,500', 'Hi')
        assert entry.start_ms == 1000
        assert entry.end_ms == 3500
        assert entry.duration_ms == 2500
        assert entry.time_range == '00:00:01,000 --> 00:00:03,500'

    def test_malformed_timecode_is_zero(self):
        entry = SubtitleEntry(1, 'bad', '00:00:01,000', 'Hi')
        assert entry.start_ms == 0

    def test_display_text(self):
        entry = SubtitleEntry(1, '00:00:01,000', '00:00:02,000', 'Hi')
        assert entry.display_text == 'Hi'
        assert not entry.is_translated
        entry.translated_text = ' Hola\n'
        assert entry.display_text == 'Hola'
        assert entry.is_translated


class TestSearchState:
    def test_reset(self):
        state = SearchState(last_match=3, search_term='cat')
        state.reset('dog')
        assert state.last_match is None
        assert state.search_term == 'dog'


class TestEditorConfig:
    def test_defaults(self):
        config = EditorConfig()
        assert config.min_insert_gap_ms == 200
        assert config.placeholder_text == '[New Line]'
        assert config.char_limit_per_line == 42
        assert config.key_prefix == 'srt-translation-'
