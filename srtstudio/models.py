"""Data models for the SrtStudio subtitle editor."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from srtstudio.timecode import parse_timecode

DEFAULT_STORAGE_DIR = Path.home() / '.srtstudio'


class SelectionState(Enum):
    """Tri-state of the select-all control."""
    ALL = 'all'
    NONE = 'none'
    SOME = 'some'


class SearchStatus(Enum):
    """Distinct outcomes of a find/replace command."""
    FOUND = 'found'
    NO_MORE_RESULTS = 'no_more_results'
    EMPTY_TERM = 'empty_term'
    MUST_FIND_FIRST = 'must_find_first'
    REPLACED_ALL = 'replaced_all'


@dataclass
class EditorConfig:
    """Configuration for an editing session."""
    storage_dir: Path = DEFAULT_STORAGE_DIR
    key_prefix: str = 'srt-translation-'
    min_insert_gap_ms: int = 200
    placeholder_text: str = '[New Line]'
    char_limit_per_line: int = 42
    output_suffix: str = '_translated.srt'


@dataclass
class SubtitleEntry:
    """A single subtitle cue and its translation."""
    index: int
    start_time: str
    end_time: str
    original_text: str
    translated_text: str = ''
    selected: bool = False
    raw_timing: Optional[str] = None

    @property
    def start_ms(self) -> int:
        return parse_timecode(self.start_time)

    @property
    def end_ms(self) -> int:
        return parse_timecode(self.end_time)

    @property
    def duration_ms(self) -> int:
        """Return the cue duration in milliseconds."""
        return self.end_ms - self.start_ms

    @property
    def time_range(self) -> str:
        """Timing line as written to the file. A line that lacked " --> " is kept verbatim."""
        if self.raw_timing is not None:
            return self.raw_timing
        return f"{self.start_time} --> {self.end_time}"

    @property
    def is_translated(self) -> bool:
        return bool(self.translated_text.strip())

    @property
    def display_text(self) -> str:
        """Text written on export: the trimmed translation, or the original when untranslated."""
        return self.translated_text.strip() or self.original_text


@dataclass
class SearchState:
    """Find session state. ``last_match`` is None until something is found."""
    last_match: Optional[int] = None
    search_term: str = ''

    def reset(self, term: str = '') -> None:
        self.last_match = None
        self.search_term = term


@dataclass
class SearchOutcome:
    """Result of a find/replace command, reported back to the host."""
    status: SearchStatus
    message: str
    position: Optional[int] = None
    sequence_number: Optional[int] = None
    replaced: int = 0
    changed: List[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND
