"""In-memory subtitle document with structural editing and selection."""

import logging
from typing import Iterator, List, Optional

from srtstudio.error_codes import ErrorCode
from srtstudio.exceptions import StructuralEditError
from srtstudio.models import SelectionState, SubtitleEntry
from srtstudio.timecode import format_timecode

logger = logging.getLogger(__name__)


class SubtitleDocument:
    """Ordered list of subtitle entries.

    Position in the list is the only identity an entry has; sequence numbers
    are derived from it and rewritten after every insert or delete.
    """

    def __init__(
        self,
        entries: Optional[List[SubtitleEntry]] = None,
        min_insert_gap_ms: int = 200,
        placeholder_text: str = '[New Line]',
        char_limit_per_line: int = 42,
    ) -> None:
        self.entries: List[SubtitleEntry] = list(entries or [])
        self.min_insert_gap_ms = min_insert_gap_ms
        self.placeholder_text = placeholder_text
        self.char_limit_per_line = char_limit_per_line

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        return iter(self.entries)

    def __getitem__(self, position: int) -> SubtitleEntry:
        return self.entries[position]

    def _entry(self, position: int) -> SubtitleEntry:
        if not 0 <= position < len(self.entries):
            raise IndexError(f"No subtitle line at position {position}")
        return self.entries[position]

    # -- selection -------------------------------------------------------

    def select(self, position: int, selected: bool = True) -> None:
        self._entry(position).selected = selected

    def toggle(self, position: int) -> bool:
        entry = self._entry(position)
        entry.selected = not entry.selected
        return entry.selected

    def select_all(self, selected: bool = True) -> None:
        for entry in self.entries:
            entry.selected = selected

    def clear_selection(self) -> None:
        self.select_all(False)

    def selected_positions(self) -> List[int]:
        return [pos for pos, entry in enumerate(self.entries) if entry.selected]

    def selection_state(self) -> SelectionState:
        count = len(self.selected_positions())
        if self.entries and count == len(self.entries):
            return SelectionState.ALL
        if count > 0:
            return SelectionState.SOME
        return SelectionState.NONE

    # -- text ------------------------------------------------------------

    def set_translation(self, position: int, text: str) -> None:
        self._entry(position).translated_text = text

    def copy_original(self, position: int) -> str:
        """Replace the translation with the original text and return it."""
        entry = self._entry(position)
        entry.translated_text = entry.original_text
        return entry.translated_text

    def char_count(self, position: int) -> int:
        return len(self._entry(position).translated_text)

    def overlong_lines(self, position: int) -> List[str]:
        """Translation lines longer than the per-line character limit."""
        return [
            line for line in self._entry(position).translated_text.split('\n')
            if len(line) > self.char_limit_per_line
        ]

    def translations(self) -> List[str]:
        return [entry.translated_text for entry in self.entries]

    # -- structure -------------------------------------------------------

    def gap_before(self, position: int) -> int:
        """Milliseconds between the previous entry's end and this entry's start."""
        if position <= 0:
            raise IndexError("The first line has no predecessor")
        return self._entry(position).start_ms - self.entries[position - 1].end_ms

    def insert_before(self, position: Optional[int] = None) -> SubtitleEntry:
        """Insert a placeholder entry before the single selected entry.

        The new entry fills the gap between its neighbours, leaving one
        millisecond on each side.
        """
        selected = self.selected_positions()
        if not selected:
            raise StructuralEditError(
                "Please select a line to insert before.",
                error_code=str(ErrorCode.NO_SELECTION.value),
            )
        if len(selected) > 1:
            raise StructuralEditError(
                "Please select only one line to insert before.",
                error_code=str(ErrorCode.MULTIPLE_SELECTION.value),
                details={'selected': [p + 1 for p in selected]},
            )
        target = selected[0]
        if position is not None and position != target:
            raise StructuralEditError(
                f"Line #{position + 1} is not the selected line.",
                error_code=str(ErrorCode.POSITION_NOT_SELECTED.value),
                details={'position': position, 'selected': target},
            )
        if target == 0:
            raise StructuralEditError(
                "Cannot insert a line before the first line.",
                error_code=str(ErrorCode.INSERT_BEFORE_FIRST.value),
            )

        prev_entry = self.entries[target - 1]
        next_entry = self.entries[target]
        gap = next_entry.start_ms - prev_entry.end_ms
        if gap < self.min_insert_gap_ms:
            logger.warning(
                "Insert rejected: %d ms between #%d and #%d",
                gap, prev_entry.index, next_entry.index,
            )
            raise StructuralEditError(
                f"Not enough time to insert a line between #{prev_entry.index} "
                f"and #{next_entry.index} (gap: {gap}ms).",
                error_code=str(ErrorCode.INSUFFICIENT_GAP.value),
                details={'previous': prev_entry.index, 'next': next_entry.index, 'gap_ms': gap},
            )

        new_entry = SubtitleEntry(
            index=next_entry.index,
            start_time=format_timecode(prev_entry.end_ms + 1),
            end_time=format_timecode(next_entry.start_ms - 1),
            original_text=self.placeholder_text,
        )
        self.entries.insert(target, new_entry)
        self.reindex()
        logger.info("Inserted line #%d (%s)", new_entry.index, new_entry.time_range)
        return new_entry

    def delete_selected(self) -> int:
        """Remove every selected entry and return how many were removed."""
        before = len(self.entries)
        remaining = [entry for entry in self.entries if not entry.selected]
        removed = before - len(remaining)
        if not removed:
            raise StructuralEditError(
                "Please select one or more lines to delete.",
                error_code=str(ErrorCode.NO_SELECTION.value),
            )
        self.entries = remaining
        self.reindex()
        logger.info("Deleted %d line(s)", removed)
        return removed

    def reindex(self) -> None:
        for pos, entry in enumerate(self.entries):
            entry.index = pos + 1
