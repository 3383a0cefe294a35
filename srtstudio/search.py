"""Cyclic find and replace across the translations of a subtitle document."""

import logging
import re
from typing import Optional

from srtstudio.document import SubtitleDocument
from srtstudio.error_codes import ErrorCode
from srtstudio.exceptions import SearchPatternError
from srtstudio.models import SearchOutcome, SearchState, SearchStatus

logger = logging.getLogger(__name__)


class SearchReplaceEngine:
    """Find/replace over a document's translated text.

    The search term is used as a regular expression without escaping when
    replacing, so characters such as ``.`` or ``(`` keep their pattern
    meaning. Finding is a plain case-insensitive substring test.
    """

    def __init__(self, document: SubtitleDocument) -> None:
        self.document = document
        self.state = SearchState()
        self.highlighted: Optional[int] = None

    def _compile(self, term: str):
        try:
            return re.compile(term, re.IGNORECASE)
        except re.error as e:
            raise SearchPatternError(
                f"Invalid search pattern: {term!r}",
                error_code=str(ErrorCode.INVALID_PATTERN.value),
                original_error=e,
            ) from e

    def reset(self, term: str = '') -> None:
        """Forget the current match and highlight."""
        self.state.reset(term)
        self.highlighted = None

    def find_next(self, term: str) -> SearchOutcome:
        if not term:
            return SearchOutcome(SearchStatus.EMPTY_TERM, "Please enter text to find.")

        if term != self.state.search_term:
            self.reset(term)

        total = len(self.document)
        last = self.state.last_match if self.state.last_match is not None else -1
        needle = term.lower()
        for step in range(total):
            pos = (last + 1 + step) % total
            if needle in self.document[pos].translated_text.lower():
                self.highlighted = pos
                self.state.last_match = pos
                seq = self.document[pos].index
                return SearchOutcome(
                    SearchStatus.FOUND,
                    f"Found in line #{seq}",
                    position=pos,
                    sequence_number=seq,
                )

        self.state.last_match = None
        self.highlighted = None
        return SearchOutcome(
            SearchStatus.NO_MORE_RESULTS,
            "End of document reached. No more results.",
        )

    def replace_current(self, term: str, replacement: str) -> SearchOutcome:
        """Replace the first match in the highlighted entry, then find the next one."""
        if self.state.last_match is None or not term:
            return SearchOutcome(
                SearchStatus.MUST_FIND_FIRST,
                "You must find text before you can replace it.",
            )
        pos = self.state.last_match
        entry = self.document[pos]
        pattern = self._compile(term)
        new_text, count = pattern.subn(lambda _m: replacement, entry.translated_text, count=1)
        if not count:
            return SearchOutcome(
                SearchStatus.FOUND,
                f"Found in line #{entry.index}",
                position=pos,
                sequence_number=entry.index,
            )
        entry.translated_text = new_text
        logger.debug("Replaced one occurrence in line #%d", entry.index)

        outcome = self.find_next(term)
        outcome.replaced = 1
        outcome.changed = [pos]
        return outcome

    def replace_all(self, term: str, replacement: str) -> SearchOutcome:
        if not term:
            return SearchOutcome(
                SearchStatus.EMPTY_TERM,
                "Please enter text to find and replace.",
            )
        pattern = self._compile(term)
        total = 0
        changed = []
        for pos, entry in enumerate(self.document):
            new_text, count = pattern.subn(lambda _m: replacement, entry.translated_text)
            if count and new_text != entry.translated_text:
                entry.translated_text = new_text
                changed.append(pos)
                total += count

        self.highlighted = None
        self.state.last_match = None
        logger.info("Replaced %d occurrence(s) of %r", total, term)
        return SearchOutcome(
            SearchStatus.REPLACED_ALL,
            f"Replaced {total} occurrence(s) throughout the file.",
            replaced=total,
            changed=changed,
        )
