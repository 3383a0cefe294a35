"""Editing session — owns the document, find state and auto-save slot for one file."""

import logging
from pathlib import Path
from typing import Optional

from srtstudio.autosave import AutosaveStore, JsonFileStorage, derive_key
from srtstudio.document import SubtitleDocument
from srtstudio.error_codes import ErrorCode
from srtstudio.exceptions import EmptyDocumentError, PersistenceError
from srtstudio.input_handler import InputHandler
from srtstudio.models import EditorConfig, SearchOutcome, SubtitleEntry
from srtstudio.search import SearchReplaceEngine
from srtstudio.srt import parse_srt, serialize_srt, write_srt

logger = logging.getLogger(__name__)

STATUS_SAVED = 'Saved.'
STATUS_SAVE_ERROR = 'Save Error!'
STATUS_LOADED = 'Loaded auto-saved session.'
STATUS_CLEARED = 'Auto-save cleared.'


class EditorSession:
    """One file being translated.

    ``save_status`` and ``find_status`` hold the last message for the
    auto-save and find/replace status lines respectively.
    """

    def __init__(
        self,
        content: str,
        name: str = 'translated.srt',
        config: Optional[EditorConfig] = None,
        storage: Optional[JsonFileStorage] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.content = content
        self.name = name

        entries = parse_srt(content)
        if not entries:
            raise EmptyDocumentError(
                "The subtitle file appears to be empty or invalid.",
                error_code=str(ErrorCode.EMPTY_DOCUMENT.value),
                details={'file': name},
            )
        self.document = SubtitleDocument(
            entries,
            min_insert_gap_ms=self.config.min_insert_gap_ms,
            placeholder_text=self.config.placeholder_text,
            char_limit_per_line=self.config.char_limit_per_line,
        )
        self.search = SearchReplaceEngine(self.document)
        self.store = AutosaveStore(storage or JsonFileStorage(self.config.storage_dir))
        self.autosave_key = derive_key(content, self.config.key_prefix)
        self.output_name = InputHandler(self.config.output_suffix).output_name(name)
        self.save_status = ''
        self.find_status = ''
        logger.info("Loaded %s: %d lines", name, len(self.document))

    @classmethod
    def open(
        cls,
        path: Path,
        config: Optional[EditorConfig] = None,
        storage: Optional[JsonFileStorage] = None,
    ) -> 'EditorSession':
        """Validate, read and parse a subtitle file."""
        config = config or EditorConfig()
        content = InputHandler(config.output_suffix).read_text(path)
        return cls(content, name=Path(path).name, config=config, storage=storage)

    # -- auto-save -------------------------------------------------------

    def _autosave(self, position: int) -> bool:
        ok = self.store.save(self.autosave_key, position, self.document[position].translated_text)
        self.save_status = STATUS_SAVED if ok else STATUS_SAVE_ERROR
        return ok

    def restore_autosave(self) -> int:
        """Apply previously auto-saved translations; returns how many lines were restored."""
        saved = self.store.load_all(self.autosave_key)
        if saved is None:
            return 0
        restored = 0
        for pos in range(len(self.document)):
            text = saved.get(str(pos))
            if text:
                self.document.set_translation(pos, text)
                restored += 1
        self.save_status = STATUS_LOADED
        logger.info("Restored %d auto-saved translation(s)", restored)
        return restored

    def clear_autosave(self) -> bool:
        try:
            self.store.clear(self.autosave_key)
        except PersistenceError as e:
            logger.error("Failed to clear auto-save data: %s", e)
            self.save_status = STATUS_SAVE_ERROR
            return False
        self.save_status = STATUS_CLEARED
        return True

    # -- text edits ------------------------------------------------------

    def edit(self, position: int, text: str) -> bool:
        self.document.set_translation(position, text)
        return self._autosave(position)

    def copy_original(self, position: int) -> str:
        text = self.document.copy_original(position)
        self._autosave(position)
        return text

    # -- find / replace --------------------------------------------------

    def _report(self, outcome: SearchOutcome) -> SearchOutcome:
        for pos in outcome.changed:
            self._autosave(pos)
        self.find_status = outcome.message
        return outcome

    def find_next(self, term: str) -> SearchOutcome:
        return self._report(self.search.find_next(term))

    def replace_current(self, term: str, replacement: str) -> SearchOutcome:
        return self._report(self.search.replace_current(term, replacement))

    def replace_all(self, term: str, replacement: str) -> SearchOutcome:
        return self._report(self.search.replace_all(term, replacement))

    # -- structure -------------------------------------------------------

    def insert_before(self, position: Optional[int] = None) -> SubtitleEntry:
        entry = self.document.insert_before(position)
        self.search.reset(self.search.state.search_term)
        return entry

    def delete_selected(self) -> int:
        removed = self.document.delete_selected()
        self.search.reset(self.search.state.search_term)
        return removed

    # -- output ----------------------------------------------------------

    def render(self) -> str:
        return serialize_srt(self.document)

    def export(self, directory: Path) -> Path:
        """Write the translated file into ``directory`` and return its path."""
        out_path = Path(directory) / self.output_name
        try:
            write_srt(self.document.entries, out_path)
        except OSError as e:
            raise PersistenceError(
                f"Failed to write {out_path}",
                error_code=str(ErrorCode.FILE_WRITE_ERROR.value),
                original_error=e,
            ) from e
        logger.info("Exported %d lines -> %s", len(self.document), out_path)
        return out_path
