"""Input validation — pre-flight checks for subtitle files and output names."""

import logging
from pathlib import Path

from srtstudio.error_codes import ErrorCode
from srtstudio.exceptions import InvalidInputFileError

logger = logging.getLogger(__name__)

SRT_SUFFIX = '.srt'


class InputHandler:
    """Validate input subtitle files and derive output file names."""

    def __init__(self, output_suffix: str = '_translated.srt') -> None:
        self.output_suffix = output_suffix

    def validate_srt_name(self, name: str) -> bool:
        # Case-sensitive: "movie.SRT" is rejected.
        if not name or not name.endswith(SRT_SUFFIX):
            raise InvalidInputFileError(
                f"Please select a valid .srt file: {name}",
                error_code=str(ErrorCode.INVALID_FILE_FORMAT.value),
            )
        return True

    def validate_srt_file(self, path: Path) -> bool:
        path = Path(path)
        self.validate_srt_name(path.name)
        if not path.exists():
            raise InvalidInputFileError(
                f"Subtitle file not found: {path}",
                error_code=str(ErrorCode.FILE_NOT_FOUND.value),
            )
        if not path.is_file():
            raise InvalidInputFileError(f"Path is not a file: {path}")
        return True

    def output_name(self, name: str) -> str:
        """Replace the first '.srt' in the name, wherever it occurs."""
        return name.replace(SRT_SUFFIX, self.output_suffix, 1)

    def read_text(self, path: Path) -> str:
        path = Path(path)
        self.validate_srt_file(path)
        logger.debug('Reading %s', path)
        try:
            # Keep \r and drop a BOM so the auto-save key matches the text as loaded.
            with open(path, 'r', encoding='utf-8-sig', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidInputFileError(
                f"Failed to read subtitle file: {path}",
                error_code=str(ErrorCode.FILE_READ_ERROR.value),
                original_error=e,
            ) from e
