"""Error codes for the SrtStudio editor."""

from enum import Enum


class ErrorCategory(Enum):
    SYSTEM = "System"
    FILE = "File Operation"
    DOCUMENT = "Document Editing"
    SEARCH = "Find and Replace"
    STORAGE = "Auto-save Storage"


class ErrorCode(Enum):
    # File Errors (2000-2007)
    FILE_NOT_FOUND = 2000
    INVALID_FILE_FORMAT = 2003
    FILE_WRITE_ERROR = 2005
    FILE_READ_ERROR = 2006
    EMPTY_DOCUMENT = 2007

    # Document Errors (3000-3004)
    NO_SELECTION = 3000
    MULTIPLE_SELECTION = 3001
    INSERT_BEFORE_FIRST = 3002
    INSUFFICIENT_GAP = 3003
    POSITION_NOT_SELECTED = 3004

    # Search Errors (4000)
    INVALID_PATTERN = 4000

    # Storage Errors (5000-5001)
    STORAGE_WRITE_ERROR = 5000
    STORAGE_READ_ERROR = 5001

    @classmethod
    def get_category(cls, code) -> ErrorCategory:
        code_value = code.value if isinstance(code, cls) else code
        ranges = {
            (2000, 2999): ErrorCategory.FILE,
            (3000, 3999): ErrorCategory.DOCUMENT,
            (4000, 4999): ErrorCategory.SEARCH,
            (5000, 5999): ErrorCategory.STORAGE,
        }
        for (lo, hi), cat in ranges.items():
            if lo <= code_value <= hi:
                return cat
        return ErrorCategory.SYSTEM

    @classmethod
    def get_description(cls, code) -> str:
        descriptions = {
            cls.FILE_NOT_FOUND: "File not found",
            cls.INVALID_FILE_FORMAT: "Not a valid .srt file",
            cls.FILE_WRITE_ERROR: "Failed to write file",
            cls.FILE_READ_ERROR: "Failed to read file",
            cls.EMPTY_DOCUMENT: "The subtitle file appears to be empty or invalid",
            cls.NO_SELECTION: "No subtitle line selected",
            cls.MULTIPLE_SELECTION: "More than one subtitle line selected",
            cls.INSERT_BEFORE_FIRST: "Cannot insert before the first line",
            cls.INSUFFICIENT_GAP: "Not enough time between lines",
            cls.POSITION_NOT_SELECTED: "The given line is not the selected line",
            cls.INVALID_PATTERN: "Search term is not a valid pattern",
            cls.STORAGE_WRITE_ERROR: "Failed to write auto-save data",
            cls.STORAGE_READ_ERROR: "Failed to read auto-save data",
        }
        return descriptions.get(code, "Unknown error")
