"""SrtStudio — SubRip subtitle translation editor."""

__version__ = "0.1.0"

__all__ = [
    "autosave",
    "cli",
    "document",
    "error_codes",
    "exceptions",
    "input_handler",
    "log",
    "models",
    "search",
    "session",
    "srt",
    "timecode",
]
