"""SRT timecode conversion (HH:MM:SS,mmm <-> integer milliseconds)."""

import re

TIMECODE_RE = re.compile(r'^([0-9]{2}):([0-9]{2}):([0-9]{2}),([0-9]{3})$')

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


def parse_timecode(text: str) -> int:
    """Convert an ``HH:MM:SS,mmm`` timecode to milliseconds.

    Anything that does not match the exact pattern yields 0 rather than an
    error, so a damaged timecode degrades to the start of the track.
    """
    if not isinstance(text, str):
        return 0
    match = TIMECODE_RE.match(text.strip())
    if not match:
        return 0
    hours, minutes, seconds, millis = map(int, match.groups())
    return hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND + millis


def format_timecode(ms: int) -> str:
    """Convert milliseconds to an ``HH:MM:SS,mmm`` timecode. Negative input clamps to zero."""
    ms = max(0, int(ms))
    hours = ms // MS_PER_HOUR
    ms %= MS_PER_HOUR
    minutes = ms // MS_PER_MINUTE
    ms %= MS_PER_MINUTE
    seconds = ms // MS_PER_SECOND
    millis = ms % MS_PER_SECOND
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"
