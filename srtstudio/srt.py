"""SrtStudio SRT subtitle parsing and writing utilities."""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from srtstudio.models import SubtitleEntry

logger = logging.getLogger(__name__)

TIME_SEPARATOR = ' --> '
TIME_MARKER = '-->'


def parse_srt(content: str) -> List[SubtitleEntry]:
    """Parse SRT content string into a list of SubtitleEntry objects.

    Blocks without a timing line are skipped, so garbage input yields fewer
    entries (possibly none) instead of an error.
    """
    entries = []
    blocks = content.strip().replace('\r', '').split('\n\n')
    for block_no, block in enumerate(blocks, 1):
        lines = block.split('\n')
        if len(lines) < 2 or TIME_MARKER not in lines[1]:
            logger.debug("Skipping malformed block #%d", block_no)
            continue
        try:
            index = int(lines[0].strip())
        except ValueError:
            index = len(entries) + 1
        start, sep, end = lines[1].partition(TIME_SEPARATOR)
        entries.append(SubtitleEntry(
            index=index,
            start_time=start,
            end_time=end,
            original_text='\n'.join(lines[2:]),
            raw_timing=None if sep else lines[1],
        ))
    return entries


def serialize_srt(
    entries: Iterable[SubtitleEntry],
    translations: Optional[Mapping[int, str]] = None,
) -> str:
    """Render entries back to SRT text.

    ``translations`` maps entry position to the text currently being edited;
    when omitted each entry's own ``translated_text`` is used. Untranslated
    entries fall back to their original text.
    """
    blocks = []
    for pos, entry in enumerate(entries):
        if translations is not None:
            text = (translations.get(pos) or '').strip() or entry.original_text
        else:
            text = entry.display_text
        blocks.append(f"{entry.index}\n{entry.time_range}\n{text}")
    return '\n\n'.join(blocks) + '\n\n'


def write_srt(entries: List[SubtitleEntry], path: Path) -> None:
    """Write SRT entries to a file as-is; the caller owns sequence numbering."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(serialize_srt(entries))
