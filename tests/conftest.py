"""Shared test fixtures for SrtStudio."""

import pytest

from srtstudio.autosave import AutosaveStore, JsonFileStorage
from srtstudio.document import SubtitleDocument
from srtstudio.models import EditorConfig
from srtstudio.srt import parse_srt


def pytest_collection_modifyitems(items):
    """Auto-mark tests without integration or slow markers as unit tests."""
    for item in items:
        markers = {marker.name for marker in item.iter_markers()}
        if 'integration' not in markers and 'slow' not in markers:
            item.add_marker(pytest.mark.unit)


SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:00:05,000 --> 00:00:06,000\n"
    "World\n"
)


@pytest.fixture
def sample_srt():
    return SAMPLE_SRT


@pytest.fixture
def sample_srt_file(tmp_path):
    """Create a sample SRT file for testing."""
    path = tmp_path / 'test.srt'
    path.write_text(SAMPLE_SRT, encoding='utf-8')
    return path


@pytest.fixture
def document():
    return SubtitleDocument(parse_srt(SAMPLE_SRT))


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / 'storage'


@pytest.fixture
def store(storage_dir):
    return AutosaveStore(JsonFileStorage(storage_dir))


@pytest.fixture
def config(storage_dir):
    return EditorConfig(storage_dir=storage_dir)
