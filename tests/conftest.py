"""
Pytest fixtures for file grouper tests.

Provides temporary archive directories, sample entries and a test
configuration that keeps logs inside the temporary directory.
"""

import pytest
from pathlib import Path

from file_grouper.config import GroupingConfig
from file_grouper.file_ops import FileOperations


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary archive directory for testing."""
    archive = tmp_path / "Sets"
    archive.mkdir()
    return archive


@pytest.fixture
def test_config(tmp_path: Path, temp_dir: Path) -> GroupingConfig:
    """Configuration pointing at the temporary archive."""
    return GroupingConfig(
        target_directory=temp_dir,
        names_file=tmp_path / "Names.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def file_ops(test_config: GroupingConfig) -> FileOperations:
    return FileOperations(test_config)


@pytest.fixture
def make_file(temp_dir: Path):
    """Factory creating a file with unique content in the archive."""
    def factory(name: str, content: str = None, parent: Path = None) -> Path:
        folder = parent or temp_dir
        path = folder / name
        path.write_text(content if content is not None else f"content of {name}")
        return path
    return factory


@pytest.fixture
def song(make_file) -> Path:
    """An entry with a group name and one alias."""
    return make_file("Artist A, Artist B - Song.mp3")


@pytest.fixture
def capture_output() -> list:
    """Create a list to capture printed output."""
    return []


@pytest.fixture
def output_callback(capture_output: list):
    """Create an output callback that captures messages."""
    def callback(message: str) -> None:
        capture_output.append(message)
    return callback
