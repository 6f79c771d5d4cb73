import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import cube_tally
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


SAMPLE_INPUT = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


# Common test fixtures
@pytest.fixture
def sample_text() -> str:
    """Return the five-game worked example."""
    return SAMPLE_INPUT


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    """Write the worked example to a temporary input file."""
    path = tmp_path / "input.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path
