import pytest
from pathlib import Path

from xplane_apt.parsers.airport_parser import AirportParser

@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'

@pytest.fixture
def sample_apt_text(test_assets_dir) -> str:
    """Return the text of the sample airport."""
    return (test_assets_dir / 'sample_apt.dat').read_text(encoding='utf-8')

@pytest.fixture
def sample_result(sample_apt_text):
    """Return the ParseResult of the sample airport."""
    return AirportParser(sample_apt_text).parse()

@pytest.fixture
def sample_airport(sample_result):
    """Return the ParsedAirport of the sample airport."""
    return sample_result.data
