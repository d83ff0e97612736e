"""
Shared pytest fixtures: sample feed text and Django configuration.
"""
import pytest  # Testing framework for writing and running tests

from cnbrates.adapters.web.server import configure_django  # Programmatic Django setup

SAMPLE_DAILY_TEXT = (
    "15 Oct 2025 # Daily rates\n"
    "Country|Currency|Amount|Code|Rate\n"
    "United States|Dollar|1|USD|23.500\n"
    "Eurozone|Euro|1|EUR|25.800\n"
    "Japan|Yen|100|JPY|15.800\n"
)


def pytest_configure(config):
    configure_django()


@pytest.fixture
def sample_daily_text():
    return SAMPLE_DAILY_TEXT
