"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest


SAMPLE = '''
key1 = value

# comment

test = bar ; comment

[section 1]
key1 = new key
num = 151
empty


[ various   ]
"quoted key"= VALUE 123

quote_multiline = """
  this is value
"""

escape_sequences = "yay\\nboo"
escaped_newlines = abcd \\
efg
'''

INHERITANCE = """\
[def]
name1=value1
name2=value2

[foo : def]
name1=Name1 from foo. Lookup for def.name2: %name2%
"""


@pytest.fixture
def sample_source() -> str:
    """Document exercising every reader feature."""
    return SAMPLE


@pytest.fixture
def inheritance_source() -> str:
    """Two sections, the second inheriting from the first."""
    return INHERITANCE


@pytest.fixture
def example_config_path(tmp_path: Path) -> Path:
    """Sample document written to a temporary file."""
    path = tmp_path / "config.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by the command line entry point."""
    yield
    logger = logging.getLogger("initree")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
