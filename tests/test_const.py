"""
Tests for constants.
"""

import initree
from initree.const import APP_NAME, APP_VERSION, DEFAULT_ROOT_NAME


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "initree"
    assert APP_VERSION == "0.1.0"
    assert DEFAULT_ROOT_NAME == "root"


def test_package_version_matches_constant():
    assert initree.__version__ == APP_VERSION
