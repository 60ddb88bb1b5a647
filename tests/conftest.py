# ============================================================================
# FILE: conftest.py
# RELPATH: search_path_helpers/tests/conftest.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Pytest fixtures for Search Path Helpers test suite
# ============================================================================

"""
Pytest configuration and shared fixtures.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from pathhelpers.paths import PathHelpers
from pathhelpers.roots import PosixRootClassifier, WindowsRootClassifier
from pathhelpers.validators import SearchPatternValidator


# ============================================================================
# Classifier Fixtures
# ============================================================================

@pytest.fixture
def windows_classifier():
    """Windows path rules."""
    return WindowsRootClassifier()


@pytest.fixture
def posix_classifier():
    """POSIX path rules."""
    return PosixRootClassifier()


@pytest.fixture
def win(windows_classifier):
    """PathHelpers bound to Windows rules."""
    return PathHelpers(windows_classifier)


@pytest.fixture
def posix(posix_classifier):
    """PathHelpers bound to POSIX rules."""
    return PathHelpers(posix_classifier)


@pytest.fixture
def pattern_validator(windows_classifier):
    """SearchPatternValidator bound to Windows rules."""
    return SearchPatternValidator(windows_classifier)


# ============================================================================
# Filesystem Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test file operations."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    config_path = temp_dir / "path_helpers_config.json"
    yield config_path
