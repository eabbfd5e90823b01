"""
Global pytest configuration for the MediTech voice test suite.
"""

import warnings


# Suppress deprecation warnings to keep CI output clean
warnings.filterwarnings(
    "ignore",
    message=".*aifc was removed in Python 3.13.*",
    category=DeprecationWarning,
    module=r"speech_recognition.*",
)

warnings.filterwarnings(
    "ignore",
    message=".*pkg_resources is deprecated.*",
    category=DeprecationWarning,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")
    config.addinivalue_line("markers", "audio: Audio backend tests")
