"""Pytest configuration and shared fixtures for the test suite.

Shared fixtures live in `tests/fixtures` and are registered as a plugin so
they are available to every test module.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

pytest_plugins = [
    "tests.fixtures.common_fixtures",
]
