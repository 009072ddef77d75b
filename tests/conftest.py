"""
Pytest configuration and shared fixtures for sdklocator tests.
"""

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.sdks import sdk_root, make_sdk
