"""Tests for sdklocator."""
