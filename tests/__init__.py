"""Tests for the wildfire package."""
