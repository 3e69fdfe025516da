"""Unit tests for app."""
