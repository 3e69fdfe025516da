"""Unit tests for responses."""
