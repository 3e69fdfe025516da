"""Unit tests for storage."""
