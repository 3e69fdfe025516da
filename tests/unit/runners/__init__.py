"""Unit tests for runners."""
