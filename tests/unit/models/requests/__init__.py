"""Unit tests for requests."""
