"""Unit tests for generation."""
