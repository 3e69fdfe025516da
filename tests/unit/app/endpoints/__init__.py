"""Unit tests for endpoints."""
