"""Tests for Prototype Builder."""
