"""Implementation of all REST API endpoints."""
