"""Runners for the service and its background tasks."""
