"""Response cache implementations."""
