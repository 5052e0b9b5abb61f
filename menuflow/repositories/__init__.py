"""State registry implementations."""
