"""Errors and the RequiringService."""
