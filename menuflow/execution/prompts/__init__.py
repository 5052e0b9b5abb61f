"""Jinja2 templates for menus and other multi-line console output."""
