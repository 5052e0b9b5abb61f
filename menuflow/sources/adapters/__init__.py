"""Concrete InputSource implementations."""
