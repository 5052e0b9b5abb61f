"""
Dependency Wiring (Composition Root).

This module is the one place that knows which concrete pieces a console is
built from when running as a real program:
1. Settings, read once per process from the environment / .env file.
2. The input source, a StreamScanner over stdin.
3. The Console itself, writing to stdout and stderr.

Tests build their own Console with in-memory streams instead.
"""

import sys
from functools import lru_cache

from ..config import Settings
from ..execution.console import Console
from ..sources.adapters.stream_scanner import StreamScanner
from ..sources.interface import InputSource


# Settings (Singleton)
@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_input_source() -> InputSource:
    return StreamScanner(sys.stdin)


def create_console() -> Console:
    """
    A console on the process's standard streams. The streams are not owned,
    so they stay open after the run.
    """
    return Console(
        source=get_input_source(),
        output=sys.stdout,
        error=sys.stderr,
        settings=get_settings(),
    )
