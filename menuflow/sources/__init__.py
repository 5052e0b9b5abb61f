"""
Input Sources

The InputSource interface and the StreamScanner adapter that reads typed
tokens from any text stream.
"""

from menuflow.sources.interface import InputSource
from menuflow.sources.adapters.stream_scanner import StreamScanner

__all__ = [
    "InputSource",
    "StreamScanner",
]
