"""
Execution Layer - Run Loop and Console I/O

Defines the Console, which registers states and drives them until the
program exits or is terminated.
"""

from menuflow.execution.console import Console

__all__ = [
    "Console",
]
