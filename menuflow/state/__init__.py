"""
State Layer - Runtime Data Models

Defines the per-run state of a console: the visited-path stack and the
object store shared between actions.
"""

from menuflow.state.models import SessionState
from menuflow.state.store import ObjectStore

__all__ = [
    "ObjectStore",
    "SessionState",
]
