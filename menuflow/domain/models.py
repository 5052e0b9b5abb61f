"""
Domain Layer - Static Data Models

This module defines the State, the fundamental unit of a menu program.
States are registered once on a Console and never change afterwards.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .directors import Director

if TYPE_CHECKING:
    from ..execution.console import Console

"""
Action is the side-effecting part of a state. It receives the console so it
can print, read input and use the object store. It runs once per visit,
before the state's director is resolved.
"""
Action = Callable[["Console"], None]


def no_action(console: "Console") -> None:
    """Stand-in for states registered without an action."""
    pass


@dataclass(frozen=True)
class State:
    """
    A named unit of execution.

    Attributes:
        state_id: Unique, non-empty key in the registry. Directors refer to
            states by this ID.
        action: Runs each time the state is visited.
        director: Decides what happens after the action has run.
    """
    state_id: str
    action: Action
    director: Director
