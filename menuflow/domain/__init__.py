"""
Domain Layer - Static Data Models

Defines the building blocks of a menu program: States, the Directors that
connect them and the restrictor predicates used to validate input.
"""

from menuflow.domain.models import Action, State, no_action
from menuflow.domain.directors import (
    Back,
    BranchOnInt,
    BranchOnString,
    Director,
    Exit,
    Next,
    back,
    branch_on_int,
    branch_on_string,
    next_state,
    stop,
)

__all__ = [
    "Action",
    "State",
    "no_action",
    "Back",
    "BranchOnInt",
    "BranchOnString",
    "Director",
    "Exit",
    "Next",
    "back",
    "branch_on_int",
    "branch_on_string",
    "next_state",
    "stop",
]
