"""
menuflow

A framework for interactive, text-based, menu-driven console programs.
Programs are described as named states, each with an action and a director
that picks the next state; the Console runs them until an Exit director is
reached or the run is terminated.
"""

from menuflow.domain import (
    Action,
    Back,
    BranchOnInt,
    BranchOnString,
    Director,
    Exit,
    Next,
    State,
    back,
    branch_on_int,
    branch_on_string,
    next_state,
    stop,
)
from menuflow.domain import restrictors
from menuflow.state import ObjectStore, SessionState
from menuflow.schemas import FailurePolicy, RetryForever, TerminateOnFailure, UseDefault
from menuflow.services.exceptions import (
    ConfigurationError,
    DuplicateStateError,
    HistoryUnderflowError,
    InputError,
    InputExhaustedError,
    InputUnavailableError,
    InvalidActionError,
    InvalidDirectorError,
    InvalidIDError,
    InvalidRestrictorError,
    MalformedInputError,
    MenuFlowError,
    NotFoundError,
    ObjectStoreError,
    TerminationSignal,
    TypeMismatchError,
    UnknownStateError,
)
from menuflow.services.requiring import RequiringService
from menuflow.sources import InputSource, StreamScanner
from menuflow.formatting import colorize
from menuflow.execution import Console

__all__ = [
    # Domain Layer
    "Action",
    "State",
    "Director",
    "Exit",
    "Next",
    "Back",
    "BranchOnInt",
    "BranchOnString",
    "stop",
    "next_state",
    "back",
    "branch_on_int",
    "branch_on_string",
    "restrictors",
    # State Layer
    "ObjectStore",
    "SessionState",
    # Schemas
    "FailurePolicy",
    "RetryForever",
    "UseDefault",
    "TerminateOnFailure",
    # Services
    "RequiringService",
    "MenuFlowError",
    "ConfigurationError",
    "DuplicateStateError",
    "InvalidIDError",
    "InvalidDirectorError",
    "InvalidActionError",
    "InvalidRestrictorError",
    "UnknownStateError",
    "HistoryUnderflowError",
    "InputError",
    "MalformedInputError",
    "InputExhaustedError",
    "InputUnavailableError",
    "ObjectStoreError",
    "NotFoundError",
    "TypeMismatchError",
    "TerminationSignal",
    # Input Sources
    "InputSource",
    "StreamScanner",
    # Formatting
    "colorize",
    # Execution Layer
    "Console",
]
