"""
Service Layer Exceptions

Custom exceptions raised while wiring up and running a menu console.

Configuration errors are programming mistakes made while building the state
machine; they are fatal and never retried. Input errors describe what went
wrong while reading one value and are handled by the RequiringService.
TerminationSignal is not an error at all: it is the control-flow signal that
stops a run early and cleanly.
"""


class MenuFlowError(Exception):
    """Base class for every error raised by menuflow."""
    pass


# ==============================================================================
# Configuration errors
# ==============================================================================


class ConfigurationError(MenuFlowError):
    """Raised when the state machine is wired up incorrectly."""
    pass


class DuplicateStateError(ConfigurationError):
    """Raised when a state ID is registered more than once."""
    pass


class InvalidIDError(ConfigurationError):
    """Raised when a state ID is not a non-empty string."""
    pass


class InvalidDirectorError(ConfigurationError):
    """Raised when a director is missing or built from inconsistent arguments."""
    pass


class InvalidActionError(ConfigurationError):
    """Raised when a state's action is neither None nor callable."""
    pass


class InvalidRestrictorError(ConfigurationError):
    """Raised when a restrictor factory receives impossible bounds."""
    pass


class UnknownStateError(ConfigurationError):
    """Raised when the run loop reaches a state ID that was never registered."""
    pass


class HistoryUnderflowError(ConfigurationError):
    """Raised when a Back director asks for more history than was recorded."""
    pass


# ==============================================================================
# Input errors
# ==============================================================================


class InputError(MenuFlowError):
    """Base class for failures of the input source."""
    pass


class MalformedInputError(InputError):
    """
    Raised when input is present but cannot be parsed as the requested type.
    The offending token stays in the buffer until it is discarded.
    """

    def __init__(self, token: str, expected: str):
        super().__init__(f"Cannot read {token!r} as {expected}.")
        self.token = token
        self.expected = expected


class InputExhaustedError(InputError):
    """Raised when the input source has no more data."""
    pass


class InputUnavailableError(InputError):
    """Raised when the input source is closed or otherwise unusable."""
    pass


# ==============================================================================
# Object store errors
# ==============================================================================


class ObjectStoreError(MenuFlowError):
    """Base class for object store lookups that fail."""
    pass


class NotFoundError(ObjectStoreError):
    """Raised when no object is stored under the requested key."""
    pass


class TypeMismatchError(ObjectStoreError):
    """Raised when the stored object is not of the expected type."""
    pass


# ==============================================================================
# Control flow
# ==============================================================================


class TerminationSignal(BaseException):
    """
    Stops a run immediately from any call depth.

    Derives from BaseException so that an action's ``except Exception`` does
    not swallow it. Only Console.run() catches it.
    """
    pass
