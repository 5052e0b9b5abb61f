import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator

from ..domain.models import State
from ..services.exceptions import DuplicateStateError, UnknownStateError

logger = logging.getLogger(__name__)


# The Interface
class StateRepository(ABC):
    """
    Defines how the console stores and looks up State definitions.
    The run loop only needs add/get, so a registry backed by something other
    than a dict can be swapped in without touching the Console.
    """

    @abstractmethod
    def add(self, state: State) -> None:
        """
        Stores a new state.
        Raises DuplicateStateError if the ID is already taken.
        """
        pass

    @abstractmethod
    def get(self, state_id: str) -> State:
        """
        Retrieves a state by ID.
        Raises UnknownStateError if not found.
        """
        pass

    @abstractmethod
    def __contains__(self, state_id: object) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Iterates over state IDs in registration order."""
        pass


class InMemoryStateRepository(StateRepository):
    """
    Keeps states in an insertion-ordered dictionary for O(1) lookup.
    """

    def __init__(self):
        self._index: Dict[str, State] = {}

    def add(self, state: State) -> None:
        if state.state_id in self._index:
            raise DuplicateStateError(f"State '{state.state_id}' is already registered.")
        self._index[state.state_id] = state
        logger.debug(f"Registered state '{state.state_id}' ({type(state.director).__name__})")

    def get(self, state_id: str) -> State:
        if state_id not in self._index:
            raise UnknownStateError(f"State '{state_id}' was never registered.")
        return self._index[state_id]

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)
