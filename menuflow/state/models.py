"""
State Layer - Runtime Data Models

This module defines the runtime state of a single console run: the
visited-path stack of state IDs, the entry state and the data slots shared
between actions.

The stack only ever grows during a run. Going "back" reads an older entry
and the run loop pushes it again as a new visit, so the full path of the
user's journey is always available.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..services.exceptions import HistoryUnderflowError


class SessionState(BaseModel):
    """
    The mutable state for a single console run.
    """
    entry_state_id: Optional[str] = None
    stack: List[str] = Field(default_factory=list)
    slots: Dict[str, Any] = Field(default_factory=dict)

    @property
    def current_state_id(self) -> Optional[str]:
        if not self.stack:
            return None
        return self.stack[-1]

    @property
    def depth(self) -> int:
        return len(self.stack)

    def push(self, state_id: str) -> None:
        self.stack.append(state_id)

    def ancestor(self, steps: int) -> str:
        """
        Returns the state ID that was current `steps` visits ago.
        `steps=0` is the current state itself.
        """
        index = len(self.stack) - steps - 1
        if index < 0:
            raise HistoryUnderflowError(
                f"Cannot go back {steps} state(s): only {len(self.stack)} visited so far."
            )
        return self.stack[index]
