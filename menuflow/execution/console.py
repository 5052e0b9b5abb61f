"""
Console - State Machine Orchestration Layer

The Console owns everything a menu program needs for one run: the state
registry, the visited-path stack, the object store, the I/O streams and the
two finalization callbacks.

run() drives the program:
1. Print the greeting (unless it is empty) and push the entry state.
2. Execute the current state's action.
3. If its director is Exit, stop. Otherwise resolve the director (which may
   read input) and push the resulting state ID.
4. Repeat from 2.

There are exactly two ways out of a run that count as "finished":
- Graceful: a state whose director is Exit has run.
- Intentional termination: a TerminationSignal was raised from any depth
  (by an action, by the RequiringService, or because the input ran dry).
  The terminate callback runs first.
Both paths end with the exit callback, exactly once, followed by the release
of owned streams. Configuration errors and broken input are not caught and
skip both callbacks.
"""

import logging
import sys
from decimal import Decimal
from operator import methodcaller
from typing import Any, Callable, NoReturn, Optional, Sequence, TextIO, Tuple

from ..config import Settings, settings as default_settings
from ..domain.directors import Director
from ..domain.models import Action, State, no_action
from ..domain.restrictors import at_least, at_most, in_range
from ..repositories.states import InMemoryStateRepository, StateRepository
from ..schemas.policies import FailurePolicy, RetryForever
from ..services.exceptions import (
    ConfigurationError,
    InvalidActionError,
    InvalidDirectorError,
    InvalidIDError,
    TerminationSignal,
    UnknownStateError,
)
from ..services.requiring import Producer, Restrictor, RequiringService
from ..sources.adapters.stream_scanner import StreamScanner
from ..sources.interface import InputSource
from ..state.models import SessionState
from ..state.store import ObjectStore
from .prompts.loader import render_menu, render_path

logger = logging.getLogger(__name__)

Callback = Callable[["Console"], None]


def _no_callback(console: "Console") -> None:
    pass


def _check_state_id(state_id: Any) -> str:
    if not isinstance(state_id, str) or not state_id:
        raise InvalidIDError(f"State IDs must be non-empty strings, got {state_id!r}.")
    return state_id


class Console:
    def __init__(
        self,
        source: Optional[InputSource] = None,
        output: Optional[TextIO] = None,
        error: Optional[TextIO] = None,
        *,
        settings: Optional[Settings] = None,
        state_repository: Optional[StateRepository] = None,
        close_input: bool = False,
        close_output: bool = False,
    ):
        """
        Args:
            source: Where values are read from. Defaults to a scanner over stdin.
            output: Sink for regular output. Defaults to stdout.
            error: Sink for print_error(). Defaults to `output` when only
                `output` is given, otherwise to stderr.
            settings: Message texts; the module-level settings are used when omitted.
            state_repository: Registry implementation; in-memory by default.
            close_input: The console owns `source` and closes it after run().
            close_output: The console owns `output` and `error` and closes
                them after run(). A stream used for both is closed once.
        """
        if output is None and error is None:
            output, error = sys.stdout, sys.stderr
        elif output is None:
            output = sys.stdout
        elif error is None:
            error = output

        self.settings = settings or default_settings
        self.source = source if source is not None else StreamScanner(sys.stdin)
        self.output = output
        self.error = error
        self.states = state_repository or InMemoryStateRepository()
        self.session = SessionState()
        self.store = ObjectStore(self.session.slots)
        self.requiring = RequiringService(self.source, emit=self.print, prompt=self.prompt)
        self.greeting_text = self.settings.GREETING_TEXT

        self._close_input = close_input
        self._close_output = close_output
        self._exit_callback: Callback = _no_callback
        self._terminate_callback: Callback = _no_callback
        self._has_run = False
        self._closed = False

    # ==========================================================================
    # Registration
    # ==========================================================================

    def register(self, state_id: str, action: Optional[Action], director: Director) -> "Console":
        """
        Defines a state. Returns the console so definitions can be chained.
        The first registered state becomes the entry state unless one was
        set explicitly.
        """
        _check_state_id(state_id)
        if not isinstance(director, Director):
            raise InvalidDirectorError(f"State '{state_id}' needs a Director, got {director!r}.")
        if action is None:
            action = no_action
        elif not callable(action):
            raise InvalidActionError(f"The action of state '{state_id}' is not callable.")

        self.states.add(State(state_id=state_id, action=action, director=director))
        if self.session.entry_state_id is None:
            self.session.entry_state_id = state_id
        return self

    def state(self, state_id: str, director: Director) -> Callable[[Action], Action]:
        """
        Decorator form of register():

            @console.state("menu", branch_on_int(1, 2, ["add", "sub"]))
            def menu(cns): ...
        """
        def decorator(action: Action) -> Action:
            self.register(state_id, action, director)
            return action

        return decorator

    @property
    def entry_state_id(self) -> Optional[str]:
        return self.session.entry_state_id

    @entry_state_id.setter
    def entry_state_id(self, state_id: str) -> None:
        self.session.entry_state_id = _check_state_id(state_id)

    @property
    def exit_callback(self) -> Callback:
        return self._exit_callback

    @exit_callback.setter
    def exit_callback(self, callback: Optional[Callback]) -> None:
        self._exit_callback = callback or _no_callback

    @property
    def terminate_callback(self) -> Callback:
        return self._terminate_callback

    @terminate_callback.setter
    def terminate_callback(self, callback: Optional[Callback]) -> None:
        self._terminate_callback = callback or _no_callback

    @property
    def history(self) -> Tuple[str, ...]:
        """Every visited state ID so far, oldest first."""
        return tuple(self.session.stack)

    # ==========================================================================
    # Run loop
    # ==========================================================================

    def run(self) -> None:
        if self._has_run:
            raise ConfigurationError("A console can only be run once.")
        self._has_run = True

        try:
            self._run_states()
        except TerminationSignal:
            logger.info(f"Run terminated at '{self.session.current_state_id}'")
            self._finalize(self._terminate_callback)

        try:
            self._finalize(self._exit_callback)
            logger.info(f"Run finished after {self.session.depth} visit(s)")
        finally:
            self.close()

    def _finalize(self, callback: Callback) -> None:
        # Callbacks cannot end finalization early
        try:
            callback(self)
        except TerminationSignal:
            logger.info("Termination requested from a finalization callback; ignored")

    def _run_states(self) -> None:
        if self.greeting_text:
            self.print(self.greeting_text)

        entry_state_id = self.session.entry_state_id
        if entry_state_id is None:
            raise UnknownStateError("No entry state: register a state before calling run().")
        self.session.push(entry_state_id)

        while True:
            state = self.states.get(self.session.current_state_id)
            logger.debug(f"Visiting '{state.state_id}' (visit #{self.session.depth})")
            state.action(self)

            if state.director.is_terminal:
                logger.debug(f"'{state.state_id}' is terminal")
                return

            next_state_id = state.director.resolve(self)
            self.session.push(next_state_id)

    def terminate(self) -> NoReturn:
        """Stops the run from inside an action; the terminate callback runs next."""
        raise TerminationSignal()

    # ==========================================================================
    # Output
    # ==========================================================================

    def print(self, *values: Any, sep: str = " ", end: str = "\n") -> None:
        print(*values, sep=sep, end=end, file=self.output)

    def print_error(self, *values: Any, sep: str = " ", end: str = "\n") -> None:
        print(*values, sep=sep, end=end, file=self.error)

    def prompt(self, text: str) -> None:
        """Writes `text` without a line break so the answer follows on the same line."""
        self.output.write(text)
        self.output.flush()

    def print_menu(self, options: Sequence[str], title: str = "", start: int = 1) -> None:
        self.output.write(render_menu(options, title=title, start=start))

    def print_path(self) -> None:
        self.output.write(render_path(self.session.stack))

    # ==========================================================================
    # Input
    # ==========================================================================

    def require(
        self,
        producer: Producer,
        policy: Optional[FailurePolicy] = None,
        restrictor: Optional[Restrictor] = None,
        restrictor_message: str = "",
    ) -> Any:
        """
        Reads one value through the RequiringService. Without a policy the
        user is asked again (settings.RETRY_PROMPT) until the value is accepted.
        """
        if policy is None:
            policy = RetryForever(retry_prompt=self.settings.RETRY_PROMPT)
        return self.requiring.require(producer, policy, restrictor, restrictor_message)

    def require_int(self, **kwargs) -> int:
        return self.require(methodcaller("read_int"), **kwargs)

    def require_str(self, **kwargs) -> str:
        return self.require(methodcaller("read_str"), **kwargs)

    def require_line(self, **kwargs) -> str:
        return self.require(methodcaller("read_line"), **kwargs)

    def require_bool(self, **kwargs) -> bool:
        return self.require(methodcaller("read_bool"), **kwargs)

    def require_decimal(self, **kwargs) -> Decimal:
        return self.require(methodcaller("read_decimal"), **kwargs)

    def require_float(self, **kwargs) -> float:
        return self.require(methodcaller("read_float"), **kwargs)

    def read_int(
        self,
        prompt: str = "",
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        """Prompts for an integer, optionally bounded, and asks until one is given."""
        restrictor = None
        message = ""
        if minimum is not None and maximum is not None:
            restrictor = in_range(minimum, maximum)
            message = self.settings.RANGE_INVALID_MESSAGE.format(low=minimum, high=maximum)
        elif minimum is not None:
            restrictor = at_least(minimum)
            message = self.settings.MIN_INVALID_MESSAGE.format(low=minimum)
        elif maximum is not None:
            restrictor = at_most(maximum)
            message = self.settings.MAX_INVALID_MESSAGE.format(high=maximum)

        self._write_prompt(prompt)
        return self.require_int(restrictor=restrictor, restrictor_message=message)

    def read_str(self, prompt: str = "") -> str:
        self._write_prompt(prompt)
        return self.require_str()

    def read_line(self, prompt: str = "") -> str:
        self._write_prompt(prompt)
        return self.require_line()

    def read_bool(self, prompt: str = "") -> bool:
        self._write_prompt(prompt)
        return self.require_bool()

    def read_decimal(self, prompt: str = "") -> Decimal:
        self._write_prompt(prompt)
        return self.require_decimal()

    def read_float(self, prompt: str = "") -> float:
        self._write_prompt(prompt)
        return self.require_float()

    def _write_prompt(self, prompt: str) -> None:
        if prompt:
            self.prompt(prompt)

    # ==========================================================================
    # Resources
    # ==========================================================================

    def close(self) -> None:
        """Releases the streams this console owns. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True

        if self._close_input:
            self.source.close()

        if self._close_output:
            self.output.close()
            if self.error is not self.output:
                self.error.close()
        else:
            self.output.flush()
            if self.error is not self.output:
                self.error.flush()

    def __enter__(self) -> "Console":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
