"""
Directors - Transition Rules Between States

A Director answers one question after a state's action has run: "which
state comes next, or should the program stop?"

Five variants exist:
- Exit: terminal. The run loop stops without asking for a next state.
- Next: always the same next state.
- Back: the state that was current N visits ago.
- BranchOnInt: the user picks a number in [low, high]; the number selects
  the next state by offset.
- BranchOnString: the user types one of a fixed set of words; the word
  selects the next state by position.

Directors are immutable and validated when they are built, so a
misconfigured branch fails while the program is being wired up, never in
the middle of a run. The branch variants read their input through the
console's RequiringService and always retry until the answer is valid.
"""

import logging
import re
from abc import abstractmethod
from typing import TYPE_CHECKING, Literal, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..schemas.policies import RetryForever
from ..services.exceptions import InvalidDirectorError, InvalidIDError
from .restrictors import in_range, must_be_one_of, must_be_one_of_ignore_case

if TYPE_CHECKING:
    from ..execution.console import Console

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="Director")

# BranchOnString reads one whitespace-delimited token
_TOKEN = re.compile(r"\S+")


def _check_state_id(state_id: str) -> str:
    if not state_id:
        raise InvalidIDError("State IDs must be non-empty strings.")
    return state_id


class Director(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_terminal(self) -> bool:
        return False

    @abstractmethod
    def resolve(self, console: "Console") -> Optional[str]:
        """Returns the ID of the state to visit next."""
        pass


class Exit(Director):
    kind: Literal["exit"] = "exit"

    @property
    def is_terminal(self) -> bool:
        return True

    def resolve(self, console: "Console") -> Optional[str]:
        # The run loop checks is_terminal first; there is never a next state.
        return None


class Next(Director):
    kind: Literal["next"] = "next"
    state_id: str

    @field_validator("state_id")
    @classmethod
    def _validate_state_id(cls, value: str) -> str:
        return _check_state_id(value)

    def resolve(self, console: "Console") -> Optional[str]:
        return self.state_id


class Back(Director):
    kind: Literal["back"] = "back"
    steps: int = Field(1, description="How many visits to go back. 0 repeats the current state.")

    @field_validator("steps")
    @classmethod
    def _validate_steps(cls, value: int) -> int:
        if value < 0:
            raise InvalidDirectorError(f"Cannot go back a negative number of states ({value}).")
        return value

    def resolve(self, console: "Console") -> Optional[str]:
        return console.session.ancestor(self.steps)


class BranchOnInt(Director):
    kind: Literal["branch_on_int"] = "branch_on_int"
    low: int
    high: int
    options: Tuple[str, ...]
    invalid_message: Optional[str] = Field(
        None,
        description="Shown when the number is out of range. Defaults to settings.RANGE_INVALID_MESSAGE."
    )
    retry_prompt: Optional[str] = Field(
        None,
        description="Shown before asking again. Defaults to settings.BRANCH_RETRY_PROMPT."
    )

    @model_validator(mode="after")
    def _validate_options(self) -> "BranchOnInt":
        if self.low > self.high:
            raise InvalidDirectorError(f"Empty branch range [{self.low}, {self.high}].")
        expected = self.high - self.low + 1
        if len(self.options) != expected:
            raise InvalidDirectorError(
                f"Range [{self.low}, {self.high}] needs {expected} option(s), got {len(self.options)}."
            )
        for state_id in self.options:
            _check_state_id(state_id)
        return self

    def resolve(self, console: "Console") -> Optional[str]:
        settings = console.settings
        message = self.invalid_message
        if message is None:
            message = settings.RANGE_INVALID_MESSAGE.format(low=self.low, high=self.high)
        prompt = self.retry_prompt
        if prompt is None:
            prompt = settings.BRANCH_RETRY_PROMPT

        value = console.require_int(
            policy=RetryForever(retry_prompt=prompt),
            restrictor=in_range(self.low, self.high),
            restrictor_message=message,
        )
        logger.debug(f"Branch input {value} selects '{self.options[value - self.low]}'")
        return self.options[value - self.low]


class BranchOnString(Director):
    kind: Literal["branch_on_string"] = "branch_on_string"
    allowed_inputs: Tuple[str, ...]
    mapped_ids: Tuple[str, ...]
    ignore_case: bool = False
    invalid_message: Optional[str] = Field(
        None,
        description="Shown when the word is not allowed. Defaults to settings.OPTION_INVALID_MESSAGE."
    )
    retry_prompt: Optional[str] = Field(
        None,
        description="Shown before asking again. Defaults to settings.BRANCH_RETRY_PROMPT."
    )

    @model_validator(mode="after")
    def _validate_mapping(self) -> "BranchOnString":
        if not self.allowed_inputs:
            raise InvalidDirectorError("A string branch needs at least one allowed input.")
        if len(self.allowed_inputs) != len(self.mapped_ids):
            raise InvalidDirectorError(
                f"{len(self.allowed_inputs)} allowed input(s) but {len(self.mapped_ids)} mapped state ID(s)."
            )
        for allowed in self.allowed_inputs:
            if not _TOKEN.fullmatch(allowed):
                raise InvalidDirectorError(
                    f"Allowed input {allowed!r} must be a single word without whitespace."
                )
        for state_id in self.mapped_ids:
            _check_state_id(state_id)
        return self

    def resolve(self, console: "Console") -> Optional[str]:
        settings = console.settings
        message = self.invalid_message
        if message is None:
            message = settings.OPTION_INVALID_MESSAGE.format(options=", ".join(self.allowed_inputs))
        prompt = self.retry_prompt
        if prompt is None:
            prompt = settings.BRANCH_RETRY_PROMPT

        if self.ignore_case:
            restrictor = must_be_one_of_ignore_case(*self.allowed_inputs)
        else:
            restrictor = must_be_one_of(*self.allowed_inputs)

        value = console.require_str(
            policy=RetryForever(retry_prompt=prompt),
            restrictor=restrictor,
            restrictor_message=message,
        )
        for allowed, state_id in zip(self.allowed_inputs, self.mapped_ids):
            if allowed == value or (self.ignore_case and allowed.casefold() == value.casefold()):
                logger.debug(f"Branch input {value!r} selects '{state_id}'")
                return state_id

        # Only reachable if the restrictor and the mapping disagree
        raise InvalidDirectorError(f"Input {value!r} passed validation but matches no branch.")


# ==============================================================================
# Factories
# ==============================================================================


def _build(director_cls: Type[D], **fields) -> D:
    try:
        return director_cls(**fields)
    except ValidationError as e:
        raise InvalidDirectorError(f"Invalid {director_cls.__name__} director: {e}") from e


def stop() -> Exit:
    """Ends the program after the state's action has run."""
    return Exit()


def next_state(state_id: str) -> Next:
    return _build(Next, state_id=state_id)


def back(steps: int = 1) -> Back:
    return _build(Back, steps=steps)


def branch_on_int(
    low: int,
    high: int,
    options: Sequence[str],
    *,
    invalid_message: Optional[str] = None,
    retry_prompt: Optional[str] = None,
) -> BranchOnInt:
    """
    Lets the user pick the next state by number.

    `options[0]` is chosen by `low`, `options[1]` by `low + 1` and so on,
    so exactly `high - low + 1` options are required.
    """
    return _build(
        BranchOnInt,
        low=low,
        high=high,
        options=options,
        invalid_message=invalid_message,
        retry_prompt=retry_prompt,
    )


def branch_on_string(
    allowed_inputs: Sequence[str],
    mapped_ids: Sequence[str],
    *,
    ignore_case: bool = False,
    invalid_message: Optional[str] = None,
    retry_prompt: Optional[str] = None,
) -> BranchOnString:
    """Lets the user pick the next state by typing one of `allowed_inputs`."""
    return _build(
        BranchOnString,
        allowed_inputs=allowed_inputs,
        mapped_ids=mapped_ids,
        ignore_case=ignore_case,
        invalid_message=invalid_message,
        retry_prompt=retry_prompt,
    )
