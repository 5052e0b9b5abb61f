"""
Schemas - Failure Policies for the Requiring Engine

This module defines the Pydantic models that tell the RequiringService what
to do when a value is malformed or rejected by a restrictor. Exactly one
policy is given per call:

RetryForever: print the retry prompt and read again until a value is accepted.
UseDefault: return the configured default immediately, without retrying.
TerminateOnFailure: print the termination message and stop the whole run.
"""
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class RetryForever(BaseModel):
    """Keep asking until the input is accepted."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["retry_forever"] = "retry_forever"
    retry_prompt: str = Field(
        "",
        description="Printed after every rejection, before reading again. Empty disables it."
    )


class UseDefault(BaseModel):
    """Fall back to a fixed value on the first rejection."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["use_default"] = "use_default"
    default: Any = Field(
        ...,
        description="Returned as-is when the input is malformed or rejected."
    )


class TerminateOnFailure(BaseModel):
    """Stop the program cleanly on the first rejection."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["terminate_on_failure"] = "terminate_on_failure"
    termination_message: str = Field(
        "",
        description="Printed once before the termination signal is raised. Empty disables it."
    )


FailurePolicy = Union[RetryForever, UseDefault, TerminateOnFailure]
