"""
Requiring Service - Read, Validate, Recover

The RequiringService turns a raw input source into a value that is
guaranteed to be one of three things:
1. A well-formed value accepted by the optional restrictor.
2. The caller's default (UseDefault policy).
3. Never returned at all: the run is stopped via TerminationSignal
   (TerminateOnFailure policy, or the input source ran dry).

A broken input source is not handled here. Its error propagates unchanged
and the run ends without the terminate callback.
"""

import logging
from typing import Callable, Optional, TypeVar

from ..schemas.policies import FailurePolicy, RetryForever, TerminateOnFailure, UseDefault
from ..sources.interface import InputSource
from .exceptions import InputExhaustedError, MalformedInputError, TerminationSignal

logger = logging.getLogger(__name__)

T = TypeVar("T")

Producer = Callable[[InputSource], T]
Restrictor = Callable[[T], bool]


class RequiringService:
    def __init__(
        self,
        source: InputSource,
        emit: Callable[[str], None],
        prompt: Optional[Callable[[str], None]] = None,
    ):
        self.source = source
        # Prints one line of user-facing feedback
        self.emit = emit
        # Writes a retry prompt; the user answers on the same line
        self.prompt = prompt or emit

    def require(
        self,
        producer: Producer,
        policy: FailurePolicy,
        restrictor: Optional[Restrictor] = None,
        restrictor_message: str = "",
    ) -> T:
        """
        Reads one value with `producer`, checks it with `restrictor` and
        applies `policy` whenever the value is rejected.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                value = producer(self.source)
            except InputExhaustedError:
                logger.info("Input exhausted while a value was required; terminating")
                raise TerminationSignal() from None
            except MalformedInputError as e:
                logger.debug(f"Attempt {attempt} rejected: {e}")
                # Drop the bad token so the next read does not trip over it again
                self.source.discard_token()
            else:
                if restrictor is None or restrictor(value):
                    return value
                logger.debug(f"Attempt {attempt} rejected by restrictor: {value!r}")
                if restrictor_message:
                    self.emit(restrictor_message)

            if isinstance(policy, UseDefault):
                return policy.default

            if isinstance(policy, TerminateOnFailure):
                if policy.termination_message:
                    self.emit(policy.termination_message)
                logger.info("Required value rejected; terminating")
                raise TerminationSignal()

            if isinstance(policy, RetryForever):
                if policy.retry_prompt:
                    self.prompt(policy.retry_prompt)
                continue

            raise TypeError(f"Unsupported failure policy: {policy!r}")
