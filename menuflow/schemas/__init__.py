"""
Schemas - Failure Policies

Defines the Pydantic models that tell the RequiringService how to recover
from malformed or rejected input.
"""

from menuflow.schemas.policies import (
    FailurePolicy,
    RetryForever,
    TerminateOnFailure,
    UseDefault,
)

__all__ = [
    "FailurePolicy",
    "RetryForever",
    "TerminateOnFailure",
    "UseDefault",
]
