"""Exception types for noun_core.

Evaluation failures are never exceptions: they are the ``Error`` noun.
These classes cover caller misuse and the evaluator's internal signalling.
"""

from __future__ import annotations


class NounCoreError(Exception):
    """Base class for all noun_core exceptions."""


class NounTypeError(NounCoreError, TypeError):
    """Raised when a noun is built from something that is not a noun or int."""


class StepLimitExceeded(NounCoreError):
    """Raised inside the evaluator when the step budget runs out."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"evaluation exceeded {limit} steps")
        self.limit = limit
