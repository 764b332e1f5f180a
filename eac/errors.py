# eac/errors.py
from __future__ import annotations


class Eac2JsonError(RuntimeError):
    """Base class for everything raised on input that doesn't match the EAC page."""


class StructuralMismatch(Eac2JsonError):
    """The document doesn't follow the expected navigation path."""


class UnknownAction(Eac2JsonError):
    def __init__(self, action: str) -> None:
        super().__init__(f'unknown row type "{action}"')
        self.action = action


class CardinalityViolation(Eac2JsonError):
    def __init__(self, action: str, expected: str, got: int) -> None:
        super().__init__(
            f'"more details" for {action}: expected {expected} row(s); got {got}'
        )
        self.action = action
        self.expected = expected
        self.got = got
