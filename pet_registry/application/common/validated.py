"""
Validated - outcome of turning raw request input into a command.

Either Valid(value) carrying the built command, or Invalid(error) with the
first rule that failed. Callers branch with isinstance().
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    error: str


Validated = Union[Valid[T], Invalid]
