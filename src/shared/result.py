"""Explicit success/failure values returned by services instead of raising."""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from src.shared.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: ValidationError


Result = Union[Ok[T], Err]
