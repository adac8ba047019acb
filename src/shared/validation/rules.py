"""
Declarative, per-property validation rules.

A validator declares one RuleChain per property. Checks inside a chain run in
order and stop at the first failure, so a property reports at most one
failure. Chains themselves are independent: every chain is evaluated and the
failures are aggregated.
"""
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Awaitable, Callable, Generic, Sized, TypeVar

from src.shared.exceptions import ValidationError, ValidationFailure

T = TypeVar("T")

Predicate = Callable[[Any], bool]
AsyncPredicate = Callable[[Any, Any], Awaitable[bool]]


def is_empty(value: Any) -> bool:
    """Return True for None, blank strings, empty collections and default dates."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, date):
        return value == date.min
    if isinstance(value, Sized):
        return len(value) == 0
    return False


@dataclass
class _Check:
    predicate: Callable[[Any, Any], Any]
    message: str
    is_async: bool = False


class RuleChain(Generic[T]):
    """Ordered checks for a single property of T."""

    def __init__(self, property_name: str, accessor: Callable[[T], Any]):
        self.property_name = property_name
        self.accessor = accessor
        self._checks: list[_Check] = []

    def _add(self, check: _Check) -> "RuleChain[T]":
        self._checks.append(check)
        return self

    def not_empty(self) -> "RuleChain[T]":
        return self._add(_Check(
            lambda value, _: not is_empty(value),
            f"'{self.property_name}' must not be empty.",
        ))

    def maximum_length(self, max_length: int) -> "RuleChain[T]":
        return self._add(_Check(
            lambda value, _: value is None or len(value) <= max_length,
            f"The length of '{self.property_name}' must be {max_length} characters or fewer.",
        ))

    def matches(self, pattern: str) -> "RuleChain[T]":
        """Require the whole value to match pattern. None passes."""
        compiled = re.compile(pattern)
        return self._add(_Check(
            lambda value, _: value is None or compiled.fullmatch(value) is not None,
            f"'{self.property_name}' is not in the correct format.",
        ))

    def inclusive_between(self, low: int, high: int) -> "RuleChain[T]":
        return self._add(_Check(
            lambda value, _: value is not None and low <= value <= high,
            f"'{self.property_name}' must be between {low} and {high}.",
        ))

    def greater_than_or_equal_to(self, minimum: int) -> "RuleChain[T]":
        return self._add(_Check(
            lambda value, _: value is not None and value >= minimum,
            f"'{self.property_name}' must be greater than or equal to '{minimum}'.",
        ))

    def must(self, predicate: Predicate) -> "RuleChain[T]":
        """Add a synchronous check over the property value."""
        return self._add(_Check(
            lambda value, _: predicate(value),
            f"The specified condition was not met for '{self.property_name}'.",
        ))

    def must_async(self, predicate: AsyncPredicate) -> "RuleChain[T]":
        """
        Add an asynchronous check.

        The predicate receives the property value and the whole instance being
        validated, so it can consult sibling fields (e.g. the record's own id).
        """
        return self._add(_Check(
            predicate,
            f"The specified condition was not met for '{self.property_name}'.",
            is_async=True,
        ))

    def with_message(self, message: str) -> "RuleChain[T]":
        """Override the message of the most recently added check."""
        if not self._checks:
            raise ValueError("with_message() must follow a check")
        self._checks[-1].message = message
        return self

    async def evaluate(self, instance: T) -> ValidationFailure | None:
        value = self.accessor(instance)
        for check in self._checks:
            if check.is_async:
                passed = await check.predicate(value, instance)
            else:
                passed = check.predicate(value, instance)
            if not passed:
                return ValidationFailure(property_name=self.property_name, message=check.message)
        return None


class BaseValidator(Generic[T]):
    """
    Base class for rule-based validators.

    Subclasses declare their rules in __init__ via rule_for(). validate()
    returns every failure; validate_and_raise() raises ValidationError instead.
    """

    def __init__(self) -> None:
        self._rules: list[RuleChain[T]] = []

    def rule_for(self, property_name: str, accessor: Callable[[T], Any]) -> RuleChain[T]:
        rule: RuleChain[T] = RuleChain(property_name, accessor)
        self._rules.append(rule)
        return rule

    async def validate(self, instance: T) -> list[ValidationFailure]:
        failures = []
        for rule in self._rules:
            failure = await rule.evaluate(instance)
            if failure is not None:
                failures.append(failure)
        return failures

    async def validate_and_raise(self, instance: T) -> None:
        failures = await self.validate(instance)
        if failures:
            raise ValidationError(failures)
