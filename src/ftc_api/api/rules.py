"""
Option-combination rules.

Each operation declares a static tuple of rules over its options, keyed by
the API's parameter names. ``check_rules`` applies them in order and raises
on the first violation, before any request is built.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from ..errors import (
    ConflictingOptions,
    FTCValidationError,
    MissingAnyOf,
    MissingArgument,
    MissingDependency,
)

logger = logging.getLogger(__name__)


def is_set(value: Any) -> bool:
    """
    Check whether an option carries a value.

    None, empty strings and the numeric sentinel 0 all mean "not given".
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, int):
        return value != 0
    return True


class Rule(Protocol):
    def check(self, values: Mapping[str, Any]) -> None: ...


@dataclass(frozen=True)
class Present:
    """The option must be given."""

    name: str

    def check(self, values: Mapping[str, Any]) -> None:
        if not is_set(values.get(self.name)):
            raise MissingArgument(self.name)


@dataclass(frozen=True)
class Excludes:
    """If ``option`` is given, none of ``others`` may be."""

    option: str
    others: tuple[str, ...]
    message: str

    def check(self, values: Mapping[str, Any]) -> None:
        if not is_set(values.get(self.option)):
            return
        if any(is_set(values.get(other)) for other in self.others):
            raise ConflictingOptions(self.message)


@dataclass(frozen=True)
class Requires:
    """If any of ``triggers`` is given, ``prerequisite`` must be too."""

    prerequisite: str
    triggers: tuple[str, ...]
    message: str

    def check(self, values: Mapping[str, Any]) -> None:
        if is_set(values.get(self.prerequisite)):
            return
        if any(is_set(values.get(trigger)) for trigger in self.triggers):
            raise MissingDependency(self.message)


@dataclass(frozen=True)
class RequiresAnyOf:
    """At least one of ``names`` must be given."""

    names: tuple[str, ...]

    def check(self, values: Mapping[str, Any]) -> None:
        if not any(is_set(values.get(name)) for name in self.names):
            raise MissingAnyOf(self.names)


def check_rules(rules: Iterable[Rule], values: Mapping[str, Any]) -> None:
    """Apply rules in declaration order; the first violation is raised."""
    for rule in rules:
        try:
            rule.check(values)
        except FTCValidationError as e:
            logger.debug(f"Rule {rule!r} rejected options: {e}")
            raise


def require_argument(name: str, value: Any) -> None:
    """Raise MissingArgument if a positional argument is empty."""
    if not is_set(value):
        raise MissingArgument(name)
