"""
Per-operation option records.

Each record declares the filters one operation accepts, in the order they
are sent as query parameters, plus the rules that decide which
combinations are legal. Field names are snake_case; the API's camelCase
names are used for rules, error messages and the query string.
"""

from enum import StrEnum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..errors import InvalidOption
from .rules import Excludes, Present, Requires, RequiresAnyOf, Rule, check_rules, is_set

Q = TypeVar("Q", bound="Query")


class TournamentLevel(StrEnum):
    """Tournament phases accepted by the API."""

    QUAL = "qual"
    PLAYOFF = "playoff"


class Query(BaseModel):
    """Base class for operation options."""

    RULES: ClassVar[tuple[Rule, ...]] = ()

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def values(self) -> dict[str, Any]:
        """Options keyed by API parameter name, in declaration order."""
        return self.model_dump(mode="json", by_alias=True)

    def check(self) -> None:
        """Raise a validation error if the combination is illegal."""
        check_rules(self.RULES, self.values())

    def params(self) -> tuple[tuple[str, str], ...]:
        """Query parameters for the options that are set."""
        return tuple(
            (name, str(value)) for name, value in self.values().items() if is_set(value)
        )


# =============================================================================
# Records
# =============================================================================


class TeamsQuery(Query):
    """Filters for team listings."""

    team_number: int | None = None
    event_code: str | None = None
    state: str | None = None

    RULES = (
        Excludes(
            "teamNumber",
            ("eventCode", "state"),
            "Cannot specify both teamNumber and (eventCode or state) in the same request",
        ),
    )


class EventsQuery(Query):
    """Filters for event listings."""

    event_code: str | None = None
    team_number: int | None = None

    RULES = (
        Excludes(
            "eventCode",
            ("teamNumber",),
            "Cannot specify both eventCode and teamNumber in the same request",
        ),
    )


class MatchesQuery(Query):
    """Filters for match results at an event."""

    tournament_level: str | None = None
    team_number: int | None = None
    match_number: int | None = None
    start: int | None = None
    end: int | None = None

    RULES = (
        Excludes(
            "teamNumber",
            ("matchNumber",),
            "Cannot specify both teamNumber and matchNumber in the same request",
        ),
        Requires(
            "tournamentLevel",
            ("matchNumber", "start", "end"),
            "Must specify tournamentLevel when using matchNumber, start, or end",
        ),
        Excludes(
            "matchNumber",
            ("start", "end"),
            "Cannot specify matchNumber with start or end",
        ),
    )


class RankingsQuery(Query):
    """Filters for event rankings."""

    team_number: int | None = None
    top: int | None = None

    RULES = (
        Excludes(
            "teamNumber",
            ("top",),
            "Cannot specify both teamNumber and top in the same request",
        ),
    )


class AwardsQuery(Query):
    """
    Selects awards by event, team, or both.

    Both values become path segments, so ``params`` is always empty.
    """

    event_code: str | None = None
    team_number: int | None = None

    RULES = (RequiresAnyOf(("eventCode", "teamNumber")),)

    def params(self) -> tuple[tuple[str, str], ...]:
        return ()

    def segments(self) -> tuple[str, ...]:
        """Path segments after /awards: event code first, then team number."""
        return tuple(
            str(value) for value in (self.event_code, self.team_number) if is_set(value)
        )


class ScoresQuery(Query):
    """Filters for score details at one tournament level."""

    team_number: int | None = None
    match_number: int | None = None
    start: int | None = None
    end: int | None = None

    RULES = (
        Excludes(
            "teamNumber",
            ("matchNumber",),
            "Cannot specify both teamNumber and matchNumber in the same request",
        ),
        Excludes(
            "matchNumber",
            ("start", "end"),
            "Cannot specify matchNumber with start or end",
        ),
    )


class ScheduleQuery(Query):
    """Schedule options; tournament level is mandatory and always sent first."""

    tournament_level: str | None = None
    team_number: int | None = None

    RULES = (Present("tournamentLevel"),)


class HybridScheduleQuery(Query):
    """Match range for the hybrid schedule."""

    start: int | None = None
    end: int | None = None


def make_query(cls: type[Q], query: Q | None = None, **filters: Any) -> Q:
    """
    Build an option record from keyword filters, or pass one through.

    Raises:
        TypeError: If both a record and filters are given
        InvalidOption: If a filter has the wrong type
    """
    given = {name: value for name, value in filters.items() if value is not None}

    if query is not None:
        if given:
            raise TypeError("Pass either query= or keyword filters, not both")
        if not isinstance(query, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(query).__name__}")
        return query

    try:
        return cls(**given)
    except PydanticValidationError as e:
        raise InvalidOption(f"Invalid options for {cls.__name__}: {e}") from e
