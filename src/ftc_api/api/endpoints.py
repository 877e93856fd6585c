"""
FTC Events API endpoint definitions.

Path templates for every read operation, plus pure builders that validate
call arguments and turn them into a request. Builders never touch the
network, so URLs can be produced and checked without a client.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any
from urllib.parse import quote, urlencode

from ..config import FTC_API_VERSION, FTC_BASE_URL
from ..errors import MissingConfiguration
from ..seasons import DEFAULT_SEASON, Season, resolve_season
from .queries import (
    AwardsQuery,
    EventsQuery,
    HybridScheduleQuery,
    MatchesQuery,
    Query,
    RankingsQuery,
    ScheduleQuery,
    ScoresQuery,
    TeamsQuery,
    make_query,
)
from .rules import require_argument

# =============================================================================
# Path Templates
# =============================================================================

# API index - name, version, status, current and max season
INDEX = "/{version}"

# Season summary - event count, team count, season dates
SEASON_SUMMARY = "/{version}/{season}"

# Teams - filter by teamNumber, or by eventCode and/or state
TEAMS = "/{version}/{season}/teams"

# Events - filter by eventCode or teamNumber
EVENTS = "/{version}/{season}/events"

# Match results for an event
MATCHES = "/{version}/{season}/matches/{event_code}"

# Rankings for an event
RANKINGS = "/{version}/{season}/rankings/{event_code}"

# Award definitions for the season
AWARD_LISTINGS = "/{version}/{season}/awards/list"

# Awards by event and/or team; both values are path segments
AWARDS = "/{version}/{season}/awards"

# Alliances for an event (playoff events only)
ALLIANCES = "/{version}/{season}/alliances/{event_code}"

# Alliance selection picks and declines
ALLIANCE_SELECTIONS = "/{version}/{season}/alliances/{event_code}/selection"

# Detailed scores for one tournament level
SCORES = "/{version}/{season}/scores/{event_code}/{tournament_level}"

# Schedule; tournamentLevel goes in the query string
SCHEDULE = "/{version}/{season}/schedule/{event_code}"

# Hybrid schedule - scheduled matches merged with results
HYBRID_SCHEDULE = "/{version}/{season}/schedule/{event_code}/{tournament_level}/hybrid"


class Operation(StrEnum):
    """Read operations offered by the API (value is the client method name)."""

    INDEX = "get_index"
    TEAMS = "get_teams"
    EVENTS = "get_events"
    MATCHES = "get_matches"
    RANKINGS = "get_rankings"
    SEASON_SUMMARY = "get_season_summary"
    AWARD_LISTINGS = "get_award_listings"
    AWARDS = "get_awards"
    ALLIANCES = "get_alliances"
    ALLIANCE_SELECTIONS = "get_alliance_selections"
    SCORES = "get_scores"
    SCHEDULE = "get_schedule"
    HYBRID_SCHEDULE = "get_hybrid_schedule"


# =============================================================================
# Request Model
# =============================================================================


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by every request a client makes."""

    token: str = field(repr=False)
    season: Season = DEFAULT_SEASON
    base_url: str = FTC_BASE_URL
    version: str = FTC_API_VERSION

    def __post_init__(self) -> None:
        if not self.token:
            raise MissingConfiguration("Token is required")
        object.__setattr__(self, "season", resolve_season(self.season))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not self.version:
            raise MissingConfiguration("API version is required")


@dataclass(frozen=True)
class BuiltRequest:
    """A validated GET request: path plus ordered query parameters."""

    base_url: str
    path: str
    params: tuple[tuple[str, str], ...] = ()

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def url(self) -> str:
        url = f"{self.base_url}{self.path}"
        if self.params:
            url += "?" + self.query_string
        return url


def _path(config: ClientConfig, template: str, **segments: object) -> str:
    quoted = {name: quote(str(value), safe="") for name, value in segments.items()}
    return template.format(version=config.version, season=int(config.season), **quoted)


def _request(
    config: ClientConfig, path: str, params: tuple[tuple[str, str], ...] = ()
) -> BuiltRequest:
    return BuiltRequest(base_url=config.base_url, path=path, params=params)


# =============================================================================
# Builders
# =============================================================================


def build_index_request(config: ClientConfig) -> BuiltRequest:
    """Build the API index request (no season segment)."""
    return _request(config, _path(config, INDEX))


def build_season_summary_request(config: ClientConfig) -> BuiltRequest:
    """Build the season summary request."""
    return _request(config, _path(config, SEASON_SUMMARY))


def build_teams_request(config: ClientConfig, query: TeamsQuery | None = None) -> BuiltRequest:
    """
    Build a team listings request.

    teamNumber cannot be combined with eventCode or state.
    """
    query = query or TeamsQuery()
    query.check()
    return _request(config, _path(config, TEAMS), query.params())


def build_events_request(config: ClientConfig, query: EventsQuery | None = None) -> BuiltRequest:
    """Build an event listings request; eventCode excludes teamNumber."""
    query = query or EventsQuery()
    query.check()
    return _request(config, _path(config, EVENTS), query.params())


def build_matches_request(
    config: ClientConfig, event_code: str, query: MatchesQuery | None = None
) -> BuiltRequest:
    """
    Build a match results request.

    Rules:
        - teamNumber excludes matchNumber
        - matchNumber, start and end need tournamentLevel
        - matchNumber excludes start and end
    """
    require_argument("eventCode", event_code)
    query = query or MatchesQuery()
    query.check()
    return _request(config, _path(config, MATCHES, event_code=event_code), query.params())


def build_rankings_request(
    config: ClientConfig, event_code: str, query: RankingsQuery | None = None
) -> BuiltRequest:
    """Build an event rankings request; teamNumber excludes top."""
    require_argument("eventCode", event_code)
    query = query or RankingsQuery()
    query.check()
    return _request(config, _path(config, RANKINGS, event_code=event_code), query.params())


def build_award_listings_request(config: ClientConfig) -> BuiltRequest:
    """Build the award definitions request."""
    return _request(config, _path(config, AWARD_LISTINGS))


def build_awards_request(config: ClientConfig, query: AwardsQuery | None = None) -> BuiltRequest:
    """
    Build an awards request.

    At least one of eventCode and teamNumber is required. Given both, the
    path is /awards/{eventCode}/{teamNumber}; given one, /awards/{value}.
    """
    query = query or AwardsQuery()
    query.check()
    path = _path(config, AWARDS)
    for segment in query.segments():
        path += "/" + quote(segment, safe="")
    return _request(config, path)


def build_alliances_request(config: ClientConfig, event_code: str) -> BuiltRequest:
    """Build an alliances request."""
    require_argument("eventCode", event_code)
    return _request(config, _path(config, ALLIANCES, event_code=event_code))


def build_alliance_selections_request(config: ClientConfig, event_code: str) -> BuiltRequest:
    """Build an alliance selection details request."""
    require_argument("eventCode", event_code)
    return _request(config, _path(config, ALLIANCE_SELECTIONS, event_code=event_code))


def build_scores_request(
    config: ClientConfig,
    event_code: str,
    tournament_level: str,
    query: ScoresQuery | None = None,
) -> BuiltRequest:
    """
    Build a score details request.

    Rules:
        - teamNumber excludes matchNumber
        - matchNumber excludes start and end
    """
    require_argument("eventCode", event_code)
    require_argument("tournamentLevel", tournament_level)
    query = query or ScoresQuery()
    query.check()
    path = _path(config, SCORES, event_code=event_code, tournament_level=tournament_level)
    return _request(config, path, query.params())


def build_schedule_request(
    config: ClientConfig, event_code: str, query: ScheduleQuery | None = None
) -> BuiltRequest:
    """Build a schedule request; tournamentLevel is mandatory and sent first."""
    require_argument("eventCode", event_code)
    query = query or ScheduleQuery()
    query.check()
    return _request(config, _path(config, SCHEDULE, event_code=event_code), query.params())


def build_hybrid_schedule_request(
    config: ClientConfig,
    event_code: str,
    tournament_level: str,
    query: HybridScheduleQuery | None = None,
) -> BuiltRequest:
    """Build a hybrid schedule request."""
    require_argument("eventCode", event_code)
    require_argument("tournamentLevel", tournament_level)
    query = query or HybridScheduleQuery()
    query.check()
    path = _path(
        config, HYBRID_SCHEDULE, event_code=event_code, tournament_level=tournament_level
    )
    return _request(config, path, query.params())


# =============================================================================
# Dispatch
# =============================================================================

_BUILDERS: dict[Operation, Callable[..., BuiltRequest]] = {
    Operation.INDEX: build_index_request,
    Operation.TEAMS: build_teams_request,
    Operation.EVENTS: build_events_request,
    Operation.MATCHES: build_matches_request,
    Operation.RANKINGS: build_rankings_request,
    Operation.SEASON_SUMMARY: build_season_summary_request,
    Operation.AWARD_LISTINGS: build_award_listings_request,
    Operation.AWARDS: build_awards_request,
    Operation.ALLIANCES: build_alliances_request,
    Operation.ALLIANCE_SELECTIONS: build_alliance_selections_request,
    Operation.SCORES: build_scores_request,
    Operation.SCHEDULE: build_schedule_request,
    Operation.HYBRID_SCHEDULE: build_hybrid_schedule_request,
}

_QUERY_TYPES: dict[Operation, type[Query]] = {
    Operation.TEAMS: TeamsQuery,
    Operation.EVENTS: EventsQuery,
    Operation.MATCHES: MatchesQuery,
    Operation.RANKINGS: RankingsQuery,
    Operation.AWARDS: AwardsQuery,
    Operation.SCORES: ScoresQuery,
    Operation.SCHEDULE: ScheduleQuery,
    Operation.HYBRID_SCHEDULE: HybridScheduleQuery,
}


def build_request(
    config: ClientConfig, operation: Operation | str, *args: Any, **filters: Any
) -> BuiltRequest:
    """
    Build the request for any operation by name.

    Positional arguments follow the operation's builder; keyword filters
    become its option record.

    Example:
        build_request(config, "get_schedule", "USACMP",
                      tournament_level="qual", team_number=12345)
    """
    operation = Operation(operation)
    builder = _BUILDERS[operation]
    query_type = _QUERY_TYPES.get(operation)

    if query_type is None:
        if any(value is not None for value in filters.values()):
            raise TypeError(f"{operation.value} takes no options")
        return builder(config, *args)

    return builder(config, *args, make_query(query_type, **filters))
