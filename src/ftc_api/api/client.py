"""
FTC Events API Client.

Async HTTP client for the FIRST Tech Challenge Events API. Every call
validates its arguments before touching the network, then issues exactly
one GET and returns the decoded JSON body unchanged.
"""

import asyncio
import logging
from typing import Any

import httpx

from .. import __version__
from ..config import FTC_API_VERSION, FTC_BASE_URL, Settings, get_settings
from ..errors import FTCAPIError, RequestFailed
from ..seasons import DEFAULT_SEASON, Season
from .auth import token_from_settings
from .endpoints import (
    BuiltRequest,
    ClientConfig,
    Operation,
    build_alliance_selections_request,
    build_alliances_request,
    build_award_listings_request,
    build_awards_request,
    build_events_request,
    build_hybrid_schedule_request,
    build_index_request,
    build_matches_request,
    build_rankings_request,
    build_schedule_request,
    build_scores_request,
    build_season_summary_request,
    build_teams_request,
)
from .queries import (
    AwardsQuery,
    EventsQuery,
    HybridScheduleQuery,
    MatchesQuery,
    RankingsQuery,
    ScheduleQuery,
    ScoresQuery,
    TeamsQuery,
    make_query,
)
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

JSON = dict[str, Any] | list[Any]


class FTCClient:
    """
    Async client for the FTC Events API.

    Holds an immutable ClientConfig (token, season, base URL, version) and a
    lazily created httpx.AsyncClient. There is no retry or caching: a
    non-success status raises RequestFailed and network errors propagate
    as httpx.RequestError.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        season: Season | int | None = DEFAULT_SEASON,
        *,
        base_url: str = FTC_BASE_URL,
        version: str = FTC_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the FTC client.

        Args:
            token: Token from create_token(username, key)
            season: Season to query (defaults to the latest)
            base_url: API base URL
            version: API version path segment
            timeout: Request timeout in seconds
            transport: Optional httpx transport (for testing)

        Raises:
            MissingConfiguration: If token or season is missing
        """
        self.config = ClientConfig(token=token, season=season, base_url=base_url, version=version)
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "FTCClient":
        """Create a client from environment configuration."""
        ftc = (settings or get_settings()).ftc
        return cls(
            token_from_settings(ftc),
            ftc.season,
            base_url=ftc.base_url,
            version=ftc.api_version,
            timeout=ftc.timeout,
            **kwargs,
        )

    @property
    def season(self) -> Season:
        return self.config.season

    async def __aenter__(self) -> "FTCClient":
        """Async context manager entry."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                headers={
                    "User-Agent": f"ftc-api/{__version__}",
                    "Accept": "application/json",
                    "Authorization": f"Basic {self.config.token}",
                },
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _send(self, request: BuiltRequest) -> JSON:
        """
        Issue a GET for a built request.

        Returns:
            Decoded JSON body

        Raises:
            RequestFailed: On any non-2xx status
            httpx.RequestError: On network failure
        """
        await self._ensure_client()
        assert self._client is not None

        logger.debug(f"GET {request.url}")
        response = await self._client.get(request.url)

        if not response.is_success:
            logger.debug(f"Request failed with {response.status_code}: {request.url}")
            raise RequestFailed(response.status_code, response.reason_phrase, request.url)

        return response.json()

    # =========================================================================
    # Root and Season
    # =========================================================================

    async def get_index(self) -> dict[str, Any]:
        """
        Get API index information.

        Returns name, API version, status, current season and max season.
        """
        return await self._send(build_index_request(self.config))  # type: ignore

    async def get_season_summary(self) -> dict[str, Any]:
        """Get a summary of the configured season."""
        return await self._send(build_season_summary_request(self.config))  # type: ignore

    # =========================================================================
    # Teams and Events
    # =========================================================================

    async def get_teams(
        self,
        *,
        team_number: int | None = None,
        event_code: str | None = None,
        state: str | None = None,
        query: TeamsQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get team listings.

        Args:
            team_number: A single team (excludes event_code and state)
            event_code: Teams attending an event
            state: Teams from a state or province
            query: Prebuilt options instead of keywords
        """
        query = make_query(
            TeamsQuery, query, team_number=team_number, event_code=event_code, state=state
        )
        return await self._send(build_teams_request(self.config, query))  # type: ignore

    async def get_events(
        self,
        *,
        event_code: str | None = None,
        team_number: int | None = None,
        query: EventsQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get event listings.

        Args:
            event_code: A single event (excludes team_number)
            team_number: Events a team is registered for
        """
        query = make_query(EventsQuery, query, event_code=event_code, team_number=team_number)
        return await self._send(build_events_request(self.config, query))  # type: ignore

    # =========================================================================
    # Event Results
    # =========================================================================

    async def get_matches(
        self,
        event_code: str,
        *,
        tournament_level: str | None = None,
        team_number: int | None = None,
        match_number: int | None = None,
        start: int | None = None,
        end: int | None = None,
        query: MatchesQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get match results for an event.

        team_number and match_number cannot be combined, match_number cannot
        be combined with start/end, and match_number, start and end all need
        tournament_level.
        """
        query = make_query(
            MatchesQuery,
            query,
            tournament_level=tournament_level,
            team_number=team_number,
            match_number=match_number,
            start=start,
            end=end,
        )
        return await self._send(build_matches_request(self.config, event_code, query))  # type: ignore

    async def get_rankings(
        self,
        event_code: str,
        *,
        team_number: int | None = None,
        top: int | None = None,
        query: RankingsQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get rankings for an event.

        Args:
            event_code: Event to rank
            team_number: A single team's ranking (excludes top)
            top: Only the top N teams
        """
        query = make_query(RankingsQuery, query, team_number=team_number, top=top)
        return await self._send(build_rankings_request(self.config, event_code, query))  # type: ignore

    async def get_scores(
        self,
        event_code: str,
        tournament_level: str,
        *,
        team_number: int | None = None,
        match_number: int | None = None,
        start: int | None = None,
        end: int | None = None,
        query: ScoresQuery | None = None,
    ) -> dict[str, Any]:
        """Get detailed scores for one tournament level of an event."""
        query = make_query(
            ScoresQuery,
            query,
            team_number=team_number,
            match_number=match_number,
            start=start,
            end=end,
        )
        request = build_scores_request(self.config, event_code, tournament_level, query)
        return await self._send(request)  # type: ignore

    # =========================================================================
    # Awards
    # =========================================================================

    async def get_award_listings(self) -> dict[str, Any]:
        """Get the awards defined for the season."""
        return await self._send(build_award_listings_request(self.config))  # type: ignore

    async def get_awards(
        self,
        *,
        event_code: str | None = None,
        team_number: int | None = None,
        query: AwardsQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get awards by event, by team, or both.

        At least one of event_code and team_number is required.
        """
        query = make_query(AwardsQuery, query, event_code=event_code, team_number=team_number)
        return await self._send(build_awards_request(self.config, query))  # type: ignore

    # =========================================================================
    # Alliances
    # =========================================================================

    async def get_alliances(self, event_code: str) -> dict[str, Any]:
        """Get playoff alliances for an event."""
        return await self._send(build_alliances_request(self.config, event_code))  # type: ignore

    async def get_alliance_selections(self, event_code: str) -> dict[str, Any]:
        """Get alliance selection details for an event."""
        request = build_alliance_selections_request(self.config, event_code)
        return await self._send(request)  # type: ignore

    # =========================================================================
    # Schedules
    # =========================================================================

    async def get_schedule(
        self,
        event_code: str,
        tournament_level: str | None = None,
        *,
        team_number: int | None = None,
        query: ScheduleQuery | None = None,
    ) -> dict[str, Any]:
        """
        Get the schedule for an event.

        tournament_level is required, either directly or on the query.
        """
        query = make_query(
            ScheduleQuery, query, tournament_level=tournament_level, team_number=team_number
        )
        return await self._send(build_schedule_request(self.config, event_code, query))  # type: ignore

    async def get_hybrid_schedule(
        self,
        event_code: str,
        tournament_level: str,
        *,
        start: int | None = None,
        end: int | None = None,
        query: HybridScheduleQuery | None = None,
    ) -> dict[str, Any]:
        """Get scheduled matches merged with results for a tournament level."""
        query = make_query(HybridScheduleQuery, query, start=start, end=end)
        request = build_hybrid_schedule_request(self.config, event_code, tournament_level, query)
        return await self._send(request)  # type: ignore

    # =========================================================================
    # Result Wrapper
    # =========================================================================

    async def attempt(self, operation: Operation | str, *args: Any, **kwargs: Any) -> Result:
        """
        Run an operation and return Ok(response) or Err(error).

        Client errors and httpx request errors are captured; anything else
        (including bad call signatures) still raises.
        """
        method = getattr(self, Operation(operation).value)
        try:
            return Ok(await method(*args, **kwargs))
        except (FTCAPIError, httpx.RequestError) as e:
            return Err(e)


# =============================================================================
# Synchronous Wrapper
# =============================================================================


class SyncFTCClient:
    """
    Synchronous wrapper for FTCClient.

    Runs the async client on a private event loop. Useful for the CLI and
    simple scripts; do not use from inside a running event loop.
    """

    def __init__(self, *args: Any, client: FTCClient | None = None, **kwargs: Any):
        """Initialize with same args as FTCClient, or wrap an existing one."""
        self._async_client = client or FTCClient(*args, **kwargs)
        self._loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "SyncFTCClient":
        """Create a client from environment configuration."""
        return cls(client=FTCClient.from_settings(settings, **kwargs))

    @property
    def config(self) -> ClientConfig:
        return self._async_client.config

    def __enter__(self) -> "SyncFTCClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _run(self, coro):
        """Run a coroutine synchronously."""
        if self._loop is None:
            self._loop = asyncio.new_event_loop()
        return self._loop.run_until_complete(coro)

    def close(self) -> None:
        """Close the client."""
        if self._loop is not None:
            self._loop.run_until_complete(self._async_client.close())
            self._loop.close()
            self._loop = None

    def get_index(self) -> dict[str, Any]:
        """Get API index information."""
        return self._run(self._async_client.get_index())

    def get_season_summary(self) -> dict[str, Any]:
        """Get season summary."""
        return self._run(self._async_client.get_season_summary())

    def get_teams(self, **kwargs: Any) -> dict[str, Any]:
        """Get team listings."""
        return self._run(self._async_client.get_teams(**kwargs))

    def get_events(self, **kwargs: Any) -> dict[str, Any]:
        """Get event listings."""
        return self._run(self._async_client.get_events(**kwargs))

    def get_matches(self, event_code: str, **kwargs: Any) -> dict[str, Any]:
        """Get match results."""
        return self._run(self._async_client.get_matches(event_code, **kwargs))

    def get_rankings(self, event_code: str, **kwargs: Any) -> dict[str, Any]:
        """Get event rankings."""
        return self._run(self._async_client.get_rankings(event_code, **kwargs))

    def get_scores(self, event_code: str, tournament_level: str, **kwargs: Any) -> dict[str, Any]:
        """Get score details."""
        return self._run(self._async_client.get_scores(event_code, tournament_level, **kwargs))

    def get_award_listings(self) -> dict[str, Any]:
        """Get award listings."""
        return self._run(self._async_client.get_award_listings())

    def get_awards(self, **kwargs: Any) -> dict[str, Any]:
        """Get awards by event and/or team."""
        return self._run(self._async_client.get_awards(**kwargs))

    def get_alliances(self, event_code: str) -> dict[str, Any]:
        """Get alliances."""
        return self._run(self._async_client.get_alliances(event_code))

    def get_alliance_selections(self, event_code: str) -> dict[str, Any]:
        """Get alliance selection details."""
        return self._run(self._async_client.get_alliance_selections(event_code))

    def get_schedule(
        self, event_code: str, tournament_level: str | None = None, **kwargs: Any
    ) -> dict[str, Any]:
        """Get event schedule."""
        return self._run(
            self._async_client.get_schedule(event_code, tournament_level, **kwargs)
        )

    def get_hybrid_schedule(
        self, event_code: str, tournament_level: str, **kwargs: Any
    ) -> dict[str, Any]:
        """Get hybrid schedule."""
        return self._run(
            self._async_client.get_hybrid_schedule(event_code, tournament_level, **kwargs)
        )

    def attempt(self, operation: Operation | str, *args: Any, **kwargs: Any) -> Result:
        """Run an operation and return Ok or Err."""
        return self._run(self._async_client.attempt(operation, *args, **kwargs))
