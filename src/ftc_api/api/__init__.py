"""
FTC Events API Integration Module.

Provides the request engine and clients for the FTC Events API.
"""

from .auth import create_token, decode_token, token_from_settings
from .client import FTCClient, SyncFTCClient
from .endpoints import BuiltRequest, ClientConfig, Operation
from .queries import (
    AwardsQuery,
    EventsQuery,
    HybridScheduleQuery,
    MatchesQuery,
    RankingsQuery,
    ScheduleQuery,
    ScoresQuery,
    TeamsQuery,
    TournamentLevel,
)
from .result import Err, Ok, Result

__all__ = [
    # Client
    "FTCClient",
    "SyncFTCClient",
    # Auth
    "create_token",
    "decode_token",
    "token_from_settings",
    # Requests
    "BuiltRequest",
    "ClientConfig",
    "Operation",
    "TournamentLevel",
    # Options
    "TeamsQuery",
    "EventsQuery",
    "MatchesQuery",
    "RankingsQuery",
    "AwardsQuery",
    "ScoresQuery",
    "ScheduleQuery",
    "HybridScheduleQuery",
    # Results
    "Ok",
    "Err",
    "Result",
]
