"""Tests for option-combination rules and required arguments."""

from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError as PydanticValidationError

from ftc_api.api.queries import (
    AwardsQuery,
    MatchesQuery,
    ScheduleQuery,
    TeamsQuery,
    make_query,
)
from ftc_api.api.rules import Excludes, Present, Requires, RequiresAnyOf, check_rules, is_set
from ftc_api.errors import (
    ConflictingOptions,
    FTCValidationError,
    InvalidOption,
    MissingAnyOf,
    MissingArgument,
    MissingDependency,
)


class TestIsSet:
    """Tests for the unset sentinel check."""

    @pytest.mark.parametrize("value", [None, "", "   ", 0])
    def test_unset(self, value) -> None:
        assert not is_set(value)

    @pytest.mark.parametrize("value", ["qual", 1, 12345, "0"])
    def test_set(self, value) -> None:
        assert is_set(value)


class TestRulePrimitives:
    """Tests for the individual rule types."""

    def test_excludes_passes_when_option_absent(self) -> None:
        Excludes("a", ("b",), "no").check({"a": None, "b": 1})

    def test_excludes_raises_with_message(self) -> None:
        with pytest.raises(ConflictingOptions) as exc_info:
            Excludes("a", ("b", "c"), "a excludes b and c").check({"a": 1, "c": "x"})
        assert exc_info.value.description == "a excludes b and c"

    def test_requires_raises_without_prerequisite(self) -> None:
        with pytest.raises(MissingDependency):
            Requires("level", ("n",), "need level").check({"n": 3})

    def test_requires_passes_with_prerequisite(self) -> None:
        Requires("level", ("n",), "need level").check({"n": 3, "level": "qual"})

    def test_requires_any_of_names(self) -> None:
        with pytest.raises(MissingAnyOf) as exc_info:
            RequiresAnyOf(("eventCode", "teamNumber")).check({})
        assert exc_info.value.names == ["eventCode", "teamNumber"]

    def test_present(self) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            Present("tournamentLevel").check({"tournamentLevel": ""})
        assert exc_info.value.name == "tournamentLevel"

    def test_check_rules_reports_first_violation(self) -> None:
        rules = (
            Excludes("a", ("b",), "first"),
            Requires("c", ("a",), "second"),
        )
        with pytest.raises(ConflictingOptions, match="first"):
            check_rules(rules, {"a": 1, "b": 1})

    def test_validation_errors_are_value_errors(self) -> None:
        assert issubclass(FTCValidationError, ValueError)


class TestOperationRules:
    """Rule tables attached to each option record."""

    def test_team_number_with_state(self) -> None:
        with pytest.raises(ConflictingOptions, match="teamNumber and \\(eventCode or state\\)"):
            TeamsQuery(team_number=12345, state="CA").check()

    def test_team_number_with_event_code(self) -> None:
        with pytest.raises(ConflictingOptions):
            TeamsQuery(team_number=12345, event_code="USACMP").check()

    def test_event_code_with_state_allowed(self) -> None:
        TeamsQuery(event_code="USACMP", state="CA").check()

    def test_match_number_needs_level(self) -> None:
        with pytest.raises(MissingDependency, match="tournamentLevel"):
            MatchesQuery(match_number=5).check()

    @pytest.mark.parametrize("field", ["start", "end"])
    def test_range_needs_level(self, field) -> None:
        with pytest.raises(MissingDependency):
            MatchesQuery(**{field: 3}).check()

    def test_team_and_match_conflict_checked_before_dependency(self) -> None:
        with pytest.raises(ConflictingOptions, match="teamNumber and matchNumber"):
            MatchesQuery(team_number=1, match_number=2).check()

    def test_dependency_checked_before_range_conflict(self) -> None:
        with pytest.raises(MissingDependency):
            MatchesQuery(match_number=2, start=1).check()

    def test_match_number_with_range(self) -> None:
        with pytest.raises(ConflictingOptions, match="matchNumber with start or end"):
            MatchesQuery(tournament_level="qual", match_number=2, end=4).check()

    def test_team_with_range_allowed(self) -> None:
        MatchesQuery(tournament_level="qual", team_number=1, start=1, end=4).check()

    def test_awards_need_event_or_team(self) -> None:
        with pytest.raises(MissingAnyOf) as exc_info:
            AwardsQuery().check()
        assert exc_info.value.names == ["eventCode", "teamNumber"]

    def test_schedule_needs_level(self) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            ScheduleQuery(team_number=1).check()
        assert exc_info.value.name == "tournamentLevel"


class TestMakeQuery:
    """Tests for building option records from keyword filters."""

    def test_from_keywords(self) -> None:
        query = make_query(TeamsQuery, state="CA", team_number=None)
        assert query == TeamsQuery(state="CA")

    def test_passthrough(self) -> None:
        query = TeamsQuery(state="CA")
        assert make_query(TeamsQuery, query) is query

    def test_both_rejected(self) -> None:
        with pytest.raises(TypeError, match="not both"):
            make_query(TeamsQuery, TeamsQuery(), state="CA")

    def test_wrong_record_type(self) -> None:
        with pytest.raises(TypeError, match="Expected TeamsQuery"):
            make_query(TeamsQuery, MatchesQuery())

    def test_bad_value(self) -> None:
        with pytest.raises(InvalidOption):
            make_query(TeamsQuery, team_number="not-a-number")

    def test_unknown_option(self) -> None:
        with pytest.raises(InvalidOption):
            make_query(TeamsQuery, top=5)

    def test_numeric_string_coerced(self) -> None:
        assert make_query(TeamsQuery, team_number="12345").team_number == 12345

    def test_records_are_frozen(self) -> None:
        query = TeamsQuery(state="CA")
        with pytest.raises(PydanticValidationError):
            query.state = "NY"  # type: ignore[misc]


class TestNoNetworkOnValidationFailure:
    """Every validation failure happens before the transport is touched."""

    @pytest.fixture
    def client(self, make_client, forbidden_transport):
        return make_client(forbidden_transport)

    def run(self, coro):
        return asyncio.run(coro)

    def test_scenario_teams_conflict(self, client) -> None:
        with pytest.raises(ConflictingOptions):
            self.run(client.get_teams(team_number=12345, state="CA"))

    def test_scenario_matches_missing_level(self, client) -> None:
        with pytest.raises(MissingDependency):
            self.run(client.get_matches("USACMP", match_number=5))

    def test_scenario_awards_missing_any(self, client) -> None:
        with pytest.raises(MissingAnyOf):
            self.run(client.get_awards())

    def test_events_conflict(self, client) -> None:
        with pytest.raises(ConflictingOptions):
            self.run(client.get_events(event_code="USACMP", team_number=12345))

    def test_rankings_conflict(self, client) -> None:
        with pytest.raises(ConflictingOptions):
            self.run(client.get_rankings("USACMP", team_number=12345, top=4))

    def test_scores_conflicts(self, client) -> None:
        with pytest.raises(ConflictingOptions):
            self.run(client.get_scores("USACMP", "qual", team_number=1, match_number=2))
        with pytest.raises(ConflictingOptions):
            self.run(client.get_scores("USACMP", "qual", match_number=2, start=1))

    def test_scores_empty_level(self, client) -> None:
        # path segment here, so it is a missing argument rather than a dependency
        with pytest.raises(MissingArgument):
            self.run(client.get_scores("USACMP", "", start=1))

    @pytest.mark.parametrize(
        ("method", "args", "missing"),
        [
            ("get_matches", ("",), "eventCode"),
            ("get_rankings", ("",), "eventCode"),
            ("get_alliances", ("",), "eventCode"),
            ("get_alliance_selections", ("",), "eventCode"),
            ("get_scores", ("", "qual"), "eventCode"),
            ("get_scores", ("USACMP", ""), "tournamentLevel"),
            ("get_schedule", ("", "qual"), "eventCode"),
            ("get_schedule", ("USACMP",), "tournamentLevel"),
            ("get_hybrid_schedule", ("", "qual"), "eventCode"),
            ("get_hybrid_schedule", ("USACMP", ""), "tournamentLevel"),
        ],
    )
    def test_missing_positional(self, client, method, args, missing) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            self.run(getattr(client, method)(*args))
        assert exc_info.value.name == missing
        assert str(exc_info.value) == f"{missing} is required"

    def test_missing_event_checked_before_options(self, client) -> None:
        with pytest.raises(MissingArgument):
            self.run(client.get_matches("", match_number=5))
