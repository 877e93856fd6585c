"""
FTC API Command Line Interface.

Built with Typer for quick checks against the FTC Events API.
"""

from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import Err, Ok, Operation, SyncFTCClient, create_token, token_from_settings
from .api.endpoints import ClientConfig, build_request
from .config import get_settings
from .errors import FTCAPIError
from .logging_utils import configure_logging
from .seasons import Season, resolve_season

app = typer.Typer(
    name="ftc-api",
    help="FTC Events API client - query teams, events, matches and rankings",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

DRY_RUN_TOKEN = "dry-run"


@app.callback()
def main_callback(
    ctx: typer.Context,
    season: Optional[str] = typer.Option(
        None, "--season", "-s", help="Season year or name (default from FTC_SEASON)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the request URL without sending it"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """
    FTC API - read-only access to FIRST Tech Challenge event data.

    Credentials come from FTC_USERNAME/FTC_KEY (or FTC_TOKEN) in the
    environment or a .env file.
    """
    settings = get_settings()
    configure_logging(log_level or settings.app.log_level)
    ctx.obj = {"season": season, "dry_run": dry_run}


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def _execute(ctx: typer.Context, operation: Operation, *args: Any, **filters: Any) -> Any:
    """Validate, then either print the URL (dry run) or call the API."""
    settings = get_settings().ftc

    try:
        season = resolve_season(ctx.obj["season"] or settings.season)
        if ctx.obj["dry_run"]:
            token = settings.token.get_secret_value() or DRY_RUN_TOKEN
            config = ClientConfig(
                token=token, season=season, base_url=settings.base_url, version=settings.api_version
            )
            typer.echo(build_request(config, operation, *args, **filters).url)
            raise typer.Exit(0)

        client = SyncFTCClient(
            token_from_settings(settings),
            season,
            base_url=settings.base_url,
            version=settings.api_version,
            timeout=settings.timeout,
        )
    except FTCAPIError as e:
        _fail(str(e))

    with client:
        result = client.attempt(operation, *args, **filters)

    match result:
        case Ok(value=data):
            return data
        case Err(error=error):
            _fail(str(error))


def _print_json(data: Any) -> None:
    console.print_json(data=data)


@app.command()
def index(ctx: typer.Context) -> None:
    """Show API name, version, status and seasons."""
    data = _execute(ctx, Operation.INDEX)

    table = Table(title="API Information", show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Name", str(data.get("name", "")))
    table.add_row("API Version", str(data.get("apiVersion", "")))
    table.add_row("Status", str(data.get("status", "")))
    table.add_row("Current Season", str(data.get("currentSeason", "")))
    table.add_row("Max Season", str(data.get("maxSeason", "")))

    console.print(table)


@app.command()
def seasons() -> None:
    """List the seasons this client supports."""
    table = Table(title="Seasons")
    table.add_column("Year", style="cyan")
    table.add_column("Game", style="white")
    table.add_column("Name", style="dim")

    for season in Season:
        table.add_row(str(int(season)), season.label, season.name.lower())

    console.print(table)


@app.command()
def token(
    username: str = typer.Argument(..., help="FTC Events API username"),
    key: str = typer.Argument(..., help="Authorization key"),
) -> None:
    """Print the token for a username and key (usable as FTC_TOKEN)."""
    try:
        typer.echo(create_token(username, key))
    except FTCAPIError as e:
        _fail(str(e))


@app.command()
def summary(ctx: typer.Context) -> None:
    """Show the season summary."""
    _print_json(_execute(ctx, Operation.SEASON_SUMMARY))


@app.command()
def teams(
    ctx: typer.Context,
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    event_code: Optional[str] = typer.Option(None, "--event", "-e", help="Event code"),
    state: Optional[str] = typer.Option(None, "--state", help="State or province"),
) -> None:
    """List teams (a team number cannot be combined with event or state)."""
    data = _execute(
        ctx, Operation.TEAMS, team_number=team_number, event_code=event_code, state=state
    )

    table = Table(title=f"Teams ({data.get('teamCountTotal', len(data.get('teams', [])))})")
    table.add_column("#", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Location", style="dim")
    table.add_column("Rookie", style="green")

    for team in data.get("teams", []):
        location = ", ".join(
            part for part in (team.get("city"), team.get("stateProv"), team.get("country")) if part
        )
        table.add_row(
            str(team.get("teamNumber", "")),
            team.get("nameShort") or team.get("nameFull") or "",
            location,
            str(team.get("rookieYear", "")),
        )

    console.print(table)


@app.command()
def events(
    ctx: typer.Context,
    event_code: Optional[str] = typer.Option(None, "--event", "-e", help="Event code"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
) -> None:
    """List events (an event code cannot be combined with a team number)."""
    _print_json(_execute(ctx, Operation.EVENTS, event_code=event_code, team_number=team_number))


@app.command()
def matches(
    ctx: typer.Context,
    event_code: str = typer.Argument(..., help="Event code"),
    tournament_level: Optional[str] = typer.Option(None, "--level", "-l", help="qual or playoff"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    match_number: Optional[int] = typer.Option(None, "--match", "-m", help="Match number"),
    start: Optional[int] = typer.Option(None, "--start", help="First match number"),
    end: Optional[int] = typer.Option(None, "--end", help="Last match number"),
) -> None:
    """Show match results for an event."""
    _print_json(
        _execute(
            ctx,
            Operation.MATCHES,
            event_code,
            tournament_level=tournament_level,
            team_number=team_number,
            match_number=match_number,
            start=start,
            end=end,
        )
    )


@app.command()
def rankings(
    ctx: typer.Context,
    event_code: str = typer.Argument(..., help="Event code"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    top: Optional[int] = typer.Option(None, "--top", help="Only the top N teams"),
) -> None:
    """Show rankings for an event."""
    data = _execute(ctx, Operation.RANKINGS, event_code, team_number=team_number, top=top)

    table = Table(title=f"Rankings - {event_code}")
    table.add_column("Rank", style="cyan")
    table.add_column("Team", style="white")
    table.add_column("W-L-T", style="green")
    table.add_column("Played", style="dim")

    for row in data.get("rankings", []):
        record = f"{row.get('wins', 0)}-{row.get('losses', 0)}-{row.get('ties', 0)}"
        table.add_row(
            str(row.get("rank", "")),
            f"{row.get('teamNumber', '')} {row.get('teamName') or ''}".strip(),
            record,
            str(row.get("matchesPlayed", "")),
        )

    console.print(table)


@app.command()
def awards(
    ctx: typer.Context,
    event_code: Optional[str] = typer.Option(None, "--event", "-e", help="Event code"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    listings: bool = typer.Option(False, "--list", help="Show the season's award definitions"),
) -> None:
    """Show awards by event and/or team."""
    if listings:
        _print_json(_execute(ctx, Operation.AWARD_LISTINGS))
        return
    _print_json(_execute(ctx, Operation.AWARDS, event_code=event_code, team_number=team_number))


@app.command()
def alliances(
    ctx: typer.Context,
    event_code: str = typer.Argument(..., help="Event code"),
    selection: bool = typer.Option(False, "--selection", help="Show selection details"),
) -> None:
    """Show playoff alliances for an event."""
    operation = Operation.ALLIANCE_SELECTIONS if selection else Operation.ALLIANCES
    _print_json(_execute(ctx, operation, event_code))


@app.command()
def scores(
    ctx: typer.Context,
    event_code: str = typer.Argument(..., help="Event code"),
    tournament_level: str = typer.Argument(..., help="qual or playoff"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    match_number: Optional[int] = typer.Option(None, "--match", "-m", help="Match number"),
    start: Optional[int] = typer.Option(None, "--start", help="First match number"),
    end: Optional[int] = typer.Option(None, "--end", help="Last match number"),
) -> None:
    """Show detailed scores for a tournament level."""
    _print_json(
        _execute(
            ctx,
            Operation.SCORES,
            event_code,
            tournament_level,
            team_number=team_number,
            match_number=match_number,
            start=start,
            end=end,
        )
    )


@app.command()
def schedule(
    ctx: typer.Context,
    event_code: str = typer.Argument(..., help="Event code"),
    tournament_level: str = typer.Argument(..., help="qual or playoff"),
    team_number: Optional[int] = typer.Option(None, "--team", "-t", help="Team number"),
    hybrid: bool = typer.Option(False, "--hybrid", help="Merge schedule with results"),
    start: Optional[int] = typer.Option(None, "--start", help="First match (hybrid only)"),
    end: Optional[int] = typer.Option(None, "--end", help="Last match (hybrid only)"),
) -> None:
    """Show the schedule for an event."""
    if hybrid:
        if team_number is not None:
            _fail("--team cannot be used with --hybrid")
        data = _execute(
            ctx, Operation.HYBRID_SCHEDULE, event_code, tournament_level, start=start, end=end
        )
    else:
        if start is not None or end is not None:
            _fail("--start/--end need --hybrid")
        data = _execute(
            ctx,
            Operation.SCHEDULE,
            event_code,
            tournament_level=tournament_level,
            team_number=team_number,
        )
    _print_json(data)


def main() -> None:
    """Entry point for the ftc-api console script."""
    app()


if __name__ == "__main__":
    main()
