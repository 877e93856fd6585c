"""
FTC season registry.

Each season is identified by the year it starts in; the API uses that
year as the season path segment.
"""

from enum import IntEnum

from .errors import MissingConfiguration


class Season(IntEnum):
    """Supported FTC seasons (value is the season year)."""

    SKYSTONE = 2019
    ULTIMATE_GOAL = 2020
    FREIGHT_FRENZY = 2021
    POWER_PLAY = 2022
    CENTERSTAGE = 2023
    INTO_THE_DEEP = 2024

    @classmethod
    def latest(cls) -> "Season":
        """Most recent supported season."""
        return max(cls)

    @property
    def label(self) -> str:
        """Game name for display."""
        return _LABELS[self]


_LABELS = {
    Season.SKYSTONE: "SKYSTONE",
    Season.ULTIMATE_GOAL: "Ultimate Goal",
    Season.FREIGHT_FRENZY: "Freight Frenzy",
    Season.POWER_PLAY: "POWERPLAY",
    Season.CENTERSTAGE: "CENTERSTAGE",
    Season.INTO_THE_DEEP: "INTO THE DEEP",
}

DEFAULT_SEASON = Season.latest()


def resolve_season(value: "Season | int | str | None") -> Season:
    """
    Resolve a season from an enum member, a year, or a member name.

    Names are matched case-insensitively and ignore spaces, dashes and
    underscores, so "into-the-deep", "IntoTheDeep" and "2024" all resolve.

    Raises:
        MissingConfiguration: If no value is given or it names no season
    """
    if value is None or value == "":
        raise MissingConfiguration("Season is required")

    if isinstance(value, Season):
        return value

    if isinstance(value, int):
        try:
            return Season(value)
        except ValueError:
            raise MissingConfiguration(f"Unsupported season: {value}") from None

    text = str(value).strip()
    if text.isdigit():
        return resolve_season(int(text))

    wanted = _normalize(text)
    for season in Season:
        if _normalize(season.name) == wanted:
            return season

    raise MissingConfiguration(f"Unsupported season: {value}")


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())
