"""Hash maps: fruit baskets and a table of football scores."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass

_U8_MAX = 255
_U8_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)
_FIELDS_PER_RESULT = 4
_ADDED_PER_MISSING_FRUIT = 1


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits in all."""
    return {"banana": 2, "apple": 2, "mango": 1}


class Fruit(enum.Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: Mapping[Fruit, int]) -> dict[Fruit, int]:
    """A copy of the basket with every missing kind of fruit added; present kinds are kept."""
    filled = dict(basket)
    for fruit in Fruit:
        filled.setdefault(fruit, _ADDED_PER_MISSING_FRUIT)
    return filled


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match to the tally."""
        self.goals_scored = _checked_u8(self.goals_scored + scored)
        self.goals_conceded = _checked_u8(self.goals_conceded + conceded)


def _checked_u8(value: int) -> int:
    if value > _U8_MAX:
        raise OverflowError("goal count does not fit in 8 bits")
    return value


def _parse_goals(text: str) -> int:
    if not _U8_PATTERN.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from ``team1,team2,goals1,goals2`` lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < _FIELDS_PER_RESULT:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name, team_1_text, team_2_text = fields[:_FIELDS_PER_RESULT]
        team_1_score = _parse_goals(team_1_text)
        team_2_score = _parse_goals(team_2_text)
        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores