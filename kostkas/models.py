"""Data models for the Kostkas statistics engine."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Iterable, List, Optional


class Outcome(IntEnum):
    """Result of one player in one match. Absence means did not play."""
    LOSS = 1
    WIN = 2

    @property
    def symbol(self) -> str:
        return 'W' if self is Outcome.WIN else 'L'


@dataclass
class Match:
    """One recorded match."""
    id: Any
    date: Optional[datetime]
    expected_count: Any = None
    results: dict[str, Outcome] = field(default_factory=dict)

    def winners(self, order: Optional[Iterable[str]] = None) -> list[str]:
        """Names that won this match, in `order` (defaults to result order)."""
        names = order if order is not None else self.results.keys()
        return [n for n in names if self.results.get(n) is Outcome.WIN]

    def losers(self, order: Optional[Iterable[str]] = None) -> list[str]:
        """Names that lost this match, in `order` (defaults to result order)."""
        names = order if order is not None else self.results.keys()
        return [n for n in names if self.results.get(n) is Outcome.LOSS]


@dataclass
class LeagueData:
    """Match list and roster from one data load."""
    matches: List[Match] = field(default_factory=list)
    roster: List[str] = field(default_factory=list)


@dataclass
class PlayerStat:
    """Aggregated counters for one player over a set of matches."""
    name: str
    played: int = 0
    won: int = 0
    points: int = 0
    percentage: float = 0.0
    streak: List[str] = field(default_factory=list)  # oldest -> newest


@dataclass
class TopLists:
    """Top-N views over the qualified players."""
    threshold: float
    points: List[PlayerStat] = field(default_factory=list)
    played: List[PlayerStat] = field(default_factory=list)
    percentage: List[PlayerStat] = field(default_factory=list)


@dataclass
class AffinityEntry:
    """Shared results between a player and one teammate."""
    name: str
    won: int = 0
    lost: int = 0

    @property
    def total(self) -> int:
        return self.won + self.lost

    @property
    def win_rate(self) -> Optional[float]:
        return self.won / self.total if self.total else None

    @property
    def loss_rate(self) -> Optional[float]:
        return self.lost / self.total if self.total else None


@dataclass
class AffinityReport:
    """Best and worst partners for a player."""
    player: str
    best: List[AffinityEntry] = field(default_factory=list)
    worst: List[AffinityEntry] = field(default_factory=list)


@dataclass
class PlayerDetails:
    """One player's stats for the current month filter and their partners."""
    stat: PlayerStat
    affinity: AffinityReport


@dataclass
class TeamGroup:
    """Ad-hoc team: an exact set of players that won or lost together."""
    players: tuple[str, ...]  # sorted
    won: int = 0
    lost: int = 0

    @property
    def key(self) -> str:
        return ','.join(self.players)

    @property
    def win_rate(self) -> float:
        total = self.won + self.lost
        return self.won / total if total else 0.0


@dataclass
class TeamRecords:
    """Most winning and most losing ad-hoc teams. None means not enough data."""
    best: Optional[TeamGroup] = None
    worst: Optional[TeamGroup] = None


@dataclass
class TeamMember:
    """Player assigned by the team generator."""
    name: str
    percentage: float = 0.0
    won: int = 0
    score: float = 0.0


@dataclass
class BalancedTeams:
    """Two generated teams with their average win percentage."""
    team_a: List[TeamMember] = field(default_factory=list)
    team_b: List[TeamMember] = field(default_factory=list)

    @staticmethod
    def _average(team: List[TeamMember]) -> float:
        if not team:
            return 0.0
        return sum(m.percentage for m in team) / len(team)

    @property
    def average_a(self) -> float:
        return self._average(self.team_a)

    @property
    def average_b(self) -> float:
        return self._average(self.team_b)


@dataclass
class MatchSummary:
    """One row of the match history view."""
    id: Any
    date: Optional[datetime]
    expected_count: Any
    winners: List[str] = field(default_factory=list)
    losers: List[str] = field(default_factory=list)
