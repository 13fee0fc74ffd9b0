"""
Team statistics and market probability dataclasses.

Pure data containers passed between the fixture source, the probability
engine and the dashboard. Frozen so a derived value can only be recomputed,
never patched in place.
"""
from dataclasses import dataclass, field

TEAMS = ("home", "away")

# Fixed enumeration order; the ranker's tie-break relies on it.
MARKETS = ("corner35", "corner45", "cards15")

MARKET_LABELS = {
    "corner35": "Over 3.5 Corners",
    "corner45": "Over 4.5 Corners",
    "cards15":  "Over 1.5 Cards",
}


@dataclass(frozen=True)
class RecentMatch:
    """One entry of a team's recent match log."""
    corners: int
    cards: int


@dataclass(frozen=True)
class TeamStatistics:
    """Per-team averages feeding the probability engine.

    Attributes:
        avg_corners_for:      Corners earned per match.
        avg_corners_against:  Corners conceded per match.
        avg_cards_for:        Cards received per match.
        recent:               Last matches played (display only).
    """
    avg_corners_for: float
    avg_corners_against: float
    avg_cards_for: float
    recent: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class MarketProbabilities:
    """Integer percentages for the three markets of one team."""
    corner35: int
    corner45: int
    cards15: int

    def as_dict(self) -> dict:
        return {
            "corner35": self.corner35,
            "corner45": self.corner45,
            "cards15": self.cards15,
        }


@dataclass(frozen=True)
class Opportunity:
    """Best team/market pairing of a match."""
    team: str
    market: str
    probability: int

    @property
    def label(self) -> str:
        return MARKET_LABELS[self.market]

    def as_dict(self) -> dict:
        return {
            "team": self.team,
            "market": self.market,
            "label": self.label,
            "probability": self.probability,
        }
