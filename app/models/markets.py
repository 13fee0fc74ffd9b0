import math

from models.state import MarketProbabilities, TeamStatistics

# ── Market lines ──────────────────────────────────────────────────────────────
CORNER35_LINE = 3.5
CORNER45_LINE = 4.5
CARDS15_LINE  = 1.5

# ── Baselines (probability when the team sits exactly on the line) ───────────
CORNER35_BASE = 50
CORNER45_BASE = 40
CARDS15_BASE  = 35

# ── Output bands, never 0% or 100% ────────────────────────────────────────────
CORNER35_BAND = (5, 98)
CORNER45_BAND = (3, 97)
CARDS15_BAND  = (2, 96)


def clamp(value, low=0, high=100):
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Nearest integer, .5 going up (86.5 -> 87, not Python's banker's 86)."""
    return int(math.floor(value + 0.5))


def compute_market_probabilities(stats: TeamStatistics) -> MarketProbabilities:
    """
    Linear score per market, shifted from its baseline and clamped to its band.

    Corners move with the distance of the team's average from the line and
    with its net corner dominance (for minus against). Cards move with the
    distance from the 1.5 line plus a flat share of the average itself.
    Returns integer percentages.
    """
    corner_bias = stats.avg_corners_for - stats.avg_corners_against

    corner35_score = (stats.avg_corners_for - CORNER35_LINE) * 12 + corner_bias * 6
    corner45_score = (stats.avg_corners_for - CORNER45_LINE) * 12 + corner_bias * 5
    cards_score    = (stats.avg_cards_for - CARDS15_LINE) * 25 + stats.avg_cards_for * 8

    return MarketProbabilities(
        corner35=round_half_up(clamp(CORNER35_BASE + corner35_score, *CORNER35_BAND)),
        corner45=round_half_up(clamp(CORNER45_BASE + corner45_score, *CORNER45_BAND)),
        cards15=round_half_up(clamp(CARDS15_BASE + cards_score, *CARDS15_BAND)),
    )
