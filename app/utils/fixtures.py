import logging
import math
from datetime import datetime, timedelta, timezone

import numpy as np

from models.state import RecentMatch, TeamStatistics
from utils.errors import DataSourceError, ScoutPredictError, ValidationError

log = logging.getLogger(__name__)

LEAGUES = [
    {"id": "italy-serie-a",      "name": "Serie A (Italy)"},
    {"id": "spain-laliga",       "name": "La Liga (Spain)"},
    {"id": "germany-bundesliga", "name": "Bundesliga (Germany)"},
    {"id": "france-ligue1",      "name": "Ligue 1 (France)"},
    {"id": "england-premier",    "name": "Premier League (England)"},
    {"id": "brazil-serie-a",     "name": "Série A (Brazil)"},
]

LEAGUE_NAMES = {l["id"]: l["name"] for l in LEAGUES}

RECENT_MATCHES = 5

# (low, high) per statistic; home sides get slightly stronger draws
HOME_RANGES = {"corners_for": (2.5, 6.5), "corners_against": (2.0, 5.0), "cards_for": (0.8, 2.2)}
AWAY_RANGES = {"corners_for": (2.0, 6.0), "corners_against": (2.0, 5.5), "cards_for": (0.7, 2.0)}


def _random_avg(rng, low, high) -> float:
    return round(float(rng.uniform(low, high)), 2)


def make_team_stats(rng, ranges) -> TeamStatistics:
    recent = tuple(
        RecentMatch(corners=int(rng.integers(0, 8)), cards=int(rng.integers(0, 4)))
        for _ in range(RECENT_MATCHES)
    )
    return TeamStatistics(
        avg_corners_for=_random_avg(rng, *ranges["corners_for"]),
        avg_corners_against=_random_avg(rng, *ranges["corners_against"]),
        avg_cards_for=_random_avg(rng, *ranges["cards_for"]),
        recent=recent,
    )


def make_mock_match(match_id, league_id, home, away, rng, day_offset=0, now=None) -> dict:
    now = now or datetime.now(timezone.utc)
    return {
        "id": str(match_id),
        "league": league_id,
        "date": (now + timedelta(days=day_offset)).isoformat(),
        "home": {"name": home, "stats": make_team_stats(rng, HOME_RANGES)},
        "away": {"name": away, "stats": make_team_stats(rng, AWAY_RANGES)},
    }


class MockFixtureSource:
    """
    Synthetic fixtures for every league.

    Any object with a `load()` returning match dicts can stand in for it.
    The generator is kept between loads, so a seeded source reproduces the
    same sequence of datasets while each refresh still yields new numbers.
    """

    name = "mock"

    def __init__(self, seed=None, matches_per_league=6):
        self.seed = seed
        self.matches_per_league = matches_per_league
        self.rng = np.random.default_rng(seed)

    def load(self, now=None) -> list:
        now = now or datetime.now(timezone.utc)
        matches = []
        match_id = 1
        for league in LEAGUES:
            country = league["id"].split("-")[0]
            for i in range(self.matches_per_league):
                home = f"Team {country}_{i * 2 + 1}"
                away = f"Team {country}_{i * 2 + 2}"
                matches.append(
                    make_mock_match(match_id, league["id"], home, away, self.rng, i - 1, now)
                )
                match_id += 1
        return matches


def validate_stats(stats: TeamStatistics) -> TeamStatistics:
    """Averages must be finite and non-negative before they reach the engine."""
    for field_name in ("avg_corners_for", "avg_corners_against", "avg_cards_for"):
        value = getattr(stats, field_name)
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} is not a number: {value!r}") from None
        if not math.isfinite(value):
            raise ValidationError(f"{field_name} is not finite: {value!r}")
        if value < 0:
            raise ValidationError(f"{field_name} is negative: {value!r}")
    return stats


def load_matches(source) -> list:
    source_name = getattr(source, "name", type(source).__name__)
    try:
        matches = list(source.load())
    except ScoutPredictError:
        raise
    except Exception as e:
        raise DataSourceError(source_name, str(e)) from e

    for m in matches:
        match_id = m.get("id", "?") if isinstance(m, dict) else "?"
        for side in ("home", "away"):
            try:
                team = m[side]
                validate_stats(team["stats"])
            except (KeyError, TypeError, AttributeError) as e:
                raise ValidationError(f"match {match_id}: missing {side} field {e}") from e
            except ValidationError as e:
                raise ValidationError(f"match {match_id} ({team.get('name', side)}): {e}") from e

    log.info("Loaded %d matches from %s source", len(matches), source_name)
    return matches
