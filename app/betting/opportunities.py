from models.markets import compute_market_probabilities
from models.state import MARKETS, TEAMS, MarketProbabilities, Opportunity


def pick_best_opportunity(home: MarketProbabilities, away: MarketProbabilities) -> Opportunity:
    """
    Highest-probability market across both teams.

    Candidates are enumerated home first, then away, each in MARKETS order.
    sorted() is stable even with reverse=True, so on a tie the earliest
    candidate of that enumeration wins.
    """
    by_team = {"home": home, "away": away}
    candidates = [
        Opportunity(team=team, market=market, probability=getattr(by_team[team], market))
        for team in TEAMS
        for market in MARKETS
    ]
    candidates = sorted(candidates, key=lambda c: c.probability, reverse=True)
    return candidates[0]


def predict_match(match: dict) -> dict:
    """Copy of `match` with a `predictions` block for both teams and the suggestion."""
    home = compute_market_probabilities(match["home"]["stats"])
    away = compute_market_probabilities(match["away"]["stats"])
    return {
        **match,
        "predictions": {
            "home": home,
            "away": away,
            "suggestion": pick_best_opportunity(home, away),
        },
    }


def attach_predictions(matches):
    return [predict_match(m) for m in matches]
