def matches_query(match: dict, query: str) -> bool:
    """Case-insensitive substring search on either team name."""
    q = (query or "").lower()
    if not q:
        return True
    return q in match["home"]["name"].lower() or q in match["away"]["name"].lower()


def filter_matches(matches, league_id: str, query: str = "") -> list:
    return [m for m in matches if m["league"] == league_id and matches_query(m, query)]
