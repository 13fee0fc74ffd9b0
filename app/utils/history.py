import logging
from datetime import datetime, timezone

log = logging.getLogger(__name__)


def add_to_history(history, match: dict, timestamp=None) -> list:
    """
    New history list with a snapshot of `match` in front (newest first).

    The snapshot keeps the match's predictions as they were when saved; later
    refreshes of the dataset do not touch it.
    """
    timestamp = timestamp or datetime.now(timezone.utc)
    entry = {
        "timestamp": timestamp.isoformat(),
        "match_id": match["id"],
        "match": match,
        "predictions": match["predictions"],
    }
    log.info("Saved match %s to history (%d entries)", match["id"], len(history) + 1)
    return [entry, *history]


def history_frame_rows(history) -> list:
    """Flat rows for the History tab table."""
    rows = []
    for entry in history:
        m = entry["match"]
        suggestion = entry["predictions"]["suggestion"].as_dict()
        team_name = m[suggestion["team"]]["name"]
        rows.append({
            "Saved": datetime.fromisoformat(entry["timestamp"]).strftime("%Y-%m-%d %H:%M"),
            "Match": f"{m['home']['name']} x {m['away']['name']}",
            "Suggestion": f"{team_name} {suggestion['label']}",
            "Probability": f"{suggestion['probability']}%",
        })
    return rows
