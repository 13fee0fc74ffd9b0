import csv
import io
import logging
from datetime import datetime

import pandas as pd

from models.state import MARKET_LABELS, MARKETS
from utils.fixtures import LEAGUE_NAMES

log = logging.getLogger(__name__)

EXPORT_COLUMNS = ["League", "Date", "Match", "Market", "Team", "Probability"]


def build_export_frame(matches) -> pd.DataFrame:
    """Six rows per predicted match: each team's three markets, home first."""
    rows = []
    for m in matches:
        kickoff = datetime.fromisoformat(m["date"]).strftime("%Y-%m-%d %H:%M")
        match_name = f"{m['home']['name']} x {m['away']['name']}"
        league = LEAGUE_NAMES.get(m["league"], m["league"])
        for side in ("home", "away"):
            probs = m["predictions"][side].as_dict()
            for market in MARKETS:
                rows.append({
                    "League": league,
                    "Date": kickoff,
                    "Match": match_name,
                    "Market": MARKET_LABELS[market],
                    "Team": m[side]["name"],
                    "Probability": f"{probs[market]}%",
                })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(matches) -> str:
    df = build_export_frame(matches)
    csv_buffer = io.StringIO()
    df.to_csv(csv_buffer, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    log.debug("Built CSV with %d rows for %d matches", len(df), len(matches))
    return csv_buffer.getvalue()
