"""
ScoutPredict - Corners & Cards Dashboard
========================================
Features:
- Mock fixtures for six leagues (injectable fixture source)
- Over 3.5 / 4.5 corners and over 1.5 cards probabilities per team
- Best opportunity per match
- League filter + team search
- In-memory prediction history
- Download filtered predictions to CSV
"""

import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from betting.opportunities import attach_predictions
from models.state import MARKET_LABELS, MARKETS
from utils import config
from utils.errors import ScoutPredictError
from utils.export import export_csv
from utils.filters import filter_matches
from utils.fixtures import LEAGUE_NAMES, LEAGUES, MockFixtureSource, load_matches
from utils.history import add_to_history, history_frame_rows
from utils.logging_config import setup_logging

st.set_page_config(page_title="⚽ ScoutPredict", layout="wide", initial_sidebar_state="collapsed")

setup_logging()
log = logging.getLogger("scoutpredict.dashboard")

# ══════════════════════════════════════════════════════════════════════════════
# SESSION STATE
# ══════════════════════════════════════════════════════════════════════════════

def init_state():
    """Initialize fixture source, match list and history in session state."""
    if "source" not in st.session_state:
        st.session_state.source = MockFixtureSource(
            seed=config.MOCK_SEED,
            matches_per_league=config.MATCHES_PER_LEAGUE,
        )
    if "history" not in st.session_state:
        st.session_state.history = []
    if "matches" not in st.session_state:
        st.session_state.matches = []
        reload_matches()

def reload_matches():
    """Draw a fresh dataset; on failure keep whatever was loaded before."""
    try:
        with st.spinner("🔄 Loading matches..."):
            st.session_state.matches = load_matches(st.session_state.source)
    except ScoutPredictError as e:
        log.exception("Failed to load matches")
        st.error(f"❌ Could not load matches: {e}")

def save_to_history(match):
    st.session_state.history = add_to_history(st.session_state.history, match)

def format_kickoff(iso_date: str) -> str:
    return datetime.fromisoformat(iso_date).strftime("%a %d %b %Y, %H:%M")

# ══════════════════════════════════════════════════════════════════════════════
# RENDERING
# ══════════════════════════════════════════════════════════════════════════════

def render_prediction_card(team: dict, preds):
    st.markdown(f"**{team['name']}**")
    for market in MARKETS:
        value = getattr(preds, market)
        col_label, col_value = st.columns([3, 1])
        col_label.caption(MARKET_LABELS[market])
        col_value.markdown(f"**{value}%**")
        st.progress(value)
    recent = team["stats"].recent
    if recent:
        form = "  ".join(f"{r.corners}c/{r.cards}y" for r in recent)
        st.caption(f"Last {len(recent)}: {form}")

def render_match(m: dict):
    suggestion = m["predictions"]["suggestion"]
    with st.container(border=True):
        col1, col2 = st.columns([3, 2])
        with col1:
            st.caption(LEAGUE_NAMES.get(m["league"], m["league"]))
            st.markdown(f"### {m['home']['name']} x {m['away']['name']}")
            st.caption(f"📅 {format_kickoff(m['date'])}")
        with col2:
            st.caption("Suggestion:")
            st.markdown(
                f"**{m[suggestion.team]['name']} {suggestion.label} ({suggestion.probability}%)**"
            )

        home_col, away_col = st.columns(2)
        with home_col:
            render_prediction_card(m["home"], m["predictions"]["home"])
        with away_col:
            render_prediction_card(m["away"], m["predictions"]["away"])

        if st.button("💾 Save to history", key=f"save_{m['id']}"):
            save_to_history(m)
            st.success(f"✅ Saved {m['home']['name']} x {m['away']['name']} to history")

# ══════════════════════════════════════════════════════════════════════════════
# UI - TABS
# ══════════════════════════════════════════════════════════════════════════════

init_state()

tab1, tab2 = st.tabs(["📊 Matches", "📁 History"])

# ══════════════════════════════════════════════════════════════════════════════
# TAB 1: MATCHES
# ══════════════════════════════════════════════════════════════════════════════

with tab1:
    st.title("⚽ ScoutPredict — Corners & Cards")

    col1, col2 = st.columns([1, 1])
    with col1:
        if st.button("🔄 Update Data", type="primary", key="update_data"):
            log.info("Manual data refresh requested")
            reload_matches()

    predicted = attach_predictions(st.session_state.matches)

    league_ids = [l["id"] for l in LEAGUES]
    f1, f2 = st.columns([1, 2])
    with f1:
        league_filter = st.selectbox(
            "League", league_ids, format_func=lambda lid: LEAGUE_NAMES[lid], key="league_filter"
        )
    with f2:
        query = st.text_input("Search team", placeholder="Search team...", key="team_query")

    filtered = filter_matches(predicted, league_filter, query)

    with col2:
        st.download_button(
            label="📥 Export CSV",
            data=export_csv(filtered),
            file_name=config.EXPORT_FILE_NAME,
            mime="text/csv",
            disabled=not filtered,
            on_click=lambda: log.info("CSV export downloaded (%d matches)", len(filtered)),
        )

    st.markdown("---")

    if not st.session_state.matches:
        st.info("No matches loaded. Press Update Data to try again.")
    elif not filtered:
        st.info("No matches for this league and search.")
    else:
        st.write(f"**Matches found: {len(filtered)}**")
        for m in filtered:
            render_match(m)

# ══════════════════════════════════════════════════════════════════════════════
# TAB 2: HISTORY
# ══════════════════════════════════════════════════════════════════════════════

with tab2:
    st.title("📁 History")
    st.caption("Prediction snapshots saved this session")

    if not st.session_state.history:
        st.info("No saved predictions yet. Save a match from the Matches tab.")
    else:
        st.dataframe(pd.DataFrame(history_frame_rows(st.session_state.history)), use_container_width=True)
