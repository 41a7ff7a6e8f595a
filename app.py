"""
Least Count Round Explorer
Streamlit interface for dealing a round, checking bot decisions and settling a show.
"""

import logging
from dataclasses import replace

import pandas as pd
import streamlit as st

from leastcount_sim.engine.settlement import settle_round, TIED_CALL_PENALTY
from leastcount_sim.engine.table import deal_round
from leastcount_sim.presets import PRESETS, get_preset

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# Page config
st.set_page_config(
    page_title="Least Count Explorer",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Least Count Explorer")
st.markdown("*Deal a round, see what the bots would do, and settle a show*")

# Sidebar for settings
st.sidebar.header("Settings")

preset_options = list(PRESETS.keys())
selected_preset = st.sidebar.selectbox(
    "Preset",
    options=preset_options,
    format_func=lambda x: PRESETS[x].name
)
preset = get_preset(selected_preset)
st.sidebar.markdown(f"*{preset.description}*")

num_players = st.sidebar.slider("Players", min_value=2, max_value=7, value=preset.config.num_players)
hand_size = st.sidebar.slider("Hand Size", min_value=1, max_value=7, value=preset.config.hand_size)
seed = st.sidebar.number_input("Seed", min_value=0, value=0, step=1)

if st.sidebar.button("🎲 Deal", type="primary", use_container_width=True):
    config = replace(preset.config, num_players=num_players, hand_size=hand_size, seed=int(seed))
    st.session_state["round"] = deal_round(config)

dealt = st.session_state.get("round")

if dealt is None:
    st.info("Pick a table and press Deal.")
else:
    st.subheader(f"Joker: {dealt.joker}")
    st.caption(f"{len(dealt.stock)} cards left in the stock")

    tossed = set(st.multiselect(
        "Players who already tossed this turn",
        options=[p.id for p in dealt.players],
    ))

    rows = dealt.summary(tossed=tossed)
    hands = pd.DataFrame([
        {
            "Player": row["player"],
            "Hand": row["hand"],
            "Value": row["value"],
            "Bot Action": row["bot_action"]["type"],
            "Cards": ", ".join(row["bot_action"].get("cardIds", [])),
        }
        for row in rows
    ]).set_index("Player")
    st.dataframe(hands, use_container_width=True)

    st.divider()
    st.subheader("Settle a Show")

    caller = st.selectbox("Caller", options=[p.id for p in dealt.players])
    scores = settle_round(dealt.players, caller, dealt.joker)
    results = pd.DataFrame([
        {"Player": s.player_id, "Hand Value": row["value"], "Round Score": s.round_score}
        for s, row in zip(scores, rows)
    ]).set_index("Player")

    caller_score = scores[caller].round_score
    if caller_score == 0:
        st.success(f"Player {caller} had the lowest hand outright")
    elif caller_score == TIED_CALL_PENALTY:
        st.warning(f"Player {caller} tied for the lowest hand (+{caller_score})")
    else:
        st.error(f"Player {caller} did not have the lowest hand (+{caller_score})")

    st.dataframe(results, use_container_width=True)
    st.bar_chart(results["Round Score"])

# Footer
st.divider()
st.markdown("*Built with the Least Count rules engine*")
