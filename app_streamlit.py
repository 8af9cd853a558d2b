import os

import pandas as pd
import requests
import streamlit as st

from herb_graph import ALL_TRADITIONS, Tradition
from herb_matcher import MatchQuery, graph_connections_for, match_herbs
from pydantic_models import Platform

API_URL = os.environ.get("REMEDY_API_URL", "http://127.0.0.1:5000/api/agents")
REQUEST_TIMEOUT_SECS = 180

TRADITION_NAMES = [t.value for t in ALL_TRADITIONS]
PLATFORM_NAMES = [p.value for p in Platform]

st.set_page_config(page_title="Remedy Roots", page_icon="🌿", layout="wide")

st.caption("NOVA PURE HERBAL PRESENTS")
st.title("🌿 Remedy Roots Agent Studio")
st.write("Orchestrate AI herbalist, educator, marketer, and community agents and build engagement loops "
         "powered by the Remedy Roots knowledge graph.")
st.info("Educational and creative use only. Herbal suggestions are not medical advice.")

form_col, preview_col = st.columns([3, 2])

with form_col:
    st.subheader("Client intake")
    user_profile = st.text_area("Client profile", "31-year-old creative entrepreneur balancing a wellness studio "
                                "launch with caretaking for family elders.")
    symptoms = st.text_area("Symptoms", "Chronic fatigue, brain fog, and high stress with evening restlessness.")
    goals = st.text_area("Wellness goals", "Restore vibrant energy, sharpen focus for content creation, and "
                         "support immune resilience during travel.")
    restrictions = st.text_input("Contraindications & restrictions",
                                 "Allergic to nightshades; sensitive to very warming herbs.")
    traditions = st.multiselect("Tradition blend", TRADITION_NAMES, default=TRADITION_NAMES)

    st.subheader("Campaign")
    brand_voice = st.text_area("Brand voice", "Rooted, community-forward, high-touch concierge tone with "
                               "remixable storytelling and warmth.")
    campaign_goal = st.text_area("Campaign goal", "Ignite a 6-week storytelling wave that positions Nova Pure "
                                 "Herbal as the go-to ritual companion for caretakers and creators.")
    platforms = st.multiselect("Target platforms", PLATFORM_NAMES, default=PLATFORM_NAMES)
    key_dates = st.text_input("Key dates", "Spring Equinox activation; weekly Tea + Talk on Sundays.")

    st.subheader("Community")
    community_theme = st.text_input("Community theme", "Caretaker resilience and ancestral ritual revival.")
    community_ask = st.text_area("Community ask", "Share a wellness ritual that grounds you using #MyRemedyRoots "
                                 "and tag a lineage bearer who taught it to you.")
    highlight_count = st.number_input("Spotlights per month", min_value=1, max_value=6, value=4, step=1)

    run = st.button("Run multi-agent ecosystem", type="primary")


def render_match(match):
    herb = match.herb
    with st.container(border=True):
        st.markdown(f"**{herb.name}** · _{herb.latin_name}_ · Score {match.score}")
        st.markdown(f"Traditions: {', '.join(t.value for t in herb.traditions)}  \n"
                    f"Key actions: {', '.join(herb.actions)}  \n"
                    f"Highlighted uses: {', '.join(herb.uses)}  \n"
                    f"Star pairings: {', '.join(herb.pairings)}")
        if match.matched_keywords:
            st.markdown(f":green[Matched client keywords: **{', '.join(match.matched_keywords)}**]")
        else:
            st.caption("No direct keyword match. Consider creative integration.")
        if match.contraindicated:
            st.error("Safety flag: review contraindications before recommending.")


def render_edges(edges):
    if not edges:
        st.caption("Add more detail to reveal relationship pathways in the herbal knowledge graph.")
        return
    for edge in edges:
        st.markdown(f"**{edge['source']}** ↔ **{edge['target']}**  \n{edge['label']}")


with preview_col:
    st.subheader("Knowledge graph preview")
    st.caption("Live preview from the Remedy Roots herbal knowledge graph")
    local_matches = match_herbs(MatchQuery(
        symptoms=symptoms,
        goals=goals,
        restrictions=restrictions,
        traditions=frozenset(Tradition(t) for t in traditions),
    ))
    if not local_matches:
        st.caption("Enter more detail to unlock herbal insight pathways.")
    for match in local_matches:
        render_match(match)
    render_edges([{"source": e.source, "target": e.target, "label": e.label}
                  for e in graph_connections_for(local_matches)])

if run:
    payload = {
        "user_profile": user_profile,
        "symptoms": symptoms,
        "goals": goals,
        "restrictions": restrictions,
        "traditions": traditions,
        "brand_voice": brand_voice,
        "campaign_goal": campaign_goal,
        "target_platforms": platforms,
        "key_dates": key_dates,
        "community_theme": community_theme,
        "community_ask": community_ask,
        "highlight_count": int(highlight_count),
    }
    with st.spinner("Orchestrating agents..."):
        try:
            resp = requests.post(API_URL, json=payload, timeout=REQUEST_TIMEOUT_SECS)
        except requests.RequestException as e:
            st.error(f"Could not reach the agent API: {e}")
            st.stop()
    try:
        data = resp.json()
    except ValueError:
        data = {}
    if not resp.ok:
        st.error(data.get("error") or f"Request failed with status {resp.status_code}")
        st.stop()

    st.success("Agents responded ✅")
    for title, key in [("Herbalist Agent", "herbalist"), ("Educator Agent", "educator"),
                       ("Marketer Agent", "marketer"), ("Community Agent", "community")]:
        with st.expander(title, expanded=True):
            st.markdown(data.get(key) or "Awaiting orchestration...")

    if data.get("herb_matches"):
        st.subheader("Verified herb matches from agents")
        df = pd.DataFrame(data["herb_matches"])
        for col in ("traditions", "actions", "matched_keywords"):
            df[col] = df[col].apply(", ".join)
        st.dataframe(df[["name", "latin_name", "score", "traditions", "actions",
                         "matched_keywords", "contraindicated"]], hide_index=True)
    if data.get("knowledge_edges"):
        st.subheader("Knowledge graph pathways")
        render_edges(data["knowledge_edges"])
