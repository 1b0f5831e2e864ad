"""
FIFO Page Replacement Visualizer

Interactive playback of the First-In-First-Out page replacement policy. A
reference sequence is fed into the simulation engine one page at a time; every
hit and fault is drawn on a row of frame slots, and the hit/fault counters are
charted as the run progresses.

Built with Streamlit for the web interface and Plotly for visualizations.
The simulation itself lives in engine.py and knows nothing about this page.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import time                                  # For pacing the playback

import streamlit as st                       # Web application framework

from engine import PageReplacementSimulator
from utils import (
    DEFAULT_DELAY,
    DEFAULT_FRAME_SIZE,
    DEFAULT_REFERENCES,
    FrameSlots,
    frame_figure,
    parse_reference_sequence,
    stats_figure,
)


# =============================================================================
# SESSION STATE HELPERS
# =============================================================================

def new_simulation(frame_size: int, references):
    """
    Store a fresh simulator, its slot board and playback cursor in the session.

    The slot board is subscribed before any reference is processed so that it
    sees every transition.
    """
    slots = FrameSlots(frame_size)
    st.session_state.sim = PageReplacementSimulator(frame_size, references, observers=[slots])
    st.session_state.slots = slots
    st.session_state.cursor = 0
    st.session_state.config = (frame_size, tuple(references))


def render(placeholders, frame_no=0):
    """Redraw every live panel from the current session state."""
    sim: PageReplacementSimulator = st.session_state.sim
    stats = sim.stats()

    # Reference queue with the next page marked
    queue = [
        f"**[{p}]**" if i == st.session_state.cursor else str(p)
        for i, p in enumerate(sim.references)
    ]
    placeholders["queue"].markdown(" ".join(queue) if queue else "_Sequence is empty_")

    placeholders["frames"].plotly_chart(
        frame_figure(st.session_state.slots), use_container_width=True, key=f"frames-{frame_no}")
    summary = stats.as_dict()
    with placeholders["stats"].container():
        st.markdown(f"**{stats}**")
        m1, m2, m3 = st.columns(3)
        m1.metric("Page Accesses", summary["total_refs"])
        m2.metric("Page Faults", summary["faults"])
        m3.metric("Hit Ratio", summary["hit_ratio"])
    placeholders["chart"].plotly_chart(
        stats_figure(stats), use_container_width=True, key=f"chart-{frame_no}")
    placeholders["fifo"].write(sim.frames())

    with placeholders["log"].container():
        for ev in sim.event_log[-20:][::-1]:
            st.write(ev)


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

st.set_page_config(page_title="FIFO Page Replacement Visualizer", layout="wide")
st.title("FIFO Page Replacement Visualizer")

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

frame_size = st.sidebar.number_input(
    "Number of frames",
    min_value=1,
    max_value=16,
    value=DEFAULT_FRAME_SIZE,
    step=1
)

access_input = st.sidebar.text_area(
    "Page reference sequence (comma separated page numbers)",
    value=",".join(map(str, DEFAULT_REFERENCES))
)

delay = st.sidebar.slider(
    "Delay between references (seconds)",
    min_value=0.0,
    max_value=2.0,
    value=DEFAULT_DELAY,
    step=0.1
)

try:
    references = parse_reference_sequence(access_input)
except ValueError as e:
    st.sidebar.error(str(e))
    st.stop()

# Rebuild the simulation whenever its configuration changes
config = (int(frame_size), tuple(references))
if st.session_state.get("config") != config:
    new_simulation(*config)

if st.sidebar.button("Reset Simulation"):
    new_simulation(*config)
    st.sidebar.success("Simulation reset")

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])

with col2:
    st.subheader("Reference Queue")
    queue_slot = st.empty()
    st.subheader("Memory Frames")
    frames_slot = st.empty()
    st.subheader("Statistics")
    stats_slot = st.empty()
    chart_slot = st.empty()
    st.subheader("Resident Pages (FIFO order, oldest first)")
    fifo_slot = st.empty()

with col1:
    st.subheader("Controls")
    step_clicked = st.button("Step Once")
    run_clicked = st.button("Run Sequence")
    st.subheader("Event Log")
    log_slot = st.empty()

placeholders = {
    "queue": queue_slot,
    "frames": frames_slot,
    "stats": stats_slot,
    "chart": chart_slot,
    "fifo": fifo_slot,
    "log": log_slot,
}

sim: PageReplacementSimulator = st.session_state.sim
remaining = sim.references[st.session_state.cursor:]

if step_clicked:
    if remaining:
        outcome = sim.step(remaining[0])
        st.session_state.cursor += 1
        with col1:
            evicted = f", evicted {outcome.evicted}" if outcome.has_evicted else ""
            st.success(f"Accessed page {outcome.page} -> {outcome.kind}{evicted}")
    else:
        with col1:
            st.warning("No pages left to reference")

if run_clicked:
    if not remaining:
        with col1:
            st.warning("No pages left to reference")
    else:
        for n, page in enumerate(remaining, start=1):
            sim.step(page)
            st.session_state.cursor += 1
            render(placeholders, n)
            time.sleep(delay)
        with col1:
            st.success("Sequence run finished")

render(placeholders)
