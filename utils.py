# utils.py

from typing import Dict, Hashable, List, Optional

import plotly.graph_objects as go

from engine import AccessKind, StepOutcome, Stats

# Defaults shown in the sidebar
DEFAULT_FRAME_SIZE = 3
DEFAULT_REFERENCES = (7, 0, 1, 2, 0, 3, 0, 4)
DEFAULT_DELAY = 0.5  # seconds between references during playback

EMPTY_COLOR = "lightgray"
HIT_COLOR = "lightgreen"
FAULT_COLOR = "salmon"


def get_color(kind: Optional[str]) -> str:
    """Return a slot color for a hit, a fault, or an empty slot (kind None)."""
    if kind == AccessKind.HIT:
        return HIT_COLOR
    if kind == AccessKind.FAULT:
        return FAULT_COLOR
    return EMPTY_COLOR


def parse_reference_sequence(text: str) -> List[int]:
    """
    Parse a comma separated list of page numbers, ignoring blank entries.

    Raises:
        ValueError: If an entry is not an integer
    """
    pages = []
    for token in text.split(','):
        token = token.strip()
        if token == '':
            continue
        try:
            pages.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid page number: {token!r}") from None
    return pages


# Marks a free slot; None is a valid page identifier
_EMPTY = object()


class FrameSlots:
    """
    Fixed row of visual frame slots, kept in sync by observing a simulator.

    A loaded page takes the first empty slot and keeps it until evicted, so
    slot position reflects where a page landed rather than its FIFO age.
    """

    def __init__(self, frame_size: int):
        self._slots: List[Hashable] = [_EMPTY] * frame_size
        self.colors: List[str] = [get_color(None)] * frame_size

    def __call__(self, outcome: StepOutcome):
        if outcome.is_hit:
            self.colors[self._find(outcome.page)] = get_color(AccessKind.HIT)
            return

        if outcome.has_evicted:
            index = self._find(outcome.evicted)
            self._slots[index] = _EMPTY
            self.colors[index] = get_color(None)

        index = self._find(_EMPTY)
        self._slots[index] = outcome.page
        self.colors[index] = get_color(AccessKind.FAULT)

    def _find(self, page) -> int:
        # Identity first so the marker never matches a page through __eq__
        for i, p in enumerate(self._slots):
            if p is page or (p is not _EMPTY and page is not _EMPTY and p == page):
                return i
        raise ValueError(f"Page {page!r} is not on the board")

    def is_free(self, index: int) -> bool:
        return self._slots[index] is _EMPTY

    def occupied(self) -> Dict[int, Hashable]:
        """Slot index -> resident page, for occupied slots only."""
        return {i: p for i, p in enumerate(self._slots) if p is not _EMPTY}

    def labels(self) -> List[str]:
        return [f"F{i}: " + ("Free" if p is _EMPTY else f"P{p}")
                for i, p in enumerate(self._slots)]


def frame_figure(slots: FrameSlots) -> go.Figure:
    """Bar chart of the frame slots, one uniform bar per slot."""
    labels = slots.labels()
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=list(range(len(labels))),
        y=[1] * len(labels),
        text=labels,
        marker_color=list(slots.colors),
        hovertext=labels,
        hoverinfo='text'
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        yaxis=dict(showticklabels=False)
    )
    return fig


def stats_figure(stats: Stats) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[stats.hits, stats.faults],
        marker_color=[HIT_COLOR, FAULT_COLOR]
    ))
    fig.update_layout(height=300, title="Hits vs Faults")
    return fig
