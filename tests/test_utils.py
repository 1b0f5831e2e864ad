"""Tests for the presentation helpers used by the Streamlit page."""

import pytest

from engine import AccessKind, PageReplacementSimulator, Stats
from utils import (
    DEFAULT_FRAME_SIZE,
    DEFAULT_REFERENCES,
    EMPTY_COLOR,
    FAULT_COLOR,
    HIT_COLOR,
    FrameSlots,
    frame_figure,
    get_color,
    parse_reference_sequence,
    stats_figure,
)

# -- Colors -------------------------------------------------------------------


class TestGetColor:
    """Verify slot coloring."""

    def test_hit(self) -> None:
        assert get_color(AccessKind.HIT) == HIT_COLOR

    def test_fault(self) -> None:
        assert get_color(AccessKind.FAULT) == FAULT_COLOR

    def test_empty(self) -> None:
        assert get_color(None) == EMPTY_COLOR


# -- Parsing ------------------------------------------------------------------


class TestParseReferenceSequence:
    """Verify parsing of the sidebar sequence."""

    def test_comma_separated(self) -> None:
        """Whitespace around entries should be ignored."""
        assert parse_reference_sequence("7, 0,1 , 2") == [7, 0, 1, 2]

    def test_blank_entries_skipped(self) -> None:
        """Empty entries should not produce pages."""
        assert parse_reference_sequence("1,,2,") == [1, 2]

    def test_empty_text(self) -> None:
        """An empty box should give an empty sequence."""
        assert parse_reference_sequence("  ") == []

    def test_invalid_entry_raises(self) -> None:
        """Non-numeric entries should raise ValueError naming the entry."""
        with pytest.raises(ValueError, match="x"):
            parse_reference_sequence("1,x,3")


# -- Frame Slots --------------------------------------------------------------


class TestFrameSlots:
    """Verify the slot board kept in sync with a simulator."""

    def _run(self, frame_size, references):
        slots = FrameSlots(frame_size)
        sim = PageReplacementSimulator(frame_size, references, observers=[slots])
        sim.run()
        return slots, sim

    def test_starts_empty(self) -> None:
        """All slots should start free and grey."""
        slots = FrameSlots(3)
        assert slots.occupied() == {}
        assert all(slots.is_free(i) for i in range(3))
        assert slots.colors == [EMPTY_COLOR] * 3

    def test_faults_fill_first_free_slot(self) -> None:
        """Loaded pages take slots left to right."""
        slots, _ = self._run(3, [7, 0])
        assert slots.occupied() == {0: 7, 1: 0}
        assert slots.is_free(2)
        assert slots.colors == [FAULT_COLOR, FAULT_COLOR, EMPTY_COLOR]

    def test_hit_recolors_slot(self) -> None:
        """A hit should mark the page's slot green."""
        slots, _ = self._run(3, [7, 0, 7])
        assert slots.colors[0] == HIT_COLOR

    def test_eviction_reuses_freed_slot(self) -> None:
        """A replacement page lands in the evicted page's slot."""
        slots, sim = self._run(3, [7, 0, 1, 2])
        assert slots.occupied() == {0: 2, 1: 0, 2: 1}
        assert sorted(slots.occupied().values()) == sorted(sim.frames())

    def test_classic_trace_board(self) -> None:
        """The board should hold the same pages as the simulator."""
        slots, sim = self._run(DEFAULT_FRAME_SIZE, DEFAULT_REFERENCES)
        assert slots.occupied() == {0: 2, 1: 4, 2: 3}
        assert sorted(slots.occupied().values()) == sorted(sim.frames())

    def test_none_page_occupies_a_slot(self) -> None:
        """A resident page None is shown as a page, not a free slot."""
        slots, sim = self._run(2, [None, 1, None])
        assert sim.frames() == [None, 1]
        assert slots.occupied() == {0: None, 1: 1}
        assert slots.labels() == ["F0: PNone", "F1: P1"]
        assert slots.colors == [HIT_COLOR, FAULT_COLOR]

    def test_none_page_eviction_frees_its_slot(self) -> None:
        """Evicting page None should clear the slot it was in."""
        slots, sim = self._run(1, [None, 1])
        assert sim.frames() == [1]
        assert slots.occupied() == {0: 1}
        assert slots.colors == [FAULT_COLOR]

    def test_labels(self) -> None:
        """Labels should name the frame and its page."""
        slots, _ = self._run(2, [5])
        assert slots.labels() == ["F0: P5", "F1: Free"]


# -- Figures ------------------------------------------------------------------


class TestFigures:
    """Verify the Plotly charts."""

    def test_frame_figure(self) -> None:
        """One bar per slot, labelled and colored."""
        slots = FrameSlots(2)
        PageReplacementSimulator(2, observers=[slots]).run([3])
        fig = frame_figure(slots)
        bar = fig.data[0]
        assert list(bar.text) == ["F0: P3", "F1: Free"]
        assert list(bar.marker.color) == [FAULT_COLOR, EMPTY_COLOR]

    def test_stats_figure(self) -> None:
        """Hits and faults should be plotted side by side."""
        fig = stats_figure(Stats(hits=2, faults=6))
        bar = fig.data[0]
        assert list(bar.x) == ["Hits", "Faults"]
        assert list(bar.y) == [2, 6]
        assert fig.layout.title.text == "Hits vs Faults"
