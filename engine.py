"""
FIFO Page Replacement Engine

Core simulation of the First-In-First-Out page replacement policy. The engine
tracks which pages are resident in a fixed number of frames, classifies every
reference as a hit or a fault, and evicts the oldest loaded page when memory
is full.

Rendering is left to observers: every processed reference is reported to the
registered callbacks as a StepOutcome, and the engine never depends on them.
"""

# =============================================================================
# IMPORTS
# =============================================================================

from collections import OrderedDict           # Hash index + insertion order
import operator                               # Accept any integer-like frame count
from dataclasses import dataclass, field      # For clean data class definitions
from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple


# =============================================================================
# ERRORS
# =============================================================================

class InvalidConfiguration(ValueError):
    """Raised when a simulator is constructed with an unusable frame size."""


# =============================================================================
# DATA TYPES
# =============================================================================

class AccessKind:
    """
    Classification of a single page reference.

    HIT:   the page was already resident in a frame
    FAULT: the page had to be loaded (possibly evicting the oldest page)
    """
    HIT = "HIT"
    FAULT = "FAULT"


@dataclass(frozen=True)
class StepOutcome:
    """
    Result of processing one page reference.

    Attributes:
        page (Hashable): The referenced page identifier
        kind (str): AccessKind.HIT or AccessKind.FAULT
        evicted (Optional[Hashable]): Page removed to make room; only
            meaningful when has_evicted is True, since None is a valid page
        frames (Tuple[Hashable, ...]): Resident pages after the step, oldest first
        has_evicted (bool): True if the step removed a resident page
    """
    page: Hashable
    kind: str
    evicted: Optional[Hashable] = None
    frames: Tuple[Hashable, ...] = field(default_factory=tuple)
    has_evicted: bool = False

    @property
    def is_hit(self) -> bool:
        return self.kind == AccessKind.HIT

    @property
    def is_fault(self) -> bool:
        return self.kind == AccessKind.FAULT


@dataclass(frozen=True)
class Stats:
    """
    Hit and fault counters at one point in a simulation.

    Attributes:
        hits (int): Number of references served from memory
        faults (int): Number of references that required a page load
    """
    hits: int = 0
    faults: int = 0

    @property
    def total_refs(self) -> int:
        return self.hits + self.faults

    @property
    def hit_ratio(self) -> float:
        total = self.total_refs
        return round(self.hits / total, 4) if total > 0 else 0.0

    @property
    def fault_rate(self) -> float:
        total = self.total_refs
        return round(self.faults / total, 4) if total > 0 else 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "hits": self.hits,
            "faults": self.faults,
            "hit_ratio": self.hit_ratio,
            "fault_rate": self.fault_rate,
            "total_refs": self.total_refs,
        }

    def __str__(self):
        return f"Hits: {self.hits} | Faults: {self.faults}"


Observer = Callable[[StepOutcome], None]


# =============================================================================
# FRAME SET - Insertion-ordered set of resident pages
# =============================================================================

class FrameSet:
    """
    Bounded set of resident pages ordered by load time (oldest first).

    Membership, insertion of the newest page and removal of the oldest page
    are all O(1). Hits never reorder the set.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._pages: "OrderedDict[Hashable, None]" = OrderedDict()

    def __contains__(self, page) -> bool:
        return page in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._pages)

    def __repr__(self):
        return f"FrameSet({list(self._pages)}, capacity={self.capacity})"

    @property
    def is_full(self) -> bool:
        return len(self._pages) >= self.capacity

    def insert_newest(self, page: Hashable):
        """
        Add a page as the most recently loaded member.

        Raises:
            ValueError: If the page is already resident or the set is full
        """
        if page in self._pages:
            raise ValueError(f"Page {page!r} is already resident")
        if self.is_full:
            raise ValueError("Frame set is full")
        self._pages[page] = None

    def remove_oldest(self) -> Hashable:
        """
        Remove and return the page that has been resident longest.

        Raises:
            IndexError: If no page is resident
        """
        if not self._pages:
            raise IndexError("remove_oldest from an empty frame set")
        page, _ = self._pages.popitem(last=False)
        return page


# =============================================================================
# SIMULATOR - Core FIFO Engine
# =============================================================================

class PageReplacementSimulator:
    """
    FIFO page replacement simulation over a fixed number of frames.

    Each call to step() processes one reference: a resident page is a hit and
    leaves the frame order untouched; any other page is a fault that loads the
    page as the newest member, evicting the oldest page first when every frame
    is occupied. Observers are called synchronously with the outcome before
    step() returns.

    Attributes:
        frame_size (int): Number of frames in memory
        hits (int): Count of page hits
        faults (int): Count of page faults
        event_log (List[str]): Log of every processed reference
    """

    def __init__(self, frame_size: int, references: Iterable[Hashable] = (),
                 observers: Optional[Iterable[Observer]] = None):
        """
        Create a simulator with empty frames and zeroed counters.

        Args:
            frame_size (int): Number of frames, must be a positive integer
            references (Iterable[Hashable]): Reference sequence used by run()
                when it is called without arguments
            observers (Optional[Iterable[Observer]]): Callbacks to register

        Raises:
            InvalidConfiguration: If frame_size is not a positive integer
        """
        # bool is an int subclass but never a meaningful frame count
        if isinstance(frame_size, bool):
            raise InvalidConfiguration(f"frame_size must be an integer, got {frame_size!r}")
        try:
            frame_size = operator.index(frame_size)
        except TypeError:
            raise InvalidConfiguration(f"frame_size must be an integer, got {frame_size!r}") from None
        if frame_size <= 0:
            raise InvalidConfiguration(f"frame_size must be positive, got {frame_size}")

        self.frame_size = frame_size
        self._references: Tuple[Hashable, ...] = tuple(references)
        self._frames = FrameSet(frame_size)

        # Statistics counters
        self.hits = 0
        self.faults = 0

        self.event_log: List[str] = []
        self._observers: List[Observer] = list(observers or [])

    # =========================================================================
    # OBSERVERS
    # =========================================================================

    def subscribe(self, observer: Observer):
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer):
        """
        Stop notifying an observer.

        Raises:
            ValueError: If the observer was never subscribed
        """
        self._observers.remove(observer)

    def _notify(self, outcome: StepOutcome):
        for observer in list(self._observers):
            observer(outcome)

    # =========================================================================
    # SIMULATION
    # =========================================================================

    @property
    def references(self) -> Tuple[Hashable, ...]:
        return self._references

    def step(self, page: Hashable) -> StepOutcome:
        """
        Process a single page reference.

        Args:
            page (Hashable): Page identifier being referenced

        Returns:
            StepOutcome: Hit/fault classification, evicted page and the
                resulting frame contents
        """
        # ----- PAGE HIT -----
        if page in self._frames:
            self.hits += 1
            self.event_log.append(f"Hit: Page {page}")
            outcome = StepOutcome(page, AccessKind.HIT, None, tuple(self._frames))
            self._notify(outcome)
            return outcome

        # ----- PAGE FAULT -----
        self.faults += 1
        self.event_log.append(f"Fault: Page {page} not in memory")

        evicted = None
        has_evicted = self._frames.is_full
        if has_evicted:
            evicted = self._frames.remove_oldest()
            self.event_log.append(f"Evicting: Page {evicted}")

        self._frames.insert_newest(page)
        self.event_log.append(f"Loaded: Page {page}")

        outcome = StepOutcome(page, AccessKind.FAULT, evicted, tuple(self._frames), has_evicted)
        self._notify(outcome)
        return outcome

    def run(self, references: Optional[Iterable[Hashable]] = None) -> List[StepOutcome]:
        """
        Step through a sequence of references in order.

        Args:
            references (Optional[Iterable[Hashable]]): Pages to process,
                defaults to the sequence given at construction

        Returns:
            List[StepOutcome]: One outcome per reference, in input order
        """
        if references is None:
            references = self._references
        return [self.step(page) for page in references]

    # =========================================================================
    # QUERIES
    # =========================================================================

    def frames(self) -> List[Hashable]:
        """Resident pages, oldest first."""
        return list(self._frames)

    def stats(self) -> Stats:
        return Stats(self.hits, self.faults)
