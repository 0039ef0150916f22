"""
Three-state machine turning calendar taps into a check-in/check-out range.

States are named by occupancy: EMPTY (nothing picked), ANCHORED (check-in
picked) and COMPLETE (check-in strictly before check-out). Each state is
an immutable value; ``next_selection`` is the single pure transition.

Usage:
    selector = DateRangeSelector(gate)
    selector.select_date(date(2026, 11, 2))
    selector.select_date(date(2026, 11, 6))
    assert selector.phase == SelectionPhase.COMPLETE
"""

import datetime as dt
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Union

from boarding.selection.availability_gate import AvailabilityGate, is_selectable
from boarding.utils import to_calendar_day

logger = logging.getLogger(__name__)


class SelectionPhase(str, Enum):
    EMPTY = "empty"
    ANCHORED = "anchored"
    COMPLETE = "complete"


@dataclass(frozen=True)
class DateRange:
    """Plain start/end view of a selection."""
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and not self.start < self.end:
            raise ValueError(f"start {self.start} must be before end {self.end}")

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class EmptyRange:
    phase: ClassVar[SelectionPhase] = SelectionPhase.EMPTY

    def to_date_range(self) -> DateRange:
        return DateRange()


@dataclass(frozen=True)
class AnchoredRange:
    start: dt.date
    phase: ClassVar[SelectionPhase] = SelectionPhase.ANCHORED

    def to_date_range(self) -> DateRange:
        return DateRange(start=self.start)


@dataclass(frozen=True)
class CompleteRange:
    start: dt.date
    end: dt.date
    phase: ClassVar[SelectionPhase] = SelectionPhase.COMPLETE

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise ValueError(f"start {self.start} must be before end {self.end}")

    def to_date_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


SelectionState = Union[EmptyRange, AnchoredRange, CompleteRange]


def next_selection(
    state: SelectionState,
    tapped: dt.date,
    *,
    gate: AvailabilityGate,
    today: dt.date,
) -> SelectionState:
    """
    Apply one tap to a selection state.

    Past, full and unknown days leave the state untouched. A tap on or
    before the anchor moves the anchor; a tap after it completes the
    range; any tap on a complete range starts a new one.
    """
    if not is_selectable(gate, tapped, today):
        return state

    if isinstance(state, EmptyRange):
        return AnchoredRange(start=tapped)
    if isinstance(state, AnchoredRange):
        if tapped > state.start:
            return CompleteRange(start=state.start, end=tapped)
        return AnchoredRange(start=tapped)
    return AnchoredRange(start=tapped)


@dataclass
class SelectionEntry:
    """Recorded history entry for an accepted tap or a clear."""
    phase: SelectionPhase
    tapped: Optional[dt.date] = None


class DateRangeSelector:
    """
    Owns the selection state of one booking session.

    Rejected taps are silent no-ops: the caller sees an unchanged state,
    never an exception.
    """

    def __init__(
        self,
        gate: AvailabilityGate,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        self._gate = gate
        self._today = today
        self._state: SelectionState = EmptyRange()
        self._history: list[SelectionEntry] = [SelectionEntry(phase=SelectionPhase.EMPTY)]

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def date_range(self) -> DateRange:
        return self._state.to_date_range()

    @property
    def is_complete(self) -> bool:
        return isinstance(self._state, CompleteRange)

    def select_date(self, tapped: Union[dt.date, dt.datetime]) -> SelectionState:
        """Apply a tap and return the resulting state."""
        day = to_calendar_day(tapped)
        old_state = self._state
        new_state = next_selection(old_state, day, gate=self._gate, today=self._today())

        if new_state is old_state:
            logger.debug("Tap on %s rejected (past, full or unknown)", day.isoformat())
            return old_state

        self._state = new_state
        self._history.append(SelectionEntry(phase=new_state.phase, tapped=day))
        logger.debug(
            "Selection: %s -> %s (tapped %s)",
            old_state.phase.value, new_state.phase.value, day.isoformat(),
        )
        return new_state

    def clear(self) -> SelectionState:
        """Reset to EMPTY from any state. Does not consult the gate."""
        self._state = EmptyRange()
        self._history.append(SelectionEntry(phase=SelectionPhase.EMPTY))
        return self._state

    def is_in_range(self, day: dt.date) -> bool:
        """Strictly between check-in and check-out of a complete range."""
        if not isinstance(self._state, CompleteRange):
            return False
        return self._state.start < to_calendar_day(day) < self._state.end

    def is_range_start(self, day: dt.date) -> bool:
        start = self.date_range.start
        return start is not None and start == to_calendar_day(day)

    def is_range_end(self, day: dt.date) -> bool:
        end = self.date_range.end
        return end is not None and end == to_calendar_day(day)

    def get_history(self) -> list[SelectionEntry]:
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Ordered phase names visited, starting with the initial EMPTY."""
        return [entry.phase.value for entry in self._history]
