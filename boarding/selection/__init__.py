from boarding.selection.availability_gate import AvailabilityGate, is_selectable
from boarding.selection.date_range_selector import (
    AnchoredRange,
    CompleteRange,
    DateRange,
    DateRangeSelector,
    EmptyRange,
    SelectionPhase,
    SelectionState,
    next_selection,
)

__all__ = [
    "AvailabilityGate", "is_selectable",
    "DateRangeSelector", "DateRange", "SelectionPhase", "SelectionState",
    "EmptyRange", "AnchoredRange", "CompleteRange", "next_selection",
]
