#!/usr/bin/env python3
"""
Rhizoid exceptions.

All Rhizoid exceptions inherit from RhizoidError for easy catching.

A transition that is simply not enabled is not an error: ``Transition.fire``
returns ``None`` in that case.
"""

from typing import Any, Dict, Optional


class RhizoidError(Exception):
    """Base exception for all Rhizoid errors."""


class InvalidArcError(RhizoidError, ValueError):
    """Malformed arc, or an inhibitor arc used as a postcondition."""


class InvalidMarkingError(RhizoidError, ValueError):
    """A marking holds a negative or non-integer token count."""


class UnknownPlaceError(RhizoidError, KeyError):
    """Firing would write to a place the marking does not track."""

    def __init__(self, place: Any, transition: Optional[str] = None):
        self.place = place
        self.transition = transition
        if transition is None:
            msg = f"Place {place!r} is not tracked by the marking"
        else:
            msg = f"Transition {transition!r} writes place {place!r}, which is not tracked by the marking"
        super().__init__(msg)

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class StepLimitExceeded(RhizoidError):
    """A run did not reach a dead marking within the allowed number of steps."""

    def __init__(self, max_steps: int, marking: Dict[Any, int]):
        self.max_steps = max_steps
        self.marking = marking
        super().__init__(f"No dead marking reached after {max_steps} steps")
