#!/usr/bin/env python3
"""
Rhizoid - Specification Layer

Core data structures of a Petri net extended with inhibitor arcs: arcs,
transitions and the net that groups them. Everything here is immutable.
Markings are plain ``{place: count}`` mappings owned by the caller; firing
never mutates them and always returns a fresh dict.

Places are opaque: any hashable value works (strings, enum members, ...).
A place missing from a marking reads as holding 0 tokens.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Generic, Hashable, Iterable, List, Mapping, Optional, TypeVar, Union
import logging

from .exceptions import InvalidArcError, InvalidMarkingError, UnknownPlaceError

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)


@dataclass(frozen=True)
class Regular:
    """Arc that consumes (pre) or produces (post) ``weight`` tokens"""
    weight: int = 1

    def __post_init__(self):
        # bool is an int subclass, but Regular(True) is almost certainly a typo
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidArcError(f"Arc weight must be an int, got {self.weight!r}")
        if self.weight < 1:
            raise InvalidArcError(f"Arc weight must be positive, got {self.weight}")

    def __repr__(self):
        return f"Regular({self.weight})"


@dataclass(frozen=True)
class Inhibitor:
    """Precondition-only arc: the transition is blocked while the place holds tokens"""

    def __repr__(self):
        return "Inhibitor()"


INHIBITOR = Inhibitor()

Arc = Union[Regular, Inhibitor]


def as_arc(value: Any) -> Arc:
    """Normalize an arc value. A bare positive int is shorthand for ``Regular(int)``."""
    if isinstance(value, (Regular, Inhibitor)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Regular(value)
    raise InvalidArcError(f"Expected Regular, Inhibitor or a positive int, got {value!r}")


@dataclass(frozen=True, eq=False)
class Transition(Generic[P]):
    """
    An atomic state change: ``preconditions`` guard and consume,
    ``postconditions`` produce.

    Preconditions may mix regular and inhibitor arcs. Postconditions must all
    be regular; an inhibitor postcondition raises ``InvalidArcError`` here,
    so a malformed transition can never exist.

    ``name`` is for display only and need not be unique.
    """
    name: str
    preconditions: Mapping[P, Arc] = field(default_factory=dict)
    postconditions: Mapping[P, Arc] = field(default_factory=dict)

    def __post_init__(self):
        pre = {place: as_arc(arc) for place, arc in dict(self.preconditions or {}).items()}
        post = {place: as_arc(arc) for place, arc in dict(self.postconditions or {}).items()}

        for place, arc in post.items():
            if isinstance(arc, Inhibitor):
                raise InvalidArcError(
                    f"Transition {self.name!r}: inhibitor arc on postcondition place {place!r}"
                )

        # Read-only views over private copies; the caller's dicts are never aliased
        object.__setattr__(self, "preconditions", MappingProxyType(pre))
        object.__setattr__(self, "postconditions", MappingProxyType(post))

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return (
            self.name == other.name
            and dict(self.preconditions) == dict(other.preconditions)
            and dict(self.postconditions) == dict(other.postconditions)
        )

    def __hash__(self):
        return hash((
            self.name,
            frozenset(self.preconditions.items()),
            frozenset(self.postconditions.items()),
        ))

    def __repr__(self):
        return f"Transition({self.name!r}, pre={dict(self.preconditions)!r}, post={dict(self.postconditions)!r})"

    def consumed_places(self) -> FrozenSet[P]:
        """Places this transition takes tokens from"""
        return frozenset(p for p, arc in self.preconditions.items() if isinstance(arc, Regular))

    def produced_places(self) -> FrozenSet[P]:
        """Places this transition puts tokens into"""
        return frozenset(self.postconditions)

    def inhibitors(self) -> FrozenSet[P]:
        """Places that must be empty for this transition to fire"""
        return frozenset(p for p, arc in self.preconditions.items() if isinstance(arc, Inhibitor))

    def is_fireable(self, marking: Mapping[P, int]) -> bool:
        """Whether every precondition holds in ``marking`` (absent places count as 0)."""
        for place, arc in self.preconditions.items():
            count = marking.get(place, 0)
            if isinstance(arc, Regular):
                if count < arc.weight:
                    return False
            elif count != 0:
                return False
        return True

    def fire(self, marking: Mapping[P, int]) -> Optional[Dict[P, int]]:
        """
        Fire this transition from ``marking``.

        Returns the new marking, or ``None`` if the transition is not
        fireable. ``marking`` itself is left untouched.

        Raises ``UnknownPlaceError`` when a postcondition names a place the
        marking does not track; nothing is applied in that case.
        """
        if not self.is_fireable(marking):
            logger.debug("Transition %r is not fireable", self.name)
            return None

        # Regular preconditions passed the check with weight >= 1, so their
        # places are present. Only productions can hit an untracked place.
        for place in self.postconditions:
            if place not in marking:
                raise UnknownPlaceError(place, self.name)

        new_marking = dict(marking)
        for place, arc in self.preconditions.items():
            if isinstance(arc, Regular):
                new_marking[place] -= arc.weight
        for place, arc in self.postconditions.items():
            new_marking[place] += arc.weight

        logger.debug("Fired %r", self.name)
        return new_marking


def validate_marking(marking: Mapping[Any, Any]) -> Dict[Any, int]:
    """Return a copy of ``marking`` after checking every count is a non-negative int"""
    checked = {}
    for place, count in marking.items():
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidMarkingError(f"Token count for {place!r} must be an int, got {count!r}")
        if count < 0:
            raise InvalidMarkingError(f"Token count for {place!r} is negative: {count}")
        checked[place] = count
    return checked


def _transition_order(transition: Transition) -> tuple:
    return (transition.name, repr(transition))


@dataclass(frozen=True)
class Net(Generic[P]):
    """
    Immutable pair of a place vocabulary and a set of transitions.

    ``places`` documents the domain; the net does not check that transition
    arcs only mention declared places (see ``referenced_places``).
    """
    places: FrozenSet[P] = frozenset()
    transitions: FrozenSet[Transition[P]] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "places", frozenset(self.places))
        object.__setattr__(self, "transitions", frozenset(self.transitions))

    def transition(self, name: str) -> Transition[P]:
        """Look up a transition by name (first by sort order if names repeat)"""
        for transition in sorted(self.transitions, key=_transition_order):
            if transition.name == name:
                return transition
        raise KeyError(name)

    def fireable(self, marking: Mapping[P, int]) -> List[Transition[P]]:
        """Transitions enabled in ``marking``, sorted by name"""
        return sorted(
            (t for t in self.transitions if t.is_fireable(marking)),
            key=_transition_order,
        )

    def referenced_places(self) -> FrozenSet[P]:
        """Every place mentioned by some arc, declared or not"""
        places = set()
        for transition in self.transitions:
            places.update(transition.preconditions)
            places.update(transition.postconditions)
        return frozenset(places)

    def empty_marking(self) -> Dict[P, int]:
        """A marking tracking every declared place with 0 tokens"""
        return {place: 0 for place in self.places}

    def marking(self, tokens: Optional[Mapping[P, int]] = None) -> Dict[P, int]:
        """Build a marking over the declared places, overriding counts from ``tokens``."""
        marking = self.empty_marking()
        for place, count in validate_marking(tokens or {}).items():
            if place not in marking:
                raise UnknownPlaceError(place)
            marking[place] = count
        return marking

    @classmethod
    def from_transitions(cls, transitions: Iterable[Transition[P]]) -> "Net[P]":
        """Build a net whose places are exactly those referenced by ``transitions``"""
        undeclared = cls(frozenset(), transitions)
        return cls(undeclared.referenced_places(), undeclared.transitions)
