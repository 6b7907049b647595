#!/usr/bin/env python3
"""
Rhizoid - Builder Layer

NetBuilder collects places and transitions and produces an immutable Net.
Transitions are validated as they are declared, so a malformed arc is
reported at the line that introduced it.
"""

from typing import Any, Dict, Generic, Hashable, List, Mapping, Optional, TypeVar

from .specs import Net, Transition

P = TypeVar("P", bound=Hashable)


class NetBuilder(Generic[P]):
    """Builder for constructing inhibitor nets"""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        # dict keeps declaration order for repr/debugging
        self._places: Dict[P, None] = {}
        self._transitions: List[Transition[P]] = []

    def place(self, place: P) -> P:
        """Declare a place and return it, so it can be bound to a local name.

        Declaring the same place twice is harmless.
        """
        self._places.setdefault(place, None)
        return place

    def places(self, *places: P) -> List[P]:
        """Declare several places at once"""
        return [self.place(p) for p in places]

    def transition(
        self,
        name: str,
        pre: Optional[Mapping[P, Any]] = None,
        post: Optional[Mapping[P, Any]] = None,
    ) -> Transition[P]:
        """Declare a transition.

        Arc values may be ``Regular``/``Inhibitor`` instances or a bare
        positive int as shorthand for ``Regular(n)``:

            builder.transition("add", pre={"opa": 1, "ena": INHIBITOR}, post={"sto": 1})

        Raises ``InvalidArcError`` right away for an inhibitor postcondition.
        """
        transition = Transition(name, pre or {}, post or {})
        self._transitions.append(transition)
        return transition

    @property
    def declared_places(self) -> List[P]:
        return list(self._places)

    @property
    def declared_transitions(self) -> List[Transition[P]]:
        return list(self._transitions)

    def build(self) -> Net[P]:
        """Freeze the declarations into a Net"""
        return Net(frozenset(self._places), frozenset(self._transitions))

    def __repr__(self):
        label = f"{self.name!r}, " if self.name else ""
        return f"NetBuilder({label}places={len(self._places)}, transitions={len(self._transitions)})"
