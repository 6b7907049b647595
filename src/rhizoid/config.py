#!/usr/bin/env python3
"""
Declarative net descriptions.

A net can be described as plain data (a dict, or JSON text) and turned into
an engine ``Net``. Places are named by strings; an arc is either a positive
int (regular arc weight) or the string ``"inhibitor"``:

    {
        "places": ["opa", "opb", "res", "ena", "sto"],
        "transitions": [
            {"name": "add", "pre": {"opa": 1, "opb": 1, "ena": "inhibitor"}, "post": {"sto": 1}}
        ],
        "initial": {"opa": 6, "opb": 2}
    }

Unlike ``Net`` itself, a description is checked for arcs that mention
undeclared places.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, ValidationError, model_validator

from .core.exceptions import InvalidMarkingError
from .core.specs import INHIBITOR, Arc, Net, Regular, Transition

ArcValue = Union[Annotated[StrictInt, Field(gt=0)], Literal["inhibitor"]]

_marking_adapter = TypeAdapter(Dict[str, Annotated[StrictInt, Field(ge=0)]])


def _to_arc(value: ArcValue) -> Arc:
    if value == "inhibitor":
        return INHIBITOR
    return Regular(value)


class TransitionConfig(BaseModel):
    """One transition of a net description"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    pre: Dict[str, ArcValue] = Field(default_factory=dict)
    post: Dict[str, ArcValue] = Field(default_factory=dict)

    def to_transition(self) -> Transition[str]:
        """Build the engine transition; an inhibitor postcondition raises ``InvalidArcError``"""
        return Transition(
            self.name,
            {place: _to_arc(arc) for place, arc in self.pre.items()},
            {place: _to_arc(arc) for place, arc in self.post.items()},
        )


class NetConfig(BaseModel):
    """A whole net, plus an optional initial marking"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    places: List[str]
    transitions: List[TransitionConfig] = Field(default_factory=list)
    initial: Dict[str, Annotated[StrictInt, Field(ge=0)]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_places(self) -> "NetConfig":
        declared = set()
        for place in self.places:
            if place in declared:
                raise ValueError(f"place {place!r} is declared twice")
            declared.add(place)

        for transition in self.transitions:
            for place in list(transition.pre) + list(transition.post):
                if place not in declared:
                    raise ValueError(f"transition {transition.name!r} references undeclared place {place!r}")

        for place in self.initial:
            if place not in declared:
                raise ValueError(f"initial marking references undeclared place {place!r}")
        return self

    def to_net(self) -> Net[str]:
        return Net(
            frozenset(self.places),
            frozenset(t.to_transition() for t in self.transitions),
        )

    def initial_marking(self) -> Dict[str, int]:
        """Every declared place, at 0 unless ``initial`` says otherwise"""
        marking = {place: 0 for place in self.places}
        marking.update(self.initial)
        return marking


def load_net(data: Mapping[str, Any]) -> NetConfig:
    """Validate a net description given as a mapping. Raises pydantic ``ValidationError``."""
    return NetConfig.model_validate(data)


def load_net_json(text: Union[str, bytes]) -> NetConfig:
    """Validate a net description given as JSON text"""
    return NetConfig.model_validate_json(text)


def parse_marking(data: Mapping[str, Any]) -> Dict[str, int]:
    """Validate a ``{place: count}`` mapping of non-negative ints"""
    try:
        return _marking_adapter.validate_python(dict(data))
    except ValidationError as e:
        raise InvalidMarkingError(f"Invalid marking: {e}") from e
