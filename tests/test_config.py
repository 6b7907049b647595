#!/usr/bin/env python3
"""Tests for declarative net descriptions (rhizoid.config)"""

import json

import pytest
from pydantic import ValidationError

from rhizoid import INHIBITOR, InvalidArcError, Regular, run
from rhizoid.config import NetConfig, TransitionConfig, load_net, load_net_json, parse_marking
from rhizoid.core.exceptions import InvalidMarkingError


DIVIDER = {
    "places": ["opa", "opb", "res", "ena", "sto"],
    "transitions": [
        {"name": "add", "pre": {"opa": 1, "opb": 1, "ena": "inhibitor"}, "post": {"sto": 1}},
        {"name": "rfl", "pre": {"ena": 1, "sto": 1}, "post": {"ena": 1, "opb": 1}},
        {"name": "ch1", "pre": {"opb": "inhibitor", "ena": "inhibitor"}, "post": {"ena": 1, "res": 1}},
        {"name": "ch2", "pre": {"ena": 1, "sto": "inhibitor"}},
    ],
    "initial": {"opa": 6, "opb": 2},
}


# ============================================================================
# Tests: Loading
# ============================================================================

def test_load_net_builds_engine_net():
    config = load_net(DIVIDER)
    net = config.to_net()

    assert net.places == {"opa", "opb", "res", "ena", "sto"}
    add = net.transition("add")
    assert add.preconditions == {"opa": Regular(1), "opb": Regular(1), "ena": INHIBITOR}
    assert add.postconditions == {"sto": Regular(1)}
    assert net.transition("ch2").postconditions == {}


def test_load_net_json_matches_dict():
    assert load_net_json(json.dumps(DIVIDER)) == load_net(DIVIDER)


def test_initial_marking_fills_missing_places():
    config = load_net(DIVIDER)
    assert config.initial_marking() == {"opa": 6, "opb": 2, "res": 0, "ena": 0, "sto": 0}


def test_loaded_divider_runs():
    config = load_net(DIVIDER)
    final = run(config.to_net(), config.initial_marking())
    assert final["res"] == 3
    assert final["opb"] == 2


# ============================================================================
# Tests: Validation
# ============================================================================

def test_undeclared_place_in_arc_is_rejected():
    with pytest.raises(ValidationError, match="undeclared place 'x'"):
        load_net({"places": ["a"], "transitions": [{"name": "t", "pre": {"x": 1}}]})


def test_undeclared_place_in_initial_marking_is_rejected():
    with pytest.raises(ValidationError):
        load_net({"places": ["a"], "initial": {"b": 1}})


def test_duplicate_place_is_rejected():
    with pytest.raises(ValidationError, match="declared twice"):
        load_net({"places": ["a", "a"]})


@pytest.mark.parametrize("arc", [0, -1, "inhibit", 1.5, True, None])
def test_bad_arc_values_are_rejected(arc):
    with pytest.raises(ValidationError):
        TransitionConfig(name="t", pre={"a": arc})


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        load_net({"places": [], "arcs": []})


def test_negative_initial_count_is_rejected():
    with pytest.raises(ValidationError):
        load_net({"places": ["a"], "initial": {"a": -1}})


def test_inhibitor_postcondition_surfaces_on_build():
    config = load_net({
        "places": ["a", "b"],
        "transitions": [{"name": "bad", "pre": {"a": 1}, "post": {"b": "inhibitor"}}],
    })
    with pytest.raises(InvalidArcError):
        config.to_net()


def test_config_is_frozen():
    config = NetConfig(places=["a"])
    with pytest.raises(ValidationError):
        config.places = ["b"]


# ============================================================================
# Tests: Markings
# ============================================================================

def test_parse_marking():
    assert parse_marking({"a": 0, "b": 3}) == {"a": 0, "b": 3}


@pytest.mark.parametrize("count", [-1, "3", 2.5, None])
def test_parse_marking_rejects_bad_counts(count):
    with pytest.raises(InvalidMarkingError):
        parse_marking({"a": count})
