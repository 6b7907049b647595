#!/usr/bin/env python3
"""Tests for programmatic net building using the NetBuilder API"""

import pytest

from rhizoid import INHIBITOR, InvalidArcError, Net, NetBuilder, Regular, Transition


# ============================================================================
# Tests: Declaring Places
# ============================================================================

def test_place_returns_the_place():
    builder = NetBuilder("n")
    assert builder.place("a") == "a"
    assert builder.places("b", "c") == ["b", "c"]
    assert builder.declared_places == ["a", "b", "c"]


def test_redeclaring_a_place_is_harmless():
    builder = NetBuilder()
    builder.place("a")
    builder.place("a")
    assert builder.declared_places == ["a"]
    assert builder.build().places == {"a"}


# ============================================================================
# Tests: Declaring Transitions
# ============================================================================

def test_transition_is_created_and_recorded():
    builder = NetBuilder()
    a, b = builder.places("a", "b")
    t = builder.transition("move", pre={a: 1}, post={b: Regular(2)})

    assert isinstance(t, Transition)
    assert t.preconditions == {"a": Regular(1)}
    assert t.postconditions == {"b": Regular(2)}
    assert builder.declared_transitions == [t]


def test_inhibitor_postcondition_fails_at_declaration():
    builder = NetBuilder()
    a, b = builder.places("a", "b")
    with pytest.raises(InvalidArcError):
        builder.transition("bad", pre={a: 1}, post={b: INHIBITOR})
    assert builder.declared_transitions == []


def test_transition_without_arcs():
    builder = NetBuilder()
    t = builder.transition("noop")
    assert t.is_fireable({})


# ============================================================================
# Tests: Building
# ============================================================================

def test_build_returns_immutable_net(producer_net):
    assert isinstance(producer_net, Net)
    assert producer_net.places == {"idle", "busy", "done"}
    assert {t.name for t in producer_net.transitions} == {"start", "finish"}


def test_build_twice_gives_equal_nets():
    builder = NetBuilder()
    builder.place("a")
    builder.transition("t", pre={"a": 1})
    assert builder.build() == builder.build()


def test_builder_repr():
    builder = NetBuilder("demo")
    builder.places("a", "b")
    builder.transition("t")
    assert repr(builder) == "NetBuilder('demo', places=2, transitions=1)"
