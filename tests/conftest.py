"""Shared fixtures for rhizoid tests"""

import pytest

from rhizoid import INHIBITOR, NetBuilder


@pytest.fixture
def producer_net():
    """Two-stage net: start is blocked while busy holds a token."""
    builder = NetBuilder("producer")
    idle, busy, done = builder.places("idle", "busy", "done")
    builder.transition("start", pre={idle: 1, busy: INHIBITOR}, post={busy: 1})
    builder.transition("finish", pre={busy: 1}, post={done: 1})
    return builder.build()


@pytest.fixture
def producer_marking(producer_net):
    return producer_net.marking({"idle": 2})
