#!/usr/bin/env python3
"""
Rhizoid - Runtime Layer

Sequential execution of a net: repeatedly pick an enabled transition and
fire it until the marking is dead (nothing is enabled). One transition
fires per step; there is no concurrency.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, Hashable, List, Mapping, Optional, Sequence, TypeVar
import logging
import random

from .exceptions import StepLimitExceeded
from .specs import Net, Transition, validate_marking

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)

Chooser = Callable[[Sequence[Transition]], Transition]

DEFAULT_MAX_STEPS = 10_000


@dataclass(frozen=True)
class FiringRecord:
    """One step of a run. ``before`` and ``after`` are read-only snapshots."""
    step: int
    transition: str
    before: Mapping[Any, int]
    after: Mapping[Any, int]

    def __post_init__(self):
        object.__setattr__(self, "before", MappingProxyType(dict(self.before)))
        object.__setattr__(self, "after", MappingProxyType(dict(self.after)))

    def __hash__(self):
        return hash((
            self.step,
            self.transition,
            frozenset(self.before.items()),
            frozenset(self.after.items()),
        ))


class Runner(Generic[P]):
    """
    Drives a net from an initial marking.

    ``chooser`` picks which enabled transition fires when several are
    enabled; it receives them sorted by name. By default a
    ``random.Random(seed)`` choice is used, so a given seed always
    reproduces the same run.
    """

    def __init__(
        self,
        net: Net[P],
        marking: Mapping[P, int],
        chooser: Optional[Chooser] = None,
        seed: Optional[int] = None,
    ):
        self.net = net
        self._initial = validate_marking(marking)
        self.marking: Dict[P, int] = dict(self._initial)
        self.history: List[FiringRecord] = []
        self._rng = random.Random(seed)
        self._seed = seed
        self._chooser = chooser or self._rng.choice

    @property
    def initial_marking(self) -> Dict[P, int]:
        return dict(self._initial)

    @property
    def is_dead(self) -> bool:
        """True when no transition is enabled in the current marking"""
        return not self.net.fireable(self.marking)

    def step(self) -> Optional[Transition[P]]:
        """Fire one enabled transition. Returns it, or None if the marking is dead."""
        enabled = self.net.fireable(self.marking)
        if not enabled:
            return None

        transition = self._chooser(enabled)
        after = transition.fire(self.marking)
        if after is None:
            # A custom chooser returned something that is not enabled
            raise ValueError(f"Chooser picked non-fireable transition {transition.name!r}")

        record = FiringRecord(len(self.history) + 1, transition.name, self.marking, after)
        self.history.append(record)
        logger.debug("Step %d: %s -> %r", record.step, transition.name, after)
        self.marking = after
        return transition

    def run(self, max_steps: int = DEFAULT_MAX_STEPS) -> Dict[P, int]:
        """Step until the marking is dead and return it.

        Raises ``StepLimitExceeded`` if more than ``max_steps`` transitions
        fire during this call; the runner keeps the marking it reached.
        """
        for _ in range(max_steps):
            if self.step() is None:
                logger.info("Dead marking reached after %d steps: %r", len(self.history), self.marking)
                return dict(self.marking)

        if self.is_dead:
            logger.info("Dead marking reached after %d steps: %r", len(self.history), self.marking)
            return dict(self.marking)

        logger.warning("Step limit of %d reached without a dead marking", max_steps)
        raise StepLimitExceeded(max_steps, dict(self.marking))

    def reset(self):
        """Back to the initial marking, with an empty history"""
        self.marking = dict(self._initial)
        self.history.clear()
        self._rng.seed(self._seed)

    def __repr__(self):
        return f"Runner(steps={len(self.history)}, marking={self.marking!r})"


def run(
    net: Net[P],
    marking: Mapping[P, int],
    max_steps: int = DEFAULT_MAX_STEPS,
    chooser: Optional[Chooser] = None,
    seed: Optional[int] = None,
) -> Dict[P, int]:
    """Run ``net`` from ``marking`` to a dead marking"""
    return Runner(net, marking, chooser=chooser, seed=seed).run(max_steps)
