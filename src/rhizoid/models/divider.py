#!/usr/bin/env python3
"""
Natural-number divider.

Computes ``opa // opb`` by repeated subtraction:

- ``add`` moves one token out of both ``opa`` and ``opb`` into ``sto``,
  while ``ena`` is empty.
- ``ch1`` fires once ``opb`` is exhausted: one more unit of the quotient
  goes to ``res`` and ``ena`` is raised.
- ``rfl`` refills ``opb`` from ``sto`` while ``ena`` is raised.
- ``ch2`` lowers ``ena`` once ``sto`` is empty, starting the next round.

The run ends in a dead marking with ``res`` holding the quotient. When the
division is exact ``opb`` is back to its original value.
"""

from enum import Enum
from typing import Dict

from ..core import INHIBITOR, Net, NetBuilder, run


class DividerPlace(Enum):
    OPA = "opa"  # dividend, consumed one per subtraction
    OPB = "opb"  # divisor
    RES = "res"  # quotient
    ENA = "ena"
    STO = "sto"  # divisor tokens taken during the current round

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


def create_divider_model() -> Net[DividerPlace]:
    builder = NetBuilder("divider")
    opa, opb, res, ena, sto = builder.places(*DividerPlace)

    builder.transition("add", pre={opa: 1, opb: 1, ena: INHIBITOR}, post={sto: 1})
    builder.transition("rfl", pre={ena: 1, sto: 1}, post={ena: 1, opb: 1})
    builder.transition("ch1", pre={opb: INHIBITOR, ena: INHIBITOR}, post={ena: 1, res: 1})
    builder.transition("ch2", pre={ena: 1, sto: INHIBITOR})

    return builder.build()


def create_divider_initial_marking(opa: int, opb: int) -> Dict[DividerPlace, int]:
    """Initial marking computing ``opa // opb``"""
    return {
        DividerPlace.OPA: opa,
        DividerPlace.OPB: opb,
        DividerPlace.RES: 0,
        DividerPlace.ENA: 0,
        DividerPlace.STO: 0,
    }


def divide(opa: int, opb: int, max_steps: int = 100_000) -> int:
    """Run the divider net and return the quotient.

    With ``opb == 0`` the net never reaches a dead marking (``ch1`` and
    ``ch2`` alternate forever), so that case is refused up front.
    """
    if opb == 0:
        raise ZeroDivisionError("divider net does not terminate for opb == 0")
    final = run(create_divider_model(), create_divider_initial_marking(opa, opb), max_steps=max_steps)
    return final[DividerPlace.RES]
