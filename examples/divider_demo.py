#!/usr/bin/env python3
"""
Divider Net Demo

Builds the divider net, walks the first round by hand with
is_fireable/fire, then lets a Runner finish the computation.
"""

import logging
import sys

from rhizoid import Runner
from rhizoid.models.divider import DividerPlace, create_divider_initial_marking, create_divider_model

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(message)s')


def show(marking):
    return ", ".join(f"{place.value}={count}" for place, count in marking.items())


def main(opa: int = 6, opb: int = 2):
    print(f"Divider Net Demo: {opa} / {opb}")
    print("=" * 40)

    net = create_divider_model()
    marking = create_divider_initial_marking(opa, opb)
    print(f"initial: {show(marking)}")

    # Fire by hand until ch1 closes the first subtraction
    while True:
        enabled = net.fireable(marking)
        if not enabled:
            break
        transition = enabled[0]
        marking = transition.fire(marking)
        print(f"  {transition.name:>4} -> {show(marking)}")
        if transition.name == "ch1":
            break

    runner = Runner(net, marking)
    final = runner.run()
    print(f"final:   {show(final)} ({len(runner.history)} more steps)")
    print(f"result:  {opa} // {opb} = {final[DividerPlace.RES]}")


if __name__ == '__main__':
    args = [int(a) for a in sys.argv[1:3]]
    main(*args)
