#!/usr/bin/env python3
"""
Net From Configuration Demo

Describes a small mutual-exclusion net as JSON, validates it with
rhizoid.config and runs it. The inhibitor arc on ``cs`` keeps the two
workers from entering the critical section at the same time.
"""

from rhizoid import Runner
from rhizoid.config import load_net_json

NET_JSON = """
{
    "places": ["a_wait", "a_cs", "b_wait", "b_cs", "done"],
    "transitions": [
        {"name": "a_enter", "pre": {"a_wait": 1, "b_cs": "inhibitor"}, "post": {"a_cs": 1}},
        {"name": "a_leave", "pre": {"a_cs": 1}, "post": {"done": 1}},
        {"name": "b_enter", "pre": {"b_wait": 1, "a_cs": "inhibitor"}, "post": {"b_cs": 1}},
        {"name": "b_leave", "pre": {"b_cs": 1}, "post": {"done": 1}}
    ],
    "initial": {"a_wait": 2, "b_wait": 2}
}
"""


def main():
    config = load_net_json(NET_JSON)
    net = config.to_net()

    runner = Runner(net, config.initial_marking(), seed=42)
    final = runner.run()

    for record in runner.history:
        assert not (record.after["a_cs"] and record.after["b_cs"])
        print(f"{record.step:>2}: {record.transition}")
    print(f"final: {final}")


if __name__ == '__main__':
    main()
