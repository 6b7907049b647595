"""Example nets built on rhizoid.core"""

from .divider import (
    DividerPlace,
    create_divider_model,
    create_divider_initial_marking,
    divide,
)

__all__ = [
    "DividerPlace",
    "create_divider_model",
    "create_divider_initial_marking",
    "divide",
]
