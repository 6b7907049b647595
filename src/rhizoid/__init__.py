import logging

from .core import (
    Regular,
    Inhibitor,
    INHIBITOR,
    Arc,
    Transition,
    Net,
    NetBuilder,
    Runner,
    run,
    RhizoidError,
    InvalidArcError,
    InvalidMarkingError,
    UnknownPlaceError,
    StepLimitExceeded,
)

# Library should not configure root logging; be quiet by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Regular",
    "Inhibitor",
    "INHIBITOR",
    "Arc",
    "Transition",
    "Net",
    "NetBuilder",
    "Runner",
    "run",
    "RhizoidError",
    "InvalidArcError",
    "InvalidMarkingError",
    "UnknownPlaceError",
    "StepLimitExceeded",
]
