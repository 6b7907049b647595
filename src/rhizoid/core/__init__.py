#!/usr/bin/env python3
"""
rhizoid.core - Petri nets with inhibitor arcs

Public API for defining nets, testing fireability and firing transitions.
"""

from .specs import (
    Regular,
    Inhibitor,
    INHIBITOR,
    Arc,
    as_arc,
    Transition,
    Net,
)

from .builder import NetBuilder

from .runtime import (
    FiringRecord,
    Runner,
    run,
    validate_marking,
)

from .exceptions import (
    RhizoidError,
    InvalidArcError,
    InvalidMarkingError,
    UnknownPlaceError,
    StepLimitExceeded,
)

__all__ = [
    # Arcs
    'Regular',
    'Inhibitor',
    'INHIBITOR',
    'Arc',
    'as_arc',

    # Net structure
    'Transition',
    'Net',
    'NetBuilder',

    # Runtime
    'FiringRecord',
    'Runner',
    'run',
    'validate_marking',

    # Errors
    'RhizoidError',
    'InvalidArcError',
    'InvalidMarkingError',
    'UnknownPlaceError',
    'StepLimitExceeded',
]
