"""Numeric spacing helpers and sweep tooling for experiment code.

Besides its own generators, the package re-exports ``pipe``/``compose`` from
toolz and ``here`` from pyprojroot so experiment scripts need one import.
"""

from pyprojroot.here import here
from toolz import compose, pipe

from labutils.core.config import LabConfig
from labutils.core.errors import InvalidArgumentError, LabUtilsError
from labutils.core.logging import setup_logging
from labutils.spacing import ParameterGrid, ParameterSpace, geomspace, logspace

__all__ = [
    "logspace",
    "geomspace",
    "ParameterSpace",
    "ParameterGrid",
    "LabConfig",
    "InvalidArgumentError",
    "LabUtilsError",
    "setup_logging",
    "pipe",
    "compose",
    "here",
]
