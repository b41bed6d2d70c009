"""Log/geometric sequence generators and parameter sweeps built on them."""

from labutils.spacing.sequences import geomspace, logspace
from labutils.spacing.parameter import ParameterGrid, ParameterSpace

__all__ = ["logspace", "geomspace", "ParameterSpace", "ParameterGrid"]
