from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import pandas as pd

from labutils.core.errors import InvalidArgumentError
from labutils.spacing.sequences import geomspace, logspace


@dataclass(frozen=True)
class ParameterSpace:
    """Defines a named parameter with a list of candidate values."""

    name: str
    values: list

    def __len__(self) -> int:
        return len(self.values)

    @staticmethod
    def logspace(name: str, start: float, stop: float, num: int = 50, *,
                 base: float = 10, endpoint: bool = True) -> ParameterSpace:
        """Create parameter space of values evenly spaced on a log scale."""
        return ParameterSpace(
            name=name, values=logspace(start, stop, num, base=base, endpoint=endpoint),
        )

    @staticmethod
    def geomspace(name: str, start: float, stop: float, num: int = 50, *,
                  endpoint: bool = True) -> ParameterSpace:
        """Create parameter space of values in geometric progression."""
        return ParameterSpace(
            name=name, values=geomspace(start, stop, num, endpoint=endpoint),
        )

    @staticmethod
    def choices(name: str, options: list) -> ParameterSpace:
        """Create parameter space from a list of discrete choices."""
        return ParameterSpace(name=name, values=list(options))


class ParameterGrid:
    """Cartesian product of several parameter spaces.

    Iterating yields one ``{name: value}`` dict per combination, in
    ``itertools.product`` order (the last space varies fastest).
    """

    def __init__(self, spaces: list[ParameterSpace]) -> None:
        names = [ps.name for ps in spaces]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InvalidArgumentError(f"duplicate parameter names: {duplicates}")
        self.spaces = list(spaces)

    @property
    def names(self) -> list[str]:
        return [ps.name for ps in self.spaces]

    def __len__(self) -> int:
        total = 1
        for ps in self.spaces:
            total *= len(ps)
        return total

    def __iter__(self) -> Iterator[dict]:
        names = self.names
        value_lists = [ps.values for ps in self.spaces]
        for combo in itertools.product(*value_lists):
            yield dict(zip(names, combo))

    def sample(self, n: int, seed: int | None = None) -> list[dict]:
        """Random sampling of parameter combinations (with replacement)."""
        if n < 0:
            raise InvalidArgumentError(f"n must be non-negative, got {n}")
        if n and not len(self):
            raise InvalidArgumentError("cannot sample from an empty grid")
        rng = np.random.default_rng(seed)
        names = self.names
        samples: list[dict] = []
        for _ in range(n):
            combo = tuple(ps.values[rng.integers(len(ps))] for ps in self.spaces)
            samples.append(dict(zip(names, combo)))
        return samples

    def to_frame(self) -> pd.DataFrame:
        """Return all combinations as a DataFrame, one column per parameter."""
        return pd.DataFrame(list(self), columns=self.names)
