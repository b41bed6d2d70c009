"""Logarithmically and geometrically spaced sequences.

Both generators compute one step ratio and build the interior of the sequence
by repeated multiplication. The first element, and the last one when
``endpoint=True``, are computed in closed form, so they are exact while the
interior elements carry accumulated rounding error.
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any, Protocol

from labutils.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class SupportsGeometric(Protocol):
    """Scalar usable as a sequence element: floats, Fractions, numpy scalars,
    pint quantities, ..."""

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __pow__(self, other: Any) -> Any: ...


def _check_num(num: int) -> int:
    if isinstance(num, bool):
        raise InvalidArgumentError(f"num must be an integer, got {num!r}")
    try:
        num = operator.index(num)
    except TypeError:
        raise InvalidArgumentError(f"num must be an integer, got {num!r}") from None
    if num <= 1:
        raise InvalidArgumentError("num must be greater than 1")
    return num


def _promote(value: Any, like: Any) -> Any:
    """Express ``value`` in the numeric type (and unit) of ``like``."""
    if type(value) is type(like):
        units = getattr(like, "units", None)
        if units is None:
            return value
        if value.units != units:
            value = value.to(units)
        magnitude = _promote(value.magnitude, like.magnitude)
        if magnitude is value.magnitude:
            return value
        return type(like)(magnitude, units)
    if not isinstance(value, numbers.Number) or not isinstance(like, numbers.Number):
        return value
    # Never drop an imaginary part
    if isinstance(like, numbers.Real) and not isinstance(value, numbers.Real):
        return value
    return type(like)(value)


def _plain_ratio(start: Any, stop: Any) -> Any:
    """Return ``stop / start`` as a plain, unitless scalar."""
    ratio = stop / start
    if hasattr(ratio, "dimensionless"):
        if not ratio.dimensionless:
            raise InvalidArgumentError(
                f"start and stop must have commensurable units, got {start!r} and {stop!r}"
            )
        ratio = ratio.to("dimensionless").magnitude
    if isinstance(ratio, numbers.Real) and ratio < 0:
        raise InvalidArgumentError(
            f"start and stop must have the same sign, got {start!r} and {stop!r}"
        )
    return ratio


def logspace(
    start: SupportsGeometric,
    stop: SupportsGeometric,
    num: int = 50,
    *,
    base: SupportsGeometric = 10,
    endpoint: bool = True,
) -> list:
    """Return ``num`` numbers evenly spaced on a log scale.

    The i-th value is ``base ** (start + i * (stop - start) / n)`` where
    ``n = num - 1`` if ``endpoint`` else ``num``.

    Args:
        start: Exponent of the first value, ``base ** start``.
        stop: Exponent of the final value, ``base ** stop``.
        num: Number of samples to generate, must be greater than 1.
        base: Base of the log space.
        endpoint: If True, ``base ** stop`` is the last sample. Otherwise it
            is not included.

    Raises:
        InvalidArgumentError: if ``num`` is not an integer greater than 1.

    >>> logspace(-3, 1, 5)
    [0.001, 0.01, 0.1, 1.0, 10.0]
    """
    num = _check_num(num)
    n = num - 1 if endpoint else num
    d = (stop - start) / n
    base = _promote(base, d)
    q = base ** d
    logger.debug("logspace: %d samples, ratio %r", num, q)

    out: list = [None] * num
    out[0] = _promote(base ** start, q)
    for i in range(1, num - 1):
        out[i] = out[i - 1] * q
    out[-1] = _promote(base ** stop, q) if endpoint else out[-2] * q
    return out


def geomspace(
    start: SupportsGeometric,
    stop: SupportsGeometric,
    num: int = 50,
    *,
    endpoint: bool = True,
) -> list:
    """Return ``num`` numbers forming a geometric progression from ``start``.

    The i-th value is ``start * (stop / start) ** (i / n)`` where
    ``n = num - 1`` if ``endpoint`` else ``num``. ``start`` and ``stop`` may be
    unit-carrying quantities (e.g. ``pint.Quantity``) with commensurable
    units; the result carries the unit of ``start``.

    Args:
        start: The first value of the sequence.
        stop: The final value of the sequence.
        num: Number of samples to generate, must be greater than 1.
        endpoint: If True, ``stop`` is the last sample. Otherwise it is not
            included.

    Raises:
        InvalidArgumentError: if ``num`` is not an integer greater than 1,
            if ``start`` or ``stop`` is zero, if they have opposite signs,
            or if their units are incommensurable.

    >>> geomspace(1, 1e4, 5)
    [1.0, 10.0, 100.0, 1000.0, 10000.0]
    """
    num = _check_num(num)
    if start == 0:
        raise InvalidArgumentError("start must be nonzero")
    if stop == 0:
        raise InvalidArgumentError("stop must be nonzero")
    n = num - 1 if endpoint else num
    q = _plain_ratio(start, stop) ** (1 / n)
    like = q * start
    logger.debug("geomspace: %d samples, ratio %r", num, q)

    out: list = [None] * num
    out[0] = _promote(start, like)
    for i in range(1, num - 1):
        out[i] = out[i - 1] * q
    out[-1] = _promote(stop, like) if endpoint else out[-2] * q
    return out
