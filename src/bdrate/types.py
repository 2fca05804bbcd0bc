"""Common containers exchanged between the BD-rate stages.

The structures are small frozen value objects built fresh for every
computation, so they can be shared across threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import UnknownMethod


class Method(str, Enum):
    """Interpolation methods supported for the log-rate curves."""

    AKIMA = "akima"
    CUBIC = "cubic"

    @classmethod
    def parse(cls, value: "Method | str") -> "Method":
        """Return the member named by ``value`` or raise :class:`UnknownMethod`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownMethod(value) from None


@dataclass(frozen=True)
class PreparedCurve:
    """Rate-quality samples ordered by ascending rate.

    Attributes
    ----------
    x:
        Quality metric of each sample.
    y:
        ``log10`` of the bitrate of each sample.
    """

    x: np.ndarray
    y: np.ndarray

    @property
    def size(self) -> int:
        return int(self.x.size)

    @property
    def x_min(self) -> float:
        """First metric value; the smallest once the curve is validated."""

        return float(self.x[0])

    @property
    def x_max(self) -> float:
        return float(self.x[-1])


@dataclass(frozen=True)
class OverlapWindow:
    """Common metric interval of two curves."""

    lo: float
    hi: float
    ratio: float

    @property
    def width(self) -> float:
        return self.hi - self.lo


__all__ = ["Method", "PreparedCurve", "OverlapWindow"]
