# readable_color/strategy.py
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Iterator, NamedTuple, Union

from .constants import BYTE_MAX, LINEAR_STEPS

"""
Candidate stepping strategies.

Exports:
- MatchStrategy                     : closed set of strategies (LINEAR)
- StepState                         : (factor, r, g, b) after one step
- linear_steps(r, g, b, darken)     : Linear strategy step generator
- resolve_strategy(value)           -> MatchStrategy
- step_generator(strategy)          -> StepGenerator

Notes:
- Working channels are byte-scale floats. They are not clamped here; the
  matcher clamps when it builds the candidate colour.
"""


class MatchStrategy(Enum):
    LINEAR = "linear"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return _LABELS[self]


_LABELS: Dict[MatchStrategy, str] = {
    MatchStrategy.LINEAR: "Linear Strategy",
}


class StepState(NamedTuple):
    factor: float
    r: float
    g: float
    b: float


StepGenerator = Callable[[float, float, float, bool], Iterator[StepState]]


def _darken_channel(c: float, factor: float) -> float:
    return math.floor(c * factor) if c > 1.0 else 0.0


def _brighten_channel(c: float, factor: float) -> float:
    # Channels at or past 255 are frozen, not pulled back.
    return math.floor(c + c * factor + 1.0) if c < BYTE_MAX else c


def linear_steps(r: float, g: float, b: float, darken: bool) -> Iterator[StepState]:
    """
    Apply the same factor to all three channels each step.

    darken=True : index 55 -> 1, factor = index/55, c = floor(c * factor)
                  (channels at or below 1 drop straight to 0).
    darken=False: index 0 -> 54, factor = index/55, c = floor(c + c*factor + 1)
                  while c < 255.
    """
    n = LINEAR_STEPS
    indices = range(n, 0, -1) if darken else range(0, n)
    step = _darken_channel if darken else _brighten_channel
    for index in indices:
        factor = index / float(n)
        r = step(r, factor)
        g = step(g, factor)
        b = step(b, factor)
        yield StepState(factor, float(r), float(g), float(b))


_GENERATORS: Dict[MatchStrategy, StepGenerator] = {
    MatchStrategy.LINEAR: linear_steps,
}


def resolve_strategy(value: Union[MatchStrategy, str]) -> MatchStrategy:
    """Accept a MatchStrategy or its string value ("linear")."""
    if isinstance(value, MatchStrategy):
        return value
    try:
        return MatchStrategy(str(value).strip().lower())
    except ValueError:
        known = ", ".join(s.value for s in MatchStrategy)
        raise ValueError(f"unknown strategy {value!r} (known: {known})") from None


def step_generator(strategy: Union[MatchStrategy, str]) -> StepGenerator:
    return _GENERATORS[resolve_strategy(strategy)]


__all__ = [
    "MatchStrategy",
    "StepState",
    "StepGenerator",
    "linear_steps",
    "resolve_strategy",
    "step_generator",
]
