# towercraft/kernel/easing.py
"""
EASING ENGINE: Progress Curves for Floor Gradients
==================================================

PURPOSE:
--------
Every gradient in the tower (scale, twist, bend, shape blend) is driven by a
normalized progress value t in [0, 1]: 0 at the bottom floor, 1 at the top.
Feeding t straight into a lerp gives a linear gradient. Passing it through an
easing curve first lets the designer concentrate change in the middle of the
tower or soften the ends.

AVAILABLE CURVES:
-----------------
- 'linear':          f(t) = t
- 'smoothstep':      f(t) = t^2 (3 - 2t)
- 'easeInOutCubic':  f(t) = 4t^3                  for t < 0.5
                     f(t) = 1 - (-2t + 2)^3 / 2   otherwise

PROPERTIES (all curves):
------------------------
- f(0) = 0 and f(1) = 1
- monotonic non-decreasing on [0, 1]
- inputs outside [0, 1] are clamped, never rejected
"""

import logging
from typing import Callable, Dict

import numpy as np

logger = logging.getLogger(__name__)


def clamp01(t: float) -> float:
    """Clamp a value to the closed interval [0, 1]."""
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return float(t)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation: a at t=0, b at t=1 (t is not clamped)."""
    return a + (b - a) * t


# Curves operate on an already clamped t, either a float or an ndarray
def _linear(t):
    return t


def _smoothstep(t):
    return t * t * (3.0 - 2.0 * t)


def _ease_in_out_cubic(t):
    return np.where(t < 0.5, 4.0 * t * t * t, 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0)


# Registry of curve name -> function
CURVES: Dict[str, Callable] = {
    'linear': _linear,
    'smoothstep': _smoothstep,
    'easeInOutCubic': _ease_in_out_cubic,
}


def resolve_curve(kind: str) -> Callable:
    """
    Look up a curve function by name.

    Unknown names fall back to 'linear' so a bad value coming from a host
    never fails a rebuild.
    """
    fn = CURVES.get(kind)
    if fn is None:
        logger.warning("Unknown curve kind %r, falling back to 'linear'", kind)
        return _linear
    return fn


def apply_curve(t: float, kind: str) -> float:
    """
    Map a progress value through an easing curve.

    Parameters:
    -----------
    t : float
        Raw progress. Clamped to [0, 1] before use.
    kind : str
        One of the names in CURVES.

    Returns:
    --------
    float
        Eased progress in [0, 1].

    Example:
    --------
    >>> apply_curve(0.5, 'smoothstep')
    0.5
    >>> apply_curve(0.25, 'easeInOutCubic')
    0.0625
    """
    return float(resolve_curve(kind)(clamp01(t)))


def apply_curve_array(t: np.ndarray, kind: str) -> np.ndarray:
    """Vectorized apply_curve, used for plotting whole gradient profiles."""
    clamped = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)
    return np.asarray(resolve_curve(kind)(clamped), dtype=float)
