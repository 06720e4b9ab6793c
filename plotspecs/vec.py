"""Helpers that build sequences of sample values."""

from __future__ import annotations


def linspace(x0: float, x1: float, numintervals: int) -> list[float]:
    """Return ``numintervals + 1`` uniformly spaced values from *x0* to *x1*."""
    if numintervals <= 0:
        raise ValueError("numintervals must be a positive integer")
    step_total = x1 - x0
    return [x0 + i * step_total / float(numintervals) for i in range(numintervals + 1)]


def int_range(x0: int, x1: int) -> list[float]:
    """Return the values from *x0* to *x1* inclusive in unit steps, either direction."""
    step = 1 if x1 > x0 else -1
    return [float(v) for v in range(x0, x1 + step, step)]