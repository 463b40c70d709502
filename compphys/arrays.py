#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
NumPy Array Mechanics
================================================================================

Project:        Part II Computational Physics
Module:         arrays.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Examples from the NumPy chapter:
- Memory layout: shape, strides and contiguity of an ndarray
- Views vs copies: which indexing and reshaping operations share data
- Broadcasting rules and pairwise differences without loops
- Loop vs vectorized timings

An ndarray is a block of memory plus a description of how to walk it.
Slicing only changes that description, so it returns a view; fancy and
boolean indexing gather elements into new memory.
"""

import logging
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .algorithms import time_function

logger = logging.getLogger(__name__)


@dataclass
class ArrayInfo:
    """Layout of an array in memory."""
    shape: Tuple[int, ...]
    dtype: str
    itemsize: int
    strides: Tuple[int, ...]
    nbytes: int
    c_contiguous: bool
    f_contiguous: bool
    owns_data: bool


@dataclass
class LoopTiming:
    """Best-of-N timings for the same calculation done two ways."""
    n: int
    loop_seconds: float
    vectorized_seconds: float
    max_difference: float

    @property
    def speedup(self) -> float:
        if self.vectorized_seconds == 0:
            return float("inf")
        return self.loop_seconds / self.vectorized_seconds


def describe_array(a: np.ndarray) -> ArrayInfo:
    """
    Report the shape, strides and ownership of an array.

    Strides are the number of bytes to step in each dimension: a C-ordered
    (3, 4) float64 array has strides (32, 8), its transpose (8, 32).
    """
    return ArrayInfo(
        shape=a.shape,
        dtype=str(a.dtype),
        itemsize=a.itemsize,
        strides=a.strides,
        nbytes=a.nbytes,
        c_contiguous=bool(a.flags.c_contiguous),
        f_contiguous=bool(a.flags.f_contiguous),
        owns_data=bool(a.flags.owndata)
    )


def shares_data(a: np.ndarray, b: np.ndarray) -> bool:
    """True if writing through one array can change the other."""
    return bool(np.shares_memory(a, b))


def index_returns_view(a: np.ndarray, index: Any) -> bool:
    """
    Whether a[index] is a view of a.

    Basic slices (a[1:3], a[::2], a[:, 0]) give views; integer-array and
    boolean indices give copies.
    """
    return shares_data(a, a[index])


def reshape_returns_view(a: np.ndarray, shape: Tuple[int, ...]) -> bool:
    """
    Whether a.reshape(shape) can reuse a's memory.

    A contiguous array always reshapes to a view. A transposed array
    usually cannot be walked in the new order with fixed strides, so NumPy
    copies it.
    """
    return shares_data(a, a.reshape(shape))


def broadcast_result_shape(*shapes: Tuple[int, ...]) -> Tuple[int, ...]:
    """
    Shape produced by broadcasting the given shapes together.

    Shapes are aligned from the right; each pair of dimensions must be
    equal or one of them must be 1. Incompatible shapes raise ValueError.
    """
    return tuple(np.broadcast_shapes(*shapes))


def sliding_windows(x: np.ndarray, window: int) -> np.ndarray:
    """
    Read-only (len(x) - window + 1, window) view of overlapping windows.

    No data is copied: the second axis reuses the stride of the first.
    """
    if window < 1 or window > len(x):
        raise ValueError(f"Window must be between 1 and {len(x)}, got {window}")
    return sliding_window_view(x, window)


def moving_average(x: np.ndarray, window: int) -> np.ndarray:
    """Mean of each length-window run of x, via sliding_windows."""
    return sliding_windows(np.asarray(x, dtype=float), window).mean(axis=-1)


def pairwise_distances_loop(points: np.ndarray) -> np.ndarray:
    """Distance matrix with two Python loops."""
    n = len(points)
    dist = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            dx = points[j] - points[i]
            dist[i, j] = np.sqrt(np.sum(dx * dx))
    return dist


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """
    Distance matrix by broadcasting.

    (n, 1, d) - (1, n, d) broadcasts to the (n, n, d) array of all
    displacements.
    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2:
        raise ValueError(f"Expected an (n, d) array of points, got shape {points.shape}")
    diff = points[np.newaxis, :, :] - points[:, np.newaxis, :]
    return np.sqrt(np.sum(diff ** 2, axis=-1))


def compare_loop_vectorized(
    n: int = 200,
    dim: int = 2,
    repeats: int = 3,
    seed: int = 0
) -> LoopTiming:
    """
    Time the loop and broadcast distance matrices on the same points.

    Args:
        n: Number of points
        dim: Spatial dimension
        repeats: Timing repetitions (best is kept)
        seed: Seed for the random points

    Returns:
        LoopTiming with both times and the largest disagreement
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    points = np.random.default_rng(seed).random((n, dim))

    loop_result, loop_seconds = time_function(pairwise_distances_loop, points, repeats=repeats)
    vec_result, vec_seconds = time_function(pairwise_distances, points, repeats=repeats)

    timing = LoopTiming(
        n=n,
        loop_seconds=loop_seconds,
        vectorized_seconds=vec_seconds,
        max_difference=float(np.max(np.abs(loop_result - vec_result)))
    )
    logger.debug(
        "Distance matrix for %d points: loop %.4fs, vectorized %.6fs",
        n, loop_seconds, vec_seconds
    )
    return timing
