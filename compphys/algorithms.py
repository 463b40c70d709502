#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Elementary Algorithms
================================================================================

Project:        Part II Computational Physics
Module:         algorithms.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Small algorithms used in the "Getting going" chapter to introduce complexity:

    - Linear search:  O(n) comparisons
    - Binary search:  O(log n) comparisons on sorted input
    - Fast power:     O(log n) multiplications by repeated squaring
    - Fibonacci:      exponential (naive recursion) down to O(log n) (matrix)

Recursion without a base case is included on purpose: calling it shows what
Python does when the call stack runs out.
"""

import time
from functools import lru_cache
from typing import Any, Callable, Sequence, Tuple

import numpy as np


def linear_search(seq: Sequence[Any], target: Any) -> int:
    """
    Return the index of the first element equal to target, or -1.

    Every element may have to be inspected, so the cost grows linearly
    with len(seq).
    """
    for index, item in enumerate(seq):
        if item == target:
            return index
    return -1


def binary_search(sorted_seq: Sequence[Any], target: Any) -> int:
    """
    Find target in an ascending sequence by repeatedly halving the interval.

    Args:
        sorted_seq: Sequence sorted in ascending order
        target: Value to look for

    Returns:
        Index of an element equal to target, or -1 if absent
    """
    lo, hi = 0, len(sorted_seq) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = sorted_seq[mid]
        if value == target:
            return mid
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def fast_power(base, exponent: int):
    """
    Compute base**exponent by repeated squaring (recursive form).

    x^n = (x^(n/2))^2        for even n
    x^n = x * (x^(n/2))^2    for odd n

    Works for anything supporting multiplication, including 2x2 NumPy
    matrices (see fibonacci_matrix).
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return _identity_like(base)
    half = fast_power(base, exponent // 2)
    squared = _multiply(half, half)
    if exponent % 2:
        return _multiply(base, squared)
    return squared


def fast_power_iterative(base, exponent: int):
    """Repeated squaring driven by the binary digits of the exponent."""
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = _identity_like(base)
    square = base
    while exponent > 0:
        if exponent & 1:
            result = _multiply(result, square)
        square = _multiply(square, square)
        exponent >>= 1
    return result


def count_multiplications(exponent: int) -> int:
    """
    Number of multiplications used by fast_power for a given exponent.

    One squaring per halving plus one extra multiplication for each odd
    exponent encountered on the way down.
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return 0
    return count_multiplications(exponent // 2) + 1 + (exponent % 2)


def _identity_like(base):
    if isinstance(base, np.ndarray):
        return np.eye(base.shape[0], dtype=base.dtype)
    return 1


def _multiply(a, b):
    if isinstance(a, np.ndarray):
        return a @ b
    return a * b


def fibonacci_recursive(n: int) -> int:
    """Direct transcription of F(n) = F(n-1) + F(n-2). Exponential time."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


@lru_cache(maxsize=None)
def _fibonacci_cached(n: int) -> int:
    if n < 2:
        return n
    return _fibonacci_cached(n - 1) + _fibonacci_cached(n - 2)


def fibonacci_memo(n: int) -> int:
    """Recursive Fibonacci with memoization. Linear time."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _fibonacci_cached(n)


def fibonacci_iterative(n: int) -> int:
    """Bottom-up Fibonacci keeping only the last two values."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_matrix(n: int) -> int:
    """
    Fibonacci via fast powering of [[1, 1], [1, 0]].

    [[1, 1], [1, 0]]^n = [[F(n+1), F(n)], [F(n), F(n-1)]]

    Uses an object array so the entries are Python ints and never overflow.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    q = np.array([[1, 1], [1, 0]], dtype=object)
    return int(fast_power(q, n)[0, 1])


def factorial(n: int) -> int:
    """Recursive factorial with the base case in place."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def factorial_no_base_case(n: int) -> int:
    """
    Factorial with the base case forgotten.

    Never terminates on its own; Python raises RecursionError once the
    interpreter's recursion limit is reached.
    """
    return n * factorial_no_base_case(n - 1)


def time_function(func: Callable, *args, repeats: int = 5) -> Tuple[Any, float]:
    """
    Call func(*args) several times and report the best wall-clock time.

    Returns:
        (result, best_seconds)
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    best = float("inf")
    result = None
    for _ in range(repeats):
        start = time.perf_counter()
        result = func(*args)
        best = min(best, time.perf_counter() - start)
    return result, best
